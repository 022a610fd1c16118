from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class ApiResult:
    """Successful response. ``body`` is ``None`` for 204 responses."""

    response: httpx.Response
    body: Any = None

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def json_dict(self) -> dict[str, Any]:
        body = self.body
        if isinstance(body, dict):
            return body
        if isinstance(body, list):
            return {"items": body}
        return {"raw": body}
