from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AuthToken:
    value: str | None = None
    header_or_query_name: str | None = None
    is_query: bool = False

    def __post_init__(self) -> None:
        if self.is_query and not self.header_or_query_name:
            raise ValueError("A query token needs header_or_query_name.")


@dataclass(frozen=True)
class ClientConfig:
    domain: str
    token: AuthToken = field(default_factory=AuthToken)
    timeout_s: float = 15.0
    user_agent: str = "geographic-client/0.1.0"

    def __post_init__(self) -> None:
        if not isinstance(self.domain, str) or not self.domain.strip():
            raise ValueError("Domain parameter must be specified as a string.")
