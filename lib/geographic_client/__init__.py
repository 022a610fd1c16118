from .client import GeographicClient
from .config_types import AuthToken, ClientConfig
from .errors import ApiError, AuthError, GeographicClientError, MissingParameterError, NetworkError
from .results import ApiResult

__all__ = [
    "GeographicClient",
    "AuthToken",
    "ClientConfig",
    "ApiResult",
    "ApiError",
    "AuthError",
    "GeographicClientError",
    "MissingParameterError",
    "NetworkError",
]
