"""HTTP utilities package for providers.

Exposes pooled httpx clients and the single-exchange helper.
"""

from .client import get_httpx_client, close_all_clients
from .exchange import BodyReadError, InvalidHeaderError, check_headers, exchange

__all__ = [
    "get_httpx_client",
    "close_all_clients",
    "exchange",
    "check_headers",
    "InvalidHeaderError",
    "BodyReadError",
]
