"""HTTP surface of the dashboard."""

from invoicedash.api.router import api_router, get_api_router

__all__ = ["api_router", "get_api_router"]
