# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Dependency injection: the shared Portal client singleton."""
from member_directory.core.config import settings
from member_directory.services.portal_client import PortalClient

_portal_client: PortalClient | None = None


def init_portal_client(portal_client: PortalClient | None = None):
    global _portal_client
    _portal_client = portal_client or PortalClient(settings.portal())


async def close_portal_client():
    global _portal_client
    if _portal_client:
        await _portal_client.aclose()
    _portal_client = None


def get_portal_client() -> PortalClient:
    if _portal_client is None:
        raise RuntimeError("Portal client not initialised; call init_portal_client() first")
    return _portal_client
