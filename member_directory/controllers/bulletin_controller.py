# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: mirror a bulletin post onto the community portal."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from member_directory.core.dependencies import get_portal_client
from member_directory.schemas import BulletinIn, BulletinSyncResult
from member_directory.services.portal_client import PortalClient

router = APIRouter(prefix="/api/v1/bulletin", tags=["Bulletin"])


@router.post("/sync", response_model=BulletinSyncResult, response_model_exclude_none=True,
             summary="Sync a bulletin to the portal",
             responses={500: {"model": BulletinSyncResult,
                              "description": "Portal not configured or unreachable"}})
async def sync_bulletin(
    bulletin: BulletinIn,
    client: PortalClient = Depends(get_portal_client),
):
    """A portal rejection still answers 200 with portalSynced=false."""
    result = await client.sync_bulletin(bulletin)
    if not result.success:
        return JSONResponse(status_code=500, content=result.model_dump(exclude_none=True))
    return result
