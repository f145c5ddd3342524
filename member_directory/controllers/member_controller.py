# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Member directory endpoints: search, list, lookup, exports.
Thin HTTP layer, delegates ALL logic to PortalClient. Always answers 200
with the APIResponse envelope; callers check `success` and `meta.fallback`.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from member_directory.core.dependencies import get_portal_client
from member_directory.schemas import APIResponse, Member, MemberFilters
from member_directory.services.portal_client import PortalClient

router = APIRouter(prefix="/api/v1/members", tags=["Members"])

MemberList = APIResponse[List[Member]]
MaybeMember = APIResponse[Optional[Member]]


@router.get("/search", response_model=MemberList, response_model_exclude_unset=True,
            summary="Search members by name or T-number")
async def search_members(
    q: str = Query(default=""),
    limit: int = Query(default=50, ge=1, le=500),
    client: PortalClient = Depends(get_portal_client),
):
    return await client.search_members(q, limit)


@router.get("/emails", response_model=MemberList, response_model_exclude_unset=True,
            summary="Members with an email address")
async def all_emails(
    limit: int = Query(default=500, ge=1, le=5000),
    client: PortalClient = Depends(get_portal_client),
):
    return await client.get_all_emails(limit)


@router.get("/phones", response_model=MemberList, response_model_exclude_unset=True,
            summary="Members with a phone number")
async def all_phone_numbers(
    limit: int = Query(default=500, ge=1, le=5000),
    client: PortalClient = Depends(get_portal_client),
):
    return await client.get_all_phone_numbers(limit)


@router.get("/community/{community}", response_model=MemberList, response_model_exclude_unset=True,
            summary="Members of one community")
async def members_by_community(
    community: str,
    client: PortalClient = Depends(get_portal_client),
):
    return await client.get_members_by_community(community)


@router.get("/by-t-number/{t_number}", response_model=MaybeMember, response_model_exclude_unset=True,
            summary="Look up a member by T-number")
async def member_by_t_number(
    t_number: str,
    client: PortalClient = Depends(get_portal_client),
):
    return await client.get_member_by_t_number(t_number)


@router.get("", response_model=MemberList, response_model_exclude_unset=True,
            summary="List members with optional filters")
async def list_members(
    page: Optional[int] = Query(default=None, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    community: Optional[str] = None,
    search: Optional[str] = None,
    include_deceased: bool = False,
    client: PortalClient = Depends(get_portal_client),
):
    filters = MemberFilters(page=page, limit=limit, community=community,
                            search=search, include_deceased=include_deceased)
    return await client.get_members(filters)
