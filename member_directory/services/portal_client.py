# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP client for the community Portal API: member lookups and bulletin sync.

Every member query degrades instead of raising: when the portal is not
configured, answers with a non-2xx status, says ``success: false``, sends a
payload that fails validation, or cannot be reached, the caller still gets an
APIResponse. Which degraded answer it gets is decided per operation by
FALLBACK_POLICIES:

    MOCK_DATA   serve the static sample members, tagged meta.fallback
    HARD_ERROR  return success=False with an error message

A missing configuration always serves sample members, whatever the policy.
"""

import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import httpx

from member_directory.core.config import PortalSettings
from member_directory.core.exceptions import PortalError, PortalNotConfigured
from member_directory.core.logging import get_logger
from member_directory.metrics import (
    BULLETIN_SYNCS,
    PORTAL_CACHE_HITS,
    PORTAL_FALLBACKS,
    PORTAL_LATENCY,
    PORTAL_REQUESTS,
)
from member_directory.schemas import (
    FALLBACK_MOCK_DATA,
    APIResponse,
    BulletinIn,
    BulletinSyncResult,
    Member,
    MemberFilters,
    PortalContactResponse,
    PortalContactsData,
    PortalContactsResponse,
    ResponseMeta,
)
from member_directory.services import fallback_data
from member_directory.services.normalizer import normalize_contacts, portal_contact_to_member
from member_directory.services.response_cache import ResponseCache

logger = get_logger(__name__)

COMMUNITY_PAGE_SIZE = 500
DEFAULT_EXPORT_LIMIT = 500


class FallbackPolicy(str, Enum):
    MOCK_DATA = "mock_data"
    HARD_ERROR = "hard_error"


# Community and bulk-export lists feed SMS/email campaigns and must not carry sample members.
FALLBACK_POLICIES: Dict[str, FallbackPolicy] = {
    "search_members": FallbackPolicy.MOCK_DATA,
    "get_members": FallbackPolicy.MOCK_DATA,
    "get_member_by_t_number": FallbackPolicy.MOCK_DATA,
    "get_members_by_community": FallbackPolicy.HARD_ERROR,
    "get_all_emails": FallbackPolicy.HARD_ERROR,
    "get_all_phone_numbers": FallbackPolicy.HARD_ERROR,
}


def _mock_response(data: Any, **meta: Any) -> APIResponse:
    return APIResponse(success=True, data=data,
                       meta=ResponseMeta(fallback=FALLBACK_MOCK_DATA, **meta))


class PortalClient:
    """Async client for the Portal ``/contacts`` and ``/bulletin`` endpoints."""

    def __init__(
        self,
        portal: PortalSettings,
        http_client: Optional[httpx.AsyncClient] = None,
        cache: Optional[ResponseCache] = None,
    ):
        self._portal = portal
        self._base_url = portal.base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=portal.timeout)
        if cache is None:
            cache = ResponseCache(portal.cache_ttl, portal.cache_max_entries)
        self._cache = cache

    @property
    def configured(self) -> bool:
        return self._portal.is_configured

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ── Transport ──

    async def _send(self, operation: str, method: str, path: str,
                    params: Optional[Dict[str, str]] = None,
                    json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """One request, no retry. Transport failures become PortalError."""
        if not self.configured:
            raise PortalNotConfigured(operation)
        url = f"{self._base_url}/{path.lstrip('/')}"
        start = time.monotonic()
        try:
            resp = await self._client.request(
                method, url, params=params, json=json,
                headers={"X-API-Key": self._portal.api_key},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            PORTAL_REQUESTS.labels(operation=operation, status="error").inc()
            raise PortalError(operation, str(exc) or type(exc).__name__,
                              reason="transport") from exc
        PORTAL_LATENCY.labels(operation=operation).observe(time.monotonic() - start)
        PORTAL_REQUESTS.labels(operation=operation, status=str(resp.status_code)).inc()
        return resp

    @staticmethod
    def _parse(operation: str, resp: httpx.Response, model):
        try:
            return model.model_validate(resp.json())
        except ValueError as exc:
            raise PortalError(operation, f"invalid payload: {exc}",
                              status_code=resp.status_code, reason="invalid_payload") from exc

    async def _fetch_contacts(self, operation: str, params: Dict[str, str]) -> PortalContactsData:
        key = ResponseCache.make_key(operation, params)
        cached = self._cache.get(key)
        if cached is not None:
            PORTAL_CACHE_HITS.labels(operation=operation).inc()
            return cached

        resp = await self._send(operation, "GET", "/contacts", params=params)
        if not resp.is_success:
            raise PortalError(operation, f"HTTP {resp.status_code}",
                              status_code=resp.status_code, reason="http_status")
        body = self._parse(operation, resp, PortalContactsResponse)
        if not body.success or body.data is None:
            raise PortalError(operation, "portal returned success=false",
                              status_code=resp.status_code)

        self._cache.set(key, body.data)
        return body.data

    # ── Fallback orchestration ──

    def _degrade(self, operation: str, exc: PortalError,
                 fallback: Callable[[], APIResponse], error_message: str) -> APIResponse:
        PORTAL_FALLBACKS.labels(operation=operation, reason=exc.reason).inc()
        if isinstance(exc, PortalNotConfigured):
            logger.info("No portal URL or API key configured, using mock data for %s", operation)
            return fallback()

        logger.warning("%s", exc, extra={"operation": operation})
        if FALLBACK_POLICIES[operation] is FallbackPolicy.MOCK_DATA:
            return fallback()
        return APIResponse(success=False, error=error_message)

    # ── Member queries ──

    async def search_members(self, search_term: str, limit: int = 50) -> APIResponse:
        """Free-text search on name or T-number."""
        operation = "search_members"
        params = {
            "search": search_term,
            "limit": str(limit),
            "activated": "true",
            "fields": "both",
        }
        try:
            data = await self._fetch_contacts(operation, params)
        except PortalError as exc:
            return self._degrade(
                operation, exc,
                lambda: _mock_response(fallback_data.search(search_term)),
                "Failed to search members",
            )

        members = normalize_contacts(data.contacts)
        return APIResponse(
            success=True,
            data=members,
            meta=ResponseMeta(
                total=data.count if data.count is not None else len(members),
                limit=data.pagination.limit if data.pagination and data.pagination.limit else limit,
            ),
        )

    async def get_members(self, filters: Optional[MemberFilters] = None) -> APIResponse:
        """Listing with optional community/search/include-deceased filters."""
        operation = "get_members"
        filters = filters or MemberFilters()
        params: Dict[str, str] = {}
        if filters.limit:
            params["limit"] = str(filters.limit)
        if filters.community:
            params["community"] = filters.community
        if filters.search:
            params["search"] = filters.search
        if filters.include_deceased:
            params["includeDeceased"] = "true"
        params["activated"] = "true"
        params["fields"] = "both"

        def fallback() -> APIResponse:
            members = fallback_data.filtered(filters.search, filters.community)
            return _mock_response(members, total=len(members),
                                  page=filters.page or 1, limit=filters.limit or 50)

        try:
            data = await self._fetch_contacts(operation, params)
        except PortalError as exc:
            return self._degrade(operation, exc, fallback, "Failed to fetch members")

        members = normalize_contacts(data.contacts)
        return APIResponse(
            success=True,
            data=members,
            meta=ResponseMeta(
                total=data.count if data.count is not None else len(members),
                page=filters.page or 1,
                limit=filters.limit or 100,
            ),
        )

    async def get_member_by_t_number(self, t_number: str) -> APIResponse:
        """Exact lookup. Not found is a successful empty answer, not a failure."""
        operation = "get_member_by_t_number"
        try:
            resp = await self._send(operation, "POST", "/contacts", json={"t_number": t_number})
            if resp.status_code == 404:
                return APIResponse(success=True, data=None)
            if not resp.is_success:
                raise PortalError(operation, f"HTTP {resp.status_code}",
                                  status_code=resp.status_code, reason="http_status")
            body = self._parse(operation, resp, PortalContactResponse)
        except PortalError as exc:
            return self._degrade(
                operation, exc,
                lambda: _mock_response(fallback_data.by_t_number(t_number)),
                "Failed to fetch member",
            )

        if not body.success or body.data is None:
            return APIResponse(success=True, data=None)
        return APIResponse(success=True, data=portal_contact_to_member(body.data))

    async def get_members_by_community(self, community: str) -> APIResponse:
        operation = "get_members_by_community"
        params = {
            "community": community,
            "activated": "true",
            "fields": "both",
            "limit": str(COMMUNITY_PAGE_SIZE),
        }
        try:
            data = await self._fetch_contacts(operation, params)
        except PortalError as exc:
            return self._degrade(
                operation, exc,
                lambda: _mock_response(fallback_data.by_community(community)),
                "Failed to fetch members",
            )
        return APIResponse(success=True, data=normalize_contacts(data.contacts))

    async def get_all_emails(self, limit: int = DEFAULT_EXPORT_LIMIT) -> APIResponse:
        """Members with an email address, for email campaigns."""
        return await self._export_contacts("get_all_emails", "email", limit,
                                           fallback_data.with_email, "Failed to fetch emails")

    async def get_all_phone_numbers(self, limit: int = DEFAULT_EXPORT_LIMIT) -> APIResponse:
        """Members with a phone number, for SMS campaigns."""
        return await self._export_contacts("get_all_phone_numbers", "phone", limit,
                                           fallback_data.with_phone, "Failed to fetch phone numbers")

    async def _export_contacts(self, operation: str, field: str, limit: int,
                               sample: Callable[[], List[Member]], error_message: str) -> APIResponse:
        params = {"activated": "true", "fields": field, "limit": str(limit)}
        try:
            data = await self._fetch_contacts(operation, params)
        except PortalError as exc:
            return self._degrade(operation, exc, lambda: _mock_response(sample()), error_message)
        # The portal already filters on `fields`; drop empty values anyway.
        return APIResponse(success=True, data=normalize_contacts(data.contacts, require=field))

    async def test_connection(self) -> bool:
        """True when the portal answers, or when running on mock data."""
        if not self.configured:
            logger.info("No portal URL or API key configured, using mock data")
            return True
        try:
            resp = await self._send("test_connection", "GET", "/contacts", params={"limit": "1"})
        except PortalError as exc:
            logger.error("Portal API connection test failed: %s", exc)
            return False
        return resp.is_success

    # ── Bulletin sync ──

    def absolute_poster_url(self, poster_url: str) -> str:
        """Portal needs a fully-qualified poster URL to fetch the image."""
        if poster_url.startswith("http"):
            return poster_url
        base = self._portal.asset_base_url.rstrip("/")
        if not base and self._base_url:
            try:
                origin = httpx.URL(self._base_url)
            except httpx.InvalidURL as exc:
                logger.warning("Cannot derive poster origin from portal URL: %s", exc)
            else:
                base = f"{origin.scheme}://{origin.netloc.decode('ascii')}"
        return f"{base}/{poster_url.lstrip('/')}"

    async def sync_bulletin(self, bulletin: BulletinIn) -> BulletinSyncResult:
        operation = "sync_bulletin"
        if not self.configured:
            BULLETIN_SYNCS.labels(result="not_configured").inc()
            return BulletinSyncResult(success=False, error="Portal API not configured")

        poster_url = self.absolute_poster_url(bulletin.poster_url)
        payload = {
            "sourceId": bulletin.sourceId,
            "title": bulletin.title,
            "subject": bulletin.subject,
            "poster_url": poster_url,
            "category": bulletin.category,
            "created": datetime.now(timezone.utc).isoformat(),
        }
        logger.info("Syncing bulletin to portal source_id=%s poster_url=%s",
                    bulletin.sourceId, poster_url)

        try:
            resp = await self._send(operation, "POST", "/bulletin", json=payload)
        except PortalError as exc:
            logger.error("Error syncing bulletin: %s", exc)
            BULLETIN_SYNCS.labels(result="error").inc()
            return BulletinSyncResult(success=False, error=str(exc))

        if not resp.is_success:
            logger.warning("Portal bulletin sync failed source_id=%s status=%d body=%s",
                           bulletin.sourceId, resp.status_code, resp.text[:200])
            BULLETIN_SYNCS.labels(result="rejected").inc()
            return BulletinSyncResult(
                success=True,
                portalSynced=False,
                portalError=resp.text,
                message="Bulletin saved locally but portal sync failed",
                data={"sourceId": bulletin.sourceId, "poster_url": poster_url},
            )

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("Portal bulletin sync returned invalid JSON: %s", exc)
            BULLETIN_SYNCS.labels(result="error").inc()
            return BulletinSyncResult(success=False, error="Portal returned an invalid response")

        BULLETIN_SYNCS.labels(result="synced").inc()
        return BulletinSyncResult(success=True, portalSynced=True, data=data)
