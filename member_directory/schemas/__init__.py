# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Pydantic schemas: local Member contract, Portal API payloads, envelopes.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

FALLBACK_MOCK_DATA = "mock_data"


# ── Local Member record ──

class PersonalInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    t_number: str
    date_of_birth: Optional[str] = None


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: Optional[str] = None
    phone: Optional[str] = None


class Member(BaseModel):
    """A community member as the staff dashboards consume it.

    ``contact_number``, ``phone`` and ``contact_info.phone`` carry the same
    value, as do ``email`` and ``contact_info.email``; older consumers read
    either spelling.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    memberId: Optional[str] = None
    t_number: str
    name: Optional[str] = None
    personal_info: PersonalInfo
    contact_number: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    community: Optional[str] = None
    status: Optional[str] = None
    activated: Optional[str] = None
    birthdate: Optional[str] = None


class ResponseMeta(BaseModel):
    total: Optional[int] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    fallback: Optional[str] = None


class APIResponse(BaseModel, Generic[T]):
    """Envelope returned by every client call. Check ``success`` first."""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    meta: Optional[ResponseMeta] = None


class MemberFilters(BaseModel):
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    community: Optional[str] = None
    search: Optional[str] = None
    include_deceased: bool = False


# ── Portal API payloads (inbound) ──

class PortalContact(BaseModel):
    """One contact as the Portal API returns it."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    memberId: str
    t_number: str
    name: Optional[str] = None
    firstName: str
    lastName: str
    phone: Optional[str] = None
    email: Optional[str] = None
    community: Optional[str] = None
    status: Optional[str] = None
    activated: Optional[str] = None
    birthdate: Optional[str] = None


class PortalPagination(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hasMore: bool = False
    nextCursor: Optional[str] = None
    limit: Optional[int] = None


class PortalContactsData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    contacts: List[PortalContact]
    count: Optional[int] = None
    pagination: Optional[PortalPagination] = None
    query: Dict[str, Any] = Field(default_factory=dict)


class PortalContactsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool
    data: Optional[PortalContactsData] = None
    timestamp: Optional[str] = None


class PortalContactResponse(BaseModel):
    """Single-contact lookup (``POST /contacts``)."""
    model_config = ConfigDict(extra="ignore")

    success: bool
    data: Optional[PortalContact] = None


# ── Bulletin sync ──

class BulletinIn(BaseModel):
    """Bulletin post to mirror onto the community portal."""
    sourceId: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=500)
    subject: str = Field(..., min_length=1)
    poster_url: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)

    @field_validator("sourceId", "title", "subject", "poster_url", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class BulletinSyncResult(BaseModel):
    success: bool
    portalSynced: Optional[bool] = None
    portalError: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None
    data: Optional[Any] = None


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
