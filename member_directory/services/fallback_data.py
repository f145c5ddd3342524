# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Static sample members served when the Portal API is unconfigured or down,
plus the predicates each query applies to them.
"""

from typing import List, Optional, Tuple

from member_directory.schemas import ContactInfo, Member, PersonalInfo


def _sample(member_id: str, t_number: str, first_name: str, last_name: str,
            phone: str, email: str, community: str, status: str) -> Member:
    return Member(
        id=member_id,
        t_number=t_number,
        personal_info=PersonalInfo(first_name=first_name, last_name=last_name, t_number=t_number),
        contact_number=phone,
        phone=phone,
        email=email,
        contact_info=ContactInfo(email=email, phone=phone),
        community=community,
        status=status,
        activated="ACTIVATED",
    )


MOCK_MEMBERS: Tuple[Member, ...] = (
    _sample("mock-1", "TCN-12345", "John", "Flett", "(204) 555-1234",
            "john.flett@example.com", "Split Lake", "On-Reserve"),
    _sample("mock-2", "TCN-67890", "Jane", "Flett", "(204) 555-5678",
            "jane.flett@example.com", "Split Lake", "Off-Reserve"),
    _sample("mock-3", "TCN-11111", "Bob", "Johnson", "(204) 555-9012",
            "bob.johnson@example.com", "Tataskweyak", "On-Reserve"),
)


def matches_search(member: Member, term: str) -> bool:
    """Case-insensitive substring match on first name, last name or T-number."""
    needle = term.lower()
    return (
        needle in member.personal_info.first_name.lower()
        or needle in member.personal_info.last_name.lower()
        or needle in member.t_number.lower()
    )


def matches_community(member: Member, community: str) -> bool:
    return (member.community or "").lower() == community.lower()


def search(term: str) -> List[Member]:
    return [m for m in MOCK_MEMBERS if matches_search(m, term)]


def by_community(community: str) -> List[Member]:
    return [m for m in MOCK_MEMBERS if matches_community(m, community)]


def by_t_number(t_number: str) -> Optional[Member]:
    return next((m for m in MOCK_MEMBERS if m.t_number == t_number), None)


def filtered(search_term: Optional[str] = None, community: Optional[str] = None) -> List[Member]:
    members = list(MOCK_MEMBERS)
    if search_term:
        members = [m for m in members if matches_search(m, search_term)]
    if community:
        members = [m for m in members if matches_community(m, community)]
    return members


def with_email() -> List[Member]:
    return [m for m in MOCK_MEMBERS if m.email]


def with_phone() -> List[Member]:
    return [m for m in MOCK_MEMBERS if m.phone]
