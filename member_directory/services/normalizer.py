# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Portal contact → local Member mapping. Pure, no I/O."""

from typing import Iterable, List, Optional

from member_directory.schemas import ContactInfo, Member, PersonalInfo, PortalContact


def portal_contact_to_member(contact: PortalContact) -> Member:
    return Member(
        id=contact.memberId,
        memberId=contact.memberId,
        t_number=contact.t_number,
        name=contact.name,
        personal_info=PersonalInfo(
            first_name=contact.firstName,
            last_name=contact.lastName,
            t_number=contact.t_number,
            date_of_birth=contact.birthdate,
        ),
        contact_number=contact.phone,
        phone=contact.phone,
        email=contact.email,
        contact_info=ContactInfo(email=contact.email, phone=contact.phone),
        community=contact.community,
        status=contact.status,
        activated=contact.activated,
        birthdate=contact.birthdate,
    )


def normalize_contacts(contacts: Iterable[PortalContact],
                       require: Optional[str] = None) -> List[Member]:
    """Map contacts to members, keeping the first record per T-number.

    ``require`` names a contact attribute ("email" or "phone") that must be
    truthy for the contact to be kept.
    """
    members: List[Member] = []
    seen: set[str] = set()
    for contact in contacts:
        if require and not getattr(contact, require):
            continue
        if contact.t_number in seen:
            continue
        seen.add(contact.t_number)
        members.append(portal_contact_to_member(contact))
    return members
