"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from duo.domain.model import Couple, Invitation, Profile
from duo.domain.value import (
    CoupleId,
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_email(value: str | None) -> Email | None:
    return Email(root=value) if value else None


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        user_id=UserId(_uuid(row["user_id"])),
        email=_optional_email(row.get("email")),
        full_name=row.get("full_name"),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        partner_email=_optional_email(row.get("partner_email")),
        couple_id=CoupleId(_uuid(row["couple_id"])) if row.get("couple_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "user_id": profile.user_id,
        "email": profile.email.root if profile.email else None,
        "full_name": profile.full_name,
        "bio": profile.bio,
        "avatar_url": profile.avatar_url,
        "partner_email": profile.partner_email.root if profile.partner_email else None,
        "couple_id": profile.couple_id,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


def row_to_couple(row: Dict[str, Any]) -> Couple:
    """Convert database row to Couple domain model."""
    return Couple(
        id=CoupleId(_uuid(row["id"])),
        user1_id=UserId(_uuid(row["user1_id"])),
        user2_id=UserId(_uuid(row["user2_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def couple_to_dict(couple: Couple) -> Dict[str, Any]:
    """Convert Couple domain model to database dict."""
    return couple.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    accepted_by = row.get("accepted_by_user_id")
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        inviter_id=UserId(_uuid(row["inviter_id"])),
        invitee_email=Email(root=row["invitee_email"]),
        invitation_token=InvitationToken(root=row["invitation_token"]),
        status=InvitationStatus(row["status"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by_user_id=UserId(_uuid(accepted_by)) if accepted_by else None,
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Args:
        invitation: Invitation domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": invitation.id,
        "inviter_id": invitation.inviter_id,
        "invitee_email": invitation.invitee_email.root,
        "invitation_token": invitation.invitation_token.root,
        "status": invitation.status.value,
        "expires_at": invitation.expires_at,
        "created_at": invitation.created_at,
        "updated_at": invitation.updated_at,
        "accepted_at": invitation.accepted_at,
        "accepted_by_user_id": invitation.accepted_by_user_id,
    }
