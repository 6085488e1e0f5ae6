"""Couple domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from duo.domain.error import (
    AlreadyPairedError,
    NotFoundError,
    PartnerNotFoundError,
    SelfPairingError,
)
from duo.domain.model import Couple, Profile
from duo.domain.repository import CoupleRepository, ProfileRepository
from duo.domain.value import CoupleId, Email, UserId

from .base import Service


class CoupleService(Service):
    """Domain service for the couple registry.

    Owns the one-couple-per-user rule and the atomic pairing path shared by
    direct pairing and invitation acceptance.
    """

    def __init__(
        self,
        couple_repository: CoupleRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize couple service.

        Args:
            couple_repository: Couple repository
            profile_repository: Profile repository
        """
        self.couple_repository = couple_repository
        self.profile_repository = profile_repository

    async def find_couple_for_user(self, user_id: UserId) -> Couple | None:
        """Get the couple a user belongs to.

        Args:
            user_id: User ID

        Returns:
            Couple if the user is paired, None otherwise
        """
        with logfire.span("couple_service.find_couple_for_user", user_id=str(user_id)):
            couple = await self.couple_repository.find_by_user(user_id)
            if couple:
                logfire.info(
                    "Couple found", user_id=str(user_id), couple_id=str(couple.id)
                )
            return couple

    async def create_couple(self, user_id: UserId, partner_email: Email) -> Couple:
        """Pair a user with the registered account owning partner_email.

        Args:
            user_id: User requesting the pairing
            partner_email: Partner's account email

        Returns:
            Created couple

        Raises:
            AlreadyPairedError: If either user already belongs to a couple
            PartnerNotFoundError: If no account owns partner_email
        """
        with logfire.span("couple_service.create_couple", user_id=str(user_id)):
            # Checked before resolving the partner so an already paired user
            # never falls through to issuing an invitation
            if await self.couple_repository.find_by_user(user_id):
                logfire.warn("User already paired", user_id=str(user_id))
                raise AlreadyPairedError(str(user_id))

            partner = await self.profile_repository.find_by_email(partner_email)
            if not partner:
                logfire.info("Partner has no account yet", user_id=str(user_id))
                raise PartnerNotFoundError(partner_email.root)

            return await self.pair(user_id, partner.user_id)

    async def pair(self, user1_id: UserId, user2_id: UserId) -> Couple:
        """Create a couple and link both profiles to it, all or nothing.

        Inside a database session this runs in the request transaction; the
        compensating rollback below additionally keeps the in-memory store
        and lost races consistent.

        Args:
            user1_id: First member (the initiator)
            user2_id: Second member

        Returns:
            Created couple

        Raises:
            AlreadyPairedError: If either user already belongs to a couple
            NotFoundError: If either user has no profile
            SelfPairingError: If both IDs are the same user
        """
        if user1_id == user2_id:
            raise SelfPairingError()

        with logfire.span(
            "couple_service.pair", user1_id=str(user1_id), user2_id=str(user2_id)
        ):
            couple = Couple(id=CoupleId(uuid4()), user1_id=user1_id, user2_id=user2_id)

            for member_id in (user1_id, user2_id):
                profile = await self.profile_repository.find_by_user_id(member_id)
                if not profile:
                    raise NotFoundError("Profile", str(member_id))
                if profile.is_paired:
                    raise AlreadyPairedError(str(member_id))
                if await self.couple_repository.find_by_user(member_id):
                    raise AlreadyPairedError(str(member_id))

            try:
                await self.couple_repository.create(couple)
            except IntegrityError:
                logfire.warn(
                    "Couple insert hit uniqueness constraint",
                    user1_id=str(user1_id),
                    user2_id=str(user2_id),
                )
                raise AlreadyPairedError(str(user1_id))

            try:
                linked = await self.profile_repository.link_couple(
                    [user1_id, user2_id], couple.id
                )
            except Exception:
                await self.revert(couple)
                raise

            if linked != 2:
                # Another pairing linked one of the profiles first
                logfire.warn(
                    "Profile link lost a race, rolling back couple",
                    couple_id=str(couple.id),
                    linked=linked,
                )
                await self.revert(couple)
                raise AlreadyPairedError(str(user1_id))

            logfire.info(
                "Couple created",
                couple_id=str(couple.id),
                user1_id=str(user1_id),
                user2_id=str(user2_id),
            )
            return couple

    async def revert(self, couple: Couple) -> None:
        """Undo a pairing that could not be completed.

        Clears both profiles' couple_id and deletes the couple row.

        Args:
            couple: Couple created earlier in the same operation
        """
        with logfire.span("couple_service.revert", couple_id=str(couple.id)):
            await self.profile_repository.unlink_couple(couple.id)
            await self.couple_repository.delete(couple.id)
            logfire.info("Couple reverted", couple_id=str(couple.id))

    async def get_partner_profile(
        self, user_id: UserId
    ) -> tuple[Couple, Profile | None] | None:
        """Get the user's couple and their partner's profile.

        Args:
            user_id: User ID

        Returns:
            (couple, partner profile) if paired, None otherwise. The partner
            profile is None if the partner's account has been deleted.
        """
        with logfire.span("couple_service.get_partner_profile", user_id=str(user_id)):
            couple = await self.couple_repository.find_by_user(user_id)
            if not couple:
                return None
            partner = await self.profile_repository.find_by_user_id(
                couple.partner_of(user_id)
            )
            return couple, partner
