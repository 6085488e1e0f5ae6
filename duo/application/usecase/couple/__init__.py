"""Couple use cases."""

from duo.application.usecase.couple.get_couple import (
    GetCoupleRequest,
    GetCoupleResponse,
    GetCoupleUseCase,
    PartnerProfile,
)

__all__ = [
    "GetCoupleRequest",
    "GetCoupleResponse",
    "GetCoupleUseCase",
    "PartnerProfile",
]
