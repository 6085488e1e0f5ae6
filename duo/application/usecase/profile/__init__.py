"""Profile use cases."""

from duo.application.usecase.profile.get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
)
from duo.application.usecase.profile.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
