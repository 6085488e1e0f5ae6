"""Bearer token authentication for API routes."""

from duo.domain.service import JWTService
from duo.interface.error import AuthenticationError
from duo.util.jwt import TokenPayload


def authenticate(jwt_service: JWTService, authorization: str | None) -> TokenPayload:
    """Verify the Authorization header and return the token payload.

    Args:
        jwt_service: JWT service from DI
        authorization: Raw ``Authorization`` header value

    Returns:
        Verified payload carrying user_id and email

    Raises:
        AuthenticationError: If the header is missing or not a bearer token
        JWTError: If the token is invalid or expired
    """
    if not authorization:
        raise AuthenticationError("Not authenticated")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Not authenticated")

    return jwt_service.verify_token(token.strip())
