"""Access token resolution."""

from dataclasses import dataclass
from typing import Protocol

from nutri_ai.domain.models import AuthenticatedUser


class AuthGateway(Protocol):
    """Identity provider interface."""

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        """Return the user for a valid access token, otherwise None.

        Raises ``IdentityProviderUnavailableError`` when the provider cannot
        be reached.
        """


@dataclass
class AuthService:
    """Resolves the current user from an Authorization header."""

    gateway: AuthGateway

    def current_user(self, authorization: str | None) -> AuthenticatedUser | None:
        """Return the user for a ``Bearer`` header, if any."""
        token = _parse_bearer(authorization)
        if token is None:
            return None
        return self.gateway.get_user(token)


def _parse_bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None
