"""Supabase Auth session lookup."""

import logging
from dataclasses import dataclass
from uuid import UUID

import httpx
from supabase import AuthError, Client

from nutri_ai.domain.errors import IdentityProviderUnavailableError
from nutri_ai.domain.models import AuthenticatedUser
from nutri_ai.services.auth import AuthGateway

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Resolve access tokens through Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        """Return the user owning the access token, if it is valid.

        Raises ``IdentityProviderUnavailableError`` when Supabase Auth cannot
        be reached.
        """
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        except httpx.HTTPError as exc:
            _logger.warning("Supabase Auth request failed: %r", exc)
            raise IdentityProviderUnavailableError(str(exc)) from exc
        if response is None or response.user is None:
            return None
        return AuthenticatedUser(
            id=UUID(str(response.user.id)),
            email=response.user.email,
        )
