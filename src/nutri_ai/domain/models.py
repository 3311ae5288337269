"""Domain models for the Nutri-AI backend."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthenticatedUser:
    """A user resolved from an access token by the identity provider."""

    id: UUID
    email: str | None
