"""Errors raised by the food search flow."""


class FoodSearchError(Exception):
    """Base class for failures reported to food search callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(FoodSearchError):
    """The caller sent no usable search query."""


class UpstreamUnavailableError(FoodSearchError):
    """The nutrition database could not be reached or answered with an error."""


class MalformedUpstreamPayloadError(FoodSearchError):
    """The nutrition database answered with a body we cannot read."""


class IdentityProviderUnavailableError(Exception):
    """The identity provider could not be reached to check an access token."""
