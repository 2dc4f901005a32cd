"""Domain errors surfaced to page controllers."""


class GlobalNestError(Exception):
    """Base class for every error raised by the application layer."""


class AuthError(GlobalNestError):
    """Sign-in, sign-up or sign-out was rejected by the auth backend."""


class DataAccessError(GlobalNestError):
    """A single table or storage call failed; the caller stops its own work."""


class GeolocationUnavailable(GlobalNestError):
    """The browser did not report usable coordinates."""
