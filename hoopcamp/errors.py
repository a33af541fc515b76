"""Exception types raised by the camp application."""


class HoopcampError(Exception):
    """Base class for application errors."""


class ConfigurationError(HoopcampError):
    """Raised when the Supabase connection settings are missing."""


class AuthenticationError(HoopcampError):
    """Raised when sign-in or sign-up is rejected by the auth provider."""
