"""Salute exception hierarchy.

Request-level failures never surface as exceptions: unmatched routes fall
back to the default handler and bad handler output becomes a fixed 500.
These types cover setup-time mistakes only.
"""


class SaluteError(Exception):
    """Base for all salute-specific errors."""


class ConfigurationError(SaluteError):
    """Raised when the app is set up incorrectly.

    Typically registering a route after the app has frozen its route
    table, or starting the server without pounce installed.
    """
