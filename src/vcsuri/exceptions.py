"""Custom exception hierarchy for vcsuri."""


class VcsUriError(Exception):
    """Base exception for all vcsuri errors."""


class InvalidUriError(VcsUriError, ValueError):
    """Raised when a string cannot be parsed into a Uri."""
