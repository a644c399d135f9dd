"""Error types raised by the URL builders."""


class InvalidArgumentError(ValueError):
    """Raised when a builder input is missing, of the wrong kind, or malformed.

    Always raised before any encoding happens, so no partial URL is produced.
    """


__all__ = ["InvalidArgumentError"]
