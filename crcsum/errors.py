class CrcsumError(Exception):
    """Base class for crcsum-specific errors."""


class UnsupportedWidthError(CrcsumError, ValueError):
    pass


class SessionClosedError(CrcsumError, RuntimeError):
    pass


class DuplicateVariantError(CrcsumError, ValueError):
    pass
