class FolksonomyError(Exception):
    """Base class for errors raised by the tag widgets."""


class InvalidConfigurationError(FolksonomyError, ValueError):
    """A widget was asked to render with options it cannot honour (e.g. gradations < 2)."""


class UnsupportedVariantError(FolksonomyError, NotImplementedError):
    """An unsupported widget variant was turned into markup."""
