__all__ = ["ConfigurationError"]


class ConfigurationError(Exception):
    """Raised when a presenter schema is declared incorrectly."""

    pass
