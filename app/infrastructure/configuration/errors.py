"""Configuration errors."""


class ConfigurationError(Exception):
    """Raised when settings are missing or invalid.

    A component that raises this during construction must not be used.
    """
