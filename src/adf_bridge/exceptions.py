class AdfBridgeError(Exception):
    """Base exception for ADF bridge errors."""

    pass


class ConfigurationError(AdfBridgeError, ValueError):
    """Raised when an environment setting has an invalid value."""

    pass
