"""Exception definitions for Jumplinks settings"""


class JumplinksException(Exception):
    """Base exception for all Jumplinks settings errors.

    All custom exceptions in this package inherit from this class.
    Use this as a catch-all when you don't need to handle specific
    exception types.
    """

    pass


class ConfigException(JumplinksException):
    """Raised when configuration loading, validation or saving fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Persisted settings fail validation (e.g. unknown wildcard cleaning mode)
    - Defaults are requested for a schema version that does not exist
    """

    pass


class UnknownFieldKindError(JumplinksException, LookupError):
    """Raised when a field kind is not registered with the host.

    This is a programming or configuration error, not a user-facing one,
    and is never recovered from inside the field factory.
    """

    def __init__(self, kind: str):
        super().__init__(f"Unknown field kind: {kind}")
        self.kind = kind


class UnknownAttributeError(JumplinksException, ValueError):
    """Raised when field metadata names an attribute the descriptor does not have."""

    def __init__(self, kind: str, attribute: str):
        super().__init__(f"Field kind '{kind}' has no attribute '{attribute}'")
        self.kind = kind
        self.attribute = attribute
