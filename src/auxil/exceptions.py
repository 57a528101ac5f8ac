class AuxilError(Exception):
    """Base class for all auxil exceptions."""

    pass


class ConfigurationError(AuxilError, ValueError):
    """Raised when memoize or Logger options are invalid or misspelled."""
    pass


class KeyDerivationError(AuxilError, TypeError):
    """Raised when the default key function cannot serialize arguments."""
    pass


class CloneError(AuxilError, TypeError):
    pass
