class CryptcrawlError(Exception):
    """Base exception for the cryptcrawl simulation core."""


class ConfigError(CryptcrawlError, ValueError):
    """Raised when a configuration file or value is invalid."""


class InvariantViolation(CryptcrawlError, AssertionError):
    """Raised when a programmer invariant is broken.

    These indicate logic defects rather than recoverable runtime conditions and
    are never caught by the core; they terminate the run.
    """


class InventoryFull(CryptcrawlError):
    """Raised when adding to an inventory that is already at capacity."""
