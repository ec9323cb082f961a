"""Errors raised by the ledger stores.

Every rejected operation raises one of these after rolling back the
session, so callers never observe a partial write.
"""


class LedgerError(Exception):
    """Base exception for ledger operations."""

    default_message = "Ledger operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(LedgerError):
    """Malformed input, e.g. an unknown category type."""

    default_message = "Invalid argument"


class DuplicateKey(LedgerError):
    """A uniqueness constraint would be violated."""

    default_message = "Duplicate key"


class NotFound(LedgerError):
    """A referenced entity does not exist."""

    default_message = "Not found"


class ReferentialConflict(LedgerError):
    """Delete blocked because other rows still reference the entity."""

    default_message = "Entity is still referenced"


class Unauthenticated(LedgerError):
    """Email and password hash do not match any user."""

    default_message = "Invalid email or password"
