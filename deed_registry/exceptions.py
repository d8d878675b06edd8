"""Custom exception hierarchy for deed-registry."""


class DeedRegistryError(Exception):
    """Base exception for all deed-registry errors."""


class RegistryError(DeedRegistryError):
    """Raised when a registry operation is rejected.

    Every subclass carries a stable numeric ``code`` and a ``kind`` name
    that callers can rely on across releases.
    """

    code: int = 1000
    kind: str = "RegistryError"


class UnauthorizedError(RegistryError):
    """Raised when the caller may not perform the operation."""

    code = 1001
    kind = "Unauthorized"


class EntityNotFoundError(RegistryError):
    """Raised when a referenced entity does not exist."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when a property ID was never issued."""

    code = 1002
    kind = "PropertyNotFound"


class InvalidOwnerError(RegistryError):
    """Raised when the target owner is empty or already owns the property."""

    code = 1003
    kind = "InvalidOwner"


class TransferNotFoundError(EntityNotFoundError):
    """Raised when a transfer sequence number was never issued for a property."""

    code = 1004
    kind = "TransferNotFound"


class InvalidPropertyDataError(RegistryError):
    """Raised when textual or numeric input fails validation."""

    code = 1005
    kind = "InvalidPropertyData"


class AlreadyVerifiedError(RegistryError):
    """Raised when a property has already been verified."""

    code = 1006
    kind = "AlreadyVerified"


class InvalidStatusError(RegistryError):
    """Raised for unknown statuses and disallowed status transitions."""

    code = 1007
    kind = "InvalidStatus"


class InvalidAccessLevelError(RegistryError):
    """Raised when an access level is outside the supported range."""

    code = 1008
    kind = "InvalidAccessLevel"


class DocumentNotFoundError(EntityNotFoundError):
    """Raised when a document sequence number was never issued for a property."""

    code = 1009
    kind = "DocumentNotFound"


class GrantNotFoundError(EntityNotFoundError):
    """Raised when no access grant exists for a (property, accessor) pair."""

    code = 1010
    kind = "GrantNotFound"


class StatusChangeNotFoundError(EntityNotFoundError):
    """Raised when a status-change sequence number was never issued."""

    code = 1011
    kind = "StatusChangeNotFound"


class UnknownOperationError(RegistryError):
    """Raised when the gateway receives an operation name it does not expose."""

    code = 1012
    kind = "UnknownOperation"


class InvalidArgumentsError(RegistryError):
    """Raised when a call's arguments do not match the operation's signature."""

    code = 1013
    kind = "InvalidArguments"


class ConfigurationError(DeedRegistryError):
    """Raised when configuration is invalid or missing."""


class SinkError(DeedRegistryError):
    """Raised when a sink operation fails."""
