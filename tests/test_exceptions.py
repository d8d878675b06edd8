"""Tests for custom exception hierarchy."""

import pytest

from deed_registry.exceptions import (
    AlreadyVerifiedError,
    ConfigurationError,
    DeedRegistryError,
    DocumentNotFoundError,
    EntityNotFoundError,
    GrantNotFoundError,
    InvalidAccessLevelError,
    InvalidArgumentsError,
    InvalidOwnerError,
    InvalidPropertyDataError,
    InvalidStatusError,
    PropertyNotFoundError,
    RegistryError,
    SinkError,
    StatusChangeNotFoundError,
    TransferNotFoundError,
    UnauthorizedError,
    UnknownOperationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_deed_registry_error_is_exception(self) -> None:
        assert isinstance(DeedRegistryError("test"), Exception)

    def test_registry_error_is_deed_registry_error(self) -> None:
        assert isinstance(RegistryError("test"), DeedRegistryError)

    @pytest.mark.parametrize(
        "error_class",
        [
            PropertyNotFoundError,
            TransferNotFoundError,
            DocumentNotFoundError,
            GrantNotFoundError,
            StatusChangeNotFoundError,
        ],
    )
    def test_lookups_are_entity_not_found(self, error_class: type) -> None:
        err = error_class("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, RegistryError)

    def test_configuration_error_is_not_registry_error(self) -> None:
        err = ConfigurationError("test")
        assert isinstance(err, DeedRegistryError)
        assert not isinstance(err, RegistryError)

    def test_sink_error_is_deed_registry_error(self) -> None:
        assert isinstance(SinkError("test"), DeedRegistryError)

    def test_exception_message(self) -> None:
        err = PropertyNotFoundError("Property 7 not found")
        assert str(err) == "Property 7 not found"


class TestErrorCodes:
    """Stable codes and kinds carried by registry errors."""

    @pytest.mark.parametrize(
        ("error_class", "code", "kind"),
        [
            (UnauthorizedError, 1001, "Unauthorized"),
            (PropertyNotFoundError, 1002, "PropertyNotFound"),
            (InvalidOwnerError, 1003, "InvalidOwner"),
            (TransferNotFoundError, 1004, "TransferNotFound"),
            (InvalidPropertyDataError, 1005, "InvalidPropertyData"),
            (AlreadyVerifiedError, 1006, "AlreadyVerified"),
            (InvalidStatusError, 1007, "InvalidStatus"),
            (InvalidAccessLevelError, 1008, "InvalidAccessLevel"),
            (DocumentNotFoundError, 1009, "DocumentNotFound"),
            (GrantNotFoundError, 1010, "GrantNotFound"),
            (StatusChangeNotFoundError, 1011, "StatusChangeNotFound"),
            (UnknownOperationError, 1012, "UnknownOperation"),
            (InvalidArgumentsError, 1013, "InvalidArguments"),
        ],
    )
    def test_code_and_kind(self, error_class: type, code: int, kind: str) -> None:
        err = error_class("test")
        assert err.code == code
        assert err.kind == kind

    def test_codes_are_unique(self) -> None:
        classes = [
            UnauthorizedError,
            PropertyNotFoundError,
            InvalidOwnerError,
            TransferNotFoundError,
            InvalidPropertyDataError,
            AlreadyVerifiedError,
            InvalidStatusError,
            InvalidAccessLevelError,
            DocumentNotFoundError,
            GrantNotFoundError,
            StatusChangeNotFoundError,
            UnknownOperationError,
            InvalidArgumentsError,
        ]
        assert len({cls.code for cls in classes}) == len(classes)
