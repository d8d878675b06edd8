"""Input-shape checks shared by registry operations."""

from decimal import Decimal, InvalidOperation

from deed_registry.exceptions import InvalidPropertyDataError


def require_text(value: str, field_name: str, max_length: int, *, required: bool = True) -> str:
    """Validate a textual field against emptiness and its maximum length."""
    if not isinstance(value, str):
        raise InvalidPropertyDataError(f"{field_name} must be a string")
    if required and not value:
        raise InvalidPropertyDataError(f"{field_name} must not be empty")
    if len(value) > max_length:
        raise InvalidPropertyDataError(
            f"{field_name} exceeds {max_length} characters ({len(value)})"
        )
    return value


def require_positive_int(value: int, field_name: str) -> int:
    """Validate an unsigned, non-zero integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidPropertyDataError(f"{field_name} must be a positive integer, got {value!r}")
    return value


def require_amount(amount: int | str | Decimal | None) -> Decimal | None:
    """Normalise an optional transfer amount to a non-negative Decimal."""
    if amount is None:
        return None
    if isinstance(amount, (bool, float)):
        raise InvalidPropertyDataError(f"Amount must be an integer or Decimal, got {amount!r}")
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise InvalidPropertyDataError(f"Invalid amount: {amount!r}") from exc
    if not value.is_finite() or value < 0:
        raise InvalidPropertyDataError(f"Amount must be non-negative, got {amount!r}")
    return value
