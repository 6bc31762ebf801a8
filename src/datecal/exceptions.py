"""Custom exceptions for datecal."""

from __future__ import annotations

from typing import Any


class DateCalError(ValueError):
    """Base exception for all datecal errors."""

    pass


class InvalidDateError(DateCalError):
    """Raised when a value is not a valid calendar date."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        msg = f"Invalid date provided: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidAmountError(DateCalError):
    """Raised when an offset amount is not a finite integer."""

    def __init__(self, amount: Any, reason: str | None = None) -> None:
        self.amount = amount
        msg = f"Invalid amount provided: {amount!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidUnitError(DateCalError):
    """Raised when a date unit is not one of days, months or years."""

    def __init__(self, unit: Any, available_units: list[str] | None = None) -> None:
        self.unit = unit
        msg = f"Invalid unit provided: {unit!r}"
        if available_units:
            msg += f". Use one of: {', '.join(available_units)}"
        super().__init__(msg)


class InvalidRangeError(DateCalError):
    """Raised when a range's start is not strictly before its end."""

    def __init__(self, from_: Any, to: Any) -> None:
        self.from_ = from_
        self.to = to
        super().__init__("Invalid range: from date must be before to date")


class UnknownCountryError(DateCalError, KeyError):
    """Raised when no holiday preset exists for a country code."""

    def __init__(self, country: str, supported: list[str] | None = None) -> None:
        self.country = country
        self.supported = supported or []
        msg = f"Unknown country preset {country!r}"
        if supported:
            msg += f". Supported: {', '.join(supported)}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
