from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class ValidationError(OrderError):
    pass


@dataclass(frozen=True)
class PricingError(OrderError):
    pass


@dataclass(frozen=True)
class MissingReference(PricingError):
    field: str

    def __str__(self) -> str:
        return f"missing_reference: {self.field} ({self.message})"


@dataclass(frozen=True)
class UnknownSpecial(OrderError):
    special_id: int

    def __str__(self) -> str:
        return f"unknown_special: {self.special_id} ({self.message})"


@dataclass(frozen=True)
class UnknownTopping(OrderError):
    topping_id: int

    def __str__(self) -> str:
        return f"unknown_topping: {self.topping_id} ({self.message})"


@dataclass(frozen=True)
class PublishError(OrderError):
    pass
