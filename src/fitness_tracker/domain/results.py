"""Outcome of a state-changing command."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CommandResult(Generic[T]):
    """Result of a command: the committed value or the reason it was rejected."""

    value: T | None = None
    missing_fields: tuple[str, ...] = ()
    not_found: bool = False

    @property
    def ok(self) -> bool:
        """Return True when the command was applied."""
        return not self.missing_fields and not self.not_found

    @classmethod
    def success(cls, value: T) -> "CommandResult[T]":
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def missing(cls, *fields: str) -> "CommandResult[T]":
        """Build a result rejected for missing required fields."""
        return cls(missing_fields=tuple(fields))

    @classmethod
    def missing_target(cls) -> "CommandResult[T]":
        """Build a result for a lookup that found nothing."""
        return cls(not_found=True)

    def rejection(self) -> "CommandResult[Any]":
        """Return this result's rejection, retyped for a different value."""
        return CommandResult(
            missing_fields=self.missing_fields, not_found=self.not_found
        )
