"""Option value sources consumed by apply.

The patcher never asks for an absolute target state. For each boolean
option it only asks whether the on-disk state should be flipped, which
keeps it independent of how target values are loaded or merged.

Thread Safety:
    StaticOptionValues is frozen and safe to share across threads. Custom
    implementations used with concurrent apply calls must be read-only too.

Example:
    >>> from shaderopts import annotate, StaticOptionValues
    >>> source = annotate("#define SHADOWS\\n")
    >>> source.apply(StaticOptionValues(flips=frozenset({"SHADOWS"})))
    '//#define SHADOWS\\n'
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol, runtime_checkable


@runtime_checkable
class OptionValues(Protocol):
    """Decides, per boolean option, whether its state should change."""

    def should_flip(self, name: str) -> bool:
        """Return True if the named boolean option should be toggled."""
        ...


@runtime_checkable
class StringOptionValues(OptionValues, Protocol):
    """Option values that can also supply replacement values for value options."""

    def get_string_value(self, name: str) -> str | None:
        """Return the new value text for the named option, or None to keep it."""
        ...


@dataclass(frozen=True, slots=True)
class StaticOptionValues:
    """In-memory option values.

    Attributes:
        flips: Names of boolean options to toggle
        strings: Replacement values for value options, keyed by name

    """

    flips: frozenset[str] = field(default_factory=frozenset)
    strings: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @classmethod
    def of(
        cls,
        flips: Iterable[str] = (),
        strings: Mapping[str, str] | None = None,
    ) -> "StaticOptionValues":
        """Build from any iterable of names and an optional value mapping.

        Example:
            >>> values = StaticOptionValues.of(["SHADOWS"], {"SHADOW_RES": "2048"})
            >>> values.should_flip("SHADOWS")
            True
        """
        return cls(frozenset(flips), MappingProxyType(dict(strings or {})))

    def should_flip(self, name: str) -> bool:
        return name in self.flips

    def get_string_value(self, name: str) -> str | None:
        return self.strings.get(name)


# Flips nothing; apply with this reproduces the source
NO_CHANGES: StaticOptionValues = StaticOptionValues()


__all__ = [
    "NO_CHANGES",
    "OptionValues",
    "StaticOptionValues",
    "StringOptionValues",
]
