"""Per-line annotation store.

Classification fills an AnnotationsBuilder, which is then frozen into
Annotations. The frozen maps are read-only views over dicts that nothing
else holds a reference to.

Thread Safety:
AnnotationsBuilder is local to one classification pass.
Annotations is frozen and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from shaderopts.options import BooleanOption, StringOption


@dataclass(frozen=True, slots=True)
class Annotations:
    """Immutable result of classifying every line of a source.

    Attributes:
        boolean_options: Line index -> boolean #define option
        string_options: Line index -> value #define option
        diagnostics: Line index -> reason a plausible option was ignored
        boolean_define_references: Name -> one line index where an
            ``#ifdef``/``#ifndef`` referenced it

    """

    boolean_options: Mapping[int, BooleanOption]
    string_options: Mapping[int, StringOption]
    diagnostics: Mapping[int, str]
    boolean_define_references: Mapping[str, int]

    # Mapping fields are not hashable; compare with ==
    __hash__ = None  # type: ignore[assignment]


class AnnotationsBuilder:
    """Mutable working set used while classifying lines.

    Each line index receives at most one option or diagnostic; recording a
    second one for the same line raises ValueError, since that means a
    classifier kept going after a terminal result.
    """

    __slots__ = (
        "_boolean_options",
        "_string_options",
        "_diagnostics",
        "_boolean_define_references",
    )

    def __init__(self) -> None:
        self._boolean_options: dict[int, BooleanOption] = {}
        self._string_options: dict[int, StringOption] = {}
        self._diagnostics: dict[int, str] = {}
        self._boolean_define_references: dict[str, int] = {}

    def add_boolean_option(self, index: int, option: BooleanOption) -> None:
        self._check_unclaimed(index)
        self._boolean_options[index] = option

    def add_string_option(self, index: int, option: StringOption) -> None:
        self._check_unclaimed(index)
        self._string_options[index] = option

    def add_diagnostic(self, index: int, message: str) -> None:
        self._check_unclaimed(index)
        self._diagnostics[index] = message

    def add_reference(self, name: str, index: int) -> None:
        # Last sighting wins; only the set of referenced names matters.
        self._boolean_define_references[name] = index

    def build(self) -> Annotations:
        """Freeze into Annotations. The builder must not be reused afterwards."""
        return Annotations(
            boolean_options=MappingProxyType(self._boolean_options),
            string_options=MappingProxyType(self._string_options),
            diagnostics=MappingProxyType(self._diagnostics),
            boolean_define_references=MappingProxyType(self._boolean_define_references),
        )

    def _check_unclaimed(self, index: int) -> None:
        if (
            index in self._boolean_options
            or index in self._string_options
            or index in self._diagnostics
        ):
            raise ValueError(f"Line {index} already has an annotation")
