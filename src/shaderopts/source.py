"""Shader source annotated with its configurable options.

Changing a shader option means editing the shader source itself: boolean
options are ``#define`` lines that get commented in or out, and value options
are ``#define NAME VALUE`` lines. OptionAnnotatedSource covers the first and
last steps of that process:

1. Discovery: classify every line once, recording an option annotation or a
   diagnostic explaining why a plausible option line was ignored.
2. Application: rewrite only the annotated lines for a set of option values.

Deduplicating options across the files of a shader pack and loading saved
values happen elsewhere.

The lines and annotations are captured together at construction and never
change, so annotations cannot drift out of sync with the text they describe.
A changed file needs a new OptionAnnotatedSource.

Thread Safety:
    Instances are deeply immutable. apply() is pure; concurrent calls with
    the same option values return identical text.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from shaderopts.annotations import Annotations
from shaderopts.classifiers import LineClassifier
from shaderopts.config import PatchConfig, get_patch_config
from shaderopts.options import BooleanOption, Diagnostic, StringOption
from shaderopts.patcher import apply_values
from shaderopts.utils.logger import get_logger
from shaderopts.values import OptionValues

logger = get_logger(__name__)


class OptionAnnotatedSource:
    """A snapshot of shader source lines plus per-line option annotations.

    Usage:
            >>> from shaderopts import StaticOptionValues
            >>> source = OptionAnnotatedSource(["#define SHADOWS // Shadows"])
            >>> source.boolean_options[0].comment
            'Shadows'
            >>> source.apply(StaticOptionValues.of(["SHADOWS"]))
            '//#define SHADOWS // Shadows\\n'

    """

    __slots__ = ("_lines", "_annotations", "_source_file")

    def __init__(self, lines: Iterable[str], *, source_file: str | None = None) -> None:
        """Classify every line of a shader source.

        Args:
            lines: Source lines without line terminators
            source_file: Optional source file path for diagnostics and errors
        """
        self._lines: tuple[str, ...] = tuple(lines)
        self._source_file = source_file
        self._annotations: Annotations = LineClassifier().classify(self._lines)
        self._log_summary()
        self.log_diagnostics()

    @property
    def lines(self) -> tuple[str, ...]:
        """The source lines the annotations describe."""
        return self._lines

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def annotations(self) -> Annotations:
        return self._annotations

    @property
    def boolean_options(self) -> Mapping[int, BooleanOption]:
        """Line index -> boolean #define option."""
        return self._annotations.boolean_options

    @property
    def string_options(self) -> Mapping[int, StringOption]:
        """Line index -> value #define option."""
        return self._annotations.string_options

    @property
    def diagnostics(self) -> Mapping[int, str]:
        """Line index -> why a plausible option on that line was ignored."""
        return self._annotations.diagnostics

    @property
    def boolean_define_references(self) -> Mapping[str, int]:
        """Option name -> one line where ``#ifdef``/``#ifndef`` referenced it.

        References inside ``#if``/``#elif`` expressions are deliberately not
        tracked, matching OptiFine.
        """
        return self._annotations.boolean_define_references

    def iter_diagnostics(self) -> Iterator[Diagnostic]:
        """Yield diagnostics as records, in line order."""
        for index in sorted(self._annotations.diagnostics):
            yield Diagnostic(index, self._annotations.diagnostics[index], self._source_file)

    def find_boolean_option(self, name: str) -> tuple[int, BooleanOption] | None:
        """Return (index, option) for the first boolean option named ``name``."""
        for index in sorted(self._annotations.boolean_options):
            option = self._annotations.boolean_options[index]
            if option.name == name:
                return index, option
        return None

    def find_string_option(self, name: str) -> tuple[int, StringOption] | None:
        """Return (index, option) for the first value option named ``name``."""
        for index in sorted(self._annotations.string_options):
            option = self._annotations.string_options[index]
            if option.name == name:
                return index, option
        return None

    def is_referenced(self, name: str) -> bool:
        """True if ``#ifdef NAME`` or ``#ifndef NAME`` appears in the source."""
        return name in self._annotations.boolean_define_references

    def apply(self, values: OptionValues, *, config: PatchConfig | None = None) -> str:
        """Rewrite the source with option changes applied.

        Args:
            values: Decides which boolean options flip
            config: Patch configuration (defaults to the context's config)

        Returns:
            The full source text, every line followed by the line terminator.

        Raises:
            UnsupportedEditError: The source has a value option and value
                edits aren't enabled. Nothing is returned in that case.
        """
        return apply_values(
            self._lines,
            self._annotations,
            values,
            config or get_patch_config(),
            source_file=self._source_file,
        )

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return (
            f"OptionAnnotatedSource({self._source_file or '<source>'!s}, "
            f"lines={len(self._lines)}, "
            f"boolean_options={len(self.boolean_options)}, "
            f"string_options={len(self.string_options)}, "
            f"diagnostics={len(self.diagnostics)})"
        )

    def log_diagnostics(self) -> None:
        """Log each diagnostic, at WARNING if the context config asks for it.

        Runs at construction; ``annotate`` calls it again on a cache hit so
        the active ``warn_on_diagnostics`` setting applies to every caller.
        """
        if not self.diagnostics:
            return

        warn = get_patch_config().warn_on_diagnostics
        for diagnostic in self.iter_diagnostics():
            if warn:
                logger.warning("%s", diagnostic)
            else:
                logger.debug("%s", diagnostic)

    def _log_summary(self) -> None:
        name = self._source_file or "<source>"
        logger.debug(
            "Annotated %s: %d lines, %d boolean options, %d value options, %d diagnostics",
            name,
            len(self._lines),
            len(self.boolean_options),
            len(self.string_options),
            len(self.diagnostics),
        )
