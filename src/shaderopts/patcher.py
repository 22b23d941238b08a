"""Rewrite annotated shader source with new option values.

Only annotated lines are touched. Every other line is emitted verbatim,
and every line, including the last, is followed by the line terminator.

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Sequence

from shaderopts.annotations import Annotations
from shaderopts.config import PatchConfig
from shaderopts.cursor import COMMENT_MARKER, LineCursor
from shaderopts.errors import InvalidOptionValueError, UnsupportedEditError
from shaderopts.options import StringOption
from shaderopts.utils.logger import get_logger
from shaderopts.values import OptionValues

logger = get_logger(__name__)


def apply_values(
    lines: Sequence[str],
    annotations: Annotations,
    values: OptionValues,
    config: PatchConfig,
    *,
    source_file: str | None = None,
) -> str:
    """Regenerate the full source text with option edits applied.

    Args:
        lines: Original lines the annotations were computed from
        annotations: Annotations for exactly these lines
        values: Decides which boolean options flip (and, optionally,
            new values for value options)
        config: Patch configuration
        source_file: Source file path for error messages

    Returns:
        The rewritten source text.

    Raises:
        UnsupportedEditError: A value option was encountered and value edits
            are disabled or unsupported by ``values``.
        InvalidOptionValueError: A replacement value isn't a number or word.
    """
    boolean_options = annotations.boolean_options
    string_options = annotations.string_options
    terminator = config.line_terminator

    parts: list[str] = []
    for index, line in enumerate(lines):
        boolean_option = boolean_options.get(index)
        if boolean_option is not None:
            if values.should_flip(boolean_option.name):
                logger.debug(
                    "Flipping %s on line %d (was %s)",
                    boolean_option.name,
                    index + 1,
                    "enabled" if boolean_option.enabled else "disabled",
                )
                line = flip_boolean_define(
                    line, preserve_indent=config.preserve_indent_on_disable
                )
        else:
            string_option = string_options.get(index)
            if string_option is not None:
                line = _edit_string_option(
                    line, index, string_option, values, config, source_file
                )

        parts.append(line)
        parts.append(terminator)

    return "".join(parts)


def _edit_string_option(
    line: str,
    index: int,
    option: StringOption,
    values: OptionValues,
    config: PatchConfig,
    source_file: str | None,
) -> str:
    get_string_value = getattr(values, "get_string_value", None)
    if not config.value_edits_enabled or get_string_value is None:
        raise UnsupportedEditError(
            f"Editing value option '{option.name}' is not supported",
            option_name=option.name,
            lineno=index + 1,
            source_file=source_file,
        )

    new_value = get_string_value(option.name)
    if new_value is None or new_value == option.value:
        return line

    if not is_valid_value(new_value):
        raise InvalidOptionValueError(option.name, new_value)

    logger.debug(
        "Setting %s on line %d: %s -> %s", option.name, index + 1, option.value, new_value
    )
    return replace_define_value(line, option.name, option.value, new_value)


def has_leading_comment(line: str) -> bool:
    return line.strip().startswith(COMMENT_MARKER)


def flip_boolean_define(line: str, *, preserve_indent: bool = False) -> str:
    """Toggle a boolean #define line between enabled and disabled.

    Removes the first ``//`` from a commented-out line, otherwise prepends
    ``//`` to the line. Relies on classification having established which
    case applies.

    Args:
        line: The boolean #define line as written
        preserve_indent: Insert ``//`` after the indentation instead of
            before it, so an indented line still classifies as the same
            option once disabled

    Examples:
        >>> flip_boolean_define("#define SHADOWS")
        '//#define SHADOWS'
        >>> flip_boolean_define("    #define SHADOWS")
        '//    #define SHADOWS'
        >>> flip_boolean_define("    #define SHADOWS", preserve_indent=True)
        '    //#define SHADOWS'
        >>> flip_boolean_define("  //#define SHADOWS // Shadows")
        '  #define SHADOWS // Shadows'
    """
    if has_leading_comment(line):
        return line.replace(COMMENT_MARKER, "", 1)

    if not preserve_indent:
        return COMMENT_MARKER + line

    indent = len(line) - len(line.lstrip())
    return line[:indent] + COMMENT_MARKER + line[indent:]


def replace_define_value(line: str, name: str, old_value: str, new_value: str) -> str:
    """Replace the value token of ``#define NAME VALUE`` in place.

    The value is the first occurrence of ``old_value`` after the name, which
    the define grammar guarantees is the value token itself.

    Examples:
        >>> replace_define_value("#define RES 512 // [512 1024]", "RES", "512", "1024")
        '#define RES 1024 // [512 1024]'
    """
    start = line.index("#define")
    start = line.index(name, start + len("#define")) + len(name)
    start = line.index(old_value, start)
    return line[:start] + new_value + line[start + len(old_value) :]


def is_valid_value(value: str) -> bool:
    """True if ``value`` is exactly one number or one word."""
    cursor = LineCursor(value)
    if cursor.take_number() is None and cursor.take_word() is None:
        return False
    return cursor.is_end()
