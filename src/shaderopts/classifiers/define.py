"""#define option classifier mixin.

Recognized shapes (leading/trailing whitespace already stripped)::

    #define SHADOWS                      boolean, enabled
    //#define SHADOWS // Enable shadows   boolean, disabled, commented
    #define SHADOW_RES 1024              value
    #define SUN_ANGLE -0.5 // Sun angle  value, commented

Anything else that contains ``#define`` gets exactly one diagnostic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shaderopts.options import BooleanOption, OptionType, StringOption

if TYPE_CHECKING:
    from shaderopts.annotations import AnnotationsBuilder
    from shaderopts.cursor import LineCursor

DEFINE_MISPLACED = (
    'This line contains an occurrence of "#define" '
    "but it wasn't in a place we expected, ignoring it."
)
DEFINE_NO_WHITESPACE = (
    "This line properly starts with a #define statement but doesn't have "
    "any whitespace characters after the #define."
)
DEFINE_NO_NAME = (
    "Invalid syntax after #define directive. "
    "No alphanumeric or underscore characters detected."
)
DEFINE_INVALID_NAME = (
    "Invalid syntax after #define directive. Only alphanumeric or underscore "
    "characters are allowed in option names."
)
DEFINE_COMMENTED_VALUE = (
    "Ignoring potential non-boolean #define option since it has a leading comment. "
    "Leading comments (//) are only allowed on boolean #define options."
)
DEFINE_INVALID_VALUE = (
    "Ignoring this #define directive because it doesn't appear to be a boolean #define, "
    "and its potential value wasn't a valid number or a valid word."
)
DEFINE_TRAILING_CHARACTERS = (
    "Invalid syntax after value #define directive. "
    "Invalid characters after number or word."
)
DEFINE_TRAILING_TEXT = (
    "Invalid syntax after value #define directive. "
    "Only comments may come after the value."
)


class DefineClassifierMixin:
    """Mixin classifying ``#define`` lines into boolean or value options."""

    _builder: AnnotationsBuilder

    def _classify_define(self, index: int, cursor: LineCursor) -> None:
        """Classify a line known to contain ``#define``.

        Records a BooleanOption, a StringOption or a single diagnostic.

        Args:
            index: Line index
            cursor: Cursor over the stripped line, at its start
        """
        builder = self._builder

        # A leading comment disables a boolean option
        has_leading_comment = cursor.take_comments()

        if not cursor.take_literal("#define"):
            builder.add_diagnostic(index, DEFINE_MISPLACED)
            return

        if not cursor.take_some_whitespace():
            builder.add_diagnostic(index, DEFINE_NO_WHITESPACE)
            return

        name = cursor.take_word()
        if name is None:
            builder.add_diagnostic(index, DEFINE_NO_NAME)
            return

        took_whitespace = cursor.take_some_whitespace()

        if cursor.is_end():
            builder.add_boolean_option(
                index, BooleanOption(OptionType.DEFINE, name, None, not has_leading_comment)
            )
            return

        if cursor.take_comments():
            # Boolean options need no allowed-values list, so the comment is taken as-is
            comment = cursor.take_rest().strip()
            builder.add_boolean_option(
                index, BooleanOption(OptionType.DEFINE, name, comment, not has_leading_comment)
            )
            return

        if not took_whitespace:
            builder.add_diagnostic(index, DEFINE_INVALID_NAME)
            return

        if has_leading_comment:
            builder.add_diagnostic(index, DEFINE_COMMENTED_VALUE)
            return

        value = cursor.take_number()
        if value is None:
            value = cursor.take_word()

        if value is None:
            builder.add_diagnostic(index, DEFINE_INVALID_VALUE)
            return

        took_whitespace = cursor.take_some_whitespace()

        if cursor.is_end():
            builder.add_string_option(
                index, StringOption.create_uncommented(OptionType.DEFINE, name, value)
            )
            return

        if not took_whitespace:
            builder.add_diagnostic(index, DEFINE_TRAILING_CHARACTERS)
            return

        if not cursor.take_comments():
            builder.add_diagnostic(index, DEFINE_TRAILING_TEXT)
            return

        comment = cursor.take_rest().strip()
        builder.add_string_option(
            index, StringOption.create(OptionType.DEFINE, name, comment, value)
        )
