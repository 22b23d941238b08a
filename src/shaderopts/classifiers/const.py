"""const declaration classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shaderopts.annotations import AnnotationsBuilder
    from shaderopts.cursor import LineCursor

CONST_UNSUPPORTED = "Const options aren't currently supported."


class ConstClassifierMixin:
    """Mixin recognizing ``const`` declarations.

    Const options (``const float sunPathRotation = -40.0;``) are recognized
    but not yet parsed. They always produce a diagnostic, never an option.

    """

    _builder: AnnotationsBuilder

    def _try_classify_const(self, index: int, cursor: LineCursor) -> bool:
        """Try to classify the line as a const declaration.

        Returns:
            True if the line starts with ``const`` (even when no whitespace
            follows and nothing is recorded), False otherwise.
        """
        if not cursor.take_literal("const"):
            return False

        # "constant", "const_value" and friends are identifiers, not declarations
        if not cursor.take_some_whitespace():
            return True

        # TODO: parse const options into StringOption/BooleanOption with OptionType.CONST
        self._builder.add_diagnostic(index, CONST_UNSUPPORTED)
        return True
