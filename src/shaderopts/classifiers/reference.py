"""#ifdef / #ifndef reference classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shaderopts.annotations import AnnotationsBuilder
    from shaderopts.cursor import LineCursor


class ReferenceClassifierMixin:
    """Mixin recording which names are referenced by #ifdef and #ifndef.

    Only these two spellings count. Names mentioned in ``#if`` and ``#elif``
    expressions (``#if defined(SHADOWS)``) are never recorded, matching how
    OptiFine decides whether a boolean #define is referenced. Shader packs
    rely on that, so it must not be widened.

    """

    # Set by LineClassifier
    _builder: AnnotationsBuilder

    def _try_classify_reference(self, index: int, cursor: LineCursor) -> bool:
        """Try to classify the line as ``#ifdef NAME`` or ``#ifndef NAME``.

        Malformed conditionals are common and not option-shaped, so they are
        dropped without a diagnostic.

        Args:
            index: Line index
            cursor: Cursor over the stripped line, at its start

        Returns:
            True if the line starts with either directive (whether or not a
            reference was recorded), False otherwise.
        """
        if not (cursor.take_literal("#ifdef") or cursor.take_literal("#ifndef")):
            return False

        if not cursor.take_some_whitespace():
            return True

        name = cursor.take_word()
        cursor.take_some_whitespace()

        if name is None or not cursor.is_end():
            return True

        self._builder.add_reference(name, index)
        return True
