"""Line classifier composing the directive classifier mixins.

Classification is a single pass over the lines:
1. Pre-filter: skip lines without any directive keyword (substring test)
2. Dispatch on the stripped line: #ifdef/#ifndef, then const, then #define
3. Record the result in the AnnotationsBuilder

Lines are independent; a line's result never depends on its neighbours.

Thread Safety:
LineClassifier instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable

from shaderopts.annotations import Annotations, AnnotationsBuilder
from shaderopts.classifiers.const import ConstClassifierMixin
from shaderopts.classifiers.define import DefineClassifierMixin
from shaderopts.classifiers.reference import ReferenceClassifierMixin
from shaderopts.cursor import LineCursor

# Every directive any classifier can accept contains one of these
TRIGGER_KEYWORDS: tuple[str, ...] = ("#define", "const", "#ifdef", "#ifndef")


def is_line_of_interest(line: str) -> bool:
    """Cheap pre-filter: does the line mention any directive keyword?"""
    return any(keyword in line for keyword in TRIGGER_KEYWORDS)


class LineClassifier(
    ReferenceClassifierMixin,
    ConstClassifierMixin,
    DefineClassifierMixin,
):
    """Classifies shader source lines into option annotations.

    Usage:
            >>> classifier = LineClassifier()
            >>> annotations = classifier.classify(["#define SHADOWS", "#ifdef SHADOWS"])
            >>> annotations.boolean_options[0].name
            'SHADOWS'
            >>> dict(annotations.boolean_define_references)
            {'SHADOWS': 1}

    """

    __slots__ = ("_builder",)

    def __init__(self) -> None:
        self._builder = AnnotationsBuilder()

    def classify(self, lines: Iterable[str]) -> Annotations:
        """Classify every line and freeze the result."""
        for index, line in enumerate(lines):
            self.classify_line(index, line)
        return self._builder.build()

    def classify_line(self, index: int, line: str) -> None:
        """Classify one line, recording at most one annotation or diagnostic."""
        if not is_line_of_interest(line):
            return

        # Indentation and trailing whitespace carry no meaning
        cursor = LineCursor(line.strip())

        if self._try_classify_reference(index, cursor):
            return
        if self._try_classify_const(index, cursor):
            return
        if cursor.currently_contains("#define"):
            self._classify_define(index, cursor)
