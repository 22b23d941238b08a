"""Directive classifiers for shader source lines.

Each classifier is a mixin handling one directive grammar. LineClassifier
composes them and owns the keyword pre-filter and dispatch order.
"""

from shaderopts.classifiers.const import ConstClassifierMixin
from shaderopts.classifiers.core import (
    TRIGGER_KEYWORDS,
    LineClassifier,
    is_line_of_interest,
)
from shaderopts.classifiers.define import DefineClassifierMixin
from shaderopts.classifiers.reference import ReferenceClassifierMixin

__all__ = [
    "ConstClassifierMixin",
    "DefineClassifierMixin",
    "LineClassifier",
    "ReferenceClassifierMixin",
    "TRIGGER_KEYWORDS",
    "is_line_of_interest",
]
