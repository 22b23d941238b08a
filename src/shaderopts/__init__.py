"""
shaderopts: shader option discovery and patching

Shader packs expose their settings as preprocessor directives in the shader
source. Changing a setting means rewriting specific lines of that source
while leaving everything else byte-identical. shaderopts finds the
configurable lines and rewrites them.

Quick Start:
    >>> from shaderopts import annotate, StaticOptionValues
    >>> source = annotate(
    ...     "#define SHADOWS // Enable shadows\\n"
    ...     "#define SHADOW_RES 1024 // [512 1024 2048]\\n"
    ... )
    >>> source.boolean_options[0].name
    'SHADOWS'
    >>> source.string_options[1].value
    '1024'

    >>> # Flip boolean options
    >>> plain = annotate("#define SHADOWS\\n")
    >>> plain.apply(StaticOptionValues.of(["SHADOWS"]))
    '//#define SHADOWS\\n'

Diagnostics:
    >>> source = annotate("#define 123abc\\n")
    >>> for diagnostic in source.iter_diagnostics():
    ...     print(diagnostic)
    1: Invalid syntax after #define directive. No alphanumeric or underscore characters detected.

Installation:
    pip install shaderopts              # zero runtime dependencies
"""

from shaderopts.annotations import Annotations
from shaderopts.cache import AnnotationCache, DictAnnotationCache
from shaderopts.classifiers import LineClassifier
from shaderopts.config import (
    PatchConfig,
    get_patch_config,
    patch_config_context,
    reset_patch_config,
    set_patch_config,
)
from shaderopts.cursor import LineCursor
from shaderopts.errors import InvalidOptionValueError, ShaderOptsError, UnsupportedEditError
from shaderopts.options import BooleanOption, Diagnostic, OptionType, StringOption
from shaderopts.source import OptionAnnotatedSource
from shaderopts.utils import hash_lines, split_source_lines
from shaderopts.values import NO_CHANGES, OptionValues, StaticOptionValues, StringOptionValues

__version__ = "0.1.0"


def annotate(
    text: str,
    *,
    source_file: str | None = None,
    cache: AnnotationCache | None = None,
) -> OptionAnnotatedSource:
    """Split shader source text into lines and annotate its options.

    Args:
        text: Shader source text
        source_file: Optional source file path for diagnostics and errors
        cache: Optional annotation cache. On a hit the cached instance is
            returned and its diagnostics are logged again under the current
            config; on a miss the new instance is stored.

    Returns:
        OptionAnnotatedSource over the split lines

    Example:
        >>> source = annotate("//#define SHADOWS\\n", source_file="final.fsh")
        >>> source.boolean_options[0].enabled
        False
    """
    lines = split_source_lines(text)

    if cache is None:
        return OptionAnnotatedSource(lines, source_file=source_file)

    key = hash_lines(lines, source_file)
    cached = cache.get(key)
    if cached is not None:
        cached.log_diagnostics()
        return cached

    source = OptionAnnotatedSource(lines, source_file=source_file)
    cache.put(key, source)
    return source


__all__ = [
    "__version__",
    # Main API
    "annotate",
    "OptionAnnotatedSource",
    # Annotations
    "Annotations",
    "BooleanOption",
    "Diagnostic",
    "OptionType",
    "StringOption",
    # Option values
    "NO_CHANGES",
    "OptionValues",
    "StaticOptionValues",
    "StringOptionValues",
    # Parser components
    "LineClassifier",
    "LineCursor",
    # Cache
    "AnnotationCache",
    "DictAnnotationCache",
    # Configuration (ContextVar-based)
    "PatchConfig",
    "get_patch_config",
    "set_patch_config",
    "reset_patch_config",
    "patch_config_context",
    # Errors
    "InvalidOptionValueError",
    "ShaderOptsError",
    "UnsupportedEditError",
    # Utilities
    "hash_lines",
    "split_source_lines",
]
