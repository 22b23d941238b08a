"""Exception classes for shaderopts.

Provides standardized exceptions for error handling throughout shaderopts.
Plausible-but-invalid option lines are not errors; they are recorded as
diagnostics on the annotated source.
"""

from __future__ import annotations


class ShaderOptsError(Exception):
    """Base exception for all shaderopts errors.

    Subclass this for specific error categories.
    """

    pass


class UnsupportedEditError(ShaderOptsError, NotImplementedError):
    """An apply call hit an option line that cannot be rewritten.

    Raised for value (non-boolean) #define options unless value edits are
    enabled in the active PatchConfig. The whole apply call fails; no
    partially rewritten source is returned.
    """

    def __init__(
        self,
        message: str,
        option_name: str | None = None,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unsupported edit error with optional location.

        Args:
            message: Error description
            option_name: Name of the option that could not be rewritten
            lineno: Line number of the option (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.option_name = option_name
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InvalidOptionValueError(ShaderOptsError, ValueError):
    """A replacement value for a value option is not a single number or word."""

    def __init__(self, option_name: str, value: str) -> None:
        """Initialize invalid value error.

        Args:
            option_name: Name of the option being rewritten
            value: The rejected replacement value
        """
        self.option_name = option_name
        self.value = value
        super().__init__(
            f"Option '{option_name}': {value!r} is not a valid number or word"
        )
