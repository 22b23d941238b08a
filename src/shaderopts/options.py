"""Option annotations and diagnostics attached to shader source lines.

Each annotated line carries exactly one of:
- BooleanOption: a #define toggled by commenting the line in or out
- StringOption: a #define carrying a number or bare word value
- Diagnostic: why a plausible option line was ignored

Thread Safety:
All records are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class OptionType(Enum):
    """Directive an option was discovered from."""

    DEFINE = auto()  # #define NAME [value]
    CONST = auto()  # const type NAME = value; (recognized, not yet supported)


@dataclass(frozen=True, slots=True)
class BooleanOption:
    """A toggle whose state is the presence of a leading ``//``.

    Attributes:
        type: Directive kind the option came from
        name: Option identifier
        comment: Trailing ``//`` comment text, stripped (None if absent)
        enabled: True when the directive line is not commented out

    Examples:
        >>> option = BooleanOption(OptionType.DEFINE, "SHADOWS", None, True)
        >>> option.name, option.enabled
        ('SHADOWS', True)

    """

    type: OptionType
    name: str
    comment: str | None
    enabled: bool


@dataclass(frozen=True, slots=True)
class StringOption:
    """A non-boolean option whose value is kept as opaque text.

    Attributes:
        type: Directive kind the option came from
        name: Option identifier
        comment: Trailing ``//`` comment text, stripped (None if absent)
        value: Value token exactly as written (``0.5``, ``-1``, ``HIGH``)
        allowed_values: Entries of a ``[a b c]`` list in the comment, if any

    """

    type: OptionType
    name: str
    comment: str | None
    value: str
    allowed_values: tuple[str, ...] = field(default=())

    @classmethod
    def create(cls, type: OptionType, name: str, comment: str, value: str) -> "StringOption":
        """Create a value option from a commented directive.

        A bracketed list in the comment is exposed as ``allowed_values``;
        the comment itself is kept verbatim.

        Examples:
            >>> option = StringOption.create(
            ...     OptionType.DEFINE, "SHADOW_RES", "Resolution [512 1024]", "512"
            ... )
            >>> option.allowed_values
            ('512', '1024')
        """
        return cls(type, name, comment, value, parse_allowed_values(comment))

    @classmethod
    def create_uncommented(cls, type: OptionType, name: str, value: str) -> "StringOption":
        """Create a value option from a directive with no trailing comment."""
        return cls(type, name, None, value)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Why a plausible option line was not accepted.

    Attributes:
        index: 0-based line index in the annotated source
        message: Human-readable explanation
        source_file: Source file path (optional)

    """

    index: int
    message: str
    source_file: str | None = None

    @property
    def lineno(self) -> int:
        """1-indexed line number for display."""
        return self.index + 1

    def __str__(self) -> str:
        """Format as ``file:lineno: message`` or ``lineno: message``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}: {self.message}"
        return f"{self.lineno}: {self.message}"


def parse_allowed_values(comment: str | None) -> tuple[str, ...]:
    """Extract whitespace-separated entries from the first ``[...]`` in a comment.

    Examples:
        >>> parse_allowed_values("Quality [LOW MEDIUM HIGH]")
        ('LOW', 'MEDIUM', 'HIGH')
        >>> parse_allowed_values("No list here")
        ()
    """
    if not comment:
        return ()

    opening = comment.find("[")
    if opening == -1:
        return ()

    closing = comment.find("]", opening)
    if closing == -1:
        return ()

    return tuple(comment[opening + 1 : closing].split())
