"""Text helpers shared by the public API."""


def split_source_lines(text: str) -> list[str]:
    """Split shader source text into lines without terminators.

    Splits on ``\\n`` and drops a single trailing ``\\r`` per line. A final
    newline does not produce an extra empty line, so
    ``"\\n".join(lines) + "\\n"`` reproduces newline-terminated input.

    Examples:
        >>> split_source_lines("#define A\\n#define B\\n")
        ['#define A', '#define B']
        >>> split_source_lines("")
        []
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
