"""ContextVar-based patch configuration for shaderopts.

Provides thread-local configuration using Python's ContextVars (PEP 567).

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from shaderopts.config import PatchConfig, patch_config_context

    with patch_config_context(PatchConfig(value_edits_enabled=True)):
        text = source.apply(values)

    # Or pass a config explicitly
    text = source.apply(values, config=PatchConfig(line_terminator="\\r\\n"))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class PatchConfig:
    """Immutable patch configuration.

    Attributes:
        value_edits_enabled: Rewrite value #define options instead of raising
            UnsupportedEditError. Requires a value source implementing
            get_string_value.
        line_terminator: Separator written after every line by apply
        warn_on_diagnostics: Log diagnostics at WARNING instead of DEBUG
        preserve_indent_on_disable: Disable indented boolean options as
            ``    //#define X`` instead of ``//    #define X``. The default
            form no longer classifies as an option when re-annotated.

    """

    value_edits_enabled: bool = False
    line_terminator: str = "\n"
    warn_on_diagnostics: bool = False
    preserve_indent_on_disable: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PatchConfig":
        """Create PatchConfig from dictionary.

        Only includes keys that are valid PatchConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = PatchConfig.from_dict({
            ...     "value_edits_enabled": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.value_edits_enabled
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PatchConfig = PatchConfig()

_patch_config: ContextVar[PatchConfig] = ContextVar(
    "patch_config",
    default=_DEFAULT_CONFIG,
)


def get_patch_config() -> PatchConfig:
    """Get current patch configuration (thread-local)."""
    return _patch_config.get()


def set_patch_config(config: PatchConfig) -> None:
    """Set patch configuration for current context.

    Args:
        config: PatchConfig instance to use for this context.

    """
    _patch_config.set(config)


def reset_patch_config() -> None:
    """Reset to default configuration."""
    _patch_config.set(_DEFAULT_CONFIG)


@contextmanager
def patch_config_context(config: PatchConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with patch_config_context(PatchConfig(line_terminator="\\r\\n")):
        ...     get_patch_config().line_terminator
        '\\r\\n'
        >>> get_patch_config().line_terminator
        '\\n'

    """
    previous = _patch_config.get()
    _patch_config.set(config)
    try:
        yield
    finally:
        _patch_config.set(previous)


__all__ = [
    "PatchConfig",
    "get_patch_config",
    "set_patch_config",
    "reset_patch_config",
    "patch_config_context",
]
