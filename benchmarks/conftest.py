"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_shader() -> list[str]:
    """Generate a large shader source (~5000 lines) with mixed options."""
    lines: list[str] = []
    for i in range(500):
        lines.extend(
            [
                f"#define FEATURE_{i} // Feature {i}",
                f"//#define DISABLED_{i}",
                f"#define LEVEL_{i} {i % 4} // Level [0 1 2 3]",
                f"#ifdef FEATURE_{i}",
                f"    color.rgb *= {i}.0 / 500.0;",
                "#endif",
                f"#if defined(DISABLED_{i}) && LEVEL_{i} > 1",
                "    color.a = 1.0;",
                "#endif",
                "",
            ]
        )
    return lines
