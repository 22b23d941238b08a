"""Benchmark option discovery and apply.

Run with:
    pytest benchmarks/benchmark_annotate.py -v --benchmark-only
"""

try:
    import pytest

    from shaderopts import OptionAnnotatedSource, PatchConfig, StaticOptionValues

    @pytest.mark.benchmark(group="annotate")
    def test_benchmark_annotate(benchmark, large_shader):
        """Benchmark classifying every line of a large shader."""
        benchmark(OptionAnnotatedSource, large_shader)

    @pytest.mark.benchmark(group="apply")
    def test_benchmark_apply_flips(benchmark, large_shader):
        """Benchmark apply with half of the boolean options flipped."""
        source = OptionAnnotatedSource(large_shader)
        values = StaticOptionValues.of(
            strings={},
            flips=[f"FEATURE_{i}" for i in range(0, 500, 2)],
        )
        config = PatchConfig(value_edits_enabled=True)

        benchmark(source.apply, values, config=config)

except ImportError:
    pass  # pytest not available
