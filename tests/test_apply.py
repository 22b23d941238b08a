"""Tests for rewriting annotated sources with apply()."""

import pytest

from shaderopts import (
    NO_CHANGES,
    InvalidOptionValueError,
    OptionAnnotatedSource,
    PatchConfig,
    StaticOptionValues,
    UnsupportedEditError,
    annotate,
    patch_config_context,
)
from shaderopts.classifiers.define import DEFINE_MISPLACED
from shaderopts.patcher import flip_boolean_define, is_valid_value, replace_define_value

SHADER = """\
#version 120

#define SHADOWS // Enable shadows
//#define REFLECTIONS // Enable reflections
  //#define   BLOOM
    #define GODRAYS

#ifdef SHADOWS
uniform sampler2D shadow;
#endif

void main() {
    gl_FragColor = vec4(1.0); // #define inside a comment is diagnosed, not edited
}
"""

VALUE_SHADER = """\
#define SHADOWS
#define SHADOW_RES 1024 // Resolution [512 1024 2048]
  #define SUN_ANGLE   -40
"""


class _FlipOnly:
    """Value source without get_string_value."""

    def __init__(self, *names: str) -> None:
        self._names = set(names)

    def should_flip(self, name: str) -> bool:
        return name in self._names


class TestApplyBooleanOptions:
    """Boolean options flip by toggling the leading comment."""

    def test_no_changes_reproduces_source(self) -> None:
        assert annotate(SHADER).apply(NO_CHANGES) == SHADER

    def test_disable_enabled_option(self) -> None:
        result = annotate(SHADER).apply(StaticOptionValues.of(["SHADOWS"]))
        assert "//#define SHADOWS // Enable shadows\n" in result
        assert result.replace("//#define SHADOWS", "#define SHADOWS", 1) == SHADER

    def test_enable_disabled_option(self) -> None:
        result = annotate(SHADER).apply(StaticOptionValues.of(["REFLECTIONS"]))
        assert "\n#define REFLECTIONS // Enable reflections\n" in result

    def test_indented_options_disable_by_prepending(self) -> None:
        result = annotate(SHADER).apply(StaticOptionValues.of(["BLOOM", "GODRAYS"]))
        lines = result.split("\n")
        assert lines[4] == "  #define   BLOOM"
        assert lines[5] == "//    #define GODRAYS"

    def test_only_option_lines_change(self) -> None:
        original = annotate(SHADER)
        result = original.apply(StaticOptionValues.of(["SHADOWS", "REFLECTIONS", "BLOOM", "GODRAYS"]))
        changed = {
            index
            for index, (old, new) in enumerate(zip(original.lines, result.split("\n")))
            if old != new
        }
        assert changed == set(original.boolean_options)

    def test_unknown_names_are_ignored(self) -> None:
        assert annotate(SHADER).apply(StaticOptionValues.of(["NOT_AN_OPTION"])) == SHADER

    def test_reference_lines_are_not_edited(self) -> None:
        result = annotate("#ifdef SHADOWS\n#endif\n").apply(StaticOptionValues.of(["SHADOWS"]))
        assert result == "#ifdef SHADOWS\n#endif\n"

    def test_round_trip(self) -> None:
        values = StaticOptionValues.of(["SHADOWS"])
        once = annotate(SHADER).apply(values)
        twice = annotate(once).apply(values)
        assert once != SHADER
        assert twice == SHADER

    def test_disabled_indented_option_is_no_longer_an_option(self) -> None:
        """Prepending // before the indentation leaves a misplaced #define."""
        once = annotate(SHADER).apply(StaticOptionValues.of(["GODRAYS"]))
        reparsed = annotate(once)
        assert 5 not in reparsed.boolean_options
        assert reparsed.diagnostics[5] == DEFINE_MISPLACED

    def test_preserve_indent_on_disable(self) -> None:
        config = PatchConfig(preserve_indent_on_disable=True)
        result = annotate(SHADER).apply(StaticOptionValues.of(["GODRAYS"]), config=config)
        assert result.split("\n")[5] == "    //#define GODRAYS"

    def test_round_trip_indented(self) -> None:
        values = StaticOptionValues.of(["BLOOM", "GODRAYS"])
        config = PatchConfig(preserve_indent_on_disable=True)
        once = annotate(SHADER).apply(values, config=config)
        reparsed = annotate(once)
        assert reparsed.boolean_options[4].enabled is True
        assert reparsed.boolean_options[5].enabled is False
        assert reparsed.apply(values, config=config) == SHADER

    def test_preserve_indent_from_context(self) -> None:
        with patch_config_context(PatchConfig(preserve_indent_on_disable=True)):
            result = annotate("  #define A\n").apply(StaticOptionValues.of(["A"]))
        assert result == "  //#define A\n"

    def test_apply_does_not_mutate(self) -> None:
        source = annotate(SHADER)
        before = (source.lines, dict(source.boolean_options))
        source.apply(StaticOptionValues.of(["SHADOWS"]))
        assert (source.lines, dict(source.boolean_options)) == before
        assert source.boolean_options[2].enabled is True


class TestLineTerminators:
    """Every line, including the last, ends with the terminator."""

    def test_final_newline_added(self) -> None:
        source = OptionAnnotatedSource(["#define A", "void main() {}"])
        assert source.apply(NO_CHANGES) == "#define A\nvoid main() {}\n"

    def test_empty_source(self) -> None:
        assert OptionAnnotatedSource([]).apply(NO_CHANGES) == ""

    def test_custom_terminator(self) -> None:
        source = OptionAnnotatedSource(["#define A", "x"])
        config = PatchConfig(line_terminator="\r\n")
        assert source.apply(StaticOptionValues.of(["A"]), config=config) == "//#define A\r\nx\r\n"

    def test_terminator_from_context(self) -> None:
        source = OptionAnnotatedSource(["x"])
        with patch_config_context(PatchConfig(line_terminator="\r\n")):
            assert source.apply(NO_CHANGES) == "x\r\n"
        assert source.apply(NO_CHANGES) == "x\n"


class TestApplyValueOptions:
    """Value options are unsupported unless value edits are enabled."""

    def test_value_option_raises_by_default(self) -> None:
        source = annotate(VALUE_SHADER, source_file="final.fsh")
        with pytest.raises(UnsupportedEditError) as exc_info:
            source.apply(NO_CHANGES)
        assert exc_info.value.option_name == "SHADOW_RES"
        assert exc_info.value.lineno == 2
        assert str(exc_info.value).startswith("final.fsh:2 ")

    def test_unsupported_edit_is_not_implemented_error(self) -> None:
        with pytest.raises(NotImplementedError):
            annotate(VALUE_SHADER).apply(StaticOptionValues.of(["SHADOWS"]))

    def test_enabled_without_value_source_support(self) -> None:
        config = PatchConfig(value_edits_enabled=True)
        with pytest.raises(UnsupportedEditError):
            annotate(VALUE_SHADER).apply(_FlipOnly("SHADOWS"), config=config)

    def test_enabled_keeps_unchanged_values(self) -> None:
        config = PatchConfig(value_edits_enabled=True)
        assert annotate(VALUE_SHADER).apply(NO_CHANGES, config=config) == VALUE_SHADER

    def test_enabled_rewrites_value_in_place(self) -> None:
        config = PatchConfig(value_edits_enabled=True)
        values = StaticOptionValues.of(strings={"SHADOW_RES": "2048", "SUN_ANGLE": "-25.5"})
        result = annotate(VALUE_SHADER).apply(values, config=config)
        assert result == (
            "#define SHADOWS\n"
            "#define SHADOW_RES 2048 // Resolution [512 1024 2048]\n"
            "  #define SUN_ANGLE   -25.5\n"
        )

    def test_rewritten_value_reparses(self) -> None:
        config = PatchConfig(value_edits_enabled=True)
        values = StaticOptionValues.of(["SHADOWS"], {"SHADOW_RES": "512"})
        reparsed = annotate(annotate(VALUE_SHADER).apply(values, config=config))
        assert reparsed.string_options[1].value == "512"
        assert reparsed.boolean_options[0].enabled is False

    def test_invalid_replacement_value(self) -> None:
        config = PatchConfig(value_edits_enabled=True)
        values = StaticOptionValues.of(strings={"SHADOW_RES": "2048 // oops"})
        with pytest.raises(InvalidOptionValueError) as exc_info:
            annotate(VALUE_SHADER).apply(values, config=config)
        assert exc_info.value.option_name == "SHADOW_RES"
        assert isinstance(exc_info.value, ValueError)


class TestPatcherHelpers:
    """Pure text transforms used by apply."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("#define A", "//#define A"),
            ("//#define A", "#define A"),
            ("  //#define A // c", "  #define A // c"),
            ("    #define A", "//    #define A"),
            ("\t#define A", "//\t#define A"),
            ("#define A // note", "//#define A // note"),
        ],
    )
    def test_flip_boolean_define(self, line: str, expected: str) -> None:
        assert flip_boolean_define(line) == expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("    #define A", "    //#define A"),
            ("\t#define A // c", "\t//#define A // c"),
            ("#define A", "//#define A"),
            ("    //#define A", "    #define A"),
        ],
    )
    def test_flip_preserving_indent(self, line: str, expected: str) -> None:
        assert flip_boolean_define(line, preserve_indent=True) == expected

    def test_flip_is_involution_for_plain_lines(self) -> None:
        assert flip_boolean_define(flip_boolean_define("#define A")) == "#define A"

    def test_replace_value_skips_name_prefix(self) -> None:
        """The value is located after the name, even if the name contains it."""
        line = "#define RES1 1 // 1 or 2"
        assert replace_define_value(line, "RES1", "1", "2") == "#define RES1 2 // 1 or 2"

    @pytest.mark.parametrize("value", ["0", "-1", "0.5", "HIGH", "_x1"])
    def test_valid_values(self, value: str) -> None:
        assert is_valid_value(value) is True

    @pytest.mark.parametrize("value", ["", "1 2", "0.5f", "a-b", "// x", " 1"])
    def test_invalid_values(self, value: str) -> None:
        assert is_valid_value(value) is False
