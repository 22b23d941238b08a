"""Report diagnostics and rewrite a value option.

Value edits are off by default; apply() raises UnsupportedEditError for
any source containing a value option until they are enabled.
"""

from shaderopts import (
    PatchConfig,
    StaticOptionValues,
    UnsupportedEditError,
    annotate,
    patch_config_context,
)

SHADER = """\
#define SHADOW_RES 1024 // Shadow map resolution [512 1024 2048]
#define SUN_ANGLE -40.0
#define BROKEN(x) x
const float sunPathRotation = -40.0;
"""

source = annotate(SHADER, source_file="settings.glsl")

for diagnostic in source.iter_diagnostics():
    print(diagnostic)

for index, option in sorted(source.string_options.items()):
    print(f"{option.name} = {option.value} (allowed: {', '.join(option.allowed_values) or 'any'})")

values = StaticOptionValues.of(strings={"SHADOW_RES": "2048"})

try:
    source.apply(values)
except UnsupportedEditError as exc:
    print(f"default config: {exc}")

with patch_config_context(PatchConfig(value_edits_enabled=True)):
    print(source.apply(values), end="")
