"""Discover boolean options in a shader and toggle one of them."""

from shaderopts import StaticOptionValues, annotate

SHADER = """\
#define SHADOWS // Enable shadows
//#define REFLECTIONS // Enable reflections

#ifdef SHADOWS
uniform sampler2DShadow shadowtex0;
#endif
"""

source = annotate(SHADER, source_file="composite.fsh")

for index, option in sorted(source.boolean_options.items()):
    state = "on" if option.enabled else "off"
    referenced = "referenced" if source.is_referenced(option.name) else "unreferenced"
    print(f"line {index + 1}: {option.name} [{state}, {referenced}] {option.comment or ''}")

print(source.apply(StaticOptionValues.of(["SHADOWS", "REFLECTIONS"])), end="")
