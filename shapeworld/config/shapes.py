"""Shape catalog and level configuration.

Shape ids and material ids written to save files are indices into these
tuples, so entries may be appended but never reordered or removed.
"""

SHAPE_PROTOTYPES = ("cube", "sphere", "capsule")
MATERIALS = ("standard", "shiny", "metallic")

# Levels are numbered from 1; index 0 is the main scene and is never unloaded.
LEVEL_COUNT = 2
