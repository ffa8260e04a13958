"""
Shape World: a scene of spawned shapes that can be saved and restored.

The interesting part is the binary save format. Its leading integer is
either ``-version`` or, in files written before versioning, the plain shape
count, so one loader reads every file ever written.

Subpackages and modules:

``shapeworld.persistence``  Typed binary codec, record layouts, the file
                            envelope and a read-only inspector.
``shapeworld.contracts``    Save format version constants.
``shapeworld.roster``       Live shapes plus the active level; drives
                            save/load.
``shapeworld.game``         Session object with rate-driven spawning.
``shapeworld.object_pool``  Recycling of shape instances.
``shapeworld.levels``       Asynchronous level transitions.
"""

__all__ = [
    "config",
    "contracts",
    "entities",
    "game",
    "levels",
    "object_pool",
    "persistence",
    "roster",
]
