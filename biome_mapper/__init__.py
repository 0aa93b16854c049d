# biome_mapper/__init__.py

# This file makes the 'biome_mapper' directory a Python package.
# We can also use it to define the public API of the package.

from .biomes import Biome, classify, color_for
from .generator import MapNoiseGenerator
from .map import BiomeMap, Cell

__all__ = ["Biome", "BiomeMap", "Cell", "MapNoiseGenerator", "classify", "color_for"]
