# biome_mapper/biomes.py

"""
================================================================================
BIOME CLASSIFICATION & COLOR MAPPING
================================================================================
This module contains the biome enumeration, the elevation/humidity decision
cascade and the biome color lookup table.

It is designed to be a pure, stateless utility with no dependencies on the
image library, so it can be used by both the map and the renderer.

The cascade is checked in priority order, with strict comparisons:
    elevation < 100  -> Ocean
    elevation < 120  -> Beach
    elevation > 800  -> Scorched / Bare / Tundra / Snow
    elevation > 600  -> TemperateDesert / ShrubLand / Taiga
    elevation > 300  -> TemperateDesert / Grassland / TemperateDeciduousForest
                        / TemperateRainForest
    otherwise        -> SubtropicalDesert / Grassland / TropicalSeasonalForest
                        / TropicalRainForest
================================================================================
"""
from enum import IntEnum

import numpy as np

from . import config as DEFAULTS

class Biome(IntEnum):
    # 0 - 100
    OCEAN = 0
    # 100 - 120
    BEACH = 1
    # e > 800
    SCORCHED = 2
    BARE = 3
    TUNDRA = 4
    SNOW = 5
    # 600 - 800
    TEMPERATE_DESERT = 6
    SHRUB_LAND = 7
    TAIGA = 8
    # 300 - 600
    GRASSLAND = 9
    TEMPERATE_DECIDUOUS_FOREST = 10
    TEMPERATE_RAIN_FOREST = 11
    # 120 - 300
    SUBTROPICAL_DESERT = 12
    TROPICAL_SEASONAL_FOREST = 13
    TROPICAL_RAIN_FOREST = 14

# Biomes of each elevation band, driest first. Each band has one more biome
# than it has humidity cut-offs in DEFAULTS.BIOME_THRESHOLDS.
_BAND_BIOMES = {
    "highland": (Biome.SCORCHED, Biome.BARE, Biome.TUNDRA, Biome.SNOW),
    "upland": (Biome.TEMPERATE_DESERT, Biome.SHRUB_LAND, Biome.TAIGA),
    "midland": (Biome.TEMPERATE_DESERT, Biome.GRASSLAND,
                Biome.TEMPERATE_DECIDUOUS_FOREST, Biome.TEMPERATE_RAIN_FOREST),
    "lowland": (Biome.SUBTROPICAL_DESERT, Biome.GRASSLAND,
                Biome.TROPICAL_SEASONAL_FOREST, Biome.TROPICAL_RAIN_FOREST),
}

# --- Default Color Mapping ---
BIOME_COLORS = {
    Biome.OCEAN: (68, 70, 121),
    Biome.BEACH: (160, 144, 121),
    Biome.SCORCHED: (85, 85, 85),
    Biome.BARE: (136, 136, 136),
    Biome.TUNDRA: (187, 187, 171),
    Biome.SNOW: (221, 221, 228),
    Biome.TEMPERATE_DESERT: (201, 209, 158),
    Biome.SHRUB_LAND: (137, 153, 121),
    Biome.TAIGA: (154, 169, 122),
    Biome.GRASSLAND: (137, 169, 90),
    Biome.TEMPERATE_DECIDUOUS_FOREST: (105, 147, 92),
    Biome.TEMPERATE_RAIN_FOREST: (71, 135, 87),
    Biome.SUBTROPICAL_DESERT: (210, 185, 142),
    Biome.TROPICAL_SEASONAL_FOREST: (87, 152, 73),
    Biome.TROPICAL_RAIN_FOREST: (54, 119, 86),
}

def _elevation_band(elevation: int) -> str:
    if elevation > DEFAULTS.HIGHLAND_MIN_ELEVATION:
        return "highland"
    if elevation > DEFAULTS.UPLAND_MIN_ELEVATION:
        return "upland"
    if elevation > DEFAULTS.MIDLAND_MIN_ELEVATION:
        return "midland"
    return "lowland"

def classify(elevation: int, humidity: float) -> Biome:
    """Maps an (elevation, humidity) pair to exactly one Biome."""
    if elevation < DEFAULTS.OCEAN_MAX_ELEVATION:
        return Biome.OCEAN
    if elevation < DEFAULTS.BEACH_MAX_ELEVATION:
        return Biome.BEACH

    band = _elevation_band(elevation)
    biomes = _BAND_BIOMES[band]
    for cutoff, biome in zip(DEFAULTS.BIOME_THRESHOLDS[band], biomes):
        if humidity < cutoff:
            return biome
    return biomes[-1]

def _band_select(humidity: np.ndarray, band: str) -> np.ndarray:
    cutoffs = DEFAULTS.BIOME_THRESHOLDS[band]
    biomes = _BAND_BIOMES[band]
    return np.select(
        [humidity < cutoff for cutoff in cutoffs],
        [int(biome) for biome in biomes[:-1]],
        default=int(biomes[-1])
    )

def calculate_biome_map(elevation_values: np.ndarray, humidity_values: np.ndarray) -> np.ndarray:
    """
    Vectorized form of `classify`. Returns a uint8 array of Biome ordinals
    with the same shape as the inputs.
    """
    elevation_values = np.asarray(elevation_values)
    humidity_values = np.asarray(humidity_values, dtype=np.float64)

    conditions = [
        elevation_values < DEFAULTS.OCEAN_MAX_ELEVATION,
        elevation_values < DEFAULTS.BEACH_MAX_ELEVATION,
        elevation_values > DEFAULTS.HIGHLAND_MIN_ELEVATION,
        elevation_values > DEFAULTS.UPLAND_MIN_ELEVATION,
        elevation_values > DEFAULTS.MIDLAND_MIN_ELEVATION,
    ]
    choices = [
        int(Biome.OCEAN),
        int(Biome.BEACH),
        _band_select(humidity_values, "highland"),
        _band_select(humidity_values, "upland"),
        _band_select(humidity_values, "midland"),
    ]
    biome_map = np.select(conditions, choices, default=_band_select(humidity_values, "lowland"))
    return biome_map.astype(np.uint8)

# --- Color Lookup Table (LUT) Generation ---
def create_biome_color_lut() -> np.ndarray:
    """Creates a LUT where the index is the Biome ordinal and the value is the RGB color."""
    lut = np.array([BIOME_COLORS[biome] for biome in Biome], dtype=np.uint8)
    lut.flags.writeable = False
    return lut

BIOME_COLOR_LUT = create_biome_color_lut()

def color_for(biome: Biome) -> tuple:
    """Returns the (r, g, b) color of a biome."""
    r, g, b = BIOME_COLOR_LUT[Biome(biome)]
    return int(r), int(g), int(b)
