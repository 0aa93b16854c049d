# biome_mapper/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the biome
map generator. These values are used if they are not explicitly provided by
the user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC MAP.
Instead, pass a configuration dictionary to the command-line tool.
================================================================================
"""

# --- Noise Generation ---
# Each layer gets its own permutation table. Both default to 0 so the
# reference map is reproducible out of the box.
DEFAULT_ELEVATION_SEED = 0
DEFAULT_HUMIDITY_SEED = 0

# The size of the base permutation (before it is doubled for wrap-free lookup).
PERMUTATION_SIZE = 256

# Raw gradient noise is multiplied by this and clamped so the output spans
# the full [-1, 1] range.
NOISE_SCALE_FACTOR = 2.0

# --- Humidity Octaves ---
# (weight, frequency) pairs. Every octave is normalized to [0, 1] on its own
# before it is weighted, so the blend stays inside [0, 1].
HUMIDITY_OCTAVES = (
    (1.0, 1.0),
    (0.5, 2.0),
    (0.25, 4.0),
)

# --- Elevation Quantization ---
# Normalized elevation [0, 1] is scaled by this and floored to an integer.
ELEVATION_SCALE = 1000

# --- Biome Thresholds ---
# Elevation bands (integer units, compared strictly).
OCEAN_MAX_ELEVATION = 100
BEACH_MAX_ELEVATION = 120
HIGHLAND_MIN_ELEVATION = 800
UPLAND_MIN_ELEVATION = 600
MIDLAND_MIN_ELEVATION = 300

# Humidity cut-offs per band, driest first. A cell takes the biome of the
# first cut-off its humidity is strictly below, otherwise the band's last biome.
BIOME_THRESHOLDS = {
    "highland": (0.1, 0.2, 0.5),
    "upland": (0.33, 0.66),
    "midland": (0.16, 0.50, 0.83),
    "lowland": (0.16, 0.33, 0.66),
}

# --- Map & Output ---
DEFAULT_MAP_WIDTH = 1024
DEFAULT_MAP_HEIGHT = 1024
DEFAULT_OUTPUT_DIR = "example_images"
DEFAULT_OUTPUT_FILENAME = "test.png"
DEFAULT_VIEW_MODE = "biome"

# --- Performance ---
# Number of rows handed to a worker (or sampled at once in serial mode).
ROWS_PER_BAND = 64
DEFAULT_WORKERS = 1
