# biome_mapper/generator.py

"""
================================================================================
MAP NOISE GENERATOR
================================================================================
This module contains the MapNoiseGenerator class, which owns the two seeded
permutation tables of a map and exposes the normalized elevation and humidity
samplers built on top of them.

Data Contract:
---------------
- Inputs (on initialization):
    - elevation_seed, humidity_seed (int): Independent seeds for each layer.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from methods):
    - Normalized noise samples in [0, 1], as floats for scalar coordinates or
      NumPy arrays for array coordinates.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same seeds, the output is deterministic. The tables
  are never modified after construction.
================================================================================
"""

import logging

from . import config as DEFAULTS
from . import noise

class MapNoiseGenerator:
    """
    Generates elevation and humidity samples for normalized map coordinates.
    Coordinates are expected in [0, 1) but any real value is accepted.
    """
    def __init__(self, elevation_seed: int = DEFAULTS.DEFAULT_ELEVATION_SEED,
                 humidity_seed: int = DEFAULTS.DEFAULT_HUMIDITY_SEED,
                 logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)
        self.elevation_seed = elevation_seed
        self.humidity_seed = humidity_seed

        self._elevation_table = noise.create_permutation_table(elevation_seed)
        self._humidity_table = noise.create_permutation_table(humidity_seed)

        self._humidity_octaves = DEFAULTS.HUMIDITY_OCTAVES
        self._humidity_total_weight = sum(weight for weight, _ in self._humidity_octaves)

        self.logger.debug(
            f"MapNoiseGenerator initialized with elevation seed {elevation_seed}, "
            f"humidity seed {humidity_seed}."
        )

    def elevation_noise(self, x, y):
        """Single-octave normalized elevation sample."""
        return noise.normalized_perlin_2d(self._elevation_table, x, y)

    def humidity_noise(self, x, y):
        """
        Three-octave humidity blend. Each octave is normalized to [0, 1]
        first, then weighted, summed and divided by the total weight.
        """
        value = 0.0
        for weight, frequency in self._humidity_octaves:
            value = value + weight * noise.normalized_perlin_2d(
                self._humidity_table, x * frequency, y * frequency
            )
        return value / self._humidity_total_weight
