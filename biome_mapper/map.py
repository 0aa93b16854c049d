# biome_mapper/map.py

"""
================================================================================
BIOME MAP
================================================================================
This module contains the BiomeMap class, which samples the noise generator
once per grid cell and stores the resulting elevation and humidity values.
Biomes are not stored; they are recomputed from the cell values on demand.

Data Contract:
---------------
- Inputs (on initialization):
    - width, height (int): Map dimensions in cells. Zero gives an empty map.
    - elevation_seed, humidity_seed (int): Noise seeds.
    - logger: A configured Python logging object for runtime messages.
    - workers (int): Number of processes used to sample rows.
- Outputs (from methods):
    - Per-cell elevation (int in [0, 1000]), humidity (float in [0, 1]) and
      Biome, plus whole-map NumPy views for the renderer.
- Side Effects: Logs messages using the provided logger.
- Invariants: Cell (x, y) lives at index y * width + x. Every index is
  written exactly once. The map is immutable after construction.
================================================================================
"""

import logging
import multiprocessing
import time
from typing import NamedTuple

import numpy as np
from tqdm import tqdm

from . import config as DEFAULTS
from .biomes import Biome, calculate_biome_map, classify, color_for as _color_for
from .generator import MapNoiseGenerator

class Cell(NamedTuple):
    elevation: int
    humidity: float

def sample_rows(generator: MapNoiseGenerator, width: int, height: int, y_start: int, y_stop: int):
    """
    Samples rows [y_start, y_stop) of a width x height map. Returns flat
    (elevation, humidity) arrays in row-major order.
    """
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(y_start, y_stop, dtype=np.float64)
    x_grid, y_grid = np.meshgrid(xs, ys)

    nx = x_grid / width
    ny = y_grid / height

    elevation_raw = generator.elevation_noise(nx, ny)
    elevation = np.floor(elevation_raw * DEFAULTS.ELEVATION_SCALE).astype(np.int64)
    humidity = generator.humidity_noise(nx, ny)

    return elevation.ravel(), humidity.ravel()

# --- Global variables for worker processes ---
worker_generator = None
worker_dimensions = (0, 0)

def init_worker(elevation_seed, humidity_seed, width, height):
    """Initializes the global state for each worker process."""
    global worker_generator, worker_dimensions

    worker_logger = logging.getLogger(f"Worker-{multiprocessing.current_process().pid}")
    worker_generator = MapNoiseGenerator(elevation_seed, humidity_seed, logger=worker_logger)
    worker_dimensions = (width, height)

def process_band(band):
    """Samples one band of rows. Returns the band bounds with its data."""
    y_start, y_stop = band
    width, height = worker_dimensions
    elevation, humidity = sample_rows(worker_generator, width, height, y_start, y_stop)
    return y_start, y_stop, elevation, humidity

class BiomeMap:
    """
    A fixed-size grid of cells, built eagerly from two seeded noise layers.
    """
    def __init__(self, width: int, height: int,
                 elevation_seed: int = DEFAULTS.DEFAULT_ELEVATION_SEED,
                 humidity_seed: int = DEFAULTS.DEFAULT_HUMIDITY_SEED,
                 logger: logging.Logger = None,
                 workers: int = DEFAULTS.DEFAULT_WORKERS,
                 show_progress: bool = False):
        if width < 0 or height < 0:
            raise ValueError(f"Map dimensions must be non-negative, got {width}x{height}")

        self.logger = logger or logging.getLogger(__name__)
        self._width = width
        self._height = height
        self.elevation_seed = elevation_seed
        self.humidity_seed = humidity_seed

        size = width * height
        # Unwritten slots keep these sentinels.
        self._elevation = np.full(size, -1, dtype=np.int64)
        self._humidity = np.full(size, np.nan, dtype=np.float64)

        start_time = time.perf_counter()
        if size > 0:
            self._populate(workers, show_progress)
        end_time = time.perf_counter()

        self._elevation.flags.writeable = False
        self._humidity.flags.writeable = False

        self.logger.info(
            f"Built {width}x{height} map ({size} cells) with seeds "
            f"({elevation_seed}, {humidity_seed}) in {end_time - start_time:.2f} seconds."
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _populate(self, workers: int, show_progress: bool):
        rows_per_band = DEFAULTS.ROWS_PER_BAND
        bands = [(y, min(y + rows_per_band, self.height)) for y in range(0, self.height, rows_per_band)]

        if workers > 1 and len(bands) > 1:
            num_workers = min(workers, len(bands))
            self.logger.info(f"Using {num_workers} worker processes.")
            init_args = (self.elevation_seed, self.humidity_seed, self.width, self.height)
            with multiprocessing.Pool(processes=num_workers, initializer=init_worker, initargs=init_args) as pool:
                results_iterator = pool.imap_unordered(process_band, bands)
                for y_start, y_stop, elevation, humidity in tqdm(
                        results_iterator, total=len(bands), desc="Sampling Rows", disable=not show_progress):
                    self._store_band(y_start, y_stop, elevation, humidity)
        else:
            generator = MapNoiseGenerator(self.elevation_seed, self.humidity_seed, logger=self.logger)
            for y_start, y_stop in tqdm(bands, desc="Sampling Rows", disable=not show_progress):
                elevation, humidity = sample_rows(generator, self.width, self.height, y_start, y_stop)
                self._store_band(y_start, y_stop, elevation, humidity)

    def _store_band(self, y_start: int, y_stop: int, elevation: np.ndarray, humidity: np.ndarray):
        # Bands are disjoint, so each slot is written exactly once.
        lo, hi = y_start * self.width, y_stop * self.width
        self._elevation[lo:hi] = elevation
        self._humidity[lo:hi] = humidity

    def __len__(self):
        return self.width * self.height

    def __eq__(self, other):
        if not isinstance(other, BiomeMap):
            return NotImplemented
        return (
            self.width == other.width and self.height == other.height
            and np.array_equal(self._elevation, other._elevation)
            and np.array_equal(self._humidity, other._humidity)
        )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} map")
        return y * self.width + x

    def elevation_at(self, x: int, y: int) -> int:
        return int(self._elevation[self._index(x, y)])

    def humidity_at(self, x: int, y: int) -> float:
        return float(self._humidity[self._index(x, y)])

    def cell(self, x: int, y: int) -> Cell:
        idx = self._index(x, y)
        return Cell(int(self._elevation[idx]), float(self._humidity[idx]))

    def biome_at(self, x: int, y: int) -> Biome:
        """Classifies the cell at (x, y)."""
        elevation, humidity = self.cell(x, y)
        return classify(elevation, humidity)

    @staticmethod
    def color_for(biome: Biome) -> tuple:
        return _color_for(biome)

    def elevation_grid(self) -> np.ndarray:
        """Read-only (height, width) view of the elevation values."""
        return self._elevation.reshape(self.height, self.width)

    def humidity_grid(self) -> np.ndarray:
        """Read-only (height, width) view of the humidity values."""
        return self._humidity.reshape(self.height, self.width)

    def biome_map(self) -> np.ndarray:
        """
        Classifies every cell at once. Returns a (height, width) uint8 array
        of Biome ordinals.
        """
        return calculate_biome_map(self.elevation_grid(), self.humidity_grid())
