# biome_mapper/renderer.py

"""
================================================================================
MAP IMAGE RENDERER
================================================================================
This module converts a BiomeMap into an RGB pixel buffer and writes it to
disk with Pillow. The image format is deduced from the file extension.

Data Contract:
---------------
- Inputs:
    - A built BiomeMap and an output location.
- Outputs:
    - (height, width, 3) uint8 NumPy arrays, and image files on disk.
- Side Effects: Creates the output directory if it is missing and writes
  the image file.
================================================================================
"""
import logging
import os

import numpy as np
from PIL import Image

from . import config as DEFAULTS
from .biomes import BIOME_COLOR_LUT
from .map import BiomeMap

COLOR_MAP_HUMIDITY = {
    "dry": (210, 180, 140),
    "wet": (70, 130, 180)
}

VIEW_MODES = ("biome", "elevation", "humidity")

def get_biome_color_array(biome_map: np.ndarray, biome_lut: np.ndarray = BIOME_COLOR_LUT) -> np.ndarray:
    """
    Converts an integer biome map into an RGB color array using the LUT.
    An ordinal with no LUT entry means the classifier and the color table
    disagree, so it is treated as fatal rather than leaving the pixel blank.
    """
    if biome_map.size and int(biome_map.max()) >= len(biome_lut):
        raise ValueError(f"Biome ordinal {int(biome_map.max())} has no color in the lookup table")
    return biome_lut[biome_map]

def get_elevation_color_array(elevation_values: np.ndarray) -> np.ndarray:
    """Converts quantized elevation [0, ELEVATION_SCALE] into a grayscale RGB array."""
    gray_values = (elevation_values * 255 // DEFAULTS.ELEVATION_SCALE).astype(np.uint8)
    return np.stack([gray_values] * 3, axis=-1)

def create_humidity_lut() -> np.ndarray:
    """Creates a 256-entry color LUT for the humidity map."""
    t = np.linspace(0.0, 1.0, 256)[..., np.newaxis]
    color_map = COLOR_MAP_HUMIDITY
    colors = (1 - t) * np.array(color_map["dry"]) + t * np.array(color_map["wet"])
    return colors.astype(np.uint8)

def get_humidity_color_array(humidity_values: np.ndarray, humidity_lut: np.ndarray = None) -> np.ndarray:
    """Converts humidity [0, 1] into a dry-to-wet RGB color array."""
    if humidity_lut is None:
        humidity_lut = create_humidity_lut()
    indices = (np.clip(humidity_values, 0.0, 1.0) * 255).astype(np.uint8)
    return humidity_lut[indices]

def render(biome_map: BiomeMap, view_mode: str = DEFAULTS.DEFAULT_VIEW_MODE) -> np.ndarray:
    """Builds the (height, width, 3) pixel buffer for the requested view."""
    if view_mode == "biome":
        return get_biome_color_array(biome_map.biome_map())
    elif view_mode == "elevation":
        return get_elevation_color_array(biome_map.elevation_grid())
    elif view_mode == "humidity":
        return get_humidity_color_array(biome_map.humidity_grid())
    raise ValueError(f"Unknown view mode '{view_mode}', expected one of {VIEW_MODES}")

def write_to_file(biome_map: BiomeMap, filename: str = DEFAULTS.DEFAULT_OUTPUT_FILENAME,
                  output_dir: str = DEFAULTS.DEFAULT_OUTPUT_DIR,
                  view_mode: str = DEFAULTS.DEFAULT_VIEW_MODE,
                  logger: logging.Logger = None) -> str:
    """
    Renders the map and saves it as `output_dir/filename`. Returns the path
    of the written file. Directory and encoding failures propagate.
    """
    logger = logger or logging.getLogger(__name__)

    if biome_map.width == 0 or biome_map.height == 0:
        raise ValueError(f"Cannot write an empty {biome_map.width}x{biome_map.height} map to an image")

    # Create the output directory for the images, if it doesn't already exist
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, filename)

    pixel_data = render(biome_map, view_mode)
    img = Image.fromarray(np.ascontiguousarray(pixel_data), 'RGB')
    img.save(file_path)

    logger.info(f"Saved {view_mode} image ({biome_map.width}x{biome_map.height}) to: {file_path}")
    return file_path
