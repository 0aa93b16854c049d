# render_map.py

"""
================================================================================
BIOME MAP RENDERING SCRIPT
================================================================================
This script is a command-line tool for generating a biome map and saving it
as an image. Map parameters come from the internal defaults, optionally
overridden by a JSON configuration file, optionally overridden again by
command-line flags.

Usage:
    python render_map.py --width 512 --height 512 --output biomes.png
    python render_map.py --config path/to/your/config.json
================================================================================
"""
import sys
import json
import logging
import argparse

from biome_mapper import config as DEFAULTS
from biome_mapper.map import BiomeMap
from biome_mapper import renderer

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def resolve_settings(user_config: dict, overrides: dict = None) -> dict:
    """
    Consolidates the map settings: defaults, then the user's config, then
    any non-None command-line overrides.
    """
    settings = {
        'width': user_config.get('width', DEFAULTS.DEFAULT_MAP_WIDTH),
        'height': user_config.get('height', DEFAULTS.DEFAULT_MAP_HEIGHT),
        'elevation_seed': user_config.get('elevation_seed', DEFAULTS.DEFAULT_ELEVATION_SEED),
        'humidity_seed': user_config.get('humidity_seed', DEFAULTS.DEFAULT_HUMIDITY_SEED),
        'output': user_config.get('output', DEFAULTS.DEFAULT_OUTPUT_FILENAME),
        'output_dir': user_config.get('output_dir', DEFAULTS.DEFAULT_OUTPUT_DIR),
        'view': user_config.get('view', DEFAULTS.DEFAULT_VIEW_MODE),
        'workers': user_config.get('workers', DEFAULTS.DEFAULT_WORKERS),
    }
    for key, value in (overrides or {}).items():
        if value is not None and key in settings:
            settings[key] = value
    return settings

def load_config(config_path: str) -> dict:
    with open(config_path, 'r') as f:
        config = json.load(f)
    return config.get('map_generation_parameters', {})

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a biome map from layered Perlin noise and save it as an image.")
    parser.add_argument("--config", type=str, help="Path to a JSON configuration file.")
    parser.add_argument("--width", type=int, help="Map width in cells/pixels.")
    parser.add_argument("--height", type=int, help="Map height in cells/pixels.")
    parser.add_argument("--elevation-seed", dest="elevation_seed", type=int, help="Seed of the elevation noise layer.")
    parser.add_argument("--humidity-seed", dest="humidity_seed", type=int, help="Seed of the humidity noise layer.")
    parser.add_argument("--output", type=str, help="Output filename. The image format is deduced from its extension.")
    parser.add_argument("--output-dir", dest="output_dir", type=str, help="Directory the image is written to (created if missing).")
    parser.add_argument("--view", choices=renderer.VIEW_MODES, help="Which layer to render.")
    parser.add_argument("--workers", type=int, help="Number of worker processes used to sample the map.")
    parser.add_argument("--log-level", dest="log_level", default="INFO", type=str.upper, choices=LOG_LEVELS, help="Logging level.")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # 1. --- Setup Logging ---
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("BiomeMapper")

    # 2. --- Load Configuration ---
    user_config = {}
    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        try:
            user_config = load_config(args.config)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.critical(f"Failed to load or parse config file: {e}")
            return 1

    overrides = {key: value for key, value in vars(args).items() if key not in ('config', 'log_level')}
    settings = resolve_settings(user_config, overrides)

    # 3. --- Generate ---
    logger.info(
        f"Generating {settings['width']}x{settings['height']} map "
        f"(elevation seed {settings['elevation_seed']}, humidity seed {settings['humidity_seed']})..."
    )
    try:
        biome_map = BiomeMap(
            settings['width'], settings['height'],
            elevation_seed=settings['elevation_seed'],
            humidity_seed=settings['humidity_seed'],
            logger=logger,
            workers=settings['workers'],
            show_progress=True
        )
    except ValueError as e:
        logger.critical(f"Invalid map settings: {e}")
        return 1

    # 4. --- Render & Save ---
    try:
        renderer.write_to_file(
            biome_map,
            filename=settings['output'],
            output_dir=settings['output_dir'],
            view_mode=settings['view'],
            logger=logger
        )
    except (OSError, ValueError) as e:
        logger.critical(f"Failed to write map image: {e}")
        return 1

    return 0


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())
