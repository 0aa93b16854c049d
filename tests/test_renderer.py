import os, sys
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import numpy as np
import pytest
from PIL import Image

from biome_mapper import renderer
from biome_mapper.map import BiomeMap


def test_biome_pixels_match_color_lookup():
    m = BiomeMap(24, 16, elevation_seed=4, humidity_seed=1)
    pixels = renderer.render(m)
    assert pixels.shape == (16, 24, 3)
    assert pixels.dtype == np.uint8
    for y in range(m.height):
        for x in range(m.width):
            assert tuple(int(c) for c in pixels[y, x]) == m.color_for(m.biome_at(x, y))


def test_unknown_biome_ordinal_is_fatal():
    bad = np.array([[0, 15]], dtype=np.uint8)
    with pytest.raises(ValueError):
        renderer.get_biome_color_array(bad)


def test_elevation_and_humidity_views():
    m = BiomeMap(10, 10)
    elevation = renderer.render(m, "elevation")
    humidity = renderer.render(m, "humidity")
    assert elevation.shape == humidity.shape == (10, 10, 3)
    assert (elevation[..., 0] == elevation[..., 1]).all()
    assert renderer.create_humidity_lut().shape == (256, 3)


def test_unknown_view_mode_rejected():
    with pytest.raises(ValueError):
        renderer.render(BiomeMap(2, 2), "temperature")


def test_write_creates_directory_and_png(tmp_path):
    m = BiomeMap(12, 8)
    out_dir = tmp_path / "example_images" / "nested"
    path = renderer.write_to_file(m, "test.png", output_dir=str(out_dir))
    assert path == os.path.join(str(out_dir), "test.png")
    assert os.path.isfile(path)
    with Image.open(path) as img:
        assert img.size == (12, 8)
        assert img.mode == "RGB"
        assert img.getpixel((5, 3)) == m.color_for(m.biome_at(5, 3))


def test_write_into_existing_directory(tmp_path):
    m = BiomeMap(4, 4)
    renderer.write_to_file(m, "a.png", output_dir=str(tmp_path))
    renderer.write_to_file(m, "b.bmp", output_dir=str(tmp_path))
    assert sorted(os.listdir(tmp_path)) == ["a.png", "b.bmp"]


def test_write_unknown_extension_fails(tmp_path):
    with pytest.raises(ValueError):
        renderer.write_to_file(BiomeMap(4, 4), "map.notanimage", output_dir=str(tmp_path))


def test_write_empty_map_fails(tmp_path):
    with pytest.raises(ValueError):
        renderer.write_to_file(BiomeMap(0, 4), output_dir=str(tmp_path))
