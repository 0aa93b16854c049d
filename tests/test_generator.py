import os, sys
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import numpy as np

from biome_mapper import noise
from biome_mapper.generator import MapNoiseGenerator


def _unit_grid(n=40):
    return np.meshgrid(np.arange(n) / n, np.arange(n) / n)


def test_samples_are_deterministic():
    gen_a = MapNoiseGenerator(0, 0)
    gen_b = MapNoiseGenerator(0, 0)
    for x, y in [(0.1, 0.2), (0.5, 0.9), (0.73, 0.31)]:
        assert gen_a.elevation_noise(x, y) == gen_b.elevation_noise(x, y)
        assert gen_a.humidity_noise(x, y) == gen_b.humidity_noise(x, y)
        assert gen_a.elevation_noise(x, y) == gen_a.elevation_noise(x, y)


def test_samples_stay_in_unit_range():
    gen = MapNoiseGenerator(5, 11)
    nx, ny = _unit_grid()
    elevation = gen.elevation_noise(nx, ny)
    humidity = gen.humidity_noise(nx, ny)
    assert ((elevation >= 0.0) & (elevation <= 1.0)).all()
    assert ((humidity >= 0.0) & (humidity <= 1.0)).all()


def test_elevation_is_single_octave():
    gen = MapNoiseGenerator(9, 0)
    table = noise.create_permutation_table(9)
    assert gen.elevation_noise(0.3, 0.6) == noise.normalized_perlin_2d(table, 0.3, 0.6)


def test_humidity_blends_individually_normalized_octaves():
    gen = MapNoiseGenerator(0, 4)
    table = noise.create_permutation_table(4)
    x, y = 0.37, 0.81
    expected = (
        noise.normalized_perlin_2d(table, x, y)
        + 0.5 * noise.normalized_perlin_2d(table, x * 2.0, y * 2.0)
        + 0.25 * noise.normalized_perlin_2d(table, x * 4.0, y * 4.0)
    ) / 1.75
    assert gen.humidity_noise(x, y) == expected


def test_humidity_at_origin_is_midpoint():
    gen = MapNoiseGenerator(0, 0)
    assert gen.humidity_noise(0.0, 0.0) == 0.5
    assert gen.elevation_noise(0.0, 0.0) == 0.5


def test_layers_use_independent_seeds():
    nx, ny = _unit_grid()
    base = MapNoiseGenerator(0, 0)
    other_elevation = MapNoiseGenerator(1, 0)
    other_humidity = MapNoiseGenerator(0, 1)
    assert not np.array_equal(base.elevation_noise(nx, ny), other_elevation.elevation_noise(nx, ny))
    assert np.array_equal(base.humidity_noise(nx, ny), other_elevation.humidity_noise(nx, ny))
    assert not np.array_equal(base.humidity_noise(nx, ny), other_humidity.humidity_noise(nx, ny))


def test_array_and_scalar_samples_agree():
    gen = MapNoiseGenerator(2, 3)
    nx, ny = _unit_grid(8)
    elevation = gen.elevation_noise(nx, ny)
    humidity = gen.humidity_noise(nx, ny)
    for (i, j), value in np.ndenumerate(elevation):
        assert value == gen.elevation_noise(nx[i, j], ny[i, j])
        assert humidity[i, j] == gen.humidity_noise(nx[i, j], ny[i, j])
