import os, sys
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import numpy as np

from biome_mapper import noise


def test_permutation_table_is_deterministic_and_read_only():
    a = noise.create_permutation_table(0)
    b = noise.create_permutation_table(0)
    assert np.array_equal(a, b)
    assert a.shape == (512,)
    assert sorted(a[:256].tolist()) == list(range(256))
    assert np.array_equal(a[:256], a[256:])
    assert not a.flags.writeable


def test_different_seeds_give_different_tables():
    assert not np.array_equal(noise.create_permutation_table(0), noise.create_permutation_table(1))


def test_noise_is_zero_on_lattice_points():
    p = noise.create_permutation_table(3)
    for x, y in [(0.0, 0.0), (1.0, 0.0), (5.0, 7.0), (-2.0, 3.0)]:
        assert noise.perlin_2d(p, x, y) == 0.0, f"Non-zero noise at lattice point ({x},{y})"


def test_raw_noise_is_bounded():
    p = noise.create_permutation_table(42)
    xs, ys = np.meshgrid(np.linspace(-3.0, 3.0, 121), np.linspace(-3.0, 3.0, 121))
    values = noise.perlin_noise_2d(p, xs, ys)
    assert values.shape == xs.shape
    assert values.min() >= -1.0
    assert values.max() <= 1.0


def test_noise_is_continuous():
    p = noise.create_permutation_table(0)
    delta = 1e-5
    for x, y in [(0.13, 0.77), (0.5, 0.5), (0.999, 0.001), (2.25, 1.75)]:
        base = noise.perlin_2d(p, x, y)
        assert abs(noise.perlin_2d(p, x + delta, y) - base) < 1e-3
        assert abs(noise.perlin_2d(p, x, y + delta) - base) < 1e-3


def test_scalar_and_array_forms_agree():
    p = noise.create_permutation_table(7)
    xs = np.array([[0.1, 0.35], [0.6, 0.95]])
    ys = np.array([[0.2, 0.45], [0.05, 0.8]])
    values = noise.perlin_noise_2d(p, xs, ys)
    for (i, j), value in np.ndenumerate(values):
        assert value == noise.perlin_2d(p, xs[i, j], ys[i, j])


def test_normalized_noise_maps_to_unit_range():
    p = noise.create_permutation_table(0)
    assert noise.normalized_perlin_2d(p, 0.0, 0.0) == 0.5
    xs, ys = np.meshgrid(np.linspace(0.0, 1.0, 50, endpoint=False), np.linspace(0.0, 1.0, 50, endpoint=False))
    values = noise.normalized_perlin_2d(p, xs, ys)
    assert ((values >= 0.0) & (values <= 1.0)).all()
    assert isinstance(noise.normalized_perlin_2d(p, 0.25, 0.75), float)


def test_clamp_is_reached_but_never_exceeded():
    # Scaling by NOISE_SCALE_FACTOR pushes the extremes onto the clamp.
    p = noise.create_permutation_table(0)
    xs, ys = np.meshgrid(np.linspace(0.0, 8.0, 401), np.linspace(0.0, 8.0, 401))
    values = noise.perlin_noise_2d(p, xs, ys)
    assert (np.abs(values) == 1.0).any()
    assert (np.abs(values) <= 1.0).all()
