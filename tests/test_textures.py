"""Unit tests for textures and texture loading."""

import numpy as np
import pytest
from PIL import Image

from core.vector import Vector3
from materials.perlin import Perlin
from materials.texture_loader import create_image_material, decode_image, load_texture
from materials.lambertian import Lambertian
from materials.textures import (CheckerTexture, ImageTexture, NoiseTexture, SolidTexture,
                                as_texture)

ORIGIN = Vector3(0, 0, 0)


@pytest.fixture
def quad_pixels():
    """2x2 image: red, green on the top row; blue, white on the bottom row."""
    return np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [255, 255, 255]],
    ], dtype=np.uint8)


class TestSolidAndChecker:
    """Tests for constant and checker textures."""

    def test_solid(self):
        assert SolidTexture(Vector3(0.1, 0.2, 0.3)).sample(0.5, 0.5, ORIGIN) == Vector3(0.1, 0.2, 0.3)

    def test_as_texture(self):
        assert isinstance(as_texture(Vector3(1, 1, 1)), SolidTexture)
        checker = CheckerTexture(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert as_texture(checker) is checker
        assert as_texture(None) is None

    def test_checker_alternates_in_space(self):
        checker = CheckerTexture(Vector3(1, 1, 1), Vector3(0, 0, 0), scale=10.0)
        assert checker.sample(0, 0, Vector3(0.05, 0.05, 0.05)) == Vector3(1, 1, 1)
        assert checker.sample(0, 0, Vector3(-0.05, 0.05, 0.05)) == Vector3(0, 0, 0)


class TestImageTexture:
    """Tests for image lookups."""

    def test_v_is_flipped(self, quad_pixels):
        texture = ImageTexture(quad_pixels)
        # v = 1 is the top row of the image
        assert texture.sample(0.0, 1.0, ORIGIN) == Vector3(1, 0, 0)
        assert texture.sample(0.0, 0.0, ORIGIN) == Vector3(0, 0, 1)
        assert texture.sample(1.0, 0.0, ORIGIN) == Vector3(1, 1, 1)
        assert texture.sample(0.9, 0.9, ORIGIN) == Vector3(0, 1, 0)

    def test_coordinates_are_clamped(self, quad_pixels):
        texture = ImageTexture(quad_pixels)
        assert texture.sample(-1.0, 2.0, ORIGIN) == Vector3(1, 0, 0)
        assert texture.sample(5.0, -3.0, ORIGIN) == Vector3(1, 1, 1)

    @pytest.mark.parametrize("shape", [(2, 2), (0, 2, 3), (2, 2, 2)])
    def test_bad_shape_raises(self, shape):
        with pytest.raises(ValueError):
            ImageTexture(np.zeros(shape, dtype=np.uint8))


class TestNoise:
    """Tests for Perlin noise and the marble texture."""

    def test_zero_on_lattice_points(self):
        perlin = Perlin(np.random.default_rng(3))
        assert perlin.noise(Vector3(1, 2, 3)) == pytest.approx(0.0)
        assert perlin.noise(Vector3(-4, 0, 7)) == pytest.approx(0.0)

    def test_same_generator_seed_same_noise(self):
        p = Vector3(0.3, 1.7, -2.2)
        a = Perlin(np.random.default_rng(42))
        b = Perlin(np.random.default_rng(42))
        assert a.noise(p) == b.noise(p)
        assert a.turb(p) == b.turb(p)

    def test_turbulence_is_non_negative(self):
        perlin = Perlin(np.random.default_rng(5))
        for i in range(20):
            assert perlin.turb(Vector3(i * 0.37, i * 0.11, -i * 0.23)) >= 0.0

    def test_marble_in_unit_range(self):
        texture = NoiseTexture(4.0, Perlin(np.random.default_rng(1)))
        for i in range(20):
            color = texture.sample(0, 0, Vector3(i * 0.5, 1.0, i * 0.25))
            assert 0.0 <= color.x <= 1.0
            assert color.x == color.y == color.z


class TestTextureLoader:
    """Tests for decoding image files with Pillow."""

    def test_load_png(self, tmp_path, quad_pixels):
        path = tmp_path / "quad.png"
        Image.fromarray(quad_pixels).save(path)
        pixels = decode_image(str(path))
        assert pixels.shape == (2, 2, 3)
        assert pixels.dtype == np.uint8
        texture = load_texture(str(path))
        assert texture.sample(0.0, 1.0, ORIGIN) == Vector3(1, 0, 0)

    def test_grayscale_is_converted(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.fromarray(np.full((3, 4), 128, dtype=np.uint8)).save(path)
        assert decode_image(str(path)).shape == (3, 4, 3)

    def test_create_image_material(self, tmp_path, quad_pixels):
        path = tmp_path / "quad.png"
        Image.fromarray(quad_pixels).save(path)
        material = create_image_material(str(path), Lambertian)
        assert isinstance(material, Lambertian)
        assert isinstance(material.texture, ImageTexture)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            decode_image(str(tmp_path / "missing.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"definitely not a png")
        with pytest.raises(ValueError):
            decode_image(str(path))
