# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB → XYZ → Lab)."""

import numpy as np
import pytest

from ebcmeter.measure.colorspace import (
    D65_WHITE,
    srgb_to_linear,
    linear_rgb_to_xyz,
    xyz_to_lab,
    srgb_to_lab,
    srgb_uint8_to_lab,
    rgb_to_lab,
)
from ebcmeter.schema import LabColor


class TestSRGBToLinear:

    def test_gamma_threshold(self):
        """Values at or below 0.04045 use the linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-12)

    def test_threshold_itself_is_linear(self):
        linear = srgb_to_linear(np.array([0.04045]))
        assert float(linear[0]) == pytest.approx(0.04045 / 12.92, abs=1e-12)

    def test_above_threshold_uses_power_curve(self):
        val = 0.5
        linear = srgb_to_linear(np.array([val]))
        expected = ((val + 0.055) / 1.055) ** 2.4
        assert float(linear[0]) == pytest.approx(expected, abs=1e-12)

    def test_endpoints(self):
        linear = srgb_to_linear(np.array([0.0, 1.0]))
        np.testing.assert_allclose(linear, [0.0, 1.0], atol=1e-12)

    def test_monotonic(self):
        srgb = np.linspace(0.0, 1.0, 256)
        linear = srgb_to_linear(srgb)
        assert np.all(np.diff(linear) > 0)


class TestLinearToXYZ:

    def test_white_is_scaled_matrix_row_sums(self):
        xyz = linear_rgb_to_xyz(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(xyz, [95.05, 100.0, 108.9], atol=1e-9)

    def test_black_is_zero(self):
        xyz = linear_rgb_to_xyz(np.array([0.0, 0.0, 0.0]))
        np.testing.assert_allclose(xyz, [0.0, 0.0, 0.0], atol=1e-12)

    def test_primary_red(self):
        xyz = linear_rgb_to_xyz(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(xyz, [41.24, 21.26, 1.93], atol=1e-9)

    def test_batch_shape(self):
        rgb = np.random.RandomState(42).random((4, 5, 3))
        assert linear_rgb_to_xyz(rgb).shape == (4, 5, 3)


class TestXYZToLab:

    def test_reference_white(self):
        lab = xyz_to_lab(D65_WHITE)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)

    def test_linear_segment_below_epsilon(self):
        """Very dark Y uses 7.787t + 16/116 instead of the cube root."""
        y = 0.5  # Y/Yref = 0.005 < 0.008856
        lab = xyz_to_lab(np.array([0.0, y, 0.0]))
        expected_l = 116.0 * (7.787 * (y / 100.0) + 16.0 / 116.0) - 16.0
        assert lab[0] == pytest.approx(expected_l, abs=1e-9)

    def test_cube_root_above_epsilon(self):
        y = 50.0
        lab = xyz_to_lab(np.array([0.0, y, 0.0]))
        expected_l = 116.0 * (0.5 ** (1.0 / 3.0)) - 16.0
        assert lab[0] == pytest.approx(expected_l, abs=1e-9)

    def test_reference_white_is_read_only(self):
        with pytest.raises(ValueError):
            D65_WHITE[0] = 1.0


class TestFullChain:

    def test_white(self):
        lab = rgb_to_lab(255, 255, 255)
        assert lab.L == pytest.approx(100.0, abs=1e-6)
        assert lab.a == pytest.approx(0.0, abs=2e-2)
        assert lab.b == pytest.approx(0.0, abs=2e-2)

    def test_black(self):
        lab = rgb_to_lab(0, 0, 0)
        assert lab.L == pytest.approx(0.0, abs=1e-9)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(0.0, abs=1e-9)

    def test_primary_red(self):
        lab = rgb_to_lab(255, 0, 0)
        assert lab.L == pytest.approx(53.24, abs=0.5)
        assert lab.a == pytest.approx(80.09, abs=0.5)
        assert lab.b == pytest.approx(67.20, abs=0.5)

    def test_returns_lab_color(self):
        assert isinstance(rgb_to_lab(128, 64, 32), LabColor)

    def test_gray_is_neutral(self):
        lab = rgb_to_lab(128, 128, 128)
        assert 0.0 < lab.L < 100.0
        assert abs(lab.a) < 0.05
        assert abs(lab.b) < 0.05

    def test_uint8_matches_float(self):
        pixels = np.array([[200, 120, 40]], dtype=np.uint8)
        from_uint8 = srgb_uint8_to_lab(pixels)
        from_float = srgb_to_lab(pixels.astype(np.float64) / 255.0)
        np.testing.assert_allclose(from_uint8, from_float, atol=1e-12)

    def test_scalar_matches_batch(self):
        pixels = np.array([[200, 120, 40], [10, 20, 30]], dtype=np.uint8)
        batch = srgb_uint8_to_lab(pixels)
        scalar = rgb_to_lab(10, 20, 30)
        assert batch[1, 0] == pytest.approx(scalar.L, abs=1e-12)
        assert batch[1, 1] == pytest.approx(scalar.a, abs=1e-12)
        assert batch[1, 2] == pytest.approx(scalar.b, abs=1e-12)

    def test_lightness_increases_with_gray_level(self):
        levels = [rgb_to_lab(v, v, v).L for v in range(0, 256, 15)]
        assert levels == sorted(levels)
