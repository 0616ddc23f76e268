# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → CIE XYZ → CIE L*a*b*

References:
- sRGB companding: IEC 61966-2-1
- XYZ → Lab: CIE 1976, D65 reference white (2° observer)

All conversions are pure NumPy for determinism and no external dependencies.
The coefficients below are the canonical sRGB/D65 values at the precision
brewing-color tools have always used; they are not tuning parameters.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ebcmeter.schema import LabColor


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb > 0.04045,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
        srgb / 12.92,
    )
    return linear


# =============================================================================
# Linear RGB → XYZ
# =============================================================================

# Linear sRGB (scaled to 0-100) to XYZ
_M_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)
_M_XYZ.setflags(write=False)

# D65 reference white on the same 0-100 scale
D65_WHITE = np.array([95.047, 100.0, 108.883], dtype=np.float64)
D65_WHITE.setflags(write=False)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB [0,1] to CIE XYZ on the 0-100 scale.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 100 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64) * 100.0
    return np.einsum('...j,ij->...i', rgb, _M_XYZ)


# =============================================================================
# XYZ → Lab
# =============================================================================

_EPSILON = 0.008856
_KAPPA_SLOPE = 7.787


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Lab companding: cube root above the threshold, linear segment below."""
    return np.where(
        t > _EPSILON,
        np.power(np.maximum(t, _EPSILON), 1.0 / 3.0),
        _KAPPA_SLOPE * t + 16.0 / 116.0,
    )


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ (0-100 scale) to CIE L*a*b*.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with Lab values (L, a, b)
        - L: Lightness [0, 100]
        - a: green ↔ red
        - b: blue ↔ yellow
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D65_WHITE)

    fx = f[..., 0]
    fy = f[..., 1]
    fz = f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB → Lab (full chain)
# =============================================================================


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIE L*a*b*.

    Full chain: sRGB → Linear RGB → XYZ → Lab

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with Lab values
    """
    linear = srgb_to_linear(srgb)
    xyz = linear_rgb_to_xyz(linear)
    return xyz_to_lab(xyz)


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert sRGB pixels [0,255] to CIE L*a*b*.

    Accepts uint8 image data as well as fractional (averaged) values.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with Lab values
    """
    srgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    return srgb_to_lab(srgb_float)


def rgb_to_lab(r: float, g: float, b: float) -> LabColor:
    """
    Convert a single sRGB color on the 0-255 scale to Lab.

    Example:
        >>> rgb_to_lab(255, 255, 255)
        LabColor(L=100.0, a=0.005..., b=-0.010...)
    """
    lab = srgb_uint8_to_lab(np.array([r, g, b], dtype=np.float64))
    return LabColor(L=float(lab[0]), a=float(lab[1]), b=float(lab[2]))
