# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Center-square sampling.

Reduces a photograph to one representative color: crop a square from
the middle of the frame (where the user aims at the glass) and average it.
Cropping keeps background and glass edges out of the mean.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ebcmeter.schema import RGBColor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for center-square sampling."""

    # Side of the sampled square as a fraction of the image's shorter side.
    # 0.4 matches the on-screen targeting box.
    crop_fraction: float = 0.4

    def __post_init__(self) -> None:
        if not 0.0 < self.crop_fraction <= 1.0:
            raise ValueError(
                f"crop_fraction must be in (0, 1], got {self.crop_fraction}"
            )


def center_square_rect(
    height: int,
    width: int,
    fraction: float = 0.4,
) -> tuple[int, int, int]:
    """
    Compute the centered square crop for an image.

    Returns:
        (top, left, size). size may be 0 for tiny images.
    """
    shorter_side = min(width, height)
    size = int(shorter_side * fraction)

    center_x = width // 2
    center_y = height // 2

    left = center_x - size // 2
    top = center_y - size // 2
    return top, left, size


def crop_to_center_square(
    pixels: NDArray[np.uint8],
    fraction: float = 0.4,
) -> NDArray[np.uint8]:
    """
    Crop the centered square used for sampling.

    The square's side is floor(min(H, W) * fraction). If that rectangle
    is empty or does not fit in the image, the original pixels are
    returned unchanged.

    Args:
        pixels: Image array of shape (H, W, C)
        fraction: Side of the square relative to the shorter image side

    Returns:
        A view of the cropped square, or pixels itself on fallback
    """
    height, width = pixels.shape[:2]
    top, left, size = center_square_rect(height, width, fraction)

    if size <= 0 or top < 0 or left < 0 or top + size > height or left + size > width:
        logger.debug(
            "Center crop %dx%d at (%d, %d) invalid for %dx%d image, using full frame",
            size, size, left, top, width, height,
        )
        return pixels

    return pixels[top:top + size, left:left + size]


def average_color(pixels: NDArray[np.uint8]) -> Optional[RGBColor]:
    """
    Mean color of an image, every pixel weighted equally.

    Only the first three channels are averaged; an alpha channel is
    ignored.

    Args:
        pixels: Image array of shape (H, W, 3) or (H, W, 4)

    Returns:
        The mean color, or None if the image has no pixels or is not
        an RGB(A) grid
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        return None

    rgb_flat = pixels[..., :3].reshape(-1, 3)
    if len(rgb_flat) == 0:
        return None

    mean = rgb_flat.astype(np.float64).mean(axis=0)
    if not np.all(np.isfinite(mean)):
        return None

    # Guard against float error pushing a solid 255 image past the bound
    mean = np.clip(mean, 0.0, 255.0)
    return RGBColor(r=float(mean[0]), g=float(mean[1]), b=float(mean[2]))


def sample(
    pixels: NDArray[np.uint8],
    config: Optional[SamplerConfig] = None,
) -> Optional[RGBColor]:
    """
    Crop the center square and return its mean color.

    None means the image could not be sampled; callers fall back to the
    Unknown result rather than raising.
    """
    if config is None:
        config = SamplerConfig()

    pixels = np.asarray(pixels)
    if pixels.ndim != 3:
        return None

    cropped = crop_to_center_square(pixels, config.crop_fraction)
    return average_color(cropped)
