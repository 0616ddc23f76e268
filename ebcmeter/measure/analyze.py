# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Main analysis API.

This is the primary entry point for EBCMeter's analysis core.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import NDArray

from ebcmeter.schema import (
    UNKNOWN_RESULT,
    AnalysisError,
    AnalysisResult,
    RGBColor,
)
from ebcmeter.measure.colorspace import rgb_to_lab
from ebcmeter.measure.ebc import accuracy, classify, estimate_ebc
from ebcmeter.measure.sampler import SamplerConfig, average_color, sample

if TYPE_CHECKING:
    from PIL import Image as PILImage

logger = logging.getLogger(__name__)

ImageInput = Union[str, Path, bytes, NDArray[np.uint8], "PILImage.Image"]


def analyze(
    image: ImageInput,
    *,
    crop: bool = True,
    crop_fraction: float = 0.4,
) -> AnalysisResult:
    """
    Estimate the EBC color of the beer in a photograph.

    This is the primary API for EBCMeter. It always returns a result
    that can be rendered: an image that cannot be read or has no pixels
    yields UNKNOWN_RESULT (ebc 0, "Unknown", accuracy 0, black swatch).
    Use analyze_strict() to get an AnalysisError instead.

    Args:
        image: One of:
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 sRGB
              values. Alpha is ignored.
            - Path to an image file (str or Path)
            - Encoded image bytes (JPEG, PNG, ...)
            - A PIL.Image.Image
        crop: If True (default), sample only the centered square.
            If False, average the whole frame.
        crop_fraction: Side of the centered square relative to the
            image's shorter side (default: 0.4)

    Returns:
        AnalysisResult

    Raises:
        TypeError: If image is none of the supported input types

    Example:
        >>> from ebcmeter import analyze
        >>> result = analyze("pint.jpg")
        >>> result.formatted_ebc, result.color_name
        ('5.3', 'Straw')
    """
    try:
        return analyze_strict(image, crop=crop, crop_fraction=crop_fraction)
    except AnalysisError as e:
        logger.warning("Could not analyze image, reporting Unknown: %s", e)
        return UNKNOWN_RESULT


def analyze_strict(
    image: ImageInput,
    *,
    crop: bool = True,
    crop_fraction: float = 0.4,
) -> AnalysisResult:
    """
    Same as analyze(), but raise instead of returning the Unknown sentinel.

    Raises:
        AnalysisError: If the image cannot be decoded, has the wrong
            shape or dtype, or has no pixels
        TypeError: If image is none of the supported input types
        ValueError: If crop_fraction is outside (0, 1]
    """
    config = SamplerConfig(crop_fraction=crop_fraction)
    pixels = _load_image(image)

    if crop:
        color = sample(pixels, config)
    else:
        color = average_color(pixels)

    if color is None:
        raise AnalysisError(
            f"Image has no pixels to sample ({pixels.shape[1]}x{pixels.shape[0]})"
        )

    return analyze_color(color)


def analyze_color(
    color: Union[RGBColor, tuple[float, float, float]],
) -> AnalysisResult:
    """
    Run the analysis stage on an already-sampled color.

    Args:
        color: RGBColor or (r, g, b) tuple on the 0-255 scale

    Returns:
        AnalysisResult for that color
    """
    if not isinstance(color, RGBColor):
        r, g, b = color
        color = RGBColor(r=float(r), g=float(g), b=float(b))

    # Lab is only needed for the accuracy score
    lab = rgb_to_lab(color.r, color.g, color.b)

    ebc_value = estimate_ebc(color.r, color.g, color.b)
    color_name = classify(ebc_value)
    score = accuracy(lab.L)

    logger.debug(
        "rgb=(%.2f, %.2f, %.2f) L=%.2f ebc=%.3f band=%s accuracy=%.3f",
        color.r, color.g, color.b, lab.L, ebc_value, color_name, score,
    )

    return AnalysisResult(
        ebc_value=ebc_value,
        color_name=color_name,
        accuracy=score,
        rgb=color.to_int_tuple(),
    )


def _load_image(image: ImageInput) -> NDArray[np.uint8]:
    """
    Load image from file, bytes or PIL image, or validate an array.

    Embedded color profiles are not applied; pixels are taken as sRGB.

    Returns:
        Pixels with shape (H, W, 3) or (H, W, 4)
    """
    if isinstance(image, np.ndarray):
        pixels = image

        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise AnalysisError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}"
            )

        if pixels.dtype != np.uint8:
            raise AnalysisError(
                f"Expected uint8 array, got {pixels.dtype}"
            )

        return pixels

    if isinstance(image, (str, Path, bytes, bytearray)):
        Image = _import_pil()
        source = io.BytesIO(image) if isinstance(image, (bytes, bytearray)) else image
        try:
            with Image.open(source) as img:
                return _pil_to_array(img)
        except (OSError, Image.DecompressionBombError) as e:
            # UnidentifiedImageError and FileNotFoundError are both OSErrors
            raise AnalysisError(f"Could not read image: {e}") from e

    Image = _import_pil(required=False)
    if Image is not None and isinstance(image, Image.Image):
        # Image.open() is lazy; a truncated file only fails on first access
        try:
            return _pil_to_array(image)
        except (OSError, Image.DecompressionBombError) as e:
            raise AnalysisError(f"Could not read image: {e}") from e

    raise TypeError(
        f"Expected numpy array, file path, bytes or PIL image, got {type(image)}"
    )


def _import_pil(required: bool = True):
    """Import PIL.Image, with an install hint if it is missing."""
    try:
        from PIL import Image
    except ImportError as e:
        if not required:
            return None
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install Pillow"
        ) from e
    return Image


def _pil_to_array(img: "PILImage.Image") -> NDArray[np.uint8]:
    """Convert a PIL image to an (H, W, 3) uint8 array."""
    if img.mode != "RGB":
        img = img.convert("RGB")
    return np.array(img, dtype=np.uint8)
