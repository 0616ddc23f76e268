# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
EBC estimation, band classification and accuracy scoring.

The estimate is an uncalibrated visual approximation:

    luma = 0.299 R + 0.587 G + 0.114 B        (0-255 scale)
    SRM  ≈ 1.4922 × luma / 100
    EBC  ≈ 1.97 × SRM

It is not a laboratory reading. The constants define the expected
behavior and must stay as they are unless a new calibration replaces them.
"""

from __future__ import annotations

from ebcmeter.schema import EBC_COLOR_BANDS, EBCColorBand


# =============================================================================
# Constants
# =============================================================================

# Rec. 601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

EBC_PER_SRM = 1.97

ACCURACY_FLOOR = 0.3
ACCURACY_CEILING = 1.0


# =============================================================================
# EBC Estimation
# =============================================================================


def luma(r: float, g: float, b: float) -> float:
    """Perceptual luma of a 0-255 color."""
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def estimate_srm(r: float, g: float, b: float) -> float:
    """Approximate SRM from a 0-255 color."""
    return 1.4922 * luma(r, g, b) / 100


def srm_to_ebc(srm: float) -> float:
    return EBC_PER_SRM * srm


def ebc_to_srm(ebc: float) -> float:
    return ebc / EBC_PER_SRM


def estimate_ebc(r: float, g: float, b: float) -> float:
    """
    Approximate EBC from a 0-255 color.

    Example:
        >>> round(estimate_ebc(255, 255, 255), 4)
        7.4961
    """
    return srm_to_ebc(estimate_srm(r, g, b))


# =============================================================================
# Classification
# =============================================================================


def find_band(
    ebc_value: float,
    bands: tuple[EBCColorBand, ...] = EBC_COLOR_BANDS,
) -> EBCColorBand:
    """
    Return the first band containing ebc_value.

    Values that no band contains (negative, NaN) fall back to the last,
    darkest band.
    """
    for band in bands:
        if band.contains(ebc_value):
            return band
    return bands[-1]


def classify(
    ebc_value: float,
    bands: tuple[EBCColorBand, ...] = EBC_COLOR_BANDS,
) -> str:
    """Name of the EBC band containing ebc_value."""
    return find_band(ebc_value, bands).name


# =============================================================================
# Accuracy
# =============================================================================


def accuracy(lab_l: float) -> float:
    """
    Confidence score from Lab lightness.

    Lighter samples are assumed to have captured more liquid and less
    glare, so the score rises with L. Clamped to [0.3, 1.0].
    """
    return min(ACCURACY_CEILING, max(ACCURACY_FLOOR, lab_l / 100.0))

