# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
AnalysisResult -- Canonical schema for beer color analysis.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same pixels → same result
- Always renderable: A failed analysis still yields a result (the
  Unknown sentinel), but the failure stays detectable via is_unknown

EBC Scale:
    The European Brewery Convention color scale runs from ~2 (very pale
    lager) to well above 100 (stouts). SRM, the North American scale, is
    related by a fixed factor: EBC ≈ 1.97 × SRM.

CIE L*a*b*:
- L (Lightness): 0 = black, 100 = white
- a: green (−) ↔ red (+)
- b: blue (−) ↔ yellow (+)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Errors
# =============================================================================


class AnalysisError(ValueError):
    """Raised by the strict API when an image cannot be analyzed."""


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An sRGB color on the 0-255 scale.

    Channels may be fractional (the mean of many pixels rarely lands
    on an integer).

    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        """Validate channels are within 0-255."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0.0 <= value <= 255.0:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    def to_int_tuple(self) -> tuple[int, int, int]:
        """Truncate channels to integers for display."""
        return int(self.r), int(self.g), int(self.b)

    @property
    def hex(self) -> str:
        """Hex string of the truncated color, like "#D9A441"."""
        r, g, b = self.to_int_tuple()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    A color in CIE L*a*b* (D65 reference white).

    Only lightness is consumed by the analysis (it drives the accuracy
    score); a and b are kept so the conversion can be checked as a whole.
    """
    L: float
    a: float
    b: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "a": self.a, "b": self.b}


# =============================================================================
# EBC Color Bands
# =============================================================================


@dataclass(frozen=True, slots=True)
class EBCColorBand:
    """
    One named range of the EBC classification table.

    Bounds are integer labels, inclusive on both ends. A fractional value
    between two labels (e.g. 7.5, between "...7" and "8...") belongs to
    the lower band, so a band covers [lower, upper + 1).

    Attributes:
        lower: First EBC value of the band
        upper: Last EBC value of the band, or None for the open-ended top band
        name: Descriptive color name
    """
    lower: float
    upper: Optional[float]
    name: str

    def __post_init__(self) -> None:
        """Validate band bounds."""
        if not self.name:
            raise ValueError("Band name cannot be empty")
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(
                f"Band '{self.name}' upper bound {self.upper} "
                f"is below lower bound {self.lower}"
            )

    @property
    def is_open_ended(self) -> bool:
        return self.upper is None

    def contains(self, ebc_value: float) -> bool:
        """True if ebc_value falls in this band."""
        if self.upper is None:
            return ebc_value >= self.lower
        return self.lower <= ebc_value < self.upper + 1

    @property
    def label(self) -> str:
        """Human-readable range, like "8-11" or "101+"."""
        if self.upper is None:
            return f"{self.lower:g}+"
        return f"{self.lower:g}-{self.upper:g}"


# Ordered from palest to darkest. The last band catches everything above
# 101; the historical table listed it as 101...500.
EBC_COLOR_BANDS: tuple[EBCColorBand, ...] = (
    EBCColorBand(0, 4, "Pale straw"),
    EBCColorBand(5, 7, "Straw"),
    EBCColorBand(8, 11, "Pale gold"),
    EBCColorBand(12, 15, "Gold"),
    EBCColorBand(16, 19, "Amber"),
    EBCColorBand(20, 25, "Deep amber"),
    EBCColorBand(26, 33, "Light copper"),
    EBCColorBand(34, 39, "Copper"),
    EBCColorBand(40, 47, "Dark copper"),
    EBCColorBand(48, 57, "Light brown"),
    EBCColorBand(58, 69, "Brown/Reddish brown"),
    EBCColorBand(70, 79, "Dark brown"),
    EBCColorBand(80, 100, "Very dark brown"),
    EBCColorBand(101, None, "Black"),
)


def validate_bands(bands: tuple[EBCColorBand, ...]) -> None:
    """
    Check that a band table is ordered, contiguous, and terminates in
    an open-ended band.

    Raises:
        ValueError: If the table violates any of these
    """
    if not bands:
        raise ValueError("Band table cannot be empty")
    if not bands[-1].is_open_ended:
        raise ValueError("Last band must be open-ended (upper=None)")
    for prev, band in zip(bands, bands[1:]):
        if prev.is_open_ended:
            raise ValueError(f"Only the last band may be open-ended, got '{prev.name}'")
        if band.lower != prev.upper + 1:
            raise ValueError(
                f"Bands '{prev.name}' and '{band.name}' are not contiguous: "
                f"{prev.label} then {band.label}"
            )


validate_bands(EBC_COLOR_BANDS)


# =============================================================================
# Top-Level Result
# =============================================================================


UNKNOWN_COLOR_NAME = "Unknown"


def describe_accuracy(accuracy: float) -> str:
    """Three-level label for an accuracy score."""
    if accuracy > 0.8:
        return "High"
    elif accuracy > 0.5:
        return "Medium"
    else:
        return "Low"


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    Outcome of analyzing one photograph of beer.

    Attributes:
        ebc_value: Estimated EBC color value
        color_name: Name of the matching EBC band, or "Unknown"
        accuracy: Confidence score (0.0-1.0), higher for lighter samples
        rgb: Sampled average color, truncated to integers, for the swatch

    Usage:
        result = analyze(pixels)
        print(result.formatted_ebc, result.color_name, result.accuracy_description)
    """
    ebc_value: float
    color_name: str
    accuracy: float
    rgb: tuple[int, int, int]

    def __post_init__(self) -> None:
        """Validate result fields."""
        if not 0.0 <= self.accuracy <= 1.0:
            raise ValueError(f"Accuracy must be 0-1, got {self.accuracy}")
        if len(self.rgb) != 3:
            raise ValueError(f"rgb must have 3 channels, got {len(self.rgb)}")
        if not all(0 <= c <= 255 for c in self.rgb):
            raise ValueError(f"rgb channels must be 0-255, got {self.rgb}")

    @property
    def is_unknown(self) -> bool:
        """True if this is the sentinel for an image that could not be analyzed."""
        return self.color_name == UNKNOWN_COLOR_NAME

    @property
    def formatted_ebc(self) -> str:
        """EBC value with one decimal, like "7.5"."""
        return f"{self.ebc_value:.1f}"

    @property
    def accuracy_description(self) -> str:
        """"High", "Medium" or "Low"."""
        return describe_accuracy(self.accuracy)

    @property
    def srm_value(self) -> float:
        """The EBC value expressed in SRM."""
        from ebcmeter.measure.ebc import ebc_to_srm
        return ebc_to_srm(self.ebc_value)

    @property
    def hex(self) -> str:
        """Swatch color as a hex string."""
        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ebc_value": self.ebc_value,
            "color_name": self.color_name,
            "accuracy": self.accuracy,
            "rgb": list(self.rgb),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_report(self) -> str:
        """
        Serialize to the labelled text report shown next to the swatch.

        Example output:
            EBC Value: 7.5
            Beer Color: Straw
            Accuracy: High
            ...
        """
        # Import here to avoid circular imports
        from ebcmeter.runtime.serializers.report import to_report
        return to_report(self)

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisResult:
        """Deserialize from dictionary."""
        r, g, b = data["rgb"]
        return cls(
            ebc_value=data["ebc_value"],
            color_name=data["color_name"],
            accuracy=data["accuracy"],
            rgb=(int(r), int(g), int(b)),
        )

    @classmethod
    def from_json(cls, json_str: str) -> AnalysisResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


UNKNOWN_RESULT = AnalysisResult(
    ebc_value=0.0,
    color_name=UNKNOWN_COLOR_NAME,
    accuracy=0.0,
    rgb=(0, 0, 0),
)
