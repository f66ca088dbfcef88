"""Tunable thresholds for pixel classification and cluster classification."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from bloodcell.core.exceptions import ConfigError


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not (low <= value <= high):
        raise ConfigError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class ClassifierThresholds:
    """Thresholds of the HSV pixel rules.

    A pixel is a red candidate when its hue wraps around 0
    (``hue > red_hue_min or hue < red_hue_max``) and it is saturated and
    bright enough. It is a white candidate when its hue lies strictly
    inside ``(white_hue_min, white_hue_max)``, it is saturated enough and
    dark enough. All comparisons are strict.

    Attributes:
        red_hue_min: Lower bound of the wrapping red hue band (degrees).
        red_hue_max: Upper bound of the wrapping red hue band (degrees).
        red_saturation_min: Saturation a red pixel must exceed.
        red_brightness_min: Brightness a red pixel must exceed.
        white_hue_min: Lower bound of the white hue band (degrees).
        white_hue_max: Upper bound of the white hue band (degrees).
        white_saturation_min: Saturation a white pixel must exceed.
        white_brightness_max: Brightness a white pixel must stay below.
    """

    red_hue_min: float = 330.0
    red_hue_max: float = 20.0
    red_saturation_min: float = 0.2
    red_brightness_min: float = 0.4
    white_hue_min: float = 200.0
    white_hue_max: float = 280.0
    white_saturation_min: float = 0.4
    white_brightness_max: float = 0.8

    def __post_init__(self) -> None:
        """Validate parameters."""
        for name in ("red_hue_min", "red_hue_max", "white_hue_min", "white_hue_max"):
            _check_range(name, getattr(self, name), 0.0, 360.0)
        for name in (
            "red_saturation_min", "red_brightness_min",
            "white_saturation_min", "white_brightness_max",
        ):
            _check_range(name, getattr(self, name), 0.0, 1.0)
        if self.white_hue_min >= self.white_hue_max:
            raise ConfigError(
                f"white_hue_min ({self.white_hue_min}) must be below "
                f"white_hue_max ({self.white_hue_max})"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "red_hue_min": self.red_hue_min,
            "red_hue_max": self.red_hue_max,
            "red_saturation_min": self.red_saturation_min,
            "red_brightness_min": self.red_brightness_min,
            "white_hue_min": self.white_hue_min,
            "white_hue_max": self.white_hue_max,
            "white_saturation_min": self.white_saturation_min,
            "white_brightness_max": self.white_brightness_max,
        }


@dataclass(frozen=True)
class ClusterThresholds:
    """Size rules of the cluster classifier.

    Attributes:
        noise_cutoff: Clusters smaller than this are discarded.
        red_cluster_min_size: Red clusters at least this large count as
            multi-cell clusters.
        min_cluster_estimate: Floor of the multi-cell estimate.
        average_red_size_seed: Average single-red size assumed before any
            single red cell has been observed.
    """

    noise_cutoff: int = 20
    red_cluster_min_size: int = 60
    min_cluster_estimate: int = 2
    average_red_size_seed: float = 70.0

    def __post_init__(self) -> None:
        """Validate parameters."""
        for name in ("noise_cutoff", "red_cluster_min_size", "min_cluster_estimate"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        seed = self.average_red_size_seed
        if isinstance(seed, bool) or not isinstance(seed, (int, float)) or not math.isfinite(seed):
            raise ConfigError(f"average_red_size_seed must be a finite number, got {seed!r}")
        if self.noise_cutoff < 1:
            raise ConfigError(f"noise_cutoff must be >= 1, got {self.noise_cutoff}")
        if self.red_cluster_min_size <= self.noise_cutoff:
            raise ConfigError(
                f"red_cluster_min_size ({self.red_cluster_min_size}) must exceed "
                f"noise_cutoff ({self.noise_cutoff})"
            )
        if self.min_cluster_estimate < 1:
            raise ConfigError(
                f"min_cluster_estimate must be >= 1, got {self.min_cluster_estimate}"
            )
        if self.average_red_size_seed <= 0:
            raise ConfigError(
                f"average_red_size_seed must be > 0, got {self.average_red_size_seed}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "noise_cutoff": self.noise_cutoff,
            "red_cluster_min_size": self.red_cluster_min_size,
            "min_cluster_estimate": self.min_cluster_estimate,
            "average_red_size_seed": self.average_red_size_seed,
        }


@dataclass(frozen=True)
class AnalysisConfig:
    """Complete configuration of one analysis pipeline."""

    pixels: ClassifierThresholds = field(default_factory=ClassifierThresholds)
    clusters: ClusterThresholds = field(default_factory=ClusterThresholds)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict suitable for YAML."""
        return {
            "pixels": self.pixels.to_dict(),
            "clusters": self.clusters.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisConfig:
        """Build a config from a dict, falling back to defaults for missing keys.

        Raises:
            ConfigError: If a section is not a mapping, a key is unknown,
                or a value fails validation.
        """
        # An empty YAML section ("pixels:") loads as None.
        pixels = data.get("pixels", {})
        clusters = data.get("clusters", {})
        pixels = {} if pixels is None else pixels
        clusters = {} if clusters is None else clusters
        unknown = set(data) - {"pixels", "clusters"}
        if unknown:
            raise ConfigError(f"Unknown config sections: {sorted(unknown)}")
        if not isinstance(pixels, dict) or not isinstance(clusters, dict):
            raise ConfigError("Config sections 'pixels' and 'clusters' must be mappings")
        try:
            return cls(
                pixels=ClassifierThresholds(**pixels),
                clusters=ClusterThresholds(**clusters),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid config: {e}") from e
