# renderer/settings.py
from dataclasses import dataclass, replace

# Nearest hit distance accepted by the integrator; avoids self-intersection.
HIT_EPSILON = 1e-4

# Recursion bound for the integrator. Deeper paths would add little light
# and risk the interpreter's stack limit.
MAX_DEPTH_LIMIT = 50

QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 4},
    "balanced": {"samples": 32, "bounces": 10},
    "high_quality": {"samples": 200, "bounces": 50},
}

@dataclass(frozen=True)
class RenderSettings:
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 32
    max_depth: int = 10
    workers: int = 1
    show_progress: bool = True

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Image must be at least 2x2 pixels, got {self.width}x{self.height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be in [0, {MAX_DEPTH_LIMIT}], got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """Settings for a named entry of QUALITY_LEVELS, with field overrides."""
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"Unknown quality level {name!r}; choose from {', '.join(QUALITY_LEVELS)}") from None
        base = cls(samples_per_pixel=quality["samples"], max_depth=quality["bounces"])
        return replace(base, **overrides)
