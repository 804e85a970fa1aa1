# renderer/settings.py
from dataclasses import dataclass

# Quality presets: samples per pixel and maximum bounce count.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 25},
    "final": {"samples": 100, "bounces": 50},
}

@dataclass(frozen=True)
class RenderSettings:
    """
    Process-wide render parameters, built once and handed to the renderer.
    """
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    # Minimum hit distance, suppresses self-intersection at a ray's origin
    min_hit_distance: float = 1e-4

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)

    def validate(self) -> "RenderSettings":
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_width < 2 or self.image_height < 2:
            raise ValueError(
                f"image must be at least 2x2 pixels, got {self.image_width}x{self.image_height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if self.min_hit_distance <= 0:
            raise ValueError(f"min_hit_distance must be positive, got {self.min_hit_distance}")
        return self

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """
        Build settings from a named preset in QUALITY_LEVELS. Keyword
        arguments override individual fields.
        """
        if name not in QUALITY_LEVELS:
            choices = ", ".join(sorted(QUALITY_LEVELS))
            raise ValueError(f"Unknown quality level '{name}' (choose from: {choices})")
        quality = QUALITY_LEVELS[name]
        fields = {"samples_per_pixel": quality["samples"], "max_depth": quality["bounces"]}
        fields.update(overrides)
        return cls(**fields)
