# wren/graphics/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ResolutionSettings:
    """Output size in pixels. Clip space [-1, 1] is stretched to fit."""

    width: int = 500
    height: int = 500

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Resolution must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True, slots=True)
class ExportSettings:
    """Where and how frame snapshots are written."""

    resolution: ResolutionSettings = field(default_factory=ResolutionSettings)
    output_dir: Path = Path("frames")
