"""
Configuration (FarsConfig)
==========================

Where the accident files live and how they are named.

The defaults point at the `extdata/` directory bundled with the package.
Callers who keep the data somewhere else build their own config:

    cfg = FarsConfig().with_data_dir("/data/fars")
    fars_summarize_years([2013, 2014], config=cfg)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Union

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "extdata"


@dataclass(frozen=True)
class FarsConfig:
    """Resource locations used by the loader and the map renderer."""
    data_dir: Path = field(default=PACKAGE_DATA_DIR)
    filename_template: str = "accident_{year}.csv.bz2"

    # State polygons for the base map; None means <data_dir>/us_states.geojson
    boundaries_path: Optional[Path] = None

    def with_data_dir(self, data_dir: Union[str, Path]) -> "FarsConfig":
        return replace(self, data_dir=Path(data_dir))

    def resolved_boundaries_path(self) -> Path:
        if self.boundaries_path is not None:
            return Path(self.boundaries_path)
        return self.data_dir / "us_states.geojson"


DEFAULT_CONFIG = FarsConfig()
