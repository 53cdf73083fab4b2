"""
State accident map
==================

`fars_map_state` draws every accident of one state and one year as a dot
on top of the state outlines.

Steps:
1) Read the full table for the year and keep the map projection
   (STATE, LONGITUD, LATITUDE)
2) Check the state code exists in that year's data, then filter to it
3) Replace sentinel coordinates with NaN (see `models.sanitize_coordinates`)
4) Draw the state boundaries, zoom to the non-missing coordinate range and
   add the points. matplotlib skips NaN points on its own.

Plotting dependencies (matplotlib, geopandas) are imported lazily so the
loading and summary helpers work without them.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple
import pandas as pd
import structlog

from .config import DEFAULT_CONFIG, FarsConfig
from .errors import DataFileNotFound, InvalidStateError
from .loader import fars_read, make_filename, map_view, to_int
from .models import LATITUDE, LONGITUDE, STATE, coordinate_bounds, sanitize_coordinates

logger = structlog.get_logger(__name__)

# Half-width used when every point shares the same longitude or latitude
_MIN_SPAN = 0.5


def load_state_boundaries(source=None, *, config: Optional[FarsConfig] = None):
    """Return state polygons as a GeoDataFrame.

    `source` may be a GeoDataFrame (returned unchanged), a path to any file
    geopandas can read, or None for the configured boundaries file.
    """
    try:
        import geopandas as gpd
    except ImportError as e:
        raise ImportError(
            "Missing dependency: geopandas.\n"
            "Install it with: python -m pip install geopandas"
        ) from e

    if isinstance(source, gpd.GeoDataFrame):
        return source
    config = config or DEFAULT_CONFIG
    path = Path(source) if source is not None else config.resolved_boundaries_path()
    if not path.exists():
        raise DataFileNotFound(path)
    return gpd.read_file(path)


def _span(lo: float, hi: float) -> Tuple[float, float]:
    if lo == hi:
        return lo - _MIN_SPAN, hi + _MIN_SPAN
    return lo, hi


def fars_map_state(
    state_num,
    year,
    *,
    config: Optional[FarsConfig] = None,
    boundaries=None,
    ax=None,
):
    """Plot the accidents of one state for one year.

    Args:
        state_num: FARS STATE code (FIPS numbering, e.g. 6 for California).
        year: year of the accident file to read.
        boundaries: path or GeoDataFrame with state outlines. Defaults to
            the configured boundaries file (`extdata/us_states.geojson`),
            which is not shipped with the package: pass `boundaries=` unless
            that file has been installed (see `extdata/README.md`).
        ax: matplotlib Axes to draw on; a new figure is created if omitted.

    Returns:
        The Axes that was drawn on, or None when there was nothing to plot.

    Raises:
        InvalidStateError: `state_num` does not occur in that year's data.
    """
    config = config or DEFAULT_CONFIG
    data = map_view(fars_read(make_filename(year, config=config)))
    state_num = to_int(state_num, what="STATE number")

    # Non-numeric codes never match any state
    codes = pd.to_numeric(data[STATE], errors="coerce")
    states = set(int(s) for s in codes.dropna().unique())
    if state_num not in states:
        raise InvalidStateError(state_num)

    sub = data[codes == state_num]
    if sub.empty:
        logger.info("no accidents to plot", state=state_num, year=year)
        return None

    sub = sanitize_coordinates(sub)
    bounds = coordinate_bounds(sub)
    if bounds is None:
        logger.info("no coordinates to plot", state=state_num, year=year, rows=len(sub))
        return None
    (lon_min, lon_max), (lat_min, lat_max) = bounds

    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib.\n"
            "Install it with: python -m pip install matplotlib"
        ) from e

    shapes = load_state_boundaries(boundaries, config=config)
    if ax is None:
        _, ax = plt.subplots()

    shapes.boundary.plot(ax=ax, color="black", linewidth=0.6)
    ax.set_xlim(*_span(lon_min, lon_max))
    ax.set_ylim(*_span(lat_min, lat_max))
    ax.plot(
        sub[LONGITUDE].to_numpy(),
        sub[LATITUDE].to_numpy(),
        linestyle="none",
        marker=".",
        markersize=1,
        color="black",
        label="accidents",
    )
    ax.set_axis_off()
    points = int(sub[[LONGITUDE, LATITUDE]].notna().all(axis=1).sum())
    logger.info("Plotted state accidents", state=state_num, year=year, points=points)
    return ax
