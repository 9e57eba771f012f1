"""
Run configuration shared by the CLI and scripts.

Graph corpora live under a data directory laid out as
<data_dir>/<family>/<family>-n<order>.dat, one graph6 line per graph.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

DATA_DIR_ENV = "COLORING_GAME_DATA_DIR"
DEFAULT_DATA_DIR = "data/graphs"
DEFAULT_DB_PATH = "data/databases/game_chromatic.db"

# Graph families with pre-generated corpora: name -> (min order, max order)
GRAPH_FAMILIES: Dict[str, Tuple[int, int]] = {
    "planar": (4, 11),
    "outerplanar": (4, 11),
}


def get_data_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """Data directory: explicit override, then $COLORING_GAME_DATA_DIR, then the default."""
    if override is not None:
        return Path(override)
    return Path(os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR))


def family_file(family: str, order: int, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Path of the corpus file for one family and order.

    Raises:
        ValueError: for an unknown family or an order outside its range
    """
    if family not in GRAPH_FAMILIES:
        known = ", ".join(sorted(GRAPH_FAMILIES))
        raise ValueError(f"Unknown graph family {family!r} (known: {known})")

    lo, hi = GRAPH_FAMILIES[family]
    if not lo <= order <= hi:
        raise ValueError(
            f"{order} is out of bounds for {family}, must be between {lo} and {hi}"
        )
    return get_data_dir(data_dir) / family / f"{family}-n{order}.dat"
