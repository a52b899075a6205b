"""Move between containers and pandas DataFrames."""

import logging
from typing import Iterable, Iterator

import pandas as pd

from .models import Container

logger = logging.getLogger(__name__)


def people_frame(people: Iterable[Container]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per container.

    Args:
        people: Containers sharing the same keys

    Returns:
        DataFrame whose columns follow the first container's key order
    """
    frame = pd.DataFrame([person.to_dict() for person in people])
    logger.debug(f"Built frame with {len(frame)} rows")
    return frame


def iter_row_containers(frame: pd.DataFrame) -> Iterator[Container]:
    """
    Generator that turns each DataFrame row back into a container.

    Uses ``itertuples`` rather than ``iterrows`` so column dtypes survive.

    Args:
        frame: Source DataFrame

    Yields:
        One container per row, keys in column order
    """
    columns = list(frame.columns)
    for row in frame.itertuples(index=False, name=None):
        yield Container(zip(columns, row))
