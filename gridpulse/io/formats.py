from __future__ import annotations
from typing import Any, Dict, List, Sequence

import pandas as pd
from pydantic import BaseModel


def to_records(items: Sequence[BaseModel]) -> List[Dict[str, Any]]:
    """
    Convert entities to plain dicts for the presentation layer.

    Timestamps become ISO-8601 strings; absent optionals stay None.
    """
    return [item.model_dump(mode="json") for item in items]


def to_frame(items: Sequence[BaseModel], index: str = "timestamp") -> pd.DataFrame:
    """
    Convert entities to a DataFrame, indexed by `index` when that column exists.

    Timestamps keep their zone; an index column is sorted ascending.
    """
    rows = [item.model_dump() for item in items]
    if not rows:
        return pd.DataFrame()
    df = pd.DataFrame(rows)
    if index in df.columns:
        df[index] = pd.to_datetime(df[index])
        df = df.set_index(index).sort_index(kind="stable")
    return df
