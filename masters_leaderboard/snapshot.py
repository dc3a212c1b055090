from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Tuple

import pandas as pd

from .config import COLUMNS, INTEGER_COLUMNS, SNAPSHOT_COLUMNS, TIMESTAMP_FORMAT


@dataclass(frozen=True)
class LeaderboardSnapshot:
    """One cycle's leaderboard: typed rows in rank order and a shared timestamp."""
    rows: Tuple[Mapping, ...]
    last_updated: datetime

    def __post_init__(self):
        object.__setattr__(self, 'rows', tuple(MappingProxyType(dict(r)) for r in self.rows))

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def to_frame(self):
        df = pd.DataFrame([{col: row.get(col) for col in COLUMNS} for row in self.rows], columns=COLUMNS)
        for col in INTEGER_COLUMNS: df[col] = df[col].astype('Int64')
        df['last_updated'] = pd.Timestamp(self.last_updated)
        return df[SNAPSHOT_COLUMNS]

    def to_records(self):
        stamp = self.last_updated.strftime(TIMESTAMP_FORMAT)
        records = [list(SNAPSHOT_COLUMNS)]
        for row in self.rows:
            records.append(["" if row.get(col) is None else row.get(col) for col in COLUMNS] + [stamp])
        return records
