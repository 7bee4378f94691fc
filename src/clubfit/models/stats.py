"""Season statistic lines used for percentile comparisons."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerStatLine(BaseModel):
    """One player's statistics for a single tournament season."""

    player_id: str = Field(..., min_length=1)
    name: str
    position: str
    club: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    stats: Dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def stat(self, key: str) -> float:
        return float(self.stats.get(key) or 0.0)
