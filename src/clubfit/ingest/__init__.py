"""Input adapters that normalize raw opportunity, review and profile data."""

from .opportunities import (
    LoadReport,
    OpportunityRow,
    load_opportunities_from_csv,
    load_opportunity_csv,
    load_player_profile,
    load_reviews_csv,
    rows_to_opportunities,
)

__all__ = [
    "LoadReport",
    "OpportunityRow",
    "load_opportunities_from_csv",
    "load_opportunity_csv",
    "load_player_profile",
    "load_reviews_csv",
    "rows_to_opportunities",
]
