"""
Discovery domain types referenced by referral tags.

Only the sort order is modelled here. Referral tags embed it by value to tell
apart the category and recommendation screens a user arrived from.
"""

from __future__ import annotations

from enum import Enum


class Sort(Enum):
    """Sort order of a discovery listing. Values are the API parameter."""

    ENDING_SOON = "end_date"
    MAGIC = "magic"
    MOST_FUNDED = "most_funded"
    NEWEST = "newest"
    POPULAR = "popularity"
