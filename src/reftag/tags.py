"""
Referral tag domain.

A referral tag records how a user arrived at a screen. Each tag has a wire
code used in analytics events, cookies and push payloads. This module defines
the closed set of tag variants and the mapping between codes and variants.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, dataclass_transform

from reftag.discovery import Sort

logger = logging.getLogger(__name__)

# Suffix appended to the base code of sorted variants
_SORT_SUFFIXES: dict[Sort, str] = {
    Sort.ENDING_SOON: "_ending_soon",
    Sort.MAGIC: "",
    Sort.MOST_FUNDED: "_most_funded",
    Sort.NEWEST: "_newest",
    Sort.POPULAR: "_popular",
}

# =============================================================================
# Tag Base
# =============================================================================


@dataclass_transform(frozen_default=True)
class RefTag:
    """Base for referral tags. Every direct subclass is one variant."""

    _code: ClassVar[str]
    _registry: ClassVar[dict[str, type[RefTag]]] = {}
    # Set once the code table is built; no variants may be added after that
    _sealed: ClassVar[bool] = False

    def __init_subclass__(cls, code: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if RefTag._sealed:
            raise TypeError(f"{cls.__name__}: the set of ref tag variants is closed")
        if cls.__bases__ != (RefTag,):
            raise TypeError(f"{cls.__name__} cannot extend a concrete ref tag variant")
        if code is None and "string_tag" not in cls.__dict__:
            raise TypeError(f"{cls.__name__} needs a code or its own string_tag")

        # eq=False keeps the equality and hash defined below
        dataclass(frozen=True, eq=False)(cls)

        if code is None:
            return
        cls._code = code

        # Only parameterless variants map a code to exactly one value
        if fields(cls):
            return
        if existing := RefTag._registry.get(code):
            raise ValueError(
                f"Code '{code}' already registered to {existing.__name__}. "
                f"Choose a different code."
            )
        RefTag._registry[code] = cls

    @classmethod
    def from_code(cls, code: str) -> RefTag:
        """Create a tag from a wire code. See `parse`."""
        return parse(code)

    @classmethod
    def known_codes(cls) -> tuple[str, ...]:
        """All codes that parse to a recognized tag, in code table order."""
        return tuple(_CODE_TABLE)

    @property
    def string_tag(self) -> str:
        """Canonical code used for analytics tracking, cookies and push payloads."""
        return self._code

    def _payload(self) -> tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefTag):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash(self.string_tag)

    def __str__(self) -> str:
        return self.string_tag


# =============================================================================
# Parameterless Variants
# =============================================================================


class Activity(RefTag, code="activity"):
    """Activity feed."""


class ActivitySample(RefTag, code="discovery_activity_sample"):
    """Activity sample shown at the top of discovery."""


class Category(RefTag, code="category"):
    """Category listing."""


class CategoryFeatured(RefTag, code="category_featured"):
    """Featured project of a category."""


class City(RefTag, code="city"):
    """City listing."""


class Dashboard(RefTag, code="dashboard"):
    """Creator dashboard."""


class Discovery(RefTag, code="discovery"):
    """Discovery listing."""


class DiscoveryPotd(RefTag, code="discovery_potd"):
    """Project of the day in discovery."""


class MessageThread(RefTag, code="message_thread"):
    """Message thread between a backer and a creator."""


class Push(RefTag, code="push"):
    """Push notification."""


class Recommended(RefTag, code="recommended"):
    """Recommendations listing."""


class Search(RefTag, code="search"):
    """Search results."""


class Social(RefTag, code="social"):
    """Social sharing link."""


class Thanks(RefTag, code="thanks"):
    """Thanks page shown after pledging."""


class Users(RefTag, code="users"):
    """User profile."""


# =============================================================================
# Sorted Variants
# =============================================================================


class CategoryWithSort(RefTag, code="category"):
    """
    Category listing shown in a specific sort order.

    Example: CategoryWithSort(Sort.NEWEST) → "category_newest"

    Sort.MAGIC has no suffix, so CategoryWithSort(Sort.MAGIC) renders as
    "category" but "category" parses back to Category().
    """

    sort: Sort

    @property
    def string_tag(self) -> str:
        return self._code + _SORT_SUFFIXES[self.sort]


class RecommendedWithSort(RefTag, code="recommended"):
    """
    Recommendations listing shown in a specific sort order.

    Example: RecommendedWithSort(Sort.POPULAR) → "recommended_popular"
    """

    sort: Sort

    @property
    def string_tag(self) -> str:
        return self._code + _SORT_SUFFIXES[self.sort]


# =============================================================================
# Fallback Variant
# =============================================================================


class Unrecognized(RefTag):
    """
    Tag for a code outside the known table.

    The original code is kept verbatim so it renders back unchanged.
    """

    code: str

    @property
    def string_tag(self) -> str:
        return self.code


# =============================================================================
# Code Table
# =============================================================================


def _sorted(variant: type[CategoryWithSort | RecommendedWithSort]) -> list[RefTag]:
    return [variant(sort) for sort in Sort]


def _build_code_table() -> dict[str, RefTag]:
    entries: list[RefTag] = [
        Activity(),
        Category(),
        CategoryFeatured(),
        ActivitySample(),
        *_sorted(CategoryWithSort),
        City(),
        Dashboard(),
        Discovery(),
        DiscoveryPotd(),
        MessageThread(),
        Push(),
        Recommended(),
        *_sorted(RecommendedWithSort),
        Search(),
        Social(),
        Thanks(),
        Users(),
    ]
    table: dict[str, RefTag] = {}
    for tag in entries:
        # First match wins: "category" and "recommended" stay with the
        # parameterless variants listed before their magic-sorted twins
        table.setdefault(tag.string_tag, tag)

    if missing := RefTag._registry.keys() - table.keys():
        raise ValueError(f"Registered codes missing from the code table: {sorted(missing)}")
    return table


_CODE_TABLE: dict[str, RefTag] = _build_code_table()
RefTag._sealed = True


def parse(code: str) -> RefTag:
    """
    Parse a wire code into a referral tag.

    Never fails: a code missing from the table becomes Unrecognized(code).

    Args:
        code: Code string from a cookie, push payload or analytics event

    Returns:
        The matching tag, or Unrecognized wrapping the original code
    """
    if (tag := _CODE_TABLE.get(code)) is not None:
        return tag
    logger.debug("Unrecognized ref tag code %r", code)
    return Unrecognized(code)


def render(tag: RefTag) -> str:
    """Render a tag as its wire code."""
    return tag.string_tag
