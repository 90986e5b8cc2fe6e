"""reftag - Referral tags for analytics tracking."""

from reftag.discovery import Sort
from reftag.serialization import (
    DecodeError,
    JSONValue,
    decode,
    encode,
    from_json,
    to_json,
)
from reftag.tags import (
    Activity,
    ActivitySample,
    Category,
    CategoryFeatured,
    CategoryWithSort,
    City,
    Dashboard,
    Discovery,
    DiscoveryPotd,
    MessageThread,
    Push,
    Recommended,
    RecommendedWithSort,
    # Core type
    RefTag,
    Search,
    Social,
    Thanks,
    Unrecognized,
    Users,
    # Code mapping
    parse,
    render,
)

__all__ = [
    "Activity",
    "ActivitySample",
    "Category",
    "CategoryFeatured",
    "CategoryWithSort",
    "City",
    "Dashboard",
    # Serialization
    "DecodeError",
    "Discovery",
    "DiscoveryPotd",
    "JSONValue",
    "MessageThread",
    "Push",
    "Recommended",
    "RecommendedWithSort",
    # Core type
    "RefTag",
    "Search",
    "Social",
    # Discovery
    "Sort",
    "Thanks",
    "Unrecognized",
    "Users",
    "decode",
    "encode",
    "from_json",
    # Code mapping
    "parse",
    "render",
    "to_json",
]
