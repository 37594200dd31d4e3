"""
Rules package.

Defines the stored rule record, its wire encoding and the filters used to
select records. Everything here is pure: no store or engine access.

Modules of interest:
- models: RuleRecord and Filter data classes.
- codec: encode/decode between engine rows, records and stored members.
- filters: field-index and structured filter predicates.
"""

from .models import MAX_FIELDS, SECTIONS, Filter, RuleRecord
from .codec import decode, deserialize, encode, serialize
from .filters import apply_field_filter, apply_filter, matches_field_filter, matches_filter

__all__ = [
    "MAX_FIELDS",
    "SECTIONS",
    "Filter",
    "RuleRecord",
    "encode",
    "decode",
    "serialize",
    "deserialize",
    "matches_field_filter",
    "matches_filter",
    "apply_field_filter",
    "apply_filter",
]
