"""biodata listings: storage, search and validation."""
from .directory import ProfileDirectory, BIODATA_KEY, SEARCH_FIELDS
from .validation import validate

__all__ = [
    "ProfileDirectory",
    "BIODATA_KEY",
    "SEARCH_FIELDS",
    "validate",
]
