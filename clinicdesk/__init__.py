"""Clinic front-desk records (receptionists, rooms, test services) kept in delimited text files."""

__version__ = "1.0.0"

__all__ = [
    "date",
    "timeofday",
    "query",
    "ids",
    "entities",
    "states",
    "parsing",
    "writing",
    "storage",
    "repositories",
]