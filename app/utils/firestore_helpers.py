"""
Firestore query helpers.
"""

from typing import Any, Dict, Optional


def where_filter(query, field_path: str, op_string: str, value):
    """
    Apply a single where clause.

    Positional arguments still work with firebase_admin; the deprecation
    warning they emit does not affect results.

    Usage:
        query = where_filter(collection, "state", "==", "kerala")
    """
    return query.where(field_path, op_string, value)


def apply_equality_filters(query, where: Optional[Dict[str, Any]]):
    """Chain an equality clause for every filter value that is neither None nor empty."""
    for field_path, value in (where or {}).items():
        if value is None or value == "":
            continue
        query = where_filter(query, field_path, "==", value)
    return query
