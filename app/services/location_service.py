"""
Location Service - state and district options for the submission form.
"""

from app.data.states_districts import STATES_DISTRICTS
from typing import Dict, List
import re


def slugify(name: str) -> str:
    """'North Goa' -> 'north-goa'"""
    return re.sub(r"\s+", "-", name.strip().lower())


def list_states() -> List[Dict[str, str]]:
    """All states as [{value: <state key>, label: <display name>}]."""
    return [
        {"value": key, "label": state["name"]}
        for key, state in STATES_DISTRICTS.items()
    ]


def list_districts(state_key: str) -> List[Dict[str, str]]:
    """
    Districts of one state as [{value: <slug>, label: <display name>}].
    Unknown state keys return an empty list.
    """
    state = STATES_DISTRICTS.get(state_key)
    if not state:
        return []
    return [
        {"value": slugify(district), "label": district}
        for district in state["districts"]
    ]
