"""
Issue Classification Module.

Suggests a category and confidence for new issues.

Key principles:
- Runs AFTER issue creation, in the background
- Advisory only: never changes the citizen's category
- Fail-safe: any failure yields {category: "other", confidence: 0}
"""

from app.services.classification.base import ClassificationProvider, ClassificationResult
from app.services.classification.registry import (
    ClassificationRegistry,
    categorize,
    get_classification_registry,
    set_classification_registry,
)

__all__ = [
    "ClassificationProvider",
    "ClassificationResult",
    "ClassificationRegistry",
    "categorize",
    "get_classification_registry",
    "set_classification_registry",
]
