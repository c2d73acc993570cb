"""
Classification Provider Base Interface.

Defines the contract for issue classifiers and the normalization every
classifier output goes through before it can reach an issue record.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import logging

from app.models.issue import CATEGORY_VALUES, IssueCategory

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = IssueCategory.OTHER.value
FALLBACK_CONFIDENCE = 0
DEFAULT_CONFIDENCE = 50


class ClassificationResult:
    """
    Standardized classifier output.

    fallback=True marks the safe default produced when classification
    failed; such results are never written onto an issue.
    """

    def __init__(
        self,
        category: str,
        confidence: int,
        model_name: str = "",
        fallback: bool = False,
        error: Optional[str] = None,
        inference_timestamp: Optional[datetime] = None
    ):
        self.category = category
        self.confidence = confidence
        self.model_name = model_name
        self.fallback = fallback
        self.error = error
        self.inference_timestamp = inference_timestamp or datetime.now(timezone.utc)

    @classmethod
    def failed(cls, reason: str, model_name: str = "") -> "ClassificationResult":
        """Safe default: category 'other' with zero confidence."""
        return cls(
            category=FALLBACK_CATEGORY,
            confidence=FALLBACK_CONFIDENCE,
            model_name=model_name,
            fallback=True,
            error=reason
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "category": self.category,
            "confidence": self.confidence,
            "model_name": self.model_name,
            "fallback": self.fallback,
            "inference_timestamp": self.inference_timestamp.isoformat(),
        }
        if self.error:
            result["error"] = self.error
        return result

    def __repr__(self) -> str:
        return (
            f"ClassificationResult(category={self.category!r}, confidence={self.confidence}, "
            f"fallback={self.fallback})"
        )


def normalize_category(value: Any) -> str:
    """Map anything outside the category vocabulary to 'other'."""
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in CATEGORY_VALUES:
            return candidate
    return FALLBACK_CATEGORY


def normalize_confidence(value: Any) -> int:
    """
    Coerce a confidence score into an int within [0, 100].
    Missing or non-numeric values become DEFAULT_CONFIDENCE.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_CONFIDENCE
    try:
        score = float(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE
    if score != score:  # NaN
        return DEFAULT_CONFIDENCE
    return int(round(max(0.0, min(100.0, score))))


class ClassificationProvider(ABC):
    """
    Abstract base class for issue classifiers.

    classify() MUST:
    - Return a ClassificationResult even on failure (use ClassificationResult.failed)
    - Never let exceptions escape
    - Respect get_timeout_seconds()
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, str]:
        """Dict with 'name' and 'version' keys."""
        pass

    @abstractmethod
    def classify(self, title: str, description: str) -> ClassificationResult:
        pass

    @abstractmethod
    def get_timeout_seconds(self) -> float:
        pass
