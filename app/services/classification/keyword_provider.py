"""
Keyword Classification Provider - offline classifier.

Used when AI is enabled but no OpenAI key is configured, so local
development still gets category suggestions without network calls.
"""

from app.services.classification.base import ClassificationProvider, ClassificationResult
from app.models.issue import IssueCategory
from typing import Dict, List, Tuple
import logging

logger = logging.getLogger(__name__)


# Checked in order; first category with a hit wins
CATEGORY_KEYWORDS: List[Tuple[str, List[str]]] = [
    (IssueCategory.TRAFFIC.value, ["traffic", "signal", "jam", "congestion", "parking", "accident"]),
    (IssueCategory.ROADS.value, ["road", "pothole", "footpath", "pavement", "bridge", "speed breaker"]),
    (IssueCategory.WATER.value, ["water", "leak", "pipeline", "tap", "supply", "flood"]),
    (IssueCategory.SANITATION.value, ["garbage", "waste", "trash", "sewage", "drain", "toilet", "dump"]),
    (IssueCategory.ELECTRICITY.value, ["electricity", "power", "streetlight", "street light", "transformer", "outage", "wire"]),
    (IssueCategory.ENVIRONMENT.value, ["tree", "pollution", "smoke", "noise", "burning", "park"]),
]


class KeywordClassificationProvider(ClassificationProvider):
    """
    Rule-based classifier using keyword matching.

    Deterministic and instant. Confidence grows with the number of
    matching keywords, capped at 80 since it is only a heuristic.
    """

    MODEL_NAME = "keyword-rules-v1"
    MODEL_VERSION = "1.0.0"
    TIMEOUT_SECONDS = 0.1

    def is_enabled(self) -> bool:
        return True

    def get_model_info(self) -> Dict[str, str]:
        return {
            "name": self.MODEL_NAME,
            "version": self.MODEL_VERSION
        }

    def get_timeout_seconds(self) -> float:
        return self.TIMEOUT_SECONDS

    def classify(self, title: str, description: str) -> ClassificationResult:
        try:
            text = f"{title} {description}".lower()

            for category, keywords in CATEGORY_KEYWORDS:
                hits = sum(1 for word in keywords if word in text)
                if hits:
                    return ClassificationResult(
                        category=category,
                        confidence=min(80, 40 + 15 * hits),
                        model_name=self.MODEL_NAME
                    )

            return ClassificationResult(
                category=IssueCategory.OTHER.value,
                confidence=20,
                model_name=self.MODEL_NAME
            )

        except Exception as e:
            logger.error(f"Keyword classifier error: {e}")
            return ClassificationResult.failed(str(e), self.MODEL_NAME)
