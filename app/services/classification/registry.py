"""
Classification Registry.

Selects the classifier from configuration and is the single entry point
for categorization. Whatever goes wrong, categorize() returns a result.
"""

from app.services.classification.base import (
    ClassificationProvider,
    ClassificationResult,
    normalize_category,
    normalize_confidence,
)
from app.services.classification.keyword_provider import KeywordClassificationProvider
from app.services.classification.openai_provider import OpenAIClassificationProvider
from app.core.settings import settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ClassificationRegistry:
    """
    Holds the active classifier.

    Provider choice:
    - AI_ENABLED=false            -> no provider, every call returns the fallback
    - OPENAI_API_KEY configured   -> OpenAI
    - otherwise                   -> keyword rules
    """

    def __init__(self, provider: Optional[ClassificationProvider] = None):
        self.provider: Optional[ClassificationProvider] = provider
        if provider is None:
            self._initialize_provider()

    def _initialize_provider(self):
        if not settings.AI_ENABLED:
            logger.info("⚠️ AI classification is disabled globally (AI_ENABLED=false)")
            self.provider = None
            return

        try:
            openai_provider = OpenAIClassificationProvider()
            if openai_provider.is_enabled():
                self.provider = openai_provider
                logger.info("✅ OpenAI classifier registered")
                return
        except Exception as e:
            logger.warning(f"⚠️ Failed to initialize OpenAI classifier: {e}")

        self.provider = KeywordClassificationProvider()
        logger.info("✅ Keyword classifier registered (no OpenAI key)")

    def categorize(self, title: str, description: str) -> ClassificationResult:
        """
        Suggest a category for an issue.

        Never raises. On any failure returns category 'other' with
        confidence 0 and fallback=True.
        """
        if self.provider is None:
            return ClassificationResult.failed("AI classification disabled")

        model_name = ""
        try:
            model_name = self.provider.get_model_info().get("name", "")
            result = self.provider.classify(title, description)
        except Exception as e:
            logger.error(f"⚠️ Classification exception ({model_name or 'unknown provider'}): {e}")
            return ClassificationResult.failed(str(e), model_name)

        if result.fallback or result.error:
            logger.warning(f"⚠️ Classification failed ({model_name}): {result.error}")
            return ClassificationResult.failed(result.error or "unknown error", model_name)

        result.category = normalize_category(result.category)
        result.confidence = normalize_confidence(result.confidence)
        logger.info(f"✅ Classified as {result.category} ({result.confidence}%) using {model_name}")
        return result


# Global registry instance (singleton)
_registry: Optional[ClassificationRegistry] = None


def get_classification_registry() -> ClassificationRegistry:
    global _registry
    if _registry is None:
        _registry = ClassificationRegistry()
    return _registry


def set_classification_registry(registry: Optional[ClassificationRegistry]) -> None:
    """Swap the registry (None resets to lazy creation from settings)."""
    global _registry
    _registry = registry


def categorize(title: str, description: str) -> ClassificationResult:
    """
    Main entry point for issue categorization.

    Example:
        result = categorize(issue["title"], issue["description"])
        if not result.fallback:
            ...apply result.category / result.confidence
    """
    return get_classification_registry().categorize(title, description)
