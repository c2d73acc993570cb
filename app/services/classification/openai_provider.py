"""
OpenAI Provider for Issue Classification.

Calls the chat-completions endpoint with a fixed instruction prompt that
constrains the answer to a JSON object {"category", "confidence"}.
"""

from app.services.classification.base import (
    ClassificationProvider,
    ClassificationResult,
    normalize_category,
    normalize_confidence,
)
from app.core.exceptions import ClassificationFailure
from app.core.settings import settings
from app.models.issue import CATEGORY_VALUES
from typing import Dict, Optional
import logging
import json
import requests

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an AI assistant that categorizes civic issues. Based on the title and "
    "description provided, categorize the issue into one of these categories: "
    f"{', '.join(CATEGORY_VALUES)}. Also provide a confidence score between 0 and 100. "
    'Respond with JSON in this format: { "category": "category_name", "confidence": number }'
)


class OpenAIClassificationProvider(ClassificationProvider):
    """
    OpenAI chat-completions classifier.

    Requires OPENAI_API_KEY. Any transport, status or parsing problem is
    turned into ClassificationResult.failed().
    """

    MODEL_VERSION = "1.0"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.api_url = api_url or settings.OPENAI_API_URL
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.AI_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self.enabled = bool(self.api_key and self.api_key.strip())

        if self.enabled:
            logger.info(f"✅ OpenAI classifier initialized: {self.model}")
        else:
            logger.info("⚠️ OpenAI classifier disabled: No API key configured")

    def is_enabled(self) -> bool:
        return self.enabled

    def get_model_info(self) -> Dict[str, str]:
        return {
            "name": f"openai-{self.model}",
            "version": self.MODEL_VERSION
        }

    def get_timeout_seconds(self) -> float:
        return self.timeout_seconds

    def classify(self, title: str, description: str) -> ClassificationResult:
        """
        Classify an issue via OpenAI.

        Returns the safe fallback if the API call fails.
        Never raises exceptions.
        """
        model_name = self.get_model_info()["name"]

        if not self.enabled:
            return ClassificationResult.failed("OpenAI API key not configured", model_name)

        try:
            text = self._call_openai_api(title, description)
            parsed = self._parse_response(text)
            return ClassificationResult(
                category=normalize_category(parsed.get("category")),
                confidence=normalize_confidence(parsed.get("confidence")),
                model_name=model_name
            )
        except Exception as e:
            logger.warning(f"⚠️ OpenAI classification failed: {e}")
            return ClassificationResult.failed(f"OpenAI API error: {e}", model_name)

    def _call_openai_api(self, title: str, description: str) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Title: {title}\nDescription: {description}"}
            ],
            "response_format": {"type": "json_object"},
            "temperature": 0,
        }

        try:
            response = self.session.post(
                self.api_url,
                headers=headers,
                json=payload,
                timeout=self.timeout_seconds
            )
        except requests.Timeout:
            raise ClassificationFailure(f"OpenAI API timed out after {self.timeout_seconds}s")
        except requests.RequestException as e:
            raise ClassificationFailure(f"OpenAI API request failed: {e}")

        if response.status_code != 200:
            raise ClassificationFailure(f"OpenAI API returned status {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
            return data["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ClassificationFailure(f"Unexpected OpenAI response shape: {e}")

    def _parse_response(self, text: str) -> Dict:
        """
        Parse the model's JSON answer.

        The model may wrap JSON in markdown code fences even with
        response_format set.
        """
        if "```json" in text:
            text = text.split("```json")[1].split("```")[0].strip()
        elif "```" in text:
            text = text.split("```")[1].split("```")[0].strip()

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug(f"Response text: {text}")
            raise ClassificationFailure(f"Malformed JSON from classifier: {e}")

        if not isinstance(parsed, dict):
            raise ClassificationFailure("Classifier answer is not a JSON object")
        return parsed
