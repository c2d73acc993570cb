"""Shared fixtures: in-memory store, deterministic clock, stub classifiers."""

from datetime import datetime, timedelta, timezone
from io import BytesIO
from typing import Dict

import pytest
from PIL import Image

from app.services.analytics_service import AnalyticsService
from app.services.classification import ClassificationProvider, ClassificationRegistry, ClassificationResult
from app.services.comment_service import CommentService
from app.services.issue_service import IssueService
from app.services.media_service import MediaService
from app.storage import MemoryRecordStore


class FakeClock:
    """Returns a strictly increasing time, one step per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc), step_seconds: int = 1):
        self.current = start
        self.step = timedelta(seconds=step_seconds)

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


class StubProvider(ClassificationProvider):
    """Classifier returning a fixed answer and recording its calls."""

    def __init__(self, category="roads", confidence=87):
        self.category = category
        self.confidence = confidence
        self.calls = []

    def is_enabled(self) -> bool:
        return True

    def get_model_info(self) -> Dict[str, str]:
        return {"name": "stub", "version": "0"}

    def get_timeout_seconds(self) -> float:
        return 0.0

    def classify(self, title, description):
        self.calls.append((title, description))
        return ClassificationResult(category=self.category, confidence=self.confidence, model_name="stub")


class ExplodingProvider(StubProvider):
    """Classifier whose upstream call always blows up."""

    def classify(self, title, description):
        self.calls.append((title, description))
        raise ConnectionError("network unreachable")


def make_image_bytes(size=(64, 48), fmt="PNG", mode="RGB", color=(200, 120, 40)):
    """Encode a solid-colour test image."""
    buffer = BytesIO()
    if mode == "RGBA":
        color = color + (128,)
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


VALID_ISSUE = {
    "title": "Pothole on MG Road",
    "description": "Large pothole near the bus stop, bikes swerving into traffic.",
    "category": "roads",
    "priority": "high",
    "state": "kerala",
    "district": "ernakulam",
    "location": "MG Road, opposite KSRTC stand",
}


@pytest.fixture
def issue_data():
    return dict(VALID_ISSUE)


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stub_provider():
    return StubProvider()


@pytest.fixture
def issue_service(store, clock, stub_provider):
    return IssueService(store=store, classifier=ClassificationRegistry(provider=stub_provider), clock=clock)


@pytest.fixture
def comment_service(store, clock):
    return CommentService(store=store, clock=clock)


@pytest.fixture
def analytics_service(store):
    return AnalyticsService(store=store)


@pytest.fixture
def media_service(tmp_path):
    return MediaService(upload_dir=str(tmp_path / "uploads"), max_bytes=64 * 1024)
