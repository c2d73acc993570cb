"""Tests for image upload handling."""

import os

import pytest
from PIL import Image

from app.core.exceptions import ValidationError
from app.services.media_service import MediaService

from conftest import make_image_bytes


def stored_path(media_service, locator):
    return os.path.join(media_service.upload_dir, locator.rsplit("/", 1)[1])


class TestSaveImage:

    def test_stores_file_and_returns_locator(self, media_service):
        locator = media_service.save_image(make_image_bytes(fmt="JPEG"), "pothole.JPG", "image/jpeg")

        assert locator.startswith("/uploads/")
        assert locator.endswith(".jpg")
        with Image.open(stored_path(media_service, locator)) as stored:
            assert stored.format == "JPEG"
            assert stored.size == (64, 48)

    def test_png_with_alpha_is_reencoded_as_jpeg(self, media_service):
        data = make_image_bytes(fmt="PNG", mode="RGBA")
        locator = media_service.save_image(data, "drain.png", "image/png")

        assert locator.endswith(".jpg")
        with Image.open(stored_path(media_service, locator)) as stored:
            assert stored.format == "JPEG"
            assert stored.mode == "RGB"

    def test_gif_accepted(self, media_service):
        data = make_image_bytes(fmt="GIF", mode="P", color=3)
        locator = media_service.save_image(data, "streetlight.gif", "image/gif")
        with Image.open(stored_path(media_service, locator)) as stored:
            assert stored.format == "JPEG"

    def test_large_image_shrinks_to_fit(self, tmp_path):
        service = MediaService(upload_dir=str(tmp_path / "uploads"), max_bytes=10 * 1024 * 1024, max_dimension=100)
        locator = service.save_image(make_image_bytes(size=(400, 200)), "wide.png", "image/png")

        with Image.open(stored_path(service, locator)) as stored:
            assert stored.size == (100, 50)

    def test_small_image_not_enlarged(self, tmp_path):
        service = MediaService(upload_dir=str(tmp_path / "uploads"), max_dimension=100)
        locator = service.save_image(make_image_bytes(size=(30, 20)), "small.png", "image/png")

        with Image.open(stored_path(service, locator)) as stored:
            assert stored.size == (30, 20)

    def test_unique_names(self, media_service):
        data = make_image_bytes()
        first = media_service.save_image(data, "x.png", "image/png")
        second = media_service.save_image(data, "x.png", "image/png")
        assert first != second

    @pytest.mark.parametrize("filename,content_type", [
        ("notes.txt", "text/plain"),
        ("photo.jpg", "application/pdf"),
        ("photo.pdf", "image/jpeg"),
        ("photo", "image/jpeg"),
    ])
    def test_rejects_non_images(self, media_service, filename, content_type):
        with pytest.raises(ValidationError):
            media_service.save_image(make_image_bytes(), filename, content_type)

    def test_rejects_bytes_that_are_not_an_image(self, media_service):
        with pytest.raises(ValidationError) as exc_info:
            media_service.save_image(b"\xff\xd8\xff\xe0not really a jpeg", "pothole.jpg", "image/jpeg")
        assert "not a valid image" in str(exc_info.value)
        assert not os.path.exists(media_service.upload_dir)

    def test_rejects_oversized(self, media_service):
        with pytest.raises(ValidationError) as exc_info:
            media_service.save_image(b"x" * (64 * 1024 + 1), "big.png", "image/png")
        assert "too large" in str(exc_info.value)

    def test_rejects_empty(self, media_service):
        with pytest.raises(ValidationError):
            media_service.save_image(b"", "empty.gif", "image/gif")

    def test_nothing_written_on_rejection(self, media_service):
        with pytest.raises(ValidationError):
            media_service.save_image(b"data", "notes.txt", "text/plain")
        assert not os.path.exists(media_service.upload_dir)
