"""
Media Service - stores images attached to issue submissions.

Runs synchronously before the issue is created: the issue record needs
the final locator, so a failed upload fails the submission.

Every accepted image is decoded, shrunk to fit MAX_IMAGE_DIMENSION on both
sides (never enlarged) and re-encoded as JPEG.
"""

from app.core.exceptions import ValidationError
from app.core.settings import settings
from datetime import datetime, timezone
from io import BytesIO
from PIL import Image, UnidentifiedImageError
from typing import Optional
import logging
import os
import uuid

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}
URL_PREFIX = "/uploads"
STORED_EXTENSION = ".jpg"


class MediaService:
    """Writes uploaded images to UPLOAD_DIR and returns their public locator."""

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        max_bytes: Optional[int] = None,
        max_dimension: Optional[int] = None,
        jpeg_quality: Optional[int] = None
    ):
        self.upload_dir = upload_dir or settings.UPLOAD_DIR
        self.max_bytes = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES
        self.max_dimension = max_dimension or settings.MAX_IMAGE_DIMENSION
        self.jpeg_quality = jpeg_quality or settings.IMAGE_JPEG_QUALITY

    def validate_image(self, data: bytes, filename: str, content_type: Optional[str]) -> str:
        """
        Check type and size of an upload.

        Returns:
            The normalized file extension

        Raises:
            ValidationError: If the file is empty, too large or not an image
        """
        ext = os.path.splitext(filename or "")[1].lower()
        if ext not in ALLOWED_EXTENSIONS or (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
            raise ValidationError("Only image files are allowed (jpeg, jpg, png, gif)")

        if not data:
            raise ValidationError("Uploaded image is empty")

        if len(data) > self.max_bytes:
            raise ValidationError(
                f"Image is too large ({len(data)} bytes). Maximum is {self.max_bytes} bytes."
            )

        return ext

    def process_image(self, data: bytes) -> Image.Image:
        """
        Decode the upload and shrink it to fit the configured bounding box.

        Raises:
            ValidationError: If the bytes are not a readable image
        """
        try:
            image = Image.open(BytesIO(data))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise ValidationError(f"Uploaded file is not a valid image: {e}")

        # JPEG has no alpha or palette modes
        if image.mode != "RGB":
            image = image.convert("RGB")

        image.thumbnail((self.max_dimension, self.max_dimension))
        return image

    def save_image(self, data: bytes, filename: str, content_type: Optional[str]) -> str:
        """
        Persist an uploaded image.

        Returns:
            Locator like /uploads/<uuid>-<timestamp>.jpg
        """
        self.validate_image(data, filename, content_type)
        image = self.process_image(data)

        os.makedirs(self.upload_dir, exist_ok=True)
        ts = int(datetime.now(timezone.utc).timestamp() * 1000)
        stored_name = f"{uuid.uuid4()}-{ts}{STORED_EXTENSION}"
        path = os.path.join(self.upload_dir, stored_name)

        try:
            image.save(path, "JPEG", quality=self.jpeg_quality)
        except OSError as e:
            logger.error(f"Failed to write upload {path}: {e}", exc_info=True)
            raise

        logger.info(f"Stored image {stored_name} ({image.width}x{image.height}, from {len(data)} bytes)")
        return f"{URL_PREFIX}/{stored_name}"


# Global service instance
_media_service = None


def get_media_service() -> MediaService:
    """Get or create MediaService singleton."""
    global _media_service
    if _media_service is None:
        _media_service = MediaService()
    return _media_service
