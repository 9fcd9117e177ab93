"""Pillow-backed image codec.

Turns an in-memory RGB image into PNG, JPEG or GIF bytes.  Codec and write
failures are wrapped in :class:`ImageEncodingError` and never retried.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any

from PIL import Image

from identiconctl.domain.errors import ImageEncodingError
from identiconctl.domain.types import ImageFormat
from identiconctl.infrastructure.filesystem import write_bytes_atomic

logger = logging.getLogger(__name__)

# Pillow's highest JPEG quality setting.
JPEG_QUALITY = 100

_SAVE_OPTIONS: dict[ImageFormat, dict[str, Any]] = {
    ImageFormat.PNG: {},
    ImageFormat.JPEG: {"quality": JPEG_QUALITY},
    ImageFormat.GIF: {},
}


def encode_image(image: Image.Image, fmt: ImageFormat) -> bytes:
    """Serialize *image* in *fmt*.

    Raises:
        ImageEncodingError: Pillow rejected the image or format.
    """
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=fmt.pillow_name, **_SAVE_OPTIONS[fmt])
    except (OSError, ValueError, KeyError, MemoryError) as exc:
        raise ImageEncodingError(fmt.value, str(exc)) from exc
    data = buffer.getvalue()
    logger.debug("Encoded %s image %sx%s (%d bytes)", fmt.value, *image.size, len(data))
    return data


def save_image(image: Image.Image, path: Path, fmt: ImageFormat) -> None:
    """Encode *image* and write it to *path* atomically.

    Encoding happens fully in memory before anything touches the
    filesystem, so an encoder failure leaves *path* untouched.

    Raises:
        ImageEncodingError: encoding or the write failed.
    """
    data = encode_image(image, fmt)
    try:
        write_bytes_atomic(path, data)
    except OSError as exc:
        raise ImageEncodingError(fmt.value, str(exc), path=path) from exc
    logger.debug("Wrote %s", path)
