"""IdenticonService — render to a file or encode to base64 text.

Each operation derives an :class:`Identicon` from the name and delegates
to its ``render`` or ``to_bytes`` method, timing each stage.  Domain
exceptions become ``ServiceError`` payloads; nothing is retried and a
failed render leaves no file behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from identiconctl.domain.base64 import encode as base64_encode
from identiconctl.domain.color import RGBColor
from identiconctl.domain.errors import (
    HSLOutOfRangeError,
    ImageEncodingError,
    ImageTooLargeError,
    InvalidColorStringError,
    UnsupportedFormatError,
)
from identiconctl.domain.identicon import DEFAULT_BACKGROUND, DEFAULT_SIZE, Identicon
from identiconctl.domain.types import ImageFormat
from identiconctl.services.result import ServiceError, ServiceResult
from identiconctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _error_result(op: str, exc: Exception) -> ServiceResult:
    """Translate a domain exception into a failed ServiceResult."""
    detail: dict[str, Any]
    if isinstance(exc, HSLOutOfRangeError):
        code = "HSL_OUT_OF_RANGE"
        detail = {"field": exc.field, "value": exc.value, "max": exc.max}
    elif isinstance(exc, ImageTooLargeError):
        code = "IMAGE_TOO_LARGE"
        detail = {"size": exc.size, "side": exc.side, "reason": exc.reason}
    elif isinstance(exc, InvalidColorStringError):
        code = "INVALID_COLOR"
        detail = {"value": exc.value}
    elif isinstance(exc, UnsupportedFormatError):
        code = "UNSUPPORTED_FORMAT"
        detail = {"value": exc.value}
    elif isinstance(exc, ImageEncodingError):
        code = "IMAGE_ENCODING_FAILED"
        detail = {"format": exc.format, "reason": exc.reason}
        if exc.path is not None:
            detail["path"] = str(exc.path)
    else:
        code = "INVALID_ARGUMENT"
        detail = {}
    logger.debug("%s failed with %s: %s", op, code, exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=str(exc), detail=detail),
    )


class IdenticonService:
    """Operations on the identicon for one ``(name, size, background)`` triple."""

    def __init__(
        self,
        name: str,
        *,
        size: int = DEFAULT_SIZE,
        background: RGBColor = DEFAULT_BACKGROUND,
    ) -> None:
        self.name = name
        self.size = size
        self.background = background

    def _build(self) -> Identicon:
        with trace_span("derive") as span:
            identicon = Identicon.create(self.name, self.size, self.background)
            if span:
                span.annotate("foreground", str(identicon.foreground))
                span.annotate("painted", sum(identicon.paints))
        return identicon

    def _summary(self, identicon: Identicon) -> dict[str, Any]:
        return {
            "name": self.name,
            "size": identicon.size,
            "side": identicon.side,
            "foreground": str(identicon.foreground),
            "background": str(identicon.background),
        }

    @traced
    def render(self, path: Path) -> ServiceResult:
        """Write the identicon to *path*; the extension selects the format."""
        op = "render"
        try:
            # Reject unknown extensions before any work is done.
            ImageFormat.from_path(path)
            identicon = self._build()
            with trace_span("write") as span:
                fmt = identicon.render(path)
                if span:
                    span.annotate("format", fmt.value)
        except (ValueError, ImageEncodingError) as exc:
            return _error_result(op, exc)

        logger.debug("Rendered %r to %s", self.name, path)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "format": fmt.value, **self._summary(identicon)},
        )

    @traced
    def encode(self, fmt: ImageFormat | str) -> ServiceResult:
        """Encode the identicon in *fmt* and return it as base64 text."""
        op = "encode"
        try:
            fmt = fmt if isinstance(fmt, ImageFormat) else ImageFormat.parse(fmt)
            identicon = self._build()
            with trace_span("codec") as span:
                raw = identicon.to_bytes(fmt)
                if span:
                    span.annotate("bytes", len(raw))
            with trace_span("base64"):
                text = base64_encode(raw)
        except (ValueError, ImageEncodingError) as exc:
            return _error_result(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "format": fmt.value,
                "byte_count": len(raw),
                "encoded": text,
                **self._summary(identicon),
            },
        )
