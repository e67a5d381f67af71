"""Errors raised while turning a model response into OCR text.

Transport failures (``google.api_core.exceptions.GoogleAPICallError``) and
filesystem failures (``OSError``) are not wrapped; they reach the caller as
raised by the SDK or the OS.
"""

from typing import Any


class OCRError(Exception):
    """Base class for response anomalies reported by the OCR client."""


class EmptyResponseError(OCRError):
    """The call succeeded but the model returned no predictions."""

    def __init__(self, model: str = "") -> None:
        self.model = model
        suffix = f" from {model}" if model else ""
        super().__init__(f"No predictions returned{suffix}")


class UnsupportedResponseShapeError(OCRError):
    """A prediction came back in a shape the text extraction does not handle."""

    def __init__(self, prediction: Any) -> None:
        self.prediction = prediction
        super().__init__(
            f"Unexpected prediction format: {type(prediction).__name__} {prediction!r:.200}"
        )
