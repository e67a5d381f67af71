"""Configuration for the Vertex AI document OCR client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

VERTEX_PROVIDER = "VertexAI"
VERTEX_API_HOST = "aiplatform.googleapis.com"
VERTEX_PUBLISHER = "google"

DEFAULT_LOCATION = "us-central1"
DEFAULT_MODEL = "gemini-2.0-flash-001"
DEFAULT_OUTPUT_DIR = "./outputs"
DEFAULT_MIME_TYPE = "application/pdf"
DEFAULT_OUTPUT_FILE_NAME = "ocr_document.pdf"
DEFAULT_OCR_PROMPT = (
    "Return a copy of the following documents but as an OCR'd document "
    "so that I can select the text from it."
)


def mask_sensitive_string(value: Optional[str], visible_chars: int = 4) -> str:
    """Mask everything but the first ``visible_chars`` characters."""
    if not value:
        return ""
    if len(value) <= visible_chars:
        return value
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


def mask_uri(uri: Optional[str]) -> str:
    """Keep the location of a URI readable but hide its query string.

    Signed URLs carry their access token in the query.
    """
    if not uri:
        return ""
    base, sep, query = uri.partition("?")
    if not sep:
        return uri
    return f"{base}?{mask_sensitive_string(query, visible_chars=0)}"


def validate_required_config(name: str, value: Any, provider: str) -> None:
    if not value:
        raise ValueError(f"Missing required configuration '{name}' for {provider}")


def _env_timeout() -> Optional[float]:
    raw = os.getenv("OCR_REQUEST_TIMEOUT", "")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"OCR_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}") from e


@dataclass
class OcrClientConfig:
    """Settings for :class:`aiocr.ocr_client.DocumentOcrClient`.

    Every field falls back to an environment variable when not passed
    explicitly. All string options are required; ``request_timeout`` is
    optional and bounds each outbound call in seconds.
    """

    project_id: str = field(default_factory=lambda: os.getenv("GOOGLE_CLOUD_PROJECT", ""))
    location: str = field(default_factory=lambda: os.getenv("GOOGLE_CLOUD_LOCATION", DEFAULT_LOCATION))
    model: str = field(default_factory=lambda: os.getenv("OCR_MODEL", DEFAULT_MODEL))
    output_directory: str = field(default_factory=lambda: os.getenv("OCR_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
    source_uri: str = field(default_factory=lambda: os.getenv("OCR_SOURCE_URI", ""))
    mime_type: str = field(default_factory=lambda: os.getenv("OCR_MIME_TYPE", DEFAULT_MIME_TYPE))
    request_timeout: Optional[float] = field(default_factory=_env_timeout)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self, provider: str = VERTEX_PROVIDER) -> None:
        for name in (
            "project_id",
            "location",
            "model",
            "output_directory",
            "source_uri",
            "mime_type",
        ):
            validate_required_config(name, getattr(self, name), provider)
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")

    @property
    def api_endpoint(self) -> str:
        """Regional Vertex AI host, e.g. ``europe-west9-aiplatform.googleapis.com``."""
        return f"{self.location}-{VERTEX_API_HOST}"

    @property
    def model_resource_name(self) -> str:
        return (
            f"projects/{self.project_id}/locations/{self.location}"
            f"/publishers/{VERTEX_PUBLISHER}/models/{self.model}"
        )
