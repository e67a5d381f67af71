from pathlib import Path

import pytest
from pytest import MonkeyPatch

from aiocr.settings import OcrClientConfig

CONFIG_ENV_VARS = [
    "GOOGLE_CLOUD_PROJECT",
    "GOOGLE_CLOUD_LOCATION",
    "OCR_MODEL",
    "OCR_OUTPUT_DIR",
    "OCR_SOURCE_URI",
    "OCR_MIME_TYPE",
    "OCR_REQUEST_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch: MonkeyPatch) -> MonkeyPatch:
    """Remove OCR settings that a developer's environment or .env may carry."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def signed_uri() -> str:
    return "https://example.blob.core.windows.net/test-files/register.pdf?sp=r&sig=secret"


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "outputs"


@pytest.fixture
def config(output_dir: Path, clean_env: MonkeyPatch, signed_uri: str) -> OcrClientConfig:
    return OcrClientConfig(
        project_id="test-project",
        location="europe-west9",
        model="gemini-2.0-flash-001",
        output_directory=str(output_dir),
        source_uri=signed_uri,
        mime_type="application/pdf",
    )
