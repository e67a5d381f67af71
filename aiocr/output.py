"""Persisting OCR results."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from loguru import logger


@dataclass(frozen=True)
class OutputArtifact:
    path: str
    content: str

    def write(self) -> str:
        """Write the content as UTF-8, replacing any existing file.

        The parent directory is created when missing. Filesystem errors are
        left to the caller.
        """
        target = Path(self.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.content, encoding="utf-8")
        logger.debug(f"Wrote {len(self.content)} characters to {self.path}")
        return self.path


def write_output(output_directory: str, output_file_name: str, content: str) -> str:
    """Write ``content`` to ``<output_directory>/<output_file_name>`` and return the path."""
    if not output_file_name:
        raise ValueError("output_file_name must not be empty")
    return OutputArtifact(path=os.path.join(output_directory, output_file_name), content=content).write()
