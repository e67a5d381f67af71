"""Multimodal inference request model.

A request carries ordered content items, each holding ordered parts. A part is
either instruction text or a reference to a file the remote service fetches
itself. The same request renders to both Vertex AI integration styles: a
``Value`` instance for ``PredictionService.Predict`` and a
``GenerateContentRequest`` for ``PredictionService.GenerateContent``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from google.cloud.aiplatform_v1 import (
    Content as GapicContent,
    FileData,
    GenerateContentRequest,
    Part as GapicPart,
)
from google.protobuf import json_format, struct_pb2

USER_ROLE = "USER"


@dataclass(frozen=True)
class TextPart:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text}

    def to_gapic(self) -> GapicPart:
        return GapicPart(text=self.text)


@dataclass(frozen=True)
class FileReferencePart:
    """A document the remote service dereferences by URI."""

    mime_type: str
    uri: str

    def to_dict(self) -> Dict[str, Any]:
        return {"file_data": {"mime_type": self.mime_type, "file_uri": self.uri}}

    def to_gapic(self) -> GapicPart:
        return GapicPart(file_data=FileData(mime_type=self.mime_type, file_uri=self.uri))


Part = Union[TextPart, FileReferencePart]


@dataclass(frozen=True)
class Content:
    role: str
    parts: Tuple[Part, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "parts": [part.to_dict() for part in self.parts]}

    def to_gapic(self) -> GapicContent:
        return GapicContent(role=self.role, parts=[part.to_gapic() for part in self.parts])


@dataclass(frozen=True)
class InferenceRequest:
    """An immutable request addressed to one model."""

    model: str
    contents: Tuple[Content, ...]

    @classmethod
    def for_document(
        cls,
        model: str,
        instruction_text: str,
        document_uri: str,
        mime_type: str,
    ) -> "InferenceRequest":
        """Build a single user turn: the instruction first, then the document.

        Raises:
            ValueError: If any of the inputs is empty.
        """
        if not instruction_text or not instruction_text.strip():
            raise ValueError("instruction_text must not be empty")
        if not document_uri:
            raise ValueError("document_uri must not be empty")
        if not mime_type:
            raise ValueError("mime_type must not be empty")
        parts: Tuple[Part, ...] = (
            TextPart(text=instruction_text),
            FileReferencePart(mime_type=mime_type, uri=document_uri),
        )
        return cls(model=model, contents=(Content(role=USER_ROLE, parts=parts),))

    def to_instances(self) -> List[struct_pb2.Value]:
        """One prediction instance per content item."""
        return [json_format.ParseDict(content.to_dict(), struct_pb2.Value()) for content in self.contents]

    def to_generate_content_request(self) -> GenerateContentRequest:
        return GenerateContentRequest(
            model=self.model,
            contents=[content.to_gapic() for content in self.contents],
        )
