import pytest
from google.protobuf import json_format

from aiocr.request import (
    USER_ROLE,
    Content,
    FileReferencePart,
    InferenceRequest,
    TextPart,
)

MODEL = "projects/p/locations/europe-west9/publishers/google/models/gemini-2.0-flash-001"


@pytest.fixture
def request_() -> InferenceRequest:
    return InferenceRequest.for_document(
        model=MODEL,
        instruction_text="OCR this document.",
        document_uri="gs://bucket/register.pdf",
        mime_type="application/pdf",
    )


class TestInferenceRequest:
    """Test cases for building inference requests."""

    def test_single_user_turn(self, request_: InferenceRequest) -> None:
        """Test that the instruction precedes the document in one user turn."""
        assert request_.model == MODEL
        assert len(request_.contents) == 1
        content = request_.contents[0]
        assert content.role == USER_ROLE == "USER"
        assert content.parts == (
            TextPart(text="OCR this document."),
            FileReferencePart(mime_type="application/pdf", uri="gs://bucket/register.pdf"),
        )

    def test_request_is_immutable(self, request_: InferenceRequest) -> None:
        """Test that a built request cannot be modified."""
        with pytest.raises(AttributeError):
            request_.model = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("instruction", ["", "   "])
    def test_empty_instruction(self, instruction: str) -> None:
        """Test that a blank instruction is rejected."""
        with pytest.raises(ValueError, match="instruction_text"):
            InferenceRequest.for_document(MODEL, instruction, "gs://b/d.pdf", "application/pdf")

    def test_empty_document_uri(self) -> None:
        """Test that a missing document URI is rejected."""
        with pytest.raises(ValueError, match="document_uri"):
            InferenceRequest.for_document(MODEL, "OCR", "", "application/pdf")

    def test_empty_mime_type(self) -> None:
        """Test that a missing MIME type is rejected."""
        with pytest.raises(ValueError, match="mime_type"):
            InferenceRequest.for_document(MODEL, "OCR", "gs://b/d.pdf", "")

    def test_to_instances(self, request_: InferenceRequest) -> None:
        """Test the prediction instance wire shape."""
        instances = request_.to_instances()

        assert len(instances) == 1
        assert json_format.MessageToDict(instances[0]) == {
            "role": "USER",
            "parts": [
                {"text": "OCR this document."},
                {
                    "file_data": {
                        "mime_type": "application/pdf",
                        "file_uri": "gs://bucket/register.pdf",
                    }
                },
            ],
        }

    def test_to_generate_content_request(self, request_: InferenceRequest) -> None:
        """Test conversion to a GenerateContent request."""
        gapic_request = request_.to_generate_content_request()

        assert gapic_request.model == MODEL
        assert len(gapic_request.contents) == 1
        parts = gapic_request.contents[0].parts
        assert gapic_request.contents[0].role == "USER"
        assert parts[0].text == "OCR this document."
        assert parts[1].file_data.mime_type == "application/pdf"
        assert parts[1].file_data.file_uri == "gs://bucket/register.pdf"

    def test_content_to_dict(self) -> None:
        """Test that parts keep their order."""
        content = Content(role="USER", parts=(FileReferencePart("image/png", "gs://b/i.png"), TextPart("x")))

        assert content.to_dict()["parts"][1] == {"text": "x"}
