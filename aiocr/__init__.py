from aiocr.exceptions import (
    EmptyResponseError,
    OCRError,
    UnsupportedResponseShapeError,
)
from aiocr.ocr_client import DocumentOcrClient
from aiocr.output import OutputArtifact, write_output
from aiocr.request import Content, FileReferencePart, InferenceRequest, TextPart
from aiocr.response import (
    StringPrediction,
    StructuredPrediction,
    UnrecognizedPrediction,
    classify_prediction,
    extract_prediction_text,
)
from aiocr.settings import OcrClientConfig

__all__ = [
    "DocumentOcrClient",
    "OcrClientConfig",
    "InferenceRequest",
    "Content",
    "TextPart",
    "FileReferencePart",
    "OutputArtifact",
    "write_output",
    "StructuredPrediction",
    "StringPrediction",
    "UnrecognizedPrediction",
    "classify_prediction",
    "extract_prediction_text",
    "OCRError",
    "EmptyResponseError",
    "UnsupportedResponseShapeError",
]
