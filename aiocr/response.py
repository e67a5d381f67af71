"""Text extraction from Vertex AI responses.

Predictions are dynamically shaped: depending on the model they arrive as a
structure with a ``text`` field, as a bare string, or as something else.
``classify_prediction`` turns the raw value into one variant of
:data:`Prediction` so callers handle each case explicitly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence, Union

from google.protobuf import json_format, struct_pb2
from loguru import logger

from aiocr.exceptions import EmptyResponseError, UnsupportedResponseShapeError

TEXT_FIELD = "text"


@dataclass(frozen=True)
class StructuredPrediction:
    text: str


@dataclass(frozen=True)
class StringPrediction:
    value: str


@dataclass(frozen=True)
class UnrecognizedPrediction:
    raw: Any


Prediction = Union[StructuredPrediction, StringPrediction, UnrecognizedPrediction]


def _to_native(value: Any) -> Any:
    # The SDK usually marshals google.protobuf.Value into dicts and strings
    # already, but raw messages can still reach us.
    if isinstance(value, struct_pb2.Value):
        return json_format.MessageToDict(value)
    return value


def classify_prediction(value: Any) -> Prediction:
    native = _to_native(value)
    if isinstance(native, Mapping):
        text = native.get(TEXT_FIELD)
        if isinstance(text, str):
            return StructuredPrediction(text=text)
        return UnrecognizedPrediction(raw=native)
    if isinstance(native, str):
        return StringPrediction(value=native)
    return UnrecognizedPrediction(raw=native)


def extract_prediction_text(predictions: Sequence[Any], model: str = "") -> str:
    """Return the OCR text carried by the first prediction.

    Raises:
        EmptyResponseError: If there are no predictions.
        UnsupportedResponseShapeError: If the first prediction is neither a
            structure with a string ``text`` field nor a string.
    """
    if not predictions:
        logger.error(f"No predictions returned from {model or 'model'}")
        raise EmptyResponseError(model)

    prediction = classify_prediction(predictions[0])
    if isinstance(prediction, StructuredPrediction):
        return prediction.text
    if isinstance(prediction, StringPrediction):
        return prediction.value
    logger.error(f"Unexpected prediction format from {model or 'model'}: {type(prediction.raw).__name__}")
    raise UnsupportedResponseShapeError(prediction.raw)


def extract_candidate_text(response: Any, model: str = "") -> str:
    """Return the first text part of the first candidate of a GenerateContent response."""
    candidates = list(response.candidates)
    if not candidates or not candidates[0].content.parts:
        logger.error(f"No candidates returned from {model or 'model'}")
        raise EmptyResponseError(model)
    return candidates[0].content.parts[0].text
