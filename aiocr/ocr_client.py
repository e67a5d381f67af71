"""Document OCR through Vertex AI generative models.

The OCR itself runs on the remote model. This module shapes the request,
makes one call, pulls the text out of the response and writes it to disk.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from google.api_core.client_options import ClientOptions
from google.cloud.aiplatform_v1 import (
    PredictionServiceAsyncClient,
    PredictionServiceClient,
    PredictRequest,
)
from loguru import logger

from aiocr.output import write_output
from aiocr.request import InferenceRequest
from aiocr.response import extract_candidate_text, extract_prediction_text
from aiocr.settings import (
    DEFAULT_OCR_PROMPT,
    DEFAULT_OUTPUT_FILE_NAME,
    OcrClientConfig,
    mask_uri,
)


class DocumentOcrClient:
    """OCR a remotely hosted document with a Vertex AI model.

    Example::

        import asyncio
        from aiocr import DocumentOcrClient, OcrClientConfig

        async def main():
            client = DocumentOcrClient(
                OcrClientConfig(
                    project_id="my-project",
                    location="europe-west9",
                    source_uri="gs://my-bucket/register.pdf",
                )
            )
            try:
                path = await client.request_ocr_async("Transcribe this document.")
            finally:
                await client.aclose()
            print(path)

        asyncio.run(main())

    No call is retried. Response anomalies raise
    :class:`~aiocr.exceptions.EmptyResponseError` or
    :class:`~aiocr.exceptions.UnsupportedResponseShapeError`; transport and
    filesystem errors propagate as raised.
    """

    def __init__(self, config: Optional[OcrClientConfig] = None) -> None:
        self.config = config or OcrClientConfig()
        self._client: Any = None
        self._aclient: Any = None

        logger.debug(
            f"Using {self.__class__.__name__}\n"
            f"Endpoint: {self.config.api_endpoint}\n"
            f"Model: {self.config.model_resource_name}\n"
            f"Output directory: {self.config.output_directory}\n"
        )

    @property
    def client(self) -> PredictionServiceClient:
        if self._client is None:
            self._client = PredictionServiceClient(
                client_options=ClientOptions(api_endpoint=self.config.api_endpoint)
            )
        return self._client

    @property
    def aclient(self) -> PredictionServiceAsyncClient:
        if self._aclient is None:
            self._aclient = PredictionServiceAsyncClient(
                client_options=ClientOptions(api_endpoint=self.config.api_endpoint)
            )
        return self._aclient

    async def aclose(self) -> None:
        """Close the async gRPC transport before the event loop shuts down."""
        if self._aclient is not None:
            await self._aclient.transport.close()
            self._aclient = None

    def close(self) -> None:
        """Close the sync gRPC transport."""
        if self._client is not None:
            self._client.transport.close()
            self._client = None

    def build_request(
        self,
        instruction_text: str,
        document_uri: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> InferenceRequest:
        """Build the request, falling back to the configured document and MIME type."""
        return InferenceRequest.for_document(
            model=self.config.model_resource_name,
            instruction_text=instruction_text,
            document_uri=document_uri or self.config.source_uri,
            mime_type=mime_type or self.config.mime_type,
        )

    def _predict_request(self, request: InferenceRequest) -> PredictRequest:
        predict_request = PredictRequest(endpoint=request.model)
        # Repeated Value fields do not accept a list in the constructor.
        predict_request.instances.extend(request.to_instances())
        return predict_request

    def _log_request(self, request: InferenceRequest, document_uri: Optional[str]) -> None:
        logger.debug(
            f"Requesting OCR from {request.model} for "
            f"{mask_uri(document_uri or self.config.source_uri)}"
        )

    def _timeout(self, timeout: Optional[float]) -> Optional[float]:
        return timeout if timeout is not None else self.config.request_timeout

    def _save(self, text: str, output_file_name: str) -> str:
        path = write_output(self.config.output_directory, output_file_name, text)
        logger.info(f"OCR result saved to: {path}")
        return path

    async def request_ocr_async(
        self,
        instruction_text: str,
        document_uri: Optional[str] = None,
        mime_type: Optional[str] = None,
        output_file_name: str = DEFAULT_OUTPUT_FILE_NAME,
        timeout: Optional[float] = None,
    ) -> str:
        """OCR a document and write the text to the output directory.

        Args:
            instruction_text: Natural language instruction for the model.
            document_uri: URI the remote service can fetch. Defaults to the
                configured ``source_uri``.
            mime_type: MIME type of the document. Defaults to the configured one.
            output_file_name: Name of the file written under the output directory.
            timeout: Seconds to wait for the model before the call is aborted
                with ``asyncio.TimeoutError``. Defaults to the configured
                ``request_timeout``; ``None`` waits indefinitely.

        Returns:
            Path of the written file.
        """
        request = self.build_request(instruction_text, document_uri, mime_type)
        self._log_request(request, document_uri)

        call = self.aclient.predict(request=self._predict_request(request), retry=None)
        response = await asyncio.wait_for(call, timeout=self._timeout(timeout))

        text = extract_prediction_text(response.predictions, model=self.config.model)
        return self._save(text, output_file_name)

    def request_ocr(
        self,
        instruction_text: str,
        document_uri: Optional[str] = None,
        mime_type: Optional[str] = None,
        output_file_name: str = DEFAULT_OUTPUT_FILE_NAME,
        timeout: Optional[float] = None,
    ) -> str:
        """Synchronous :meth:`request_ocr_async`; a timeout surfaces as ``DeadlineExceeded``."""
        request = self.build_request(instruction_text, document_uri, mime_type)
        self._log_request(request, document_uri)

        response = self.client.predict(
            request=self._predict_request(request),
            retry=None,
            timeout=self._timeout(timeout),
        )

        text = extract_prediction_text(response.predictions, model=self.config.model)
        return self._save(text, output_file_name)

    async def generate_content_async(
        self,
        instruction_text: str,
        document_uri: Optional[str] = None,
        mime_type: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """Send the same request through the GenerateContent API and return the text.

        Nothing is written to disk.
        """
        request = self.build_request(instruction_text, document_uri, mime_type)
        self._log_request(request, document_uri)

        call = self.aclient.generate_content(request=request.to_generate_content_request(), retry=None)
        response = await asyncio.wait_for(call, timeout=self._timeout(timeout))
        return extract_candidate_text(response, model=self.config.model)

    async def execute_async(self, output_file_name: str = DEFAULT_OUTPUT_FILE_NAME) -> str:
        """OCR the configured source document with the default instruction."""
        return await self.request_ocr_async(DEFAULT_OCR_PROMPT, output_file_name=output_file_name)
