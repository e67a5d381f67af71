import asyncio

from aiocr import DocumentOcrClient, OcrClientConfig


async def main():
    # Project, location and source document are loaded from .env when omitted:
    # GOOGLE_CLOUD_PROJECT, GOOGLE_CLOUD_LOCATION, OCR_SOURCE_URI
    client = DocumentOcrClient(
        OcrClientConfig(
            location="europe-west9",  # Paris
            model="gemini-2.0-flash-001",
            output_directory="./outputs",
        )
    )

    try:
        path = await client.execute_async()
        print(f"OCR result saved to: {path}")

        # The same document through the GenerateContent API
        # text = await client.generate_content_async("Transcribe this document.")
        # print(text)
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
