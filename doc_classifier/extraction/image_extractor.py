import base64
import time

from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.extraction.base import BaseExtractor
from doc_classifier.extraction.content_types import normalize_mime
from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.logging.logger import Log
from doc_classifier.tracing.session import TraceSession, preview

VISION_SYSTEM_PROMPT = (
    "You are an expert in image analysis and text extraction. Extract ALL the "
    "text you can see in the image, verbatim. If the image contains no text, "
    "describe its visual content in detail instead. Respond in the language of "
    "any text found. If the image is an invoice, receipt, letter or other "
    "document, include all important data such as dates, numbers and names."
)


class ImageExtractor(BaseExtractor):
    """Reads images by sending them to a vision-capable chat model."""

    method = "Vision Model"
    trace_step = "extract_text_vision"

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        max_tokens: int = 2000,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens

    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        image_mime = normalize_mime(mime_type) or "image/png"
        encoded = base64.b64encode(content).decode("ascii")
        messages: list[dict[str, object]] = [
            {"role": "system", "content": VISION_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:{image_mime};base64,{encoded}"},
                    }
                ],
            },
        ]
        trace_input = {"image_size": len(encoded), "mime_type": image_mime, "model": self._model}

        Log.info(f"Sending {len(content)} byte image to {self._model} for vision analysis")
        started = time.monotonic()
        try:
            text = self._client.create_chat_completion(
                model=self._model,
                temperature=0.0,
                messages=messages,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            trace.record("vision_analysis", trace_input, error=str(exc))
            raise

        trace.record(
            "vision_analysis",
            trace_input,
            output={
                "extracted_content": preview(text),
                "content_length": len(text),
                "processing_time_ms": round((time.monotonic() - started) * 1000),
            },
        )
        return ExtractedContent(text=text)
