import time

import httpx

from doc_classifier.extraction.exceptions import FetchError
from doc_classifier.extraction.models import FetchedDocument
from doc_classifier.logging.logger import Log


class RemoteFetcher:
    """Downloads a document over HTTP with a wall-clock deadline and a size cap.

    Each URL is requested exactly once; failures are never retried.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        max_bytes: int = 50 * 1024 * 1024,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._max_bytes = max_bytes
        self._transport = transport

    def fetch(self, url: str) -> FetchedDocument:
        Log.info(f"Downloading document from URL: {url}")
        deadline = time.monotonic() + self._timeout_seconds
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    self._check_declared_length(response)
                    content = self._read_capped(response, deadline)
                    mime_type = response.headers.get("content-type")
        except httpx.TimeoutException as exc:
            raise FetchError(
                f"Download timed out after {self._timeout_seconds:g}s: {url}"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Could not download the document from URL: "
                f"server responded with HTTP {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"Could not download the document from URL: {exc}") from exc

        Log.info(f"Download completed. Type: {mime_type}, Size: {len(content)} bytes")
        return FetchedDocument(content=content, mime_type=mime_type, url=url)

    def _check_declared_length(self, response: httpx.Response) -> None:
        declared = response.headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self._max_bytes:
            raise FetchError(
                f"Remote document is {int(declared)} bytes, "
                f"maximum allowed is {self._max_bytes} bytes"
            )

    def _read_capped(self, response: httpx.Response, deadline: float) -> bytes:
        buf = bytearray()
        for chunk in response.iter_bytes():
            buf.extend(chunk)
            if len(buf) > self._max_bytes:
                raise FetchError(
                    f"Remote document exceeds maximum allowed size of {self._max_bytes} bytes"
                )
            if time.monotonic() > deadline:
                raise FetchError(
                    f"Download timed out after {self._timeout_seconds:g}s: {response.url}"
                )
        return bytes(buf)
