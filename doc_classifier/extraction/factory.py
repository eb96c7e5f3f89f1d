from doc_classifier.completion.client_base import BaseCompletionClient
from doc_classifier.config.settings import Settings
from doc_classifier.extraction.content_types import ContentType
from doc_classifier.extraction.csv_extractor import CsvExtractor
from doc_classifier.extraction.dispatcher import ExtractionDispatcher
from doc_classifier.extraction.fetcher import RemoteFetcher
from doc_classifier.extraction.image_extractor import ImageExtractor
from doc_classifier.extraction.pdf_extractor import PdfExtractor
from doc_classifier.extraction.spreadsheet_extractor import SpreadsheetExtractor
from doc_classifier.extraction.text_extractor import TextExtractor
from doc_classifier.extraction.word_extractor import WordExtractor
from doc_classifier.pdf.factory import PdfExtractorFactory


def build_dispatcher(
    settings: Settings,
    completion_client: BaseCompletionClient,
) -> ExtractionDispatcher:
    """Wire one extractor per content type into a dispatcher."""
    extractors = {
        ContentType.PDF: PdfExtractor(PdfExtractorFactory.create(settings)),
        ContentType.IMAGE: ImageExtractor(
            client=completion_client,
            model=settings.openai_model_name,
            max_tokens=settings.vision_max_tokens,
        ),
        ContentType.WORD: WordExtractor(),
        ContentType.SPREADSHEET: SpreadsheetExtractor(),
        ContentType.CSV: CsvExtractor(),
        ContentType.TEXT: TextExtractor(),
    }
    fetcher = RemoteFetcher(
        timeout_seconds=settings.fetch_timeout_seconds,
        max_bytes=settings.fetch_max_bytes,
    )
    return ExtractionDispatcher(extractors, fetcher)
