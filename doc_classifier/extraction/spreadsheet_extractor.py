"""Workbook to text conversion.

Every sheet becomes a CSV block headed by ``--- Sheet: <name> ---``; blocks are
joined with a blank line in workbook order. The workbook flavour is detected
from the file signature, so CSV served under a spreadsheet MIME type still
reads as a single-sheet workbook.
"""

import csv
import io

import openpyxl
import xlrd

from doc_classifier.extraction.base import OLE2_SIGNATURE, BaseExtractor
from doc_classifier.extraction.models import ExtractedContent
from doc_classifier.extraction.tabular import rows_to_csv
from doc_classifier.logging.logger import Log
from doc_classifier.tracing.session import TraceSession

XLSX_SIGNATURE = b"PK\x03\x04"
XLS_SIGNATURE = OLE2_SIGNATURE
DELIMITED_SHEET_NAME = "Sheet1"

Sheet = tuple[str, list[list[object]]]


def sheet_header(name: str) -> str:
    return f"--- Sheet: {name} ---"


class SpreadsheetExtractor(BaseExtractor):
    method = "Excel Parser"
    trace_step = "extract_text_excel"

    def extract(
        self,
        content: bytes,
        mime_type: str | None,
        trace: TraceSession,
    ) -> ExtractedContent:
        sheets = self._read_sheets(content)
        blocks = []
        for index, (name, rows) in enumerate(sheets, start=1):
            sheet_text = rows_to_csv(rows)
            Log.debug(f"Sheet {index}/{len(sheets)} ({name}): {len(sheet_text)} characters")
            blocks.append(f"{sheet_header(name)}\n{sheet_text}")
        Log.info(f"Spreadsheet processed: {len(sheets)} sheets")
        return ExtractedContent(text="\n\n".join(blocks))

    def _read_sheets(self, content: bytes) -> list[Sheet]:
        if content.startswith(XLSX_SIGNATURE):
            return self._read_xlsx(content)
        if content.startswith(XLS_SIGNATURE):
            return self._read_xls(content)
        return self._read_delimited(content)

    @staticmethod
    def _read_xlsx(content: bytes) -> list[Sheet]:
        workbook = openpyxl.load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        try:
            return [
                (sheet.title, [list(row) for row in sheet.iter_rows(values_only=True)])
                for sheet in workbook.worksheets
            ]
        finally:
            workbook.close()

    @staticmethod
    def _read_xls(content: bytes) -> list[Sheet]:
        workbook = xlrd.open_workbook(file_contents=content)

        def value(cell: xlrd.sheet.Cell) -> object:
            # xlrd stores dates as float serials relative to the workbook epoch.
            if cell.ctype == xlrd.XL_CELL_DATE:
                return xlrd.xldate_as_datetime(cell.value, workbook.datemode)
            if cell.ctype == xlrd.XL_CELL_BOOLEAN:
                return bool(cell.value)
            return cell.value

        return [
            (sheet.name, [[value(cell) for cell in sheet.row(i)] for i in range(sheet.nrows)])
            for sheet in workbook.sheets()
        ]

    @staticmethod
    def _read_delimited(content: bytes) -> list[Sheet]:
        text = content.decode("utf-8-sig")
        rows: list[list[object]] = [list(row) for row in csv.reader(io.StringIO(text, newline=""))]
        return [(DELIMITED_SHEET_NAME, rows)]
