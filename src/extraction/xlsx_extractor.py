# src/extraction/xlsx_extractor.py — v1
"""Spreadsheet extractor using openpyxl.

Every sheet, row and cell is flattened to text: cells separated by a space,
rows by a newline. Values are rendered with ``str()``; dates and numbers get
no locale- or type-aware formatting. Requires the 'openpyxl' package.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docinsight.core.errors import ExcelExtractionError
from docinsight.extraction.base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class SpreadsheetExtractor(BaseExtractor):
    """Extractor for Excel workbooks (.xlsx; legacy .xls fails cleanly)."""

    error_cls = ExcelExtractionError
    family = "spreadsheet"

    @property
    def supported_extensions(self) -> list[str]:
        return ["xlsx", "xls"]

    def extract_text(self, path: Path) -> str:
        try:
            import openpyxl
        except ImportError as e:
            raise ImportError(
                "openpyxl package required for spreadsheet extraction: "
                "pip install openpyxl"
            ) from e

        workbook = openpyxl.load_workbook(str(path), read_only=True, data_only=True)
        try:
            lines: list[str] = []
            for sheet_name in workbook.sheetnames:
                sheet = workbook[sheet_name]
                for row in sheet.iter_rows(values_only=True):
                    lines.append(self.render_row(row))
            logger.debug(
                "Extracted %d rows from %d sheets in %s",
                len(lines), len(workbook.sheetnames), path.name,
            )
        finally:
            workbook.close()

        return "\n".join(lines)

    @staticmethod
    def render_row(row: tuple[object, ...]) -> str:
        """Join cell values with spaces; empty cells become empty strings."""
        return " ".join("" if value is None else str(value) for value in row)
