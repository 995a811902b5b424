"""
Plain-text extraction from uploaded resume files.

PDF pages are read with pdfplumber, DOCX paragraphs with python-docx and TXT
files are decoded as UTF-8. Results are kept in an ``ExtractionCache`` keyed
by extension and the SHA-256 of the file bytes, so re-uploading the same file
skips parsing.
"""

import hashlib
import io
import logging
import os
from collections import OrderedDict
from typing import Optional

import docx
import pdfplumber

from ..core import settings
from .exceptions import ResumeParsingError

logger = logging.getLogger(__name__)


class ExtractionCache:
    """Bounded LRU mapping of file fingerprint to extracted text."""

    def __init__(self, max_size: int = settings.EXTRACTION_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: "OrderedDict[str, str]" = OrderedDict()

    @staticmethod
    def fingerprint(file_bytes: bytes) -> str:
        return hashlib.sha256(file_bytes).hexdigest()

    def get(self, key: str) -> Optional[str]:
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: str, text: str) -> None:
        self._entries[key] = text
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted extraction cache entry {evicted[:12]}")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class TextExtractor:
    def __init__(self, cache: Optional[ExtractionCache] = None) -> None:
        self.cache = cache if cache is not None else ExtractionCache()

    def extract_text(self, file_bytes: bytes, filename: str) -> str:
        """
        Extract plain text from ``file_bytes``; the format comes from the
        ``filename`` extension.

        The extension is checked before the cache, and cache entries are keyed
        per extension, so a cached upload never bypasses format validation.

        Raises:
            ResumeParsingError: unsupported format or unreadable file
        """
        extension = os.path.splitext(filename)[1].lower()
        match extension:
            case ".pdf":
                parse = self._extract_pdf
            case ".docx":
                parse = self._extract_docx
            case ".txt":
                parse = self._decode_txt
            case _:
                raise ResumeParsingError(
                    filename,
                    f"Unsupported file format '{extension or filename}'. Supported formats: PDF, DOCX, TXT.",
                )

        key = f"{extension}:{self.cache.fingerprint(file_bytes)}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Using cached extraction result for {filename}")
            return cached

        text = parse(file_bytes, filename)
        logger.info(f"Extracted {len(text)} characters from {filename}")
        self.cache.set(key, text)
        return text

    @staticmethod
    def _decode_txt(file_bytes: bytes, filename: str) -> str:
        return file_bytes.decode("utf-8", errors="replace")

    @staticmethod
    def _extract_pdf(file_bytes: bytes, filename: str) -> str:
        if not file_bytes.startswith(b"%PDF"):
            raise ResumeParsingError(filename, "Invalid PDF file format")
        try:
            with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            logger.error(f"PDF extraction failed for {filename}: {e}")
            raise ResumeParsingError(
                filename,
                f"PDF extraction failed: {e}. Try re-saving the PDF or converting it to DOCX.",
            ) from e
        return "\n".join(pages)

    @staticmethod
    def _extract_docx(file_bytes: bytes, filename: str) -> str:
        try:
            document = docx.Document(io.BytesIO(file_bytes))
        except Exception as e:
            logger.error(f"DOCX extraction failed for {filename}: {e}")
            raise ResumeParsingError(filename, f"DOCX extraction failed: {e}") from e
        return "\n".join(paragraph.text for paragraph in document.paragraphs)
