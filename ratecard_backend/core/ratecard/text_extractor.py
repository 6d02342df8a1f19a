"""
Rate card text extraction using LangChain document loaders.

Reads the raw text of uploaded PDF and Word rate cards. The loader is
selected by file extension; an unsupported extension yields empty text.

Dependencies: langchain_community.document_loaders (pypdf, docx2txt)
System role: First stage of the rate card extraction pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import Docx2txtLoader, PyPDFLoader
from langchain_core.documents import Document

from ratecard_backend.core.exceptions import TextExtractionError

PDF_EXTENSIONS = frozenset({".pdf"})
WORD_EXTENSIONS = frozenset({".doc", ".docx"})


class TextExtractor:
    """Extract raw text from PDF and Word documents."""

    def extract(self, file_path: str, extension: str | None = None) -> str:
        """
        Extract the full text of a document.

        Args:
            file_path: Path to the staged document
            extension: Extension of the original upload name; defaults to the
                path's own suffix

        Returns:
            str: Document text, pages joined by newlines; empty for
                unsupported extensions

        Raises:
            TextExtractionError: When the file is missing or the loader fails
        """
        path = Path(file_path)
        ext = (extension or path.suffix).lower()

        if ext in PDF_EXTENSIONS:
            loader_cls = PyPDFLoader
        elif ext in WORD_EXTENSIONS:
            loader_cls = Docx2txtLoader
        else:
            return ""

        if not path.exists():
            raise TextExtractionError(f"File not found: {file_path}", path.name, ext)

        try:
            documents: list[Document] = loader_cls(str(path)).load()
        except Exception as e:
            raise TextExtractionError(
                f"Failed to extract text from {ext.lstrip('.')} document: {e}",
                path.name,
                ext,
            ) from e

        return "\n".join(doc.page_content for doc in documents)
