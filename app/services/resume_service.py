"""
Resume File Service

Validates uploaded resume files and extracts their plain text.
"""

from io import BytesIO
from typing import Optional, Tuple

from PyPDF2 import PdfReader
from docx import Document

from app.config import Config
from app.utils.logger import get_logger
from app.utils.exceptions import AgentError, ExtractionError, ValidationError

logger = get_logger(__name__)

INVALID_TYPE_MESSAGE = "Invalid file type. Only PDF, DOCX, and TXT files are allowed."


def get_extension(filename: str) -> str:
    """
    Lower-cased extension including the dot, taken after the last '.'.

    Returns an empty string when the name has no dot at all.
    """
    if not filename or "." not in filename:
        return ""
    return "." + filename.rsplit(".", 1)[1].lower()


class ResumeService:
    """Service for validating and reading resume uploads"""

    def __init__(self, config: Config):
        self.config = config
        self.max_file_size = config.upload.max_file_size
        self.allowed_extensions = set(config.upload.allowed_extensions)

    def validate_extension(self, filename: str) -> Optional[ValidationError]:
        """Reject anything outside the extension allow-list before the body is read."""
        if get_extension(filename) not in self.allowed_extensions:
            return ValidationError(INVALID_TYPE_MESSAGE, "upload", error="Invalid file type")
        return None

    def validate_file(self, file_content: bytes, filename: str) -> Tuple[bool, Optional[AgentError]]:
        """
        Validate an uploaded resume file.

        Args:
            file_content: File content as bytes
            filename: Original filename

        Returns:
            Tuple of (is_valid, error)
        """
        type_error = self.validate_extension(filename)
        if type_error:
            return False, type_error

        if len(file_content) > self.max_file_size:
            return False, ValidationError(
                f"File size exceeds maximum of {self.max_file_size // 1024 // 1024}MB",
                "upload",
                error="File too large",
            )

        return True, None

    def extract_text(self, file_content: bytes, filename: str) -> Tuple[str, Optional[AgentError]]:
        """
        Extract text from a resume file based on its extension.

        Args:
            file_content: File content as bytes
            filename: Original filename

        Returns:
            Tuple of (extracted_text, error)
        """
        file_ext = get_extension(filename)

        if file_ext == ".pdf":
            return self._extract_pdf_text(file_content)
        elif file_ext == ".docx":
            return self._extract_docx_text(file_content)
        elif file_ext == ".txt":
            return self._extract_txt_text(file_content)
        return "", ExtractionError(f"Unsupported file type: {file_ext or filename}", "extract")

    def _extract_pdf_text(self, file_content: bytes) -> Tuple[str, Optional[AgentError]]:
        """Extract the text layer of every page of a PDF"""
        try:
            reader = PdfReader(BytesIO(file_content))
            text_parts = [page.extract_text() or "" for page in reader.pages]
            full_text = "\n".join(text_parts)
        except Exception as e:
            error_msg = f"Failed to extract text from PDF: {str(e)}"
            logger.error(f"[ResumeService] {error_msg}")
            return "", ExtractionError(error_msg, "pdf")

        logger.info(f"[ResumeService] PDF extraction complete: {len(full_text)} characters from {len(text_parts)} page(s)")
        if not full_text.strip():
            logger.warning("[ResumeService] PDF has no text layer (possibly a scanned image)")
        return full_text, None

    def _extract_docx_text(self, file_content: bytes) -> Tuple[str, Optional[AgentError]]:
        """Extract raw paragraph text from a DOCX, tables included"""
        try:
            doc = Document(BytesIO(file_content))

            text_parts = [paragraph.text for paragraph in doc.paragraphs]
            for table in doc.tables:
                for row in table.rows:
                    for cell in row.cells:
                        text_parts.extend(p.text for p in cell.paragraphs)

            full_text = "\n\n".join(text_parts)
        except Exception as e:
            error_msg = f"Failed to extract text from DOCX: {str(e)}"
            logger.error(f"[ResumeService] {error_msg}")
            return "", ExtractionError(error_msg, "docx")

        logger.info(f"[ResumeService] DOCX extraction complete: {len(full_text)} characters")
        return full_text, None

    def _extract_txt_text(self, file_content: bytes) -> Tuple[str, Optional[AgentError]]:
        """Decode a plain-text file as strict UTF-8"""
        try:
            text = file_content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            error_msg = f"Failed to extract text from TXT: {str(e)}"
            logger.error(f"[ResumeService] {error_msg}")
            return "", ExtractionError(error_msg, "txt")
        return text, None
