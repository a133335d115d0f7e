"""Base types and utilities for reading BibTeX sources."""

from pathlib import Path

__all__ = [
    "BibTeXSyntaxError",
    "detect_encoding",
    "normalize_line_endings",
    "read_bibtex_file",
]


class BibTeXSyntaxError(Exception):
    """Raised when BibTeX text is structurally malformed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        """Initialize syntax error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line where the problem was detected.
        """
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)
        self.line = line


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of file bytes using deterministic strategy.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        ``utf-8-sig`` when a BOM is present, ``utf-8`` when the bytes
        decode cleanly, ``latin-1`` otherwise.
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def read_bibtex_file(path: Path) -> str:
    """Read a BibTeX file as text with LF line endings.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    file_bytes = path.read_bytes()
    return normalize_line_endings(file_bytes.decode(detect_encoding(file_bytes)))
