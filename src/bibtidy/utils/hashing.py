"""Hashing utilities for bibtidy."""

import hashlib

__all__ = ["format_sha256", "calculate_string_sha256"]


def format_sha256(hex_digest: str) -> str:
    """Format SHA256 hash with standard prefix.

    Parameters
    ----------
    hex_digest : str
        Raw hexadecimal digest.

    Returns
    -------
    str
        Formatted hash with "sha256:" prefix.
    """
    return f"sha256:{hex_digest}"


def calculate_string_sha256(text: str) -> str:
    """Calculate SHA256 hash of string.

    Used to fingerprint tidied output in the audit log so that two runs can
    be compared without storing the text.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    str
        SHA256 hash with "sha256:" prefix.
    """
    sha256_hash = hashlib.sha256(text.encode("utf-8"))
    return format_sha256(sha256_hash.hexdigest())
