"""Common utility functions for bibtidy.

Hashing and timestamp helpers shared by the audit log and the CLI.
"""

from bibtidy.utils.hashing import calculate_string_sha256, format_sha256
from bibtidy.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_string_sha256",
    "format_sha256",
]
