"""Duplicate entry detection.

Entries are compared under independent criteria (citation key, DOI,
author/title signature, abstract signature), each with its own map from
signature to the first entry that produced it.
"""

from bibtidy.duplicates.criteria import DEFAULT_CRITERIA, SIGNATURES, alpha_num, parse_criterion
from bibtidy.duplicates.index import DuplicateIndex, DuplicateMatch

__all__ = [
    "DuplicateIndex",
    "DuplicateMatch",
    "DEFAULT_CRITERIA",
    "SIGNATURES",
    "alpha_num",
    "parse_criterion",
]
