"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from bibtidy.models import Entry, NormalizedField, RawField, ValueKind  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    """Factory for normalized entries with minimal boilerplate.

    Field values are given as keyword arguments. A plain string is stored
    braced; a ``(value, ValueKind)`` tuple sets the datatype explicitly. Raw
    fields mirror the field map so that merge strategies that swap raw
    fields behave as on parsed input.
    """

    def _factory(
        key: str | None = "key_001",
        entry_type: str = "article",
        **fields: str | tuple[str, ValueKind],
    ) -> Entry:
        raw_fields: list[RawField] = []
        field_map: dict[str, NormalizedField] = {}
        for name, spec in fields.items():
            value, datatype = spec if isinstance(spec, tuple) else (spec, ValueKind.BRACED)
            raw_fields.append(RawField(name=name, value=value, datatype=datatype))
            field_map[name.lower()] = NormalizedField(value=value, datatype=datatype)
        return Entry(type=entry_type, key=key, fields=raw_fields, field_map=field_map)

    return _factory


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample .bib files."""
    return FIXTURES_DIR
