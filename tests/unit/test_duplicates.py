"""Tests for duplicate criteria and the duplicate index."""

from collections.abc import Callable

import pytest

from bibtidy.duplicates import DEFAULT_CRITERIA, DuplicateIndex, alpha_num, parse_criterion
from bibtidy.duplicates.criteria import (
    abstract_signature,
    citation_signature,
    doi_signature,
    key_signature,
)
from bibtidy.models import DuplicateCriterion, Entry

# ---------------------------------------------------------------------------
# Signatures
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_alpha_num() -> None:
    """Test non-alphanumeric characters are removed and case folded."""
    assert alpha_num("10.1000/ABC-123") == "101000abc123"
    assert alpha_num("") == ""
    assert alpha_num(None) is None


@pytest.mark.unit
def test_key_signature(make_entry: Callable[..., Entry]) -> None:
    """Test keys are compared verbatim and missing keys never match."""
    assert key_signature(make_entry("Smith2009")) == "Smith2009"
    assert key_signature(make_entry(None)) is None
    assert key_signature(make_entry("")) is None


@pytest.mark.unit
def test_doi_signature(make_entry: Callable[..., Entry]) -> None:
    """Test DOIs ignore punctuation and case."""
    a = make_entry("a", doi="10.1000/XYZ.1")
    b = make_entry("b", doi="10.1000/xyz-1")

    assert doi_signature(a) == doi_signature(b) == "101000xyz1"
    assert doi_signature(make_entry("c")) is None


@pytest.mark.unit
def test_citation_signature(make_entry: Callable[..., Entry]) -> None:
    """Test first author token plus title prefix."""
    entry = make_entry("a", author="Sweig, Stefan and Doe, Jane", title="The Impossible Book!")

    assert citation_signature(entry) == "sweig:theimpossiblebook"


@pytest.mark.unit
def test_citation_signature_splits_on_and(make_entry: Callable[..., Entry]) -> None:
    """Test the first author ends at ' and ' when no comma precedes it."""
    entry = make_entry("a", author="Stefan Sweig and Jane Doe", title="T")

    assert citation_signature(entry) == "stefansweig:t"


@pytest.mark.unit
def test_citation_signature_truncates_title(make_entry: Callable[..., Entry]) -> None:
    """Test only the first 50 title characters count."""
    a = make_entry("a", author="Doe", title="x" * 50 + " first ending")
    b = make_entry("b", author="Doe", title="x" * 50 + " other ending")

    assert citation_signature(a) == citation_signature(b) == "doe:" + "x" * 50


@pytest.mark.unit
def test_citation_signature_needs_author_and_title(make_entry: Callable[..., Entry]) -> None:
    """Test entries missing author or title have no signature."""
    assert citation_signature(make_entry("a", title="Only title")) is None
    assert citation_signature(make_entry("b", author="Only author")) is None


@pytest.mark.unit
def test_abstract_signature(make_entry: Callable[..., Entry]) -> None:
    """Test the abstract signature is its first 100 alphanumerics."""
    entry = make_entry("a", abstract="A, b; c. " * 60)

    signature = abstract_signature(entry)

    assert signature == "abc" * 33 + "a"
    assert len(signature) == 100
    assert abstract_signature(make_entry("b")) is None


@pytest.mark.unit
def test_parse_criterion() -> None:
    """Test criterion names parse case-insensitively."""
    assert parse_criterion("DOI") == DuplicateCriterion.DOI
    assert parse_criterion(" citation ") == DuplicateCriterion.CITATION

    with pytest.raises(ValueError, match="Unknown duplicate criterion"):
        parse_criterion("isbn")


@pytest.mark.unit
def test_default_criteria() -> None:
    """Test defaults are doi, citation and abstract in that order."""
    assert DEFAULT_CRITERIA == (
        DuplicateCriterion.DOI,
        DuplicateCriterion.CITATION,
        DuplicateCriterion.ABSTRACT,
    )


# ---------------------------------------------------------------------------
# DuplicateIndex
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_index_always_checks_key_first() -> None:
    """Test key is checked first even when not requested."""
    index = DuplicateIndex([DuplicateCriterion.DOI], merge=True)

    assert index.checks == (
        (DuplicateCriterion.KEY, False),
        (DuplicateCriterion.DOI, True),
    )


@pytest.mark.unit
def test_index_key_merges_only_when_requested() -> None:
    """Test the key criterion merges only when listed and merge is on."""
    requested = DuplicateIndex([DuplicateCriterion.DOI, DuplicateCriterion.KEY], merge=True)
    warn_only = DuplicateIndex([DuplicateCriterion.KEY], merge=False)

    assert requested.checks == ((DuplicateCriterion.KEY, True), (DuplicateCriterion.DOI, True))
    assert warn_only.checks == ((DuplicateCriterion.KEY, False),)


@pytest.mark.unit
def test_index_unique_entries(make_entry: Callable[..., Entry]) -> None:
    """Test distinct entries are never matched."""
    index = DuplicateIndex(DEFAULT_CRITERIA)

    assert index.classify(make_entry("a", doi="10.1/a")) is None
    assert index.classify(make_entry("b", doi="10.1/b")) is None


@pytest.mark.unit
def test_index_duplicate_key_is_warn_only(make_entry: Callable[..., Entry]) -> None:
    """Test a repeated key matches without merge by default."""
    index = DuplicateIndex()
    first = make_entry("same")
    second = make_entry("same")

    assert index.classify(first) is None
    match = index.classify(second)

    assert match is not None
    assert match.criterion == DuplicateCriterion.KEY
    assert match.duplicate_of is first
    assert match.merge is False


@pytest.mark.unit
def test_index_matches_against_first_representative(make_entry: Callable[..., Entry]) -> None:
    """Test later duplicates point at the first entry with the signature."""
    index = DuplicateIndex([DuplicateCriterion.DOI], merge=True)
    first = make_entry("a", doi="10.1/x")
    index.classify(first)

    second = index.classify(make_entry("b", doi="10.1/X"))
    third = index.classify(make_entry("c", doi="10.1/x"))

    assert second is not None and second.duplicate_of is first
    assert third is not None and third.duplicate_of is first


@pytest.mark.unit
def test_index_first_matching_criterion_wins(make_entry: Callable[..., Entry]) -> None:
    """Test a key match stops further criteria from being checked."""
    index = DuplicateIndex([DuplicateCriterion.DOI], merge=True)
    by_doi = make_entry("a", doi="10.1/x")
    by_key = make_entry("b", doi="10.1/y")
    index.classify(by_doi)
    index.classify(by_key)

    match = index.classify(make_entry("b", doi="10.1/x"))

    assert match is not None
    assert match.criterion == DuplicateCriterion.KEY
    assert match.duplicate_of is by_key


@pytest.mark.unit
def test_index_criteria_order_is_respected(make_entry: Callable[..., Entry]) -> None:
    """Test requested criteria are checked in their configured order."""
    index = DuplicateIndex([DuplicateCriterion.ABSTRACT, DuplicateCriterion.DOI], merge=True)
    by_doi = make_entry("a", doi="10.1/x", abstract="first abstract")
    by_abstract = make_entry("b", doi="10.1/y", abstract="shared abstract")
    index.classify(by_doi)
    index.classify(by_abstract)

    match = index.classify(make_entry("c", doi="10.1/x", abstract="shared abstract"))

    assert match is not None
    assert match.criterion == DuplicateCriterion.ABSTRACT
    assert match.duplicate_of is by_abstract


@pytest.mark.unit
def test_index_skips_entries_without_signature(make_entry: Callable[..., Entry]) -> None:
    """Test entries lacking the data for a criterion are not matched by it."""
    index = DuplicateIndex([DuplicateCriterion.DOI, DuplicateCriterion.CITATION], merge=True)

    assert index.classify(make_entry(None, title="T")) is None
    assert index.classify(make_entry(None, title="T")) is None


@pytest.mark.unit
def test_index_matching_entry_not_registered(make_entry: Callable[..., Entry]) -> None:
    """Test a matched entry does not become a representative elsewhere."""
    index = DuplicateIndex([DuplicateCriterion.DOI, DuplicateCriterion.ABSTRACT], merge=True)
    index.classify(make_entry("a", doi="10.1/x"))
    index.classify(make_entry("b", doi="10.1/x", abstract="only here"))

    assert index.classify(make_entry("c", abstract="only here")) is None


@pytest.mark.unit
def test_index_checks_is_read_only() -> None:
    """Test the check order cannot be changed through the property."""
    index = DuplicateIndex([DuplicateCriterion.DOI])

    with pytest.raises(AttributeError):
        index.checks = ()
    assert isinstance(index.checks, tuple)
