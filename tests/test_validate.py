import pytest

from data.catalog import CatalogSnapshot
from data.validate import validate_catalog, assert_catalog_valid, CatalogIntegrityError
from engines.hop_core.models import Reference


def test_static_catalog_is_valid():
    assert validate_catalog() == []


def test_seeded_store_is_valid(store):
    assert validate_catalog(store) == []
    assert_catalog_valid(store)


def test_missing_reference_and_orphans_are_reported(snapshot):
    questions = snapshot.all_questions()
    references = [r for r in snapshot.all_references() if r.question_id != "1.01"]
    references.append(Reference("42.42", "CARS", "000", "orphan"))
    broken = CatalogSnapshot(questions, references, snapshot.sections(), snapshot.documents())

    errors = validate_catalog(broken)
    assert "question 1.01 has no reference" in errors
    assert any("unknown question 42.42" in e for e in errors)


def test_dangling_static_ids_are_reported(snapshot):
    # 去掉被天气偏好表和应急题池引用的题目
    questions = [q for q in snapshot.all_questions() if q.id not in ("6.08", "11.01")]
    references = [r for r in snapshot.all_references() if r.question_id not in ("6.08", "11.01")]
    broken = CatalogSnapshot(questions, references, snapshot.sections(), snapshot.documents())

    errors = validate_catalog(broken)
    assert any("weather bias" in e and "6.08" in e for e in errors)
    assert any("emergency engine-rough references unknown question 11.01" == e for e in errors)


def test_assert_raises_with_all_errors(snapshot):
    broken = CatalogSnapshot(snapshot.all_questions(), [], snapshot.sections(), {})
    with pytest.raises(CatalogIntegrityError) as excinfo:
        assert_catalog_valid(broken)
    assert "no document metadata" in excinfo.value.errors
    assert len(excinfo.value.errors) > len(snapshot.all_questions())
