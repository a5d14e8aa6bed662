import pytest

from data.catalog import CatalogSnapshot, seed_catalog
from data.pstar_questions import QUESTIONS, ANSWER_KEY


def test_seed_loads_every_question_with_answer_key(store):
    assert store.question_count() == len(QUESTIONS)
    assert store.answer_key() == ANSWER_KEY


def test_seed_is_repeatable(store):
    seed_catalog(store)
    assert store.question_count() == len(QUESTIONS)
    assert len(store.get_references("3.18")) == 2


def test_questions_by_phase_are_sorted_and_tagged(store):
    records = store.get_questions_by_phase("arrival")
    assert records
    assert all(r.phase == "arrival" for r in records)
    ids = [r.id for r in records]
    assert ids == [r.id for r in CatalogSnapshot.from_static().get_questions_by_phase("arrival")]


def test_questions_by_ids_ignores_unknown(store):
    records = store.get_questions_by_ids(["2.02", "nope", "1.01"])
    assert [r.id for r in records] == ["1.01", "2.02"]
    assert store.get_questions_by_ids([]) == []


def test_record_fields_round_trip_from_store(store, snapshot):
    assert store.get_questions_by_ids(["3.18"]) == snapshot.get_questions_by_ids(["3.18"])


@pytest.mark.parametrize("catalog_name", ["store", "snapshot"])
def test_text_search_modes(catalog_name, request):
    catalog = request.getfixturevalue(catalog_name)

    exact = catalog.text_search("2.02")
    assert [r.id for r in exact] == ["2.02"]

    section = catalog.text_search("13.")
    assert section
    assert all(r.id.startswith("13.") for r in section)
    assert [r.id for r in catalog.text_search("13")] == [r.id for r in section]

    keyword = catalog.text_search("HEAD-ON")
    assert "1.02" in [r.id for r in keyword]

    filtered = catalog.text_search("", section_filter=2)
    assert filtered
    assert all(r.section_number == 2 for r in filtered)


def test_references_carry_document_title(store):
    refs = store.get_references("1.01")
    assert refs
    assert refs[0].doc_id == "CARS"
    assert refs[0].doc_title.startswith("Canadian Aviation Regulations")
    assert store.get_references("99.99") == []


def test_random_questions_are_bounded(store, snapshot):
    assert len(store.random_questions(50)) == 50
    assert len(snapshot.random_questions(500)) == len(QUESTIONS)


def test_snapshot_prefetch_matches_store(store):
    prefetched = CatalogSnapshot.from_store(store)
    assert prefetched.question_count() == store.question_count()
    assert prefetched.sections() == store.sections()
    assert prefetched.get_questions_by_phase("enroute") == store.get_questions_by_phase("enroute")


def test_ping(store):
    assert store.ping() is True


@pytest.mark.parametrize("query", ["%", "_", "a_b", "100%", "\\", "head-on", "transponder"])
def test_store_and_snapshot_search_agree(store, snapshot, query):
    assert [r.id for r in store.text_search(query)] == [r.id for r in snapshot.text_search(query)]


def test_wildcards_match_literally(store):
    assert store.text_search("%") == []
    assert store.text_search("_") == []
