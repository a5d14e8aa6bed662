import json
import threading

from engines.mastery import InMemoryMasteryStore, JsonFileMasteryStore, create_mastery_store


def test_summary_aggregates_questions_and_sections():
    store = InMemoryMasteryStore()
    store.record("1.01", True)
    store.record("1.01", False)
    store.record("1.02", True)
    store.record("3.18", False)
    store.record("roc-say-again", True)

    summary = store.summary({1: "Collision Avoidance", 3: "Radiotelephony"})

    assert summary["questions"]["1.01"] == {"attempts": 2, "correct": 1, "accuracy": 0.5}
    assert summary["totals"] == {"attempts": 5, "correct": 3, "accuracy": 0.6}

    sections = {s["section"]: s for s in summary["sections"]}
    assert sections[1]["name"] == "Collision Avoidance"
    assert sections[1]["attempts"] == 3
    assert sections[3]["accuracy"] == 0.0

    assert summary["weakest"][0]["questionId"] == "3.18"


def test_empty_store_summary():
    summary = InMemoryMasteryStore().summary()
    assert summary["questions"] == {}
    assert summary["weakest"] == []
    assert summary["totals"]["accuracy"] == 0.0


def test_json_store_persists_between_instances(tmp_path):
    path = tmp_path / "progress" / "mastery.json"
    store = JsonFileMasteryStore(str(path))
    store.record("6.05", True)
    store.record("6.05", True)

    reloaded = JsonFileMasteryStore(str(path))
    assert reloaded.stats() == {"6.05": {"attempts": 2, "correct": 2}}
    assert json.loads(path.read_text(encoding="utf-8"))["6.05"]["correct"] == 2


def test_corrupt_json_starts_empty(tmp_path):
    path = tmp_path / "mastery.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonFileMasteryStore(str(path)).stats() == {}


def test_factory_selects_adapter(tmp_path):
    assert type(create_mastery_store("")) is InMemoryMasteryStore
    assert isinstance(create_mastery_store(str(tmp_path / "m.json")), JsonFileMasteryStore)


def test_concurrent_records_leave_latest_snapshot_on_disk(tmp_path):
    path = tmp_path / "mastery.json"
    store = JsonFileMasteryStore(str(path))

    def worker(qid):
        for _ in range(25):
            store.record(qid, True)

    threads = [threading.Thread(target=worker, args=(f"1.0{i}",)) for i in range(1, 5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk == store.stats()
    assert sum(s["attempts"] for s in on_disk.values()) == 100
