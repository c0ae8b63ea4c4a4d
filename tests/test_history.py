"""
ciphercore: activity log tests
"""

import json
import threading

import pytest

from ciphercore import Algorithm, HistoryStore, Mode, caesar_encrypt, vigenere_encrypt


class FakeClock:
    def __init__(self, start=1_700_000_000.0):
        self.now = start

    def __call__(self):
        self.now += 1
        return self.now


@pytest.fixture
def store():
    return HistoryStore(max_entries=5, clock=FakeClock())

# ── append / list ─────────────────────────────────────────────────────────────
def test_append_newest_first(store):
    first  = store.append("caesar", "HELLO", "KHOOR", "encrypt")
    second = store.append(Algorithm.REVERSE, "SECRET", "TERCES", Mode.ENCRYPT)
    assert [e.id for e in store.entries()] == [second.id, first.id]
    assert second.timestamp > first.timestamp
    assert first.algorithm == "caesar" and second.mode == "encrypt"

def test_ids_are_unique(store):
    ids = {store.append("base64", str(i), str(i), "encrypt").id for i in range(5)}
    assert len(ids) == 5

def test_capped_to_max_entries(store):
    for i in range(8):
        store.append("reverse", f"in{i}", f"out{i}", "encrypt")
    entries = store.entries()
    assert len(entries) == len(store) == 5
    assert entries[0].input == "in7"
    assert entries[-1].input == "in3"

def test_record_only_logs_successes(store):
    ok = caesar_encrypt("HELLO", 3)
    bad = vigenere_encrypt("HELLO", "")
    assert store.record("caesar", "encrypt", "HELLO", ok).output == "KHOOR"
    assert store.record("vigenere", "encrypt", "HELLO", bad) is None
    assert len(store) == 1

def test_rejects_unknown_algorithm_and_mode(store):
    with pytest.raises(ValueError):
        store.append("enigma", "a", "b", "encrypt")
    with pytest.raises(ValueError):
        store.append("caesar", "a", "b", "scramble")

# ── search / filter ───────────────────────────────────────────────────────────
def test_search_is_case_insensitive_over_all_fields(store):
    store.append("caesar", "Hello", "Khoor", "encrypt")
    store.append("vigenere", "attack", "lxfopv", "encrypt")
    store.append("base64", "x", "eA==", "encrypt")
    assert [e.input for e in store.search("HELLO")] == ["Hello"]
    assert [e.input for e in store.search("LXF")] == ["attack"]
    assert [e.algorithm for e in store.search("vig")] == ["vigenere"]
    assert store.search("nothing here") == []

def test_filter_by_algorithm(store):
    store.append("caesar", "a", "d", "encrypt")
    store.append("xor", "b", "Yg==", "encrypt")
    store.append("caesar", "d", "a", "decrypt")
    assert [e.input for e in store.filter_by_algorithm("caesar")] == ["d", "a"]
    assert len(store.filter_by_algorithm("all")) == 3
    assert store.filter_by_algorithm(Algorithm.SYMMETRIC) == []

# ── delete / clear ────────────────────────────────────────────────────────────
def test_delete_by_id(store):
    keep = store.append("caesar", "a", "d", "encrypt")
    gone = store.append("caesar", "b", "e", "encrypt")
    assert store.delete(gone.id) is True
    assert store.delete(gone.id) is False
    assert store.entries() == [keep]

def test_clear(store):
    store.append("caesar", "a", "d", "encrypt")
    store.clear()
    assert store.entries() == []

# ── export ────────────────────────────────────────────────────────────────────
def test_export_json(store):
    entry = store.append("caesar", "HELLO", "KHOOR", "encrypt")
    data = json.loads(store.export("json"))
    assert data == [{
        "id": entry.id, "algorithm": "caesar", "input": "HELLO",
        "output": "KHOOR", "timestamp": entry.timestamp, "mode": "encrypt",
    }]

def test_export_txt(store):
    store.append("caesar", "HELLO", "KHOOR", "encrypt")
    store.append("base64", "SGk=", "Hi", "decrypt")
    text = store.export("txt")
    blocks = text.split("\n\n")
    assert len(blocks) == 2
    assert "] BASE64 - DECRYPT\nInput: SGk=\nOutput: Hi\n" in blocks[0]
    assert "] CAESAR - ENCRYPT\nInput: HELLO\nOutput: KHOOR\n" in blocks[1]
    assert text.endswith("=" * 50 + "\n")

def test_export_unknown_format(store):
    with pytest.raises(ValueError):
        store.export("xml")

# ── subscribe ─────────────────────────────────────────────────────────────────
def test_subscribers_see_every_mutation(store):
    seen = []
    unsubscribe = store.subscribe(lambda entries: seen.append(len(entries)))
    entry = store.append("caesar", "a", "d", "encrypt")
    store.append("caesar", "b", "e", "encrypt")
    store.delete(entry.id)
    store.delete("missing")
    store.clear()
    unsubscribe()
    store.append("caesar", "c", "f", "encrypt")
    assert seen == [1, 2, 1, 0]

def test_subscriber_gets_a_copy(store):
    store.subscribe(lambda entries: entries.clear())
    store.append("caesar", "a", "d", "encrypt")
    assert len(store) == 1

# ── concurrency ───────────────────────────────────────────────────────────────
def test_concurrent_appends_are_not_lost():
    store = HistoryStore(max_entries=1000)

    def worker(n):
        for i in range(50):
            store.append("reverse", f"{n}-{i}", "x", "encrypt")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 400

# ── persistence ───────────────────────────────────────────────────────────────
def test_persists_to_json_file(tmp_path):
    path = tmp_path / "nested" / "history.json"
    store = HistoryStore(max_entries=5, path=path)
    entry = store.append("xor", "hi", "IwI=", "encrypt")
    reloaded = HistoryStore(max_entries=5, path=path)
    assert reloaded.entries() == [entry]

def test_reload_respects_smaller_cap(tmp_path):
    path = tmp_path / "history.json"
    store = HistoryStore(max_entries=10, path=path)
    for i in range(6):
        store.append("reverse", str(i), str(i), "encrypt")
    assert [e.input for e in HistoryStore(max_entries=2, path=path).entries()] == ["5", "4"]

def test_failed_write_leaves_store_unchanged(tmp_path):
    path  = tmp_path / "history.json"
    store = HistoryStore(max_entries=5, path=path)
    kept  = store.append("caesar", "a", "d", "encrypt")
    path.unlink()
    path.mkdir()
    seen = []
    store.subscribe(seen.append)

    with pytest.raises(OSError):
        store.append("caesar", "b", "e", "encrypt")
    with pytest.raises(OSError):
        store.delete(kept.id)
    with pytest.raises(OSError):
        store.clear()

    assert store.entries() == [kept]
    assert len(store) == 1
    assert seen == []
    assert not list(tmp_path.glob(".history.json.*"))

def test_writes_leave_no_temp_files(tmp_path):
    path  = tmp_path / "history.json"
    store = HistoryStore(max_entries=3, path=path)
    for i in range(5):
        store.append("reverse", str(i), str(i), "encrypt")
    store.delete(store.entries()[0].id)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["history.json"]
    assert [e["input"] for e in json.loads(path.read_text(encoding="utf-8"))] == ["3", "2"]

def test_concurrent_subscribe_and_len():
    store = HistoryStore(max_entries=50)
    errors = []

    def churn():
        try:
            for _ in range(200):
                unsubscribe = store.subscribe(lambda entries: None)
                len(store)
                unsubscribe()
        except Exception as exc:
            errors.append(exc)

    def writer():
        for i in range(100):
            store.append("reverse", str(i), str(i), "encrypt")

    threads = [threading.Thread(target=churn) for _ in range(4)] + [threading.Thread(target=writer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
    assert len(store) == 50

def test_unreadable_file_loads_empty(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    store = HistoryStore(path=path)
    assert store.entries() == []
    store.append("caesar", "a", "d", "encrypt")
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 1

def test_default_cap_comes_from_settings():
    assert HistoryStore().max_entries == 100

def test_invalid_cap():
    with pytest.raises(ValueError):
        HistoryStore(max_entries=0)
