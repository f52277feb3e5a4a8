import threading

import duckdb
import pytest
from fastapi.testclient import TestClient

from dotword import app as app_module
from dotword.app import PickRequest, api_pick, app, get_store, get_words
from dotword.generator import generate_puzzle
from dotword.store import DuckDBStore, MemoryStore
from dotword.words import load_words

DATE = "2025-01-31"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(store):
    words = load_words()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_words] = lambda: words
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def puzzle():
    return generate_puzzle("v1-" + DATE, load_words())


def test_today_hides_answer_until_played(client, puzzle):
    r = client.get("/api/today", params={"date": DATE}).json()
    assert r["ok"] is True
    assert r["picks"] == puzzle.picks
    assert len(r["clues"]) == 5 and len(r["clue_data"]) == 5
    assert r["played"] is False
    assert "answer" not in r

    r = client.get("/api/today", params={"date": DATE, "reveal_answer": True}).json()
    assert r["answer"] == puzzle.answer


def test_pick_records_first_selection_only(client, store, puzzle):
    wrong = next(w for w in puzzle.picks if w != puzzle.answer)
    r = client.post("/api/pick", json={"word": wrong.lower(), "time_ms": 15000, "date": DATE}).json()
    assert r["ok"] is True
    assert r["correct"] is False
    assert r["already_played"] is False
    assert r["answer"] == puzzle.answer
    assert store.get_play(DATE).solved == 0

    r = client.post("/api/pick", json={"word": puzzle.answer, "time_ms": 20000, "date": DATE}).json()
    assert r["already_played"] is True
    assert r["correct"] is False
    assert store.get_play(DATE).time_ms == 15000

    r = client.get("/api/today", params={"date": DATE}).json()
    assert r["played"] is True
    assert r["answer"] == puzzle.answer


def test_pick_correct_answer(client, puzzle):
    r = client.post("/api/pick", json={"word": puzzle.answer, "time_ms": 4000, "date": DATE}).json()
    assert r["correct"] is True
    assert r["share"].startswith(f"dotWord {DATE} ✅ 4s")


def test_pick_unknown_word(client, store):
    r = client.post("/api/pick", json={"word": "NOTAPICK", "date": DATE}).json()
    assert r["ok"] is False
    assert store.get_play(DATE) is None


def test_play_endpoint(client):
    assert client.get("/api/play", params={"date": DATE}).json()["ok"] is False
    client.post("/api/pick", json={"word": "", "date": DATE})
    today = client.get("/api/today", params={"date": DATE}).json()
    client.post("/api/pick", json={"word": today["picks"][0], "time_ms": 1000, "date": DATE})
    r = client.get("/api/play", params={"date": DATE}).json()
    assert r["ok"] is True
    assert r["play"]["timeMs"] == 1000


def test_index_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "dotWord" in r.text


def test_simultaneous_first_picks_store_one_result(tmp_path, puzzle):
    store = DuckDBStore(tmp_path / "picks.duckdb")
    words = load_words()
    results = []
    barrier = threading.Barrier(len(puzzle.picks))

    def pick(word, time_ms):
        barrier.wait()
        body = PickRequest(word=word, time_ms=time_ms, date=DATE)
        results.append(api_pick(body, store=store, words=words))

    threads = [
        threading.Thread(target=pick, args=(w, 1000 * (i + 1)))
        for i, w in enumerate(puzzle.picks)
    ]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    first = [r for r in results if not r["already_played"]]
    assert len(first) == 1
    assert store.get_play(DATE).to_dict() == first[0]["play"]
    assert all(r["play"] == first[0]["play"] for r in results)
    store.close()


def test_shutdown_closes_store(tmp_path, monkeypatch):
    store = DuckDBStore(tmp_path / "lifespan.duckdb")
    monkeypatch.setattr(app_module, "_STORE", store)
    with TestClient(app) as client:
        assert client.get("/").status_code == 200
    assert app_module._STORE is None
    with pytest.raises(duckdb.Error):
        store.conn.execute("SELECT 1")
