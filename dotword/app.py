"""
Localhost API for the daily dotWord puzzle.
Run: uvicorn dotword.app:app --reload --host 0.0.0.0
Then open http://localhost:8000
"""
from __future__ import annotations

import threading
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .clues import clue_to_dict
from .daily import ensure_puzzle, record_play, today_utc
from .hints import clue_texts, share_text
from .store import DuckDBStore
from .words import load_words

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Opened on first request; tests swap these out via app.dependency_overrides
_STORE: DuckDBStore | None = None
_WORDS: list[str] | None = None
_STORE_LOCK = threading.Lock()
# Serializes the read-then-write in /api/pick so only the first pick of a day is stored
_PICK_LOCK = threading.Lock()


def get_store() -> DuckDBStore:
    global _STORE
    with _STORE_LOCK:
        if _STORE is None:
            _STORE = DuckDBStore()
        return _STORE


def close_store() -> None:
    global _STORE
    with _STORE_LOCK:
        if _STORE is not None:
            _STORE.close()
            _STORE = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_store()


app = FastAPI(title="dotWord", lifespan=lifespan)


def get_words() -> list[str]:
    global _WORDS
    if _WORDS is None:
        _WORDS = load_words()
    return _WORDS


class PickRequest(BaseModel):
    word: str = ""
    time_ms: int = 0
    hints: int = 0
    date: str = ""


@app.get("/api/today")
def api_today(
    date: str = "",
    reveal_answer: bool = False,
    store=Depends(get_store),
    words: list[str] = Depends(get_words),
):
    """Today's clues and words. The answer is included once the day is played or when revealed."""
    date = date or today_utc()
    puzzle = ensure_puzzle(store, words, date)
    play = store.get_play(date)
    out = {
        "ok": True,
        "date": date,
        "picks": puzzle.picks,
        "clues": clue_texts(puzzle.clues),
        "clue_data": [clue_to_dict(c) for c in puzzle.clues],
        "played": play is not None,
    }
    if play is not None:
        out["play"] = play.to_dict()
    if reveal_answer or play is not None:
        out["answer"] = puzzle.answer
    return out


@app.post("/api/pick")
def api_pick(body: PickRequest, store=Depends(get_store), words: list[str] = Depends(get_words)):
    """Record the player's pick. Only the first pick of a day is stored."""
    date = body.date or today_utc()
    word = (body.word or "").strip().upper()
    with _PICK_LOCK:
        puzzle = ensure_puzzle(store, words, date)
        existing = store.get_play(date)
        if existing is not None:
            return {
                "ok": True,
                "already_played": True,
                "correct": existing.solved == 1,
                "answer": puzzle.answer,
                "play": existing.to_dict(),
                "share": share_text(date, existing.solved == 1, existing.time_ms // 1000),
            }
        if word not in puzzle.picks:
            return {"ok": False, "error": "Pick one of today's words."}
        correct = word == puzzle.answer
        play = record_play(store, date, solved=correct, time_ms=body.time_ms, hints=body.hints)
    return {
        "ok": True,
        "already_played": False,
        "correct": correct,
        "answer": puzzle.answer,
        "play": play.to_dict(),
        "share": share_text(date, correct, play.time_ms // 1000),
    }


@app.get("/api/play")
def api_play(date: str = "", store=Depends(get_store)):
    """Stored result for a date, if the puzzle was played."""
    date = date or today_utc()
    play = store.get_play(date)
    if play is None:
        return {"ok": False, "error": "No play recorded for this date."}
    return {"ok": True, "date": date, "play": play.to_dict()}


@app.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(_index_html())


def _index_html() -> str:
    return """<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>dotWord</title></head>
<body>
<h1>dotWord</h1>
<ul id="clues"></ul>
<div id="picks"></div>
<pre id="result"></pre>
<script>
const t0 = Date.now();
async function load() {
  const r = await (await fetch("/api/today")).json();
  document.getElementById("clues").innerHTML = r.clues.map(c => "<li>" + c + "</li>").join("");
  document.getElementById("picks").innerHTML = r.picks.map(
    w => "<button onclick=\\"pick('" + w + "')\\">" + w + "</button>").join(" ");
}
async function pick(word) {
  const r = await (await fetch("/api/pick", {
    method: "POST", headers: {"Content-Type": "application/json"},
    body: JSON.stringify({word: word, time_ms: Date.now() - t0})
  })).json();
  document.getElementById("result").textContent = r.ok ? r.share : r.error;
}
load();
</script>
</body></html>"""
