"""
Date-keyed storage for puzzles and play results (DuckDB).
One puzzle blob and at most one play result per UTC date; writes overwrite.
"""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Protocol

import duckdb

from .models import PlayResult, Puzzle

# Default DB sits next to the package code; set DOTWORD_DB to put it elsewhere
DATA_DIR = Path(__file__).resolve().parent / "data"
DB_PATH = DATA_DIR / "dotword.duckdb"


class PuzzleStore(Protocol):
    def get_puzzle(self, date: str) -> Puzzle | None: ...

    def put_puzzle(self, date: str, puzzle: Puzzle) -> None: ...


class PlayStore(Protocol):
    def get_play(self, date: str) -> PlayResult | None: ...

    def put_play(self, date: str, play: PlayResult) -> None: ...


class MemoryStore:
    """In-process store with the same overwrite semantics as DuckDBStore."""

    def __init__(self) -> None:
        self._puzzles: dict[str, dict] = {}
        self._plays: dict[str, dict] = {}

    def get_puzzle(self, date: str) -> Puzzle | None:
        data = self._puzzles.get(date)
        return Puzzle.from_dict(data) if data is not None else None

    def put_puzzle(self, date: str, puzzle: Puzzle) -> None:
        self._puzzles[date] = puzzle.to_dict()

    def get_play(self, date: str) -> PlayResult | None:
        data = self._plays.get(date)
        return PlayResult.from_dict(data) if data is not None else None

    def put_play(self, date: str, play: PlayResult) -> None:
        self._plays[date] = play.to_dict()


def get_db_path() -> Path:
    p = os.environ.get("DOTWORD_DB")
    if p:
        return Path(p)
    return DB_PATH


def get_connection(path: Path | str | None = None) -> duckdb.DuckDBPyConnection:
    path = path or get_db_path()
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    return duckdb.connect(str(path))


def init_db(conn: duckdb.DuckDBPyConnection) -> None:
    cur = conn.cursor()

    # Generated puzzle per date, stored as a JSON blob
    cur.execute("""
        CREATE TABLE IF NOT EXISTS puzzles (
            date VARCHAR PRIMARY KEY,
            data VARCHAR NOT NULL
        )
    """)

    cur.execute("""
        CREATE TABLE IF NOT EXISTS plays (
            date VARCHAR PRIMARY KEY,
            solved INTEGER NOT NULL DEFAULT 0,
            time_ms BIGINT NOT NULL DEFAULT 0,
            hints INTEGER NOT NULL DEFAULT 0
        )
    """)
    conn.commit()


class DuckDBStore:
    """
    DuckDB-backed store. Each operation runs on its own cursor under a lock,
    so one store can be shared by the app's worker threads.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.conn = get_connection(path)
        self._lock = threading.Lock()
        init_db(self.conn)

    def _fetchone(self, sql: str, params: tuple) -> tuple | None:
        with self._lock:
            cur = self.conn.cursor()
            try:
                return cur.execute(sql, params).fetchone()
            finally:
                cur.close()

    def _execute(self, sql: str, params: tuple) -> None:
        with self._lock:
            cur = self.conn.cursor()
            try:
                cur.execute(sql, params)
            finally:
                cur.close()

    def get_puzzle(self, date: str) -> Puzzle | None:
        row = self._fetchone("SELECT data FROM puzzles WHERE date = ?", (date,))
        if row is None:
            return None
        return Puzzle.from_dict(json.loads(row[0]))

    def put_puzzle(self, date: str, puzzle: Puzzle) -> None:
        self._execute(
            "INSERT OR REPLACE INTO puzzles (date, data) VALUES (?, ?)",
            (date, json.dumps(puzzle.to_dict())),
        )

    def get_play(self, date: str) -> PlayResult | None:
        row = self._fetchone("SELECT solved, time_ms, hints FROM plays WHERE date = ?", (date,))
        if row is None:
            return None
        return PlayResult(solved=int(row[0]), time_ms=int(row[1]), hints=int(row[2]))

    def put_play(self, date: str, play: PlayResult) -> None:
        self._execute(
            "INSERT OR REPLACE INTO plays (date, solved, time_ms, hints) VALUES (?, ?, ?, ?)",
            (date, play.solved, play.time_ms, play.hints),
        )

    def close(self) -> None:
        with self._lock:
            self.conn.close()
