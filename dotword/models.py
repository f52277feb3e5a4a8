"""
Puzzle and PlayResult: what gets stored per UTC date.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .clues import Clue, clue_from_dict, clue_to_dict


@dataclass
class Puzzle:
    picks: list[str]  # exactly 5 distinct uppercase words
    answer: str  # one of picks
    clues: list[Clue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "picks": list(self.picks),
            "answer": self.answer,
            "clues": [clue_to_dict(c) for c in self.clues],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Puzzle":
        """Rebuild a stored puzzle. Raises ValueError if the blob is malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"Puzzle must be a dict, got {type(data).__name__}")
        try:
            picks = [str(w) for w in data["picks"]]
            answer = str(data["answer"])
            raw_clues = data["clues"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed puzzle data: {e}") from e
        if not isinstance(raw_clues, list):
            raise ValueError("Puzzle clues must be a list")
        return cls(picks=picks, answer=answer, clues=[clue_from_dict(c) for c in raw_clues])


@dataclass
class PlayResult:
    solved: int  # 0 or 1
    time_ms: int
    hints: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"solved": self.solved, "timeMs": self.time_ms, "hints": self.hints}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayResult":
        return cls(
            solved=int(data.get("solved", 0)),
            time_ms=int(data.get("timeMs", 0)),
            hints=int(data.get("hints", 0)),
        )
