"""
Clue model: the closed set of clue variants a puzzle is built from.
Each variant is an immutable value; two clues are equal when type and payload match.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class StartsWith:
    letter: str
    type: ClassVar[str] = "startsWith"


@dataclass(frozen=True)
class EndsWith:
    letter: str
    type: ClassVar[str] = "endsWith"


@dataclass(frozen=True)
class VowelCount:
    count: int
    type: ClassVar[str] = "vowelCount"


@dataclass(frozen=True)
class ConsonantCount:
    count: int
    type: ClassVar[str] = "consonantCount"


@dataclass(frozen=True)
class NoRepeatLetters:
    type: ClassVar[str] = "noRepeatLetters"


@dataclass(frozen=True)
class HasDoubleLetter:
    type: ClassVar[str] = "hasDoubleLetter"


@dataclass(frozen=True)
class LetterAtPos:
    pos: int  # 1-based
    letter: str
    type: ClassVar[str] = "letterAtPos"


@dataclass(frozen=True)
class Contains:
    letter: str
    type: ClassVar[str] = "contains"


@dataclass(frozen=True)
class NotContains:
    letter: str
    type: ClassVar[str] = "notContains"


@dataclass(frozen=True)
class ContainsExactly:
    letter: str
    count: int
    type: ClassVar[str] = "containsExactly"


@dataclass(frozen=True)
class AlphaAfter:
    word: str
    type: ClassVar[str] = "alphaAfter"


@dataclass(frozen=True)
class AlphaBefore:
    word: str
    type: ClassVar[str] = "alphaBefore"


@dataclass(frozen=True)
class SharedLettersAtLeast:
    word: str
    n: int
    type: ClassVar[str] = "sharedLettersAtLeast"


@dataclass(frozen=True)
class NotWord:
    word: str
    type: ClassVar[str] = "notWord"


Clue = Union[
    StartsWith,
    EndsWith,
    VowelCount,
    ConsonantCount,
    NoRepeatLetters,
    HasDoubleLetter,
    LetterAtPos,
    Contains,
    NotContains,
    ContainsExactly,
    AlphaAfter,
    AlphaBefore,
    SharedLettersAtLeast,
    NotWord,
]

CLUE_CLASSES: dict[str, type] = {
    cls.type: cls
    for cls in (
        StartsWith,
        EndsWith,
        VowelCount,
        ConsonantCount,
        NoRepeatLetters,
        HasDoubleLetter,
        LetterAtPos,
        Contains,
        NotContains,
        ContainsExactly,
        AlphaAfter,
        AlphaBefore,
        SharedLettersAtLeast,
        NotWord,
    )
}


def clue_to_dict(clue: Clue) -> dict[str, Any]:
    """Tagged dict for the stored puzzle blob, e.g. {"type": "startsWith", "letter": "A"}."""
    return {"type": clue.type, **asdict(clue)}


def clue_from_dict(data: dict[str, Any]) -> Clue:
    """Inverse of clue_to_dict. Raises ValueError on unknown tags or bad payloads."""
    if not isinstance(data, dict):
        raise ValueError(f"Clue must be a dict, got {type(data).__name__}")
    tag = data.get("type")
    cls = CLUE_CLASSES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise ValueError(f"Unknown clue type: {tag!r}")
    payload = {k: v for k, v in data.items() if k != "type"}
    expected = {f.name: f.type for f in fields(cls)}
    if set(payload) != set(expected):
        raise ValueError(f"Bad payload for {tag} clue: {payload}")
    for name, kind in expected.items():
        value = payload[name]
        # annotations are strings under postponed evaluation
        if kind == "int" and (isinstance(value, bool) or not isinstance(value, int)):
            raise ValueError(f"{tag}.{name} must be an int, got {value!r}")
        if kind == "str" and not isinstance(value, str):
            raise ValueError(f"{tag}.{name} must be a str, got {value!r}")
    return cls(**payload)
