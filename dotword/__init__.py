"""
dotWord: a daily five-word logic puzzle. Pick the answer from five words using five clues.
"""
from .clues import Clue
from .generator import generate_puzzle
from .models import PlayResult, Puzzle
from .solver import satisfies, solve

__all__ = ["Clue", "PlayResult", "Puzzle", "generate_puzzle", "satisfies", "solve"]
