"""Quiz Engines - Avaliacao, sessoes de jogo e editor."""

from .editor import QuestionEditor
from .evaluator import evaluate, is_blank_candidate, is_valid_candidate, normalize_answer
from .list_session import ListSession, ListSnapshot
from .scoring_engine import QuizScoringEngine
from .sequential_session import SequentialSession, SequentialSnapshot

__all__ = [
    "evaluate",
    "is_blank_candidate",
    "is_valid_candidate",
    "normalize_answer",
    "QuizScoringEngine",
    "SequentialSession",
    "SequentialSnapshot",
    "ListSession",
    "ListSnapshot",
    "QuestionEditor",
]
