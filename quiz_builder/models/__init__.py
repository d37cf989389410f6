"""Quiz Models - Enums, Schemas do documento e objetos de resultado."""

from .enums import DisplayType, GradeStatus, QuestionType, ResultTier, SessionPhase, ValidationReason
from .results import (
    AnswerFeedback,
    EditResult,
    GradeReport,
    GradeResult,
    QuestionVerdict,
    RecordResult,
    ScoreSummary,
    SubmitResult,
)
from .schemas import (
    CHOICE_COUNT,
    ChoiceQuestion,
    Question,
    QuestionDraft,
    QuizDocument,
    QuizMeta,
    TextAnswerSet,
    TextQuestion,
)

__all__ = [
    # Enums
    "QuestionType",
    "DisplayType",
    "SessionPhase",
    "GradeStatus",
    "ValidationReason",
    "ResultTier",
    # Schemas
    "CHOICE_COUNT",
    "TextAnswerSet",
    "ChoiceQuestion",
    "TextQuestion",
    "Question",
    "QuizMeta",
    "QuizDocument",
    "QuestionDraft",
    # Results
    "AnswerFeedback",
    "ScoreSummary",
    "SubmitResult",
    "RecordResult",
    "QuestionVerdict",
    "GradeReport",
    "GradeResult",
    "EditResult",
]
