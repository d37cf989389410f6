"""Quiz Builder - Montagem, preview e exportacao de quizzes.

Arquitetura:
- models/: Enums, Schemas Pydantic do documento, objetos de resultado
- engine/: Avaliador de respostas, sessoes (sequencial/lista), editor
- storage/: Serializacao, importacao CSV, workspaces em memoria
- render/: View models para builder e players
- export/: Bundle HTML/JSON para CMS
- router.py: FastAPI endpoints
"""

from .engine import (
    ListSession,
    QuestionEditor,
    QuizScoringEngine,
    SequentialSession,
    evaluate,
)
from .exceptions import QuizBuilderError, QuizContractError
from .models import (
    ChoiceQuestion,
    DisplayType,
    QuestionDraft,
    QuestionType,
    QuizDocument,
    QuizMeta,
    TextAnswerSet,
    TextQuestion,
)
from .storage import QuizStore, deserialize_document, serialize_document

__all__ = [
    # Models
    "QuestionType",
    "DisplayType",
    "TextAnswerSet",
    "ChoiceQuestion",
    "TextQuestion",
    "QuizMeta",
    "QuizDocument",
    "QuestionDraft",
    # Engines
    "evaluate",
    "QuizScoringEngine",
    "SequentialSession",
    "ListSession",
    "QuestionEditor",
    # Storage
    "QuizStore",
    "serialize_document",
    "deserialize_document",
    # Errors
    "QuizBuilderError",
    "QuizContractError",
]
