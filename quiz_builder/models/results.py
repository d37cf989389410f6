"""Quiz Results - Objetos de resultado devolvidos pelos comandos.

Comandos do editor e das sessoes nunca lancam excecao para erros
corrigiveis pelo usuario: devolvem um destes objetos com ``ok``/``accepted``
falso e o ``reason`` correspondente.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import GradeStatus, ResultTier, SessionPhase, ValidationReason
from .schemas import ChoiceQuestion, QuestionDraft, TextQuestion


class AnswerFeedback(BaseModel):
    """Feedback exibido apos responder uma pergunta."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    is_correct: bool
    correct_answer: str = Field(..., description="Texto da resposta correta (canonica)")
    other_answers: tuple[str, ...] = Field(default=(), description="Outras grafias aceitas")
    explanation: str = ""


class ScoreSummary(BaseModel):
    """Resultado agregado de uma tentativa."""

    model_config = ConfigDict(frozen=True)

    score: int
    total: int
    percentage: int = Field(..., description="Percentual arredondado (0-100)")
    tier: ResultTier
    title: str
    message: str


class SubmitResult(BaseModel):
    """Resultado de ``SequentialSession.submit``."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    phase: SessionPhase
    reason: ValidationReason | None = None
    feedback: AnswerFeedback | None = None


class RecordResult(BaseModel):
    """Resultado de ``ListSession.record_answer``."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    question_id: str
    answered: bool = Field(default=False, description="Se ha resposta registrada apos o comando")
    reason: ValidationReason | None = None


class QuestionVerdict(BaseModel):
    """Veredito de uma pergunta apos a correcao do modo lista."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    index: int
    answered: bool
    is_correct: bool
    candidate: int | str | None = None
    feedback: AnswerFeedback


class GradeReport(BaseModel):
    """Relatorio imutavel da correcao do modo lista."""

    model_config = ConfigDict(frozen=True)

    summary: ScoreSummary
    verdicts: tuple[QuestionVerdict, ...]

    @property
    def score(self) -> int:
        return self.summary.score

    @property
    def total(self) -> int:
        return self.summary.total


class GradeResult(BaseModel):
    """Resultado de ``ListSession.grade``."""

    model_config = ConfigDict(frozen=True)

    status: GradeStatus
    unanswered_count: int = 0
    report: GradeReport | None = None


class EditResult(BaseModel):
    """Resultado de um comando do editor."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    reason: ValidationReason | None = None
    question: ChoiceQuestion | TextQuestion | None = None
    draft: QuestionDraft | None = None

    @classmethod
    def rejected(cls, reason: ValidationReason, draft: QuestionDraft | None = None) -> "EditResult":
        return cls(ok=False, reason=reason, draft=draft)
