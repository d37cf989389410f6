"""List Session - Maquina de estados do modo lista (prova).

``COLLECTING`` aceita qualquer numero de respostas, em qualquer ordem
(ultima escrita por pergunta vence). ``grade`` leva a ``GRADED``, terminal
para a tentativa: o relatorio produzido nao muda mais.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..exceptions import QuestionNotFoundError
from ..logger import get_logger
from ..models.enums import GradeStatus, SessionPhase, ValidationReason
from ..models.results import GradeReport, GradeResult, QuestionVerdict, RecordResult
from ..models.schemas import ChoiceQuestion, QuizDocument, QuizMeta, TextQuestion
from .evaluator import is_blank_candidate, is_valid_candidate
from .scoring_engine import QuizScoringEngine

logger = get_logger("list_session")


class ListSnapshot(BaseModel):
    """Copia somente-leitura do estado da sessao para os renderers."""

    model_config = ConfigDict(frozen=True)

    phase: SessionPhase
    total: int
    answered_count: int
    unanswered_ids: tuple[str, ...]
    answers: dict[str, int | str]
    report: GradeReport | None = None


class ListSession:
    """Uma tentativa do quiz no modo lista.

    Attributes:
        phase: COLLECTING ou GRADED
        answers: Respostas registradas (question_id -> candidato)
        report: Relatorio da correcao (None enquanto COLLECTING)
    """

    def __init__(self, document: QuizDocument, scoring: QuizScoringEngine | None = None):
        self.document = document
        self.scoring = scoring or QuizScoringEngine()
        self.restart()

    def restart(self) -> ListSnapshot:
        """Descarta respostas e relatorio, voltando para COLLECTING."""
        self.meta: QuizMeta = self.document.meta.model_copy()
        self.questions: list[ChoiceQuestion | TextQuestion] = [
            q.model_copy(deep=True) for q in self.document.questions
        ]
        self._by_id = {q.id: q for q in self.questions}
        self.answers: dict[str, Any] = {}
        self.report: GradeReport | None = None
        self.phase = SessionPhase.COLLECTING

        logger.debug(f"Sessao lista iniciada: {len(self.questions)} perguntas")
        return self.snapshot()

    def _question(self, question_id: str) -> ChoiceQuestion | TextQuestion:
        try:
            return self._by_id[question_id]
        except KeyError:
            raise QuestionNotFoundError(question_id) from None

    def record_answer(self, question_id: str, candidate: Any) -> RecordResult:
        """Registra (ou limpa) a resposta de uma pergunta.

        Candidato vazio remove a resposta registrada. Apos a correcao o
        comando e ignorado e o chamador e notificado com ALREADY_GRADED;
        candidato com formato invalido e ignorado com INVALID_CANDIDATE.

        Raises:
            QuestionNotFoundError: Se a pergunta nao pertence a sessao
        """
        question = self._question(question_id)

        if self.phase == SessionPhase.GRADED:
            logger.info(f"Resposta ignorada, quiz ja corrigido: {question_id}")
            return RecordResult(
                accepted=False,
                question_id=question_id,
                answered=question_id in self.answers,
                reason=ValidationReason.ALREADY_GRADED,
            )

        if is_blank_candidate(question, candidate):
            self.answers.pop(question_id, None)
            return RecordResult(accepted=True, question_id=question_id, answered=False)

        if not is_valid_candidate(question, candidate):
            logger.info(f"Resposta com formato invalido ignorada: {question_id}")
            return RecordResult(
                accepted=False,
                question_id=question_id,
                answered=question_id in self.answers,
                reason=ValidationReason.INVALID_CANDIDATE,
            )

        if isinstance(candidate, str):
            candidate = candidate.strip()
        self.answers[question_id] = candidate
        return RecordResult(accepted=True, question_id=question_id, answered=True)

    def unanswered_ids(self) -> list[str]:
        return [q.id for q in self.questions if q.id not in self.answers]

    def grade(self, confirm_gaps: bool = False) -> GradeResult:
        """Corrige todas as perguntas na ordem do documento.

        Args:
            confirm_gaps: Confirmacao explicita para corrigir mesmo com
                perguntas sem resposta (contam como incorretas)

        Returns:
            GradeResult com status GRADED, NEEDS_CONFIRMATION ou ALREADY_GRADED
        """
        if self.phase == SessionPhase.GRADED:
            logger.info("Correcao ignorada: quiz ja corrigido")
            return GradeResult(status=GradeStatus.ALREADY_GRADED, report=self.report)

        unanswered = self.unanswered_ids()
        if unanswered and not confirm_gaps:
            logger.info(f"Correcao aguardando confirmacao: {len(unanswered)} sem resposta")
            return GradeResult(
                status=GradeStatus.NEEDS_CONFIRMATION, unanswered_count=len(unanswered)
            )

        verdicts = []
        score = 0
        for index, question in enumerate(self.questions):
            candidate = self.answers.get(question.id)
            feedback = self.scoring.build_feedback(question, candidate)
            if feedback.is_correct:
                score += 1
            verdicts.append(
                QuestionVerdict(
                    question_id=question.id,
                    index=index,
                    answered=question.id in self.answers,
                    is_correct=feedback.is_correct,
                    candidate=candidate,
                    feedback=feedback,
                )
            )

        self.report = GradeReport(
            summary=self.scoring.summarize(score, len(self.questions)),
            verdicts=tuple(verdicts),
        )
        self.phase = SessionPhase.GRADED

        logger.info(f"Quiz corrigido: {score}/{len(self.questions)}")
        return GradeResult(
            status=GradeStatus.GRADED, unanswered_count=len(unanswered), report=self.report
        )

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_graded(self) -> bool:
        return self.phase == SessionPhase.GRADED

    def snapshot(self) -> ListSnapshot:
        unanswered = self.unanswered_ids()
        return ListSnapshot(
            phase=self.phase,
            total=self.total,
            answered_count=self.total - len(unanswered),
            unanswered_ids=tuple(unanswered),
            answers=dict(self.answers),
            report=self.report,
        )
