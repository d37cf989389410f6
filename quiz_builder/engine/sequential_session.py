"""Sequential Session - Maquina de estados do modo uma-pergunta-por-vez.

Estados::

    AWAITING_ANSWER(i) --submit--> ANSWERED(i, correto?) --advance--> AWAITING_ANSWER(i+1)
                                                         \\--advance--> FINISHED(score, total)

``restart`` volta sempre para AWAITING_ANSWER(0) com mapa de respostas vazio.
"""

import random
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..exceptions import QuizContractError
from ..logger import get_logger
from ..models.enums import SessionPhase, ValidationReason
from ..models.results import AnswerFeedback, ScoreSummary, SubmitResult
from ..models.schemas import ChoiceQuestion, QuizDocument, QuizMeta, TextQuestion
from .evaluator import is_blank_candidate, is_valid_candidate
from .scoring_engine import QuizScoringEngine

logger = get_logger("sequential_session")


class SequentialSnapshot(BaseModel):
    """Copia somente-leitura do estado da sessao para os renderers."""

    model_config = ConfigDict(frozen=True)

    phase: SessionPhase
    current_index: int
    current_question_id: str | None
    total: int
    score: int
    answered_count: int
    progress: float
    last_feedback: AnswerFeedback | None = None
    summary: ScoreSummary | None = None


class SequentialSession:
    """Uma tentativa de jogar o quiz no modo sequencial.

    As perguntas sao copiadas do documento no inicio (e a cada restart), de
    modo que edicoes concorrentes no builder nao alteram uma tentativa em
    andamento.

    Attributes:
        phase: Estado atual
        current_index: Posicao atual na ordem de jogo
        score: Acertos ate o momento
        answers: Respostas registradas (question_id -> candidato)
        verdicts: Acertos por pergunta (question_id -> bool)
    """

    def __init__(
        self,
        document: QuizDocument,
        rng: random.Random | None = None,
        scoring: QuizScoringEngine | None = None,
    ):
        self.document = document
        self.rng = rng or random.Random()
        self.scoring = scoring or QuizScoringEngine()
        self.restart()

    # -------------------------------------------------------------------------
    # Transicoes
    # -------------------------------------------------------------------------

    def restart(self) -> SequentialSnapshot:
        """Reinicia a tentativa (sempre permitido, em qualquer estado)."""
        self.meta: QuizMeta = self.document.meta.model_copy()
        self.questions: list[ChoiceQuestion | TextQuestion] = [
            q.model_copy(deep=True) for q in self.document.questions
        ]
        if self.meta.shuffle:
            self.rng.shuffle(self.questions)

        self.current_index = 0
        self.score = 0
        self.answers: dict[str, Any] = {}
        self.verdicts: dict[str, bool] = {}
        self.last_feedback: AnswerFeedback | None = None
        self.phase = SessionPhase.AWAITING_ANSWER if self.questions else SessionPhase.FINISHED

        logger.debug(f"Sessao sequencial iniciada: {len(self.questions)} perguntas")
        return self.snapshot()

    def submit(self, candidate: Any, question_id: str | None = None) -> SubmitResult:
        """Registra e avalia a resposta da pergunta atual.

        Args:
            candidate: Indice (choice) ou texto (text)
            question_id: ID alvo opcional; deve ser a pergunta atual

        Returns:
            SubmitResult com feedback, ou rejeitado com EMPTY_CANDIDATE /
                INVALID_CANDIDATE

        Raises:
            QuizContractError: Se a pergunta atual ja foi respondida, a sessao
                terminou ou ``question_id`` nao e a pergunta atual
        """
        if self.phase != SessionPhase.AWAITING_ANSWER:
            raise QuizContractError(f"submit invalido no estado {self.phase.value}")

        question = self.current_question
        if question_id is not None and question_id != question.id:
            raise QuizContractError(
                f"Pergunta {question_id} nao e a pergunta atual ({question.id})"
            )

        if is_blank_candidate(question, candidate):
            logger.info(f"Resposta vazia rejeitada: {question.id}")
            return SubmitResult(
                accepted=False, phase=self.phase, reason=ValidationReason.EMPTY_CANDIDATE
            )

        if not is_valid_candidate(question, candidate):
            logger.info(f"Resposta com formato invalido rejeitada: {question.id}")
            return SubmitResult(
                accepted=False, phase=self.phase, reason=ValidationReason.INVALID_CANDIDATE
            )

        feedback = self.scoring.build_feedback(question, candidate)
        self.answers[question.id] = candidate
        self.verdicts[question.id] = feedback.is_correct
        if feedback.is_correct:
            self.score += 1

        self.last_feedback = feedback
        self.phase = SessionPhase.ANSWERED

        logger.debug(
            f"Pergunta {question.id}: {'correta' if feedback.is_correct else 'incorreta'} "
            f"(score {self.score}/{self.current_index + 1})"
        )
        return SubmitResult(accepted=True, phase=self.phase, feedback=feedback)

    def advance(self) -> SequentialSnapshot:
        """Avanca para a proxima pergunta ou para o resultado final.

        Raises:
            QuizContractError: Se a pergunta atual ainda nao foi respondida
        """
        if self.phase != SessionPhase.ANSWERED:
            raise QuizContractError(f"advance invalido no estado {self.phase.value}")

        self.last_feedback = None
        if self.current_index + 1 < len(self.questions):
            self.current_index += 1
            self.phase = SessionPhase.AWAITING_ANSWER
        else:
            self.phase = SessionPhase.FINISHED
            logger.info(f"Quiz finalizado: {self.score}/{self.total}")

        return self.snapshot()

    # -------------------------------------------------------------------------
    # Consultas
    # -------------------------------------------------------------------------

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.phase == SessionPhase.FINISHED

    @property
    def current_question(self) -> ChoiceQuestion | TextQuestion | None:
        """Pergunta em exibicao (None apos o fim)."""
        if self.is_finished:
            return None
        return self.questions[self.current_index]

    def question_at(self, index: int) -> ChoiceQuestion | TextQuestion:
        """Pergunta na posicao ``index`` da ordem de jogo."""
        if not 0 <= index < len(self.questions):
            raise QuizContractError(f"Indice {index} fora da sessao (0..{len(self.questions) - 1})")
        return self.questions[index]

    def summary(self) -> ScoreSummary | None:
        if not self.is_finished:
            return None
        return self.scoring.summarize(self.score, self.total)

    def snapshot(self) -> SequentialSnapshot:
        current = self.current_question
        answered = len(self.answers)
        return SequentialSnapshot(
            phase=self.phase,
            current_index=self.current_index,
            current_question_id=current.id if current else None,
            total=self.total,
            score=self.score,
            answered_count=answered,
            progress=answered / self.total if self.total else 1.0,
            last_feedback=self.last_feedback,
            summary=self.summary(),
        )
