"""Quiz Enums - Tipos de pergunta, modos de exibicao e estados de sessao."""

from enum import Enum


class QuestionType(str, Enum):
    """Formato da pergunta."""

    CHOICE = "choice"  # 4 alternativas, resposta = indice
    TEXT = "text"  # Resposta livre, uma ou mais grafias aceitas


class DisplayType(str, Enum):
    """Modo de exibicao do quiz exportado."""

    SEQUENTIAL = "sequential"  # Uma pergunta por vez (estudo)
    LIST = "list"  # Todas de uma vez, correcao no final (prova)


class SessionPhase(str, Enum):
    """Estados das maquinas de sessao."""

    # Modo sequencial
    AWAITING_ANSWER = "awaiting_answer"
    ANSWERED = "answered"
    FINISHED = "finished"

    # Modo lista
    COLLECTING = "collecting"
    GRADED = "graded"


class GradeStatus(str, Enum):
    """Resultado de uma chamada de correcao no modo lista."""

    GRADED = "graded"
    NEEDS_CONFIRMATION = "needs_confirmation"
    ALREADY_GRADED = "already_graded"


class ValidationReason(str, Enum):
    """Motivos de rejeicao corrigiveis pelo usuario."""

    MISSING_QUESTION = "missing_question"
    MISSING_CHOICE = "missing_choice"
    MISSING_CORRECT_ANSWER = "missing_correct_answer"
    MISSING_TEXT_ANSWER = "missing_text_answer"
    EMPTY_CANDIDATE = "empty_candidate"
    INVALID_CANDIDATE = "invalid_candidate"  # Indice nao inteiro em choice, nao-texto em text
    NOT_CONFIRMED = "not_confirmed"
    ALREADY_GRADED = "already_graded"


class ResultTier(str, Enum):
    """Faixas de resultado final."""

    PERFECT = "perfect"  # 100%
    EXCELLENT = "excellent"  # 80-99%
    GOOD = "good"  # 60-79%
    RETRY = "retry"  # <60%
