"""Answer Evaluator - Decide se uma resposta candidata esta correta.

Funcoes puras, sem efeitos colaterais:

- choice: correta sse o indice candidato e um ``int`` igual a ``answer``
  (sem coercao: ``"0"``, ``True`` e ``None`` sao sempre incorretos)
- text: candidato e respostas aceitas sao normalizados (strip + lower) e
  comparados por igualdade exata; candidato vazio nunca e comparado
"""

from typing import Any

from ..models.schemas import ChoiceQuestion, TextAnswerSet, TextQuestion


def normalize_answer(text: str) -> str:
    """Remove espacos nas bordas e converte para minusculas."""
    return text.strip().lower()


def is_blank_candidate(question: ChoiceQuestion | TextQuestion, candidate: Any) -> bool:
    """Verifica se o candidato conta como "sem resposta" para a pergunta.

    ``None`` e strings vazias apos ``strip`` sao "sem resposta" em qualquer
    tipo de pergunta.
    """
    if candidate is None:
        return True
    return isinstance(candidate, str) and not candidate.strip()


def _is_strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_candidate(question: ChoiceQuestion | TextQuestion, candidate: Any) -> bool:
    """Verifica o formato do candidato: ``int`` (sem bool) para choice, ``str`` para text."""
    if isinstance(question, ChoiceQuestion):
        return _is_strict_int(candidate)
    return isinstance(candidate, str)


def evaluate_choice(question: ChoiceQuestion, candidate: Any) -> bool:
    if not _is_strict_int(candidate):
        return False
    return candidate == question.answer


def matches_text(answers: TextAnswerSet, candidate: Any) -> bool:
    """Compara candidato com qualquer uma das respostas aceitas."""
    if not isinstance(candidate, str):
        return False

    normalized = normalize_answer(candidate)
    if not normalized:
        return False

    return any(normalize_answer(accepted) == normalized for accepted in answers.values)


def evaluate_text(question: TextQuestion, candidate: Any) -> bool:
    return matches_text(question.answer, candidate)


def evaluate(question: ChoiceQuestion | TextQuestion, candidate: Any) -> bool:
    """Avalia uma resposta candidata.

    Args:
        question: Pergunta do documento
        candidate: Indice (choice) ou texto (text); ``None`` = sem resposta

    Returns:
        True se a resposta estiver correta
    """
    if isinstance(question, ChoiceQuestion):
        return evaluate_choice(question, candidate)
    return evaluate_text(question, candidate)
