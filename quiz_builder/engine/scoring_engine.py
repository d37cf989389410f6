"""Quiz Scoring Engine - Percentual, faixas de resultado e feedback."""

from typing import Any

from ..models.enums import ResultTier
from ..models.results import AnswerFeedback, ScoreSummary
from ..models.schemas import ChoiceQuestion, TextQuestion
from .evaluator import evaluate


class QuizScoringEngine:
    """Motor de pontuacao para tentativas de quiz.

    Cada pergunta vale 1 ponto. O percentual e arredondado para inteiro e
    determina a faixa de resultado exibida na tela final.

    Faixas de resultado:
        - 100%: Perfeito
        - 80-99%: Excelente
        - 60-79%: Muito bem
        - <60%: Tente de novo

    Example:
        >>> engine = QuizScoringEngine()
        >>> summary = engine.summarize(4, 5)
        >>> summary.percentage, summary.tier
        (80, <ResultTier.EXCELLENT: 'excellent'>)
    """

    # Faixas (threshold, tier, title, message)
    TIER_THRESHOLDS = [
        (100, ResultTier.PERFECT, "🎉 Perfeito!", "Voce acertou todas as perguntas."),
        (80, ResultTier.EXCELLENT, "👏 Excelente!", "Quase la, faltou muito pouco para gabaritar."),
        (60, ResultTier.GOOD, "👍 Muito bem!", "Boa base. Revise as explicacoes das que errou."),
        (0, ResultTier.RETRY, "💪 Tente de novo!", "Releia as explicacoes e tente mais uma vez."),
    ]

    def calculate_percentage(self, score: int, total: int) -> int:
        """Percentual de acerto arredondado (0 quando nao ha perguntas)."""
        if total <= 0:
            return 0
        return round(score / total * 100)

    def calculate_tier(self, percentage: float) -> tuple[ResultTier, str, str]:
        """Calcula a faixa de resultado.

        Args:
            percentage: Percentual de acerto (0-100)

        Returns:
            Tuple de (tier, title, message)
        """
        for threshold, tier, title, message in self.TIER_THRESHOLDS:
            if percentage >= threshold:
                return tier, title, message

        return self.TIER_THRESHOLDS[-1][1:4]

    def summarize(self, score: int, total: int) -> ScoreSummary:
        """Monta o resumo final de uma tentativa."""
        percentage = self.calculate_percentage(score, total)
        tier, title, message = self.calculate_tier(percentage)

        return ScoreSummary(
            score=score,
            total=total,
            percentage=percentage,
            tier=tier,
            title=title,
            message=message,
        )

    def build_feedback(
        self, question: ChoiceQuestion | TextQuestion, candidate: Any
    ) -> AnswerFeedback:
        """Avalia uma resposta e monta o feedback exibido ao usuario.

        Args:
            question: Pergunta respondida
            candidate: Resposta candidata (indice ou texto)

        Returns:
            AnswerFeedback com resposta correta, alternativas e explicacao
        """
        if isinstance(question, ChoiceQuestion):
            correct_answer = question.correct_choice
            other_answers: tuple[str, ...] = ()
        else:
            correct_answer = question.answer.canonical
            other_answers = question.answer.alternates

        return AnswerFeedback(
            question_id=question.id,
            is_correct=evaluate(question, candidate),
            correct_answer=correct_answer,
            other_answers=other_answers,
            explanation=question.explanation,
        )
