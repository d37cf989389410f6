"""Renderers - Projecao de documento + sessao em estruturas de apresentacao.

Funcoes puras: nao alteram documento nem sessao. O HTML/CSS final fica a
cargo do frontend; aqui so decidimos O QUE aparece em cada estado.
"""

from typing import Any

from pydantic import BaseModel, Field

from ..config import get_config
from ..engine.list_session import ListSession
from ..engine.sequential_session import SequentialSession
from ..models.enums import DisplayType, QuestionType, SessionPhase
from ..models.results import AnswerFeedback, QuestionVerdict, ScoreSummary
from ..models.schemas import ChoiceQuestion, QuizDocument, TextQuestion

TYPE_LABELS = {
    QuestionType.CHOICE: "Multipla escolha",
    QuestionType.TEXT: "Texto",
}


# =============================================================================
# VIEW MODELS
# =============================================================================


class BuilderListItem(BaseModel):
    index: int
    id: str
    type: QuestionType
    type_label: str
    short_question: str
    answer_preview: str
    has_image: bool
    has_choice_images: bool
    can_move_up: bool
    can_move_down: bool


class BuilderListView(BaseModel):
    """Lista de perguntas do builder."""

    title: str
    display_type: DisplayType
    shuffle: bool
    total: int
    items: list[BuilderListItem] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class ChoiceOptionView(BaseModel):
    index: int
    label: str
    text: str
    image: str = ""
    selected: bool = False
    highlight: str | None = Field(default=None, description="correct | incorrect | None")
    disabled: bool = False


class QuestionView(BaseModel):
    id: str
    number: int
    type: QuestionType
    question: str
    image: str = ""
    choices: list[ChoiceOptionView] = Field(default_factory=list)
    text_answer: str | None = None
    input_disabled: bool = False


class FeedbackView(BaseModel):
    is_correct: bool
    headline: str
    other_answers: list[str] = Field(default_factory=list)
    explanation: str = ""


class SequentialView(BaseModel):
    """Tela do modo sequencial."""

    title: str
    phase: SessionPhase
    progress_label: str
    progress: float
    question: QuestionView | None = None
    feedback: FeedbackView | None = None
    can_advance: bool = False
    result: ScoreSummary | None = None


class ListItemView(BaseModel):
    question: QuestionView
    answered: bool
    feedback: FeedbackView | None = None


class ListView(BaseModel):
    """Tela do modo lista (prova)."""

    title: str
    phase: SessionPhase
    total: int
    answered_count: int
    items: list[ListItemView] = Field(default_factory=list)
    can_grade: bool = True
    result: ScoreSummary | None = None


# =============================================================================
# HELPERS
# =============================================================================


def shorten(text: str, limit: int) -> str:
    """Encurta texto para a lista do builder."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _answer_preview(question: ChoiceQuestion | TextQuestion) -> str:
    if isinstance(question, ChoiceQuestion):
        return f"{chr(ord('A') + question.answer)}) {question.correct_choice}"
    return " / ".join(question.answer.values)


def _feedback_view(feedback: AnswerFeedback) -> FeedbackView:
    if feedback.is_correct:
        headline = "🎉 Correto!"
    else:
        headline = f"❌ Incorreto. A resposta correta e «{feedback.correct_answer}»."
    return FeedbackView(
        is_correct=feedback.is_correct,
        headline=headline,
        other_answers=list(feedback.other_answers),
        explanation=feedback.explanation,
    )


def _question_view(
    question: ChoiceQuestion | TextQuestion,
    number: int,
    candidate: Any = None,
    revealed: bool = False,
) -> QuestionView:
    """Monta a pergunta; ``revealed`` destaca a alternativa correta e trava a entrada."""
    view = QuestionView(
        id=question.id,
        number=number,
        type=QuestionType(question.type),
        question=question.question,
        image=question.image,
        input_disabled=revealed,
    )

    if isinstance(question, ChoiceQuestion):
        for i, text in enumerate(question.choices):
            selected = candidate == i and not isinstance(candidate, bool)
            highlight = None
            if revealed and i == question.answer:
                highlight = "correct"
            elif revealed and selected:
                highlight = "incorrect"
            view.choices.append(
                ChoiceOptionView(
                    index=i,
                    label=chr(ord("A") + i),
                    text=text,
                    image=question.choice_images[i],
                    selected=selected,
                    highlight=highlight,
                    disabled=revealed,
                )
            )
    else:
        view.text_answer = candidate if isinstance(candidate, str) else None

    return view


# =============================================================================
# RENDERERS
# =============================================================================


def render_builder_list(document: QuizDocument, text_limit: int | None = None) -> BuilderListView:
    """Lista de perguntas do builder com os botoes habilitados por posicao."""
    limit = text_limit if text_limit is not None else get_config().preview_text_limit
    total = len(document.questions)

    items = []
    for index, q in enumerate(document.questions):
        question_type = QuestionType(q.type)
        items.append(
            BuilderListItem(
                index=index,
                id=q.id,
                type=question_type,
                type_label=TYPE_LABELS[question_type],
                short_question=shorten(q.question, limit),
                answer_preview=_answer_preview(q),
                has_image=bool(q.image),
                has_choice_images=isinstance(q, ChoiceQuestion) and any(q.choice_images),
                can_move_up=index > 0,
                can_move_down=index < total - 1,
            )
        )

    return BuilderListView(
        title=document.meta.title,
        display_type=document.meta.display_type,
        shuffle=document.meta.shuffle,
        total=total,
        items=items,
    )


def render_sequential(session: SequentialSession) -> SequentialView:
    """Tela atual do modo sequencial (pergunta, feedback ou resultado)."""
    snapshot = session.snapshot()
    view = SequentialView(
        title=session.meta.title,
        phase=snapshot.phase,
        progress_label=f"{min(snapshot.current_index + 1, snapshot.total)} / {snapshot.total}",
        progress=snapshot.progress,
    )

    if snapshot.phase == SessionPhase.FINISHED:
        view.result = snapshot.summary
        return view

    question = session.current_question
    answered = snapshot.phase == SessionPhase.ANSWERED
    view.question = _question_view(
        question,
        number=snapshot.current_index + 1,
        candidate=session.answers.get(question.id),
        revealed=answered,
    )
    if answered and snapshot.last_feedback is not None:
        view.feedback = _feedback_view(snapshot.last_feedback)
        view.can_advance = True

    return view


def render_list(session: ListSession) -> ListView:
    """Tela do modo lista; apos a correcao inclui veredito e explicacao por pergunta."""
    snapshot = session.snapshot()
    verdicts: dict[str, QuestionVerdict] = {}
    if snapshot.report is not None:
        verdicts = {v.question_id: v for v in snapshot.report.verdicts}

    items = []
    for index, question in enumerate(session.questions):
        verdict = verdicts.get(question.id)
        items.append(
            ListItemView(
                question=_question_view(
                    question,
                    number=index + 1,
                    candidate=snapshot.answers.get(question.id),
                    revealed=verdict is not None,
                ),
                answered=question.id in snapshot.answers,
                feedback=_feedback_view(verdict.feedback) if verdict else None,
            )
        )

    return ListView(
        title=session.meta.title,
        phase=snapshot.phase,
        total=snapshot.total,
        answered_count=snapshot.answered_count,
        items=items,
        can_grade=snapshot.phase == SessionPhase.COLLECTING,
        result=snapshot.report.summary if snapshot.report else None,
    )
