"""Quiz Schemas - Modelo do documento de quiz (Pydantic).

O documento serializado usa as chaves do bundle exportado (``displayType``,
``choiceImages``); os atributos Python usam snake_case via alias.
"""

from collections.abc import Iterable
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..exceptions import QuestionIndexError, QuestionNotFoundError
from .enums import DisplayType, QuestionType

CHOICE_COUNT = 4


class TextAnswerSet(BaseModel):
    """Conjunto ordenado e nao vazio de respostas aceitas.

    A primeira entrada e a resposta canonica exibida ao usuario; as demais
    sao grafias alternativas. Internamente e sempre uma lista; a forma
    escalar (string unica) so existe na serializacao.
    """

    model_config = ConfigDict(frozen=True)

    values: tuple[str, ...] = Field(..., min_length=1, description="Respostas aceitas")

    @field_validator("values")
    @classmethod
    def _reject_blank(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        if any(not v.strip() for v in values):
            raise ValueError("Respostas aceitas nao podem ser vazias")
        return values

    @classmethod
    def from_raw(cls, raw: Any) -> "TextAnswerSet":
        """Cria conjunto a partir de string ou lista (achatada um nivel).

        Args:
            raw: ``"Tokyo"`` ou ``["東京", "tokyo"]`` (listas aninhadas sao
                achatadas um nivel; entradas vazias sao descartadas)

        Returns:
            TextAnswerSet com ao menos uma entrada

        Raises:
            ValueError: Se nenhuma resposta nao vazia restar
        """
        if isinstance(raw, TextAnswerSet):
            return raw

        if raw is None:
            items: list[Any] = []
        elif isinstance(raw, str):
            items = [raw]
        elif isinstance(raw, Iterable):
            items = []
            for entry in raw:
                if isinstance(entry, (list, tuple)):
                    items.extend(entry)
                else:
                    items.append(entry)
        else:
            items = [raw]

        values = [str(v) for v in items if v is not None and str(v).strip()]
        if not values:
            raise ValueError("Pergunta de texto precisa de ao menos uma resposta")
        return cls(values=tuple(values))

    def to_raw(self) -> str | list[str]:
        """Forma serializada: string se houver uma resposta, lista caso contrario."""
        if len(self.values) == 1:
            return self.values[0]
        return list(self.values)

    @property
    def canonical(self) -> str:
        return self.values[0]

    @property
    def alternates(self) -> tuple[str, ...]:
        return self.values[1:]


# =============================================================================
# PERGUNTAS
# =============================================================================


class QuestionBase(BaseModel):
    """Campos comuns a todos os formatos de pergunta."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="ID unico e estavel da pergunta")
    question: str = Field(..., description="Enunciado da pergunta")
    image: str = Field(default="", description="URL ou data URI da imagem ('' = nenhuma)")
    explanation: str = Field(default="", description="Explicacao exibida apos a resposta")

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Enunciado da pergunta nao pode ser vazio")
        return value

    @field_validator("image", "explanation", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ChoiceQuestion(QuestionBase):
    """Pergunta de multipla escolha com exatamente 4 alternativas."""

    type: Literal["choice"] = "choice"
    choices: list[str] = Field(
        ..., min_length=CHOICE_COUNT, max_length=CHOICE_COUNT, description="4 alternativas"
    )
    choice_images: list[str] = Field(
        default_factory=lambda: [""] * CHOICE_COUNT,
        alias="choiceImages",
        description="Imagens alinhadas por posicao com as alternativas",
    )
    answer: int = Field(..., ge=0, le=CHOICE_COUNT - 1, strict=True, description="Indice correto (0-3)")

    @field_validator("choices")
    @classmethod
    def _choices_not_blank(cls, choices: list[str]) -> list[str]:
        if any(not c.strip() for c in choices):
            raise ValueError("Todas as 4 alternativas devem ser preenchidas")
        return choices

    @field_validator("choice_images", mode="before")
    @classmethod
    def _pad_choice_images(cls, value: Any) -> Any:
        if value is None:
            return [""] * CHOICE_COUNT
        if isinstance(value, list):
            if len(value) > CHOICE_COUNT:
                raise ValueError("choiceImages aceita no maximo 4 imagens")
            padded = ["" if v is None else v for v in value]
            return padded + [""] * (CHOICE_COUNT - len(padded))
        return value

    @property
    def correct_choice(self) -> str:
        return self.choices[self.answer]


class TextQuestion(QuestionBase):
    """Pergunta de resposta livre (uma ou mais grafias aceitas)."""

    type: Literal["text"] = "text"
    answer: TextAnswerSet = Field(..., description="Respostas aceitas (string ou lista)")

    @field_validator("answer", mode="before")
    @classmethod
    def _coerce_answer(cls, value: Any) -> TextAnswerSet:
        if isinstance(value, dict) and "values" in value:
            return TextAnswerSet.from_raw(value["values"])
        return TextAnswerSet.from_raw(value)

    @field_serializer("answer")
    def _serialize_answer(self, answer: TextAnswerSet) -> str | list[str]:
        return answer.to_raw()


Question = Annotated[Union[ChoiceQuestion, TextQuestion], Field(discriminator="type")]


# =============================================================================
# DOCUMENTO
# =============================================================================


class QuizMeta(BaseModel):
    """Configuracao geral do quiz."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", description="Titulo do quiz")
    shuffle: bool = Field(default=False, description="Embaralhar ordem das perguntas")
    display_type: DisplayType = Field(
        default=DisplayType.SEQUENTIAL, alias="displayType", description="Modo de exibicao"
    )


class QuizDocument(BaseModel):
    """Documento completo: meta + lista ordenada de perguntas.

    A ordem de ``questions`` define a ordem de apresentacao. Indices sao
    sempre derivados da posicao; buscas por ``id`` sao estaveis entre
    reordenacoes.
    """

    meta: QuizMeta = Field(default_factory=QuizMeta)
    questions: list[Question] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "QuizDocument":
        seen: set[str] = set()
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"ID de pergunta duplicado: {q.id}")
            seen.add(q.id)
        return self

    def ids(self) -> list[str]:
        return [q.id for q in self.questions]

    def index_of(self, question_id: str) -> int:
        """Posicao atual da pergunta com o ID informado."""
        for index, q in enumerate(self.questions):
            if q.id == question_id:
                return index
        raise QuestionNotFoundError(question_id)

    def get_question(self, question_id: str) -> ChoiceQuestion | TextQuestion:
        return self.questions[self.index_of(question_id)]

    def question_at(self, index: int) -> ChoiceQuestion | TextQuestion:
        """Pergunta na posicao informada (sem indices negativos)."""
        self.check_index(index)
        return self.questions[index]

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self.questions):
            raise QuestionIndexError(index, len(self.questions))


# =============================================================================
# RASCUNHO DE EDICAO
# =============================================================================


class QuestionDraft(BaseModel):
    """Conteudo do formulario de edicao de uma pergunta.

    Aceita campos incompletos; a validacao acontece em ``QuestionEditor.save``.
    """

    id: str
    type: QuestionType = QuestionType.CHOICE
    question: str = ""
    image: str = ""
    explanation: str = ""
    choices: list[str] = Field(default_factory=lambda: [""] * CHOICE_COUNT, max_length=CHOICE_COUNT)
    choice_images: list[str] = Field(
        default_factory=lambda: [""] * CHOICE_COUNT, max_length=CHOICE_COUNT
    )
    answer_index: int | None = Field(default=None, description="Alternativa correta selecionada")
    text_answers: list[str] = Field(default_factory=list, description="Respostas aceitas")

    @classmethod
    def from_question(cls, question: ChoiceQuestion | TextQuestion) -> "QuestionDraft":
        """Preenche o formulario com o conteudo atual da pergunta."""
        if isinstance(question, ChoiceQuestion):
            return cls(
                id=question.id,
                type=QuestionType.CHOICE,
                question=question.question,
                image=question.image,
                explanation=question.explanation,
                choices=list(question.choices),
                choice_images=list(question.choice_images),
                answer_index=question.answer,
            )
        return cls(
            id=question.id,
            type=QuestionType.TEXT,
            question=question.question,
            image=question.image,
            explanation=question.explanation,
            text_answers=list(question.answer.values),
        )
