"""Question Editor - Operacoes de CRUD sobre as perguntas do documento.

Todas as operacoes sao sincronas e deixam o documento estruturalmente
valido em qualquer saida, inclusive em validacoes rejeitadas.
"""

import uuid
from collections.abc import Iterable

from ..config import QuizBuilderConfig, get_config
from ..exceptions import QuestionNotFoundError
from ..logger import get_logger
from ..models.enums import DisplayType, QuestionType, ValidationReason
from ..models.results import EditResult
from ..models.schemas import (
    CHOICE_COUNT,
    ChoiceQuestion,
    QuestionDraft,
    QuizDocument,
    TextAnswerSet,
    TextQuestion,
)

logger = get_logger("editor")

DEFAULT_QUESTION_TEXT = "Nova pergunta"
DEFAULT_CHOICES = ["Alternativa 1", "Alternativa 2", "Alternativa 3", "Alternativa 4"]


class QuestionEditor:
    """Editor de perguntas com dono exclusivo do documento.

    Perguntas ``choice`` novas entram no documento imediatamente com valores
    padrao. Perguntas ``text`` novas apenas reservam o ID: entram no
    documento no primeiro ``save`` valido, pois exigem ao menos uma resposta.

    Attributes:
        document: Documento editado
        selected_id: Pergunta selecionada para edicao (None = nenhuma)
    """

    def __init__(self, document: QuizDocument, config: QuizBuilderConfig | None = None):
        self.document = document
        self.config = config or get_config()
        self.selected_id: str | None = None
        self._pending: dict[str, QuestionType] = {}

    # -------------------------------------------------------------------------
    # IDs
    # -------------------------------------------------------------------------

    def _new_id(self) -> str:
        taken = set(self.document.ids()) | set(self._pending)
        while True:
            candidate = f"{self.config.id_prefix}{uuid.uuid4().hex[:12]}"
            if candidate not in taken:
                return candidate

    # -------------------------------------------------------------------------
    # Criacao e edicao
    # -------------------------------------------------------------------------

    def add(self, question_type: QuestionType = QuestionType.CHOICE) -> QuestionDraft:
        """Cria uma pergunta nova e a seleciona para edicao.

        Args:
            question_type: choice (entra no documento agora) ou text
                (reservada ate o primeiro save valido)

        Returns:
            Rascunho do formulario de edicao da nova pergunta
        """
        question_id = self._new_id()
        self.selected_id = question_id

        if question_type == QuestionType.TEXT:
            self._pending[question_id] = QuestionType.TEXT
            logger.info(f"Pergunta de texto reservada: {question_id}")
            return QuestionDraft(id=question_id, type=QuestionType.TEXT)

        question = ChoiceQuestion(
            id=question_id,
            question=DEFAULT_QUESTION_TEXT,
            choices=list(DEFAULT_CHOICES),
            choice_images=[""] * CHOICE_COUNT,
            answer=0,
        )
        self.document.questions.append(question)
        logger.info(f"Pergunta adicionada: {question_id}")
        return QuestionDraft.from_question(question)

    def draft(self, question_id: str) -> QuestionDraft:
        """Conteudo atual do formulario de edicao para a pergunta."""
        if question_id in self._pending:
            return QuestionDraft(id=question_id, type=self._pending[question_id])
        return QuestionDraft.from_question(self.document.get_question(question_id))

    def select(self, question_id: str) -> QuestionDraft:
        draft = self.draft(question_id)
        self.selected_id = question_id
        return draft

    def _build_question(self, draft: QuestionDraft) -> ChoiceQuestion | TextQuestion | ValidationReason:
        question_text = draft.question.strip()
        if not question_text:
            return ValidationReason.MISSING_QUESTION

        common = {
            "id": draft.id,
            "question": question_text,
            "image": draft.image,
            "explanation": draft.explanation.strip(),
        }

        if draft.type == QuestionType.CHOICE:
            choices = [c.strip() for c in draft.choices]
            if len(choices) < CHOICE_COUNT or any(not c for c in choices):
                return ValidationReason.MISSING_CHOICE
            if draft.answer_index is None or not 0 <= draft.answer_index < CHOICE_COUNT:
                return ValidationReason.MISSING_CORRECT_ANSWER
            return ChoiceQuestion(
                **common,
                choices=choices,
                choice_images=list(draft.choice_images),
                answer=draft.answer_index,
            )

        answers = [a.strip() for a in draft.text_answers if a.strip()]
        if not answers:
            return ValidationReason.MISSING_TEXT_ANSWER
        return TextQuestion(**common, answer=TextAnswerSet(values=tuple(answers)))

    def save(self, draft: QuestionDraft) -> EditResult:
        """Valida o rascunho e substitui a pergunta (ID preservado).

        Ordem de validacao: enunciado; (choice) 4 alternativas e resposta
        correta; (text) ao menos uma resposta nao vazia.

        Returns:
            EditResult ok com a pergunta salva, ou rejeitado com o motivo

        Raises:
            QuestionNotFoundError: Se o ID nao existe nem esta reservado
        """
        is_pending = draft.id in self._pending
        if not is_pending:
            index = self.document.index_of(draft.id)

        built = self._build_question(draft)
        if isinstance(built, ValidationReason):
            logger.info(f"Pergunta {draft.id} rejeitada: {built.value}")
            return EditResult.rejected(built, draft=draft)

        if is_pending:
            del self._pending[draft.id]
            self.document.questions.append(built)
        else:
            self.document.questions[index] = built

        logger.info(f"Pergunta salva: {draft.id}")
        return EditResult(ok=True, question=built)

    def discard(self, question_id: str) -> None:
        """Descarta uma reserva de pergunta ainda nao salva."""
        if question_id not in self._pending:
            raise QuestionNotFoundError(question_id)
        del self._pending[question_id]
        if self.selected_id == question_id:
            self.selected_id = None

    # -------------------------------------------------------------------------
    # Estrutura
    # -------------------------------------------------------------------------

    def duplicate(self, index: int) -> EditResult:
        """Copia profunda da pergunta, inserida logo apos a original."""
        source = self.document.question_at(index)

        copy = source.model_copy(deep=True)
        copy.id = self._new_id()
        copy.question = f"{copy.question}{self.config.copy_marker}"

        self.document.questions.insert(index + 1, copy)
        logger.info(f"Pergunta duplicada: {source.id} -> {copy.id}")
        return EditResult(ok=True, question=copy)

    def delete(self, index: int, confirmed: bool = False) -> EditResult:
        """Remove a pergunta na posicao informada, apos confirmacao explicita."""
        question = self.document.question_at(index)

        if not confirmed:
            return EditResult.rejected(ValidationReason.NOT_CONFIRMED)

        del self.document.questions[index]
        if self.selected_id == question.id:
            self.selected_id = None

        logger.info(f"Pergunta removida: {question.id}")
        return EditResult(ok=True, question=question)

    def move_up(self, index: int) -> bool:
        """Troca com a vizinha de cima. Retorna False (no-op) na primeira posicao."""
        self.document.check_index(index)
        if index == 0:
            return False

        questions = self.document.questions
        questions[index - 1], questions[index] = questions[index], questions[index - 1]
        logger.debug(f"Pergunta movida para cima: {index} -> {index - 1}")
        return True

    def move_down(self, index: int) -> bool:
        """Troca com a vizinha de baixo. Retorna False (no-op) na ultima posicao."""
        self.document.check_index(index)
        questions = self.document.questions
        if index == len(questions) - 1:
            return False

        questions[index + 1], questions[index] = questions[index], questions[index + 1]
        logger.debug(f"Pergunta movida para baixo: {index} -> {index + 1}")
        return True

    # -------------------------------------------------------------------------
    # Importacao em lote
    # -------------------------------------------------------------------------

    def _with_fresh_ids(
        self, questions: Iterable[ChoiceQuestion | TextQuestion], taken: set[str]
    ) -> list[ChoiceQuestion | TextQuestion]:
        result = []
        for q in questions:
            q = q.model_copy(deep=True)
            if q.id in taken:
                q.id = self._new_id()
                while q.id in taken:
                    q.id = self._new_id()
            taken.add(q.id)
            result.append(q)
        return result

    def replace_all(self, questions: Iterable[ChoiceQuestion | TextQuestion]) -> int:
        """Substitui todas as perguntas do documento."""
        imported = self._with_fresh_ids(questions, set(self._pending))
        self.document.questions[:] = imported
        self.selected_id = None
        logger.info(f"Perguntas substituidas: {len(imported)}")
        return len(imported)

    def append_all(self, questions: Iterable[ChoiceQuestion | TextQuestion]) -> int:
        """Adiciona perguntas ao final, gerando novos IDs em caso de colisao."""
        imported = self._with_fresh_ids(questions, set(self.document.ids()) | set(self._pending))
        self.document.questions.extend(imported)
        logger.info(f"Perguntas adicionadas: {len(imported)}")
        return len(imported)

    def update_meta(
        self,
        title: str | None = None,
        shuffle: bool | None = None,
        display_type: DisplayType | None = None,
    ) -> None:
        meta = self.document.meta
        if title is not None:
            meta.title = title
        if shuffle is not None:
            meta.shuffle = shuffle
        if display_type is not None:
            meta.display_type = DisplayType(display_type)
