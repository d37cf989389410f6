"""Quiz Store - Workspaces de quiz em memoria.

Cada workspace e dono exclusivo de um documento, do editor sobre ele e das
sessoes de jogo em andamento. Nao ha persistencia: o store vive enquanto o
processo vive.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from typing import Any

from ..config import QuizBuilderConfig, get_config
from ..engine.editor import QuestionEditor
from ..engine.list_session import ListSession
from ..engine.sequential_session import SequentialSession
from ..exceptions import QuizNotFoundError
from ..logger import get_logger
from ..models.schemas import QuizDocument, QuizMeta

logger = get_logger("quiz_store")


@dataclass
class QuizWorkspace:
    """Documento + editor + sessoes de um quiz.

    Attributes:
        quiz_id: ID unico do workspace
        document: Documento editado
        editor: Editor com dono exclusivo do documento
        sequential: Sessao sequencial em andamento (None = nao iniciada)
        list_session: Sessao de modo lista em andamento (None = nao iniciada)
    """

    quiz_id: str
    document: QuizDocument
    editor: QuestionEditor
    sequential: SequentialSession | None = None
    list_session: ListSession | None = None
    rng: random.Random = field(default_factory=random.Random)

    def start_sequential(self) -> SequentialSession:
        """Inicia (ou reinicia) a sessao sequencial com o documento atual."""
        self.sequential = SequentialSession(self.document, rng=self.rng)
        return self.sequential

    def start_list(self) -> ListSession:
        """Inicia (ou reinicia) a sessao de modo lista com o documento atual."""
        self.list_session = ListSession(self.document)
        return self.list_session

    def get_sequential(self) -> SequentialSession:
        return self.sequential or self.start_sequential()

    def get_list_session(self) -> ListSession:
        return self.list_session or self.start_list()


class QuizStore:
    """Store em memoria de workspaces de quiz.

    Example:
        >>> store = QuizStore()
        >>> workspace = store.create()
        >>> store.get(workspace.quiz_id) is workspace
        True
    """

    KEY_PREFIX = "quiz"

    def __init__(self, config: QuizBuilderConfig | None = None):
        self.config = config or get_config()
        self._workspaces: dict[str, QuizWorkspace] = {}

    def _new_quiz_id(self) -> str:
        return f"{self.KEY_PREFIX}-{uuid.uuid4().hex[:12]}"

    def new_document(self) -> QuizDocument:
        """Documento vazio com os padroes da configuracao."""
        return QuizDocument(
            meta=QuizMeta(
                title=self.config.default_title,
                shuffle=self.config.default_shuffle,
                display_type=self.config.default_display_type,
            )
        )

    def create(self, document: QuizDocument | None = None) -> QuizWorkspace:
        """Cria workspace para o documento (ou um documento vazio).

        Args:
            document: Documento inicial; None usa os padroes da configuracao

        Returns:
            QuizWorkspace registrado
        """
        document = document if document is not None else self.new_document()
        quiz_id = self._new_quiz_id()

        workspace = QuizWorkspace(
            quiz_id=quiz_id,
            document=document,
            editor=QuestionEditor(document, config=self.config),
        )
        self._workspaces[quiz_id] = workspace

        logger.info(f"Quiz criado: {quiz_id} ({len(document.questions)} perguntas)")
        return workspace

    def get(self, quiz_id: str) -> QuizWorkspace:
        """Busca workspace.

        Raises:
            QuizNotFoundError: Se o quiz nao existir
        """
        try:
            return self._workspaces[quiz_id]
        except KeyError:
            logger.debug(f"Quiz não encontrado: {quiz_id}")
            raise QuizNotFoundError(quiz_id) from None

    def delete(self, quiz_id: str) -> None:
        """Remove workspace do store."""
        if self._workspaces.pop(quiz_id, None) is None:
            raise QuizNotFoundError(quiz_id)
        logger.info(f"Quiz deletado: {quiz_id}")

    def list_quizzes(self) -> list[str]:
        return list(self._workspaces)

    def get_status(self, quiz_id: str) -> dict[str, Any]:
        """Retorna status resumido do quiz.

        Args:
            quiz_id: ID do quiz

        Returns:
            Dict com status do quiz
        """
        workspace = self._workspaces.get(quiz_id)
        if workspace is None:
            return {
                "quiz_id": quiz_id,
                "found": False,
                "error": "Quiz não encontrado",
            }

        document = workspace.document
        return {
            "quiz_id": quiz_id,
            "found": True,
            "title": document.meta.title,
            "display_type": document.meta.display_type.value,
            "total_questions": len(document.questions),
            "sequential_phase": workspace.sequential.phase.value if workspace.sequential else None,
            "list_phase": workspace.list_session.phase.value if workspace.list_session else None,
        }
