"""Quiz Router - Endpoints FastAPI do builder e dos players.

Os endpoints apenas encaminham comandos para o workspace do quiz e
devolvem snapshots/views. Erros corrigiveis pelo usuario viram HTTP 422
com o motivo; violacoes de contrato viram 4xx via exception handlers.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

import app_state

from .engine.list_session import ListSnapshot
from .engine.sequential_session import SequentialSnapshot
from .exceptions import (
    CsvImportError,
    DocumentFormatError,
    ExportError,
    QuestionIndexError,
    QuestionNotFoundError,
    QuizContractError,
    QuizNotFoundError,
)
from .logger import get_logger
from .models.enums import DisplayType, QuestionType
from .models.results import EditResult, GradeResult, RecordResult, SubmitResult
from .models.schemas import QuestionDraft
from .render.views import (
    BuilderListView,
    ListView,
    SequentialView,
    render_builder_list,
    render_list,
    render_sequential,
)
from .storage.csv_loader import ImportMode, import_csv
from .storage.document_codec import deserialize_document, serialize_document
from .storage.quiz_store import QuizStore, QuizWorkspace
from .export.bundle import build_export_bundle

logger = get_logger("router")

router = APIRouter(prefix="/quiz", tags=["Quiz"])


# =============================================================================
# REQUEST MODELS
# =============================================================================


class CreateQuizRequest(BaseModel):
    """Request para criar um quiz (documento opcional)."""

    document: dict[str, Any] | None = Field(default=None, description="Documento serializado")


class UpdateMetaRequest(BaseModel):
    """Request para alterar titulo/embaralhamento/modo de exibicao."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    shuffle: bool | None = None
    display_type: DisplayType | None = Field(default=None, alias="displayType")


class AddQuestionRequest(BaseModel):
    type: QuestionType = Field(default=QuestionType.CHOICE, description="choice ou text")


class SubmitAnswerRequest(BaseModel):
    """Resposta do modo sequencial (indice para choice, texto para text)."""

    answer: int | str | None = None
    question_id: str | None = Field(default=None, description="Deve ser a pergunta atual")


class RecordAnswerRequest(BaseModel):
    """Resposta do modo lista."""

    question_id: str
    answer: int | str | None = None


class GradeRequest(BaseModel):
    confirm_gaps: bool = Field(default=False, description="Corrigir mesmo com perguntas em branco")


class CsvImportRequest(BaseModel):
    csv: str = Field(..., description="Conteudo do arquivo CSV")
    mode: ImportMode = ImportMode.APPEND
    skip_invalid: bool = False


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_store() -> QuizStore:
    """Dependency para obter o store global."""
    return app_state.get_store()


def get_workspace(quiz_id: str, store: QuizStore = Depends(get_store)) -> QuizWorkspace:
    """Dependency para obter o workspace do quiz da URL."""
    return store.get(quiz_id)


def _reject(result: EditResult | SubmitResult) -> HTTPException:
    return HTTPException(status_code=422, detail={"reason": result.reason.value})


# =============================================================================
# DOCUMENTO
# =============================================================================


@router.post("", status_code=201)
async def create_quiz(request: CreateQuizRequest, store: QuizStore = Depends(get_store)):
    """Cria um quiz vazio ou a partir de um documento serializado."""
    document = deserialize_document(request.document) if request.document is not None else None
    workspace = store.create(document)
    return {"quiz_id": workspace.quiz_id, "document": serialize_document(workspace.document)}


@router.get("/{quiz_id}/status")
async def get_quiz_status(quiz_id: str, store: QuizStore = Depends(get_store)):
    """Retorna status do quiz (para debug/monitoramento)."""
    status = store.get_status(quiz_id)
    if not status.get("found"):
        raise HTTPException(status_code=404, detail=f"Quiz {quiz_id} não encontrado")
    return status


@router.delete("/{quiz_id}", status_code=204)
async def delete_quiz(quiz_id: str, store: QuizStore = Depends(get_store)):
    store.delete(quiz_id)


@router.get("/{quiz_id}/document")
async def get_document(workspace: QuizWorkspace = Depends(get_workspace)):
    """Documento serializado (mesmo formato embutido no bundle)."""
    return serialize_document(workspace.document)


@router.patch("/{quiz_id}/meta")
async def update_meta(request: UpdateMetaRequest, workspace: QuizWorkspace = Depends(get_workspace)):
    workspace.editor.update_meta(
        title=request.title, shuffle=request.shuffle, display_type=request.display_type
    )
    return workspace.document.meta.model_dump(mode="json", by_alias=True)


@router.get("/{quiz_id}/questions", response_model=BuilderListView)
async def list_questions(workspace: QuizWorkspace = Depends(get_workspace)):
    """Lista de perguntas do builder."""
    return render_builder_list(workspace.document)


# =============================================================================
# EDITOR
# =============================================================================


@router.post("/{quiz_id}/questions", status_code=201, response_model=QuestionDraft)
async def add_question(request: AddQuestionRequest, workspace: QuizWorkspace = Depends(get_workspace)):
    """Cria pergunta nova e devolve o formulario de edicao."""
    return workspace.editor.add(request.type)


@router.get("/{quiz_id}/questions/{question_id}/draft", response_model=QuestionDraft)
async def get_draft(question_id: str, workspace: QuizWorkspace = Depends(get_workspace)):
    return workspace.editor.select(question_id)


@router.put("/{quiz_id}/questions/{question_id}")
async def save_question(
    question_id: str, draft: QuestionDraft, workspace: QuizWorkspace = Depends(get_workspace)
):
    """Valida e salva o formulario de edicao (ID da URL prevalece)."""
    result = workspace.editor.save(draft.model_copy(update={"id": question_id}))
    if not result.ok:
        raise _reject(result)
    return result


@router.post("/{quiz_id}/questions/{index}/duplicate", status_code=201)
async def duplicate_question(index: int, workspace: QuizWorkspace = Depends(get_workspace)):
    return workspace.editor.duplicate(index)


@router.delete("/{quiz_id}/questions/{index}")
async def delete_question(
    index: int, confirm: bool = False, workspace: QuizWorkspace = Depends(get_workspace)
):
    """Remove pergunta; exige ``?confirm=true``."""
    result = workspace.editor.delete(index, confirmed=confirm)
    if not result.ok:
        raise _reject(result)
    return result


@router.post("/{quiz_id}/questions/{index}/move-up")
async def move_question_up(index: int, workspace: QuizWorkspace = Depends(get_workspace)):
    return {"moved": workspace.editor.move_up(index)}


@router.post("/{quiz_id}/questions/{index}/move-down")
async def move_question_down(index: int, workspace: QuizWorkspace = Depends(get_workspace)):
    return {"moved": workspace.editor.move_down(index)}


@router.post("/{quiz_id}/import/csv")
async def import_questions_csv(
    request: CsvImportRequest, workspace: QuizWorkspace = Depends(get_workspace)
):
    """Importa perguntas de CSV (substituindo ou adicionando)."""
    result = import_csv(
        workspace.editor, request.csv, mode=request.mode, skip_invalid=request.skip_invalid
    )
    return {
        "imported": len(result.questions),
        "multi_answer": result.multi_answer_count,
        "skipped": [{"line": e.line_number, "message": e.message} for e in result.errors],
        "total_questions": len(workspace.document.questions),
    }


# =============================================================================
# PLAYER - MODO SEQUENCIAL
# =============================================================================


@router.post("/{quiz_id}/play/sequential/restart", response_model=SequentialSnapshot)
async def restart_sequential(workspace: QuizWorkspace = Depends(get_workspace)):
    """Inicia ou reinicia a tentativa com o documento atual."""
    return workspace.start_sequential().snapshot()


@router.get("/{quiz_id}/play/sequential", response_model=SequentialView)
async def view_sequential(workspace: QuizWorkspace = Depends(get_workspace)):
    return render_sequential(workspace.get_sequential())


@router.post("/{quiz_id}/play/sequential/submit", response_model=SubmitResult)
async def submit_sequential(
    request: SubmitAnswerRequest, workspace: QuizWorkspace = Depends(get_workspace)
):
    result = workspace.get_sequential().submit(request.answer, question_id=request.question_id)
    if not result.accepted:
        raise _reject(result)
    return result


@router.post("/{quiz_id}/play/sequential/advance", response_model=SequentialSnapshot)
async def advance_sequential(workspace: QuizWorkspace = Depends(get_workspace)):
    return workspace.get_sequential().advance()


# =============================================================================
# PLAYER - MODO LISTA
# =============================================================================


@router.post("/{quiz_id}/play/list/restart", response_model=ListSnapshot)
async def restart_list(workspace: QuizWorkspace = Depends(get_workspace)):
    return workspace.start_list().snapshot()


@router.get("/{quiz_id}/play/list", response_model=ListView)
async def view_list(workspace: QuizWorkspace = Depends(get_workspace)):
    return render_list(workspace.get_list_session())


@router.post("/{quiz_id}/play/list/answer", response_model=RecordResult)
async def record_list_answer(
    request: RecordAnswerRequest, workspace: QuizWorkspace = Depends(get_workspace)
):
    return workspace.get_list_session().record_answer(request.question_id, request.answer)


@router.post("/{quiz_id}/play/list/grade", response_model=GradeResult)
async def grade_list(request: GradeRequest, workspace: QuizWorkspace = Depends(get_workspace)):
    """Corrige o modo lista; com perguntas em branco exige ``confirm_gaps``."""
    return workspace.get_list_session().grade(confirm_gaps=request.confirm_gaps)


# =============================================================================
# EXPORT
# =============================================================================


@router.get("/{quiz_id}/export")
async def export_quiz(workspace: QuizWorkspace = Depends(get_workspace)):
    """Arquivos do bundle (nome -> conteudo)."""
    bundle = build_export_bundle(workspace.document)
    return {
        "display_type": bundle.display_type.value,
        "main_file": bundle.main_file,
        "files": bundle.files,
    }


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================


def _error_response(status_code: int, detail: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(404, str(exc))


async def _bad_index_handler(request: Request, exc: QuestionIndexError) -> JSONResponse:
    return _error_response(400, str(exc))


async def _contract_handler(request: Request, exc: QuizContractError) -> JSONResponse:
    logger.warning(f"Violacao de contrato em {request.url.path}: {exc}")
    return _error_response(409, str(exc))


async def _document_format_handler(request: Request, exc: DocumentFormatError) -> JSONResponse:
    return _error_response(422, {"message": str(exc), "errors": exc.errors})


async def _csv_handler(request: Request, exc: CsvImportError) -> JSONResponse:
    return _error_response(422, {"line": exc.line_number, "message": exc.message})


async def _export_handler(request: Request, exc: ExportError) -> JSONResponse:
    return _error_response(400, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Mapeia excecoes do nucleo para respostas HTTP."""
    app.add_exception_handler(QuizNotFoundError, _not_found_handler)
    app.add_exception_handler(QuestionNotFoundError, _not_found_handler)
    app.add_exception_handler(QuestionIndexError, _bad_index_handler)
    app.add_exception_handler(QuizContractError, _contract_handler)
    app.add_exception_handler(DocumentFormatError, _document_format_handler)
    app.add_exception_handler(CsvImportError, _csv_handler)
    app.add_exception_handler(ExportError, _export_handler)
