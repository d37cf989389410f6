"""Document Codec - Serializacao do QuizDocument.

O formato serializado e exatamente o objeto ``{meta, questions}`` embutido
no bundle exportado. Respostas de texto saem como string (uma resposta) ou
lista (varias).

Campos ``answer2``, ``answer3``... ao lado de ``answer`` sao um formato
legado aceito apenas na importacao: sao incorporados a lista de respostas
e nunca escritos de volta.
"""

import json
import re
from typing import Any

from pydantic import ValidationError

from ..exceptions import DocumentFormatError
from ..logger import get_logger
from ..models.schemas import QuizDocument

logger = get_logger("document_codec")

LEGACY_ANSWER_KEY = re.compile(r"^answer(\d+)$")


def _fold_legacy_answers(question: dict[str, Any]) -> dict[str, Any]:
    """Incorpora answer2, answer3... na lista ``answer`` de perguntas de texto."""
    extra_keys = sorted(
        (int(m.group(1)), key)
        for key in question
        if (m := LEGACY_ANSWER_KEY.match(key)) and int(m.group(1)) >= 2
    )
    if not extra_keys:
        return question

    upgraded = {k: v for k, v in question.items() if not LEGACY_ANSWER_KEY.match(k)}
    if question.get("type") != "text":
        return upgraded

    base = question.get("answer")
    answers = list(base) if isinstance(base, list) else ([base] if base is not None else [])
    for _, key in extra_keys:
        value = question[key]
        if isinstance(value, str) and value.strip():
            answers.append(value.strip())

    upgraded["answer"] = answers
    logger.warning(
        f"Pergunta {question.get('id')}: campos legados {[k for _, k in extra_keys]} "
        "convertidos para lista de respostas"
    )
    return upgraded


def serialize_document(document: QuizDocument) -> dict[str, Any]:
    """Converte o documento para dict JSON-compativel."""
    return document.model_dump(mode="json", by_alias=True)


def deserialize_document(data: dict[str, Any]) -> QuizDocument:
    """Cria documento a partir do dict serializado.

    Raises:
        DocumentFormatError: Se o payload nao for um documento valido
    """
    if not isinstance(data, dict):
        raise DocumentFormatError("Documento deve ser um objeto com 'meta' e 'questions'")

    payload = dict(data)
    questions = payload.get("questions")
    if isinstance(questions, list):
        payload["questions"] = [
            _fold_legacy_answers(q) if isinstance(q, dict) else q for q in questions
        ]

    try:
        return QuizDocument.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Documento invalido: {e.error_count()} erro(s)")
        raise DocumentFormatError(
            f"Documento invalido: {e.error_count()} erro(s)",
            errors=[{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()],
        ) from e


def dumps(document: QuizDocument, indent: int | None = 2) -> str:
    """Serializa o documento como JSON (preservando caracteres nao-ASCII)."""
    return json.dumps(serialize_document(document), ensure_ascii=False, indent=indent)


def loads(text: str) -> QuizDocument:
    """Carrega documento de uma string JSON."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentFormatError(f"JSON invalido: {e.msg} (linha {e.lineno})") from e
    return deserialize_document(data)
