"""CSV Loader - Importacao de perguntas a partir de CSV.

Formato (cabecalho obrigatorio, colunas extras sao ignoradas)::

    type,question,choice1,choice2,choice3,choice4,answer,answer2,answer3,explanation,image

- choice: choice1..choice4 obrigatorios; ``answer`` e o indice 0-3
- text: ``answer`` obrigatorio; ``answer2``, ``answer3``... (enquanto
  preenchidos) viram grafias alternativas aceitas
"""

import csv
import io
import uuid
from dataclasses import dataclass, field
from enum import Enum

from pydantic import ValidationError

from ..config import get_config
from ..engine.editor import QuestionEditor
from ..exceptions import CsvImportError
from ..logger import get_logger
from ..models.enums import QuestionType
from ..models.schemas import CHOICE_COUNT, ChoiceQuestion, TextAnswerSet, TextQuestion

logger = get_logger("csv_loader")

REQUIRED_HEADERS = ("type", "question", "answer")

SAMPLE_CSV = """type,question,choice1,choice2,choice3,choice4,answer,answer2,answer3,explanation
choice,Qual a montanha mais alta do Japao?,Monte Fuji,Kita-dake,Yari-ga-take,Tate-yama,0,,,O Monte Fuji tem 3776m.
choice,Qual a altura da Torre de Toquio?,333m,444m,555m,666m,0,,,A Torre de Toquio tem 333m.
text,Qual a capital do Japao?,,,,,東京,tokyo,トウキョウ,Aceita variacoes de escrita.
text,What is the capital of Japan?,,,,,Tokyo,tokyo,TOKYO,Maiusculas e minusculas sao equivalentes.
text,Quanto vale pi?,,,,,3.14,3.141592,π,Aceita varias formas de resposta.
choice,1+1=?,1,2,3,4,1,,,
"""


class ImportMode(str, Enum):
    """Como as perguntas importadas entram no documento."""

    REPLACE = "replace"
    APPEND = "append"


@dataclass
class CsvParseResult:
    """Perguntas lidas e erros por linha (quando ``skip_invalid``)."""

    questions: list[ChoiceQuestion | TextQuestion] = field(default_factory=list)
    errors: list[CsvImportError] = field(default_factory=list)

    @property
    def multi_answer_count(self) -> int:
        return sum(
            1 for q in self.questions if isinstance(q, TextQuestion) and len(q.answer.values) > 1
        )


def _new_import_id() -> str:
    return f"{get_config().id_prefix}{uuid.uuid4().hex[:12]}"


def _parse_row(row: dict[str, str], line_number: int) -> ChoiceQuestion | TextQuestion:
    raw_type = row.get("type", "").strip().lower()
    if raw_type not in (QuestionType.CHOICE.value, QuestionType.TEXT.value):
        raise CsvImportError(line_number, f"type nao suportado: {row.get('type')!r} (use choice ou text)")

    question_text = row.get("question", "").strip()
    if not question_text:
        raise CsvImportError(line_number, "coluna question vazia")

    common = {
        "id": _new_import_id(),
        "question": question_text,
        "explanation": row.get("explanation", "").strip(),
        "image": row.get("image", "").strip(),
    }

    if raw_type == QuestionType.CHOICE.value:
        choices = [row.get(f"choice{i}", "").strip() for i in range(1, CHOICE_COUNT + 1)]
        if any(not c for c in choices):
            raise CsvImportError(line_number, "pergunta choice precisa de choice1 a choice4")

        raw_answer = row.get("answer", "").strip()
        if raw_answer not in {str(i) for i in range(CHOICE_COUNT)}:
            raise CsvImportError(line_number, f"answer de choice deve ser 0 a 3: {raw_answer!r}")

        return ChoiceQuestion(**common, choices=choices, answer=int(raw_answer))

    answers = [row.get("answer", "").strip()]
    if not answers[0]:
        raise CsvImportError(line_number, "answer de text vazio")

    number = 2
    while row.get(f"answer{number}", "").strip():
        answers.append(row[f"answer{number}"].strip())
        number += 1

    return TextQuestion(**common, answer=TextAnswerSet(values=tuple(answers)))


def parse_csv(text: str, skip_invalid: bool = False) -> CsvParseResult:
    """Le perguntas de um texto CSV.

    Args:
        text: Conteudo do arquivo CSV
        skip_invalid: Se True, linhas invalidas sao puladas e listadas em
            ``errors``; se False, a primeira linha invalida interrompe

    Returns:
        CsvParseResult com as perguntas lidas

    Raises:
        CsvImportError: Cabecalho invalido, nenhuma pergunta, ou linha
            invalida com ``skip_invalid=False``
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))

    headers: list[str] | None = None
    result = CsvParseResult()

    for values in reader:
        if not any(v.strip() for v in values):
            continue

        if headers is None:
            headers = [h.strip().lower() for h in values]
            missing = [h for h in REQUIRED_HEADERS if h not in headers]
            if missing:
                raise CsvImportError(
                    reader.line_num, f"colunas obrigatorias ausentes: {', '.join(missing)}"
                )
            continue

        row = {h: (values[i] if i < len(values) else "") for i, h in enumerate(headers)}
        try:
            result.questions.append(_parse_row(row, reader.line_num))
        except ValidationError as e:
            error = CsvImportError(reader.line_num, e.errors()[0]["msg"])
            if not skip_invalid:
                raise error from e
            result.errors.append(error)
        except CsvImportError as error:
            if not skip_invalid:
                raise
            result.errors.append(error)

    if headers is None:
        raise CsvImportError(1, "CSV vazio")
    if not result.questions:
        raise CsvImportError(reader.line_num, "nenhuma pergunta valida encontrada")

    for error in result.errors:
        logger.warning(f"Linha ignorada na importacao: {error}")
    logger.info(
        f"CSV lido: {len(result.questions)} perguntas "
        f"({result.multi_answer_count} com varias respostas)"
    )
    return result


def import_csv(
    editor: QuestionEditor,
    text: str,
    mode: ImportMode = ImportMode.APPEND,
    skip_invalid: bool = False,
) -> CsvParseResult:
    """Le o CSV e aplica as perguntas no documento via editor."""
    result = parse_csv(text, skip_invalid=skip_invalid)

    if ImportMode(mode) == ImportMode.REPLACE:
        editor.replace_all(result.questions)
    else:
        editor.append_all(result.questions)

    return result


def sample_csv() -> str:
    """CSV de exemplo, incluindo perguntas com varias respostas."""
    return SAMPLE_CSV
