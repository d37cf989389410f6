"""Export Bundle - Arquivos gerados para embutir o quiz em uma pagina de CMS.

O documento serializado e embutido sem alteracoes. O runtime do player
(JS/CSS) e referenciado por nome de arquivo e nao e gerado aqui.
"""

import json
from dataclasses import dataclass, field
from string import Template

from ..exceptions import ExportError
from ..logger import get_logger
from ..models.enums import DisplayType
from ..models.schemas import QuizDocument
from ..storage.document_codec import dumps, serialize_document

logger = get_logger("export")

DATA_FILENAME = "quiz-data.json"

RUNTIME_FILES = {
    DisplayType.SEQUENTIAL: ("quiz-allinone.html", "quiz.js", "quiz.css"),
    DisplayType.LIST: ("quiz-allinone-list.html", "quiz-list.js", "quiz-list.css"),
}

DISPLAY_LABELS = {
    DisplayType.SEQUENTIAL: "uma pergunta por vez (estudo)",
    DisplayType.LIST: "todas as perguntas, correcao no final (prova)",
}

HTML_TEMPLATE = Template(
    """<!-- $title -->
<link rel="stylesheet" href="$css">
<div id="app" data-display-type="$display_type"></div>
<script>
const quizData = $data;
</script>
<script src="$script"></script>
"""
)

README_TEMPLATE = Template(
    """$title
==========

Modo de exibicao: $display_label
Perguntas: $total

Arquivos:
- $html: cole o conteudo inteiro em um bloco HTML personalizado do CMS
- $data_file: dados do quiz (mesmo conteudo embutido no HTML)
"""
)


@dataclass
class ExportBundle:
    """Arquivos prontos para download (nome -> conteudo)."""

    display_type: DisplayType
    files: dict[str, str] = field(default_factory=dict)

    @property
    def main_file(self) -> str:
        return RUNTIME_FILES[self.display_type][0]


def validate_for_export(document: QuizDocument) -> None:
    """Verifica se o documento pode ser exportado.

    Raises:
        ExportError: Se o documento nao tiver perguntas
    """
    if not document.questions:
        raise ExportError("Nenhuma pergunta para exportar. Adicione perguntas primeiro.")


def build_export_bundle(document: QuizDocument) -> ExportBundle:
    """Gera os arquivos do bundle conforme o modo de exibicao do documento."""
    validate_for_export(document)

    display_type = document.meta.display_type
    html_name, script_name, css_name = RUNTIME_FILES[display_type]
    title = document.meta.title or "Quiz"

    embedded = json.dumps(serialize_document(document), ensure_ascii=False)
    # Impede que "</script>" dentro de textos feche a tag
    embedded = embedded.replace("</", "<\\/")

    bundle = ExportBundle(display_type=display_type)
    bundle.files[html_name] = HTML_TEMPLATE.substitute(
        title=title.replace("--", "- -"),
        css=css_name,
        display_type=display_type.value,
        data=embedded,
        script=script_name,
    )
    bundle.files[DATA_FILENAME] = dumps(document)
    bundle.files["README.txt"] = README_TEMPLATE.substitute(
        title=title,
        display_label=DISPLAY_LABELS[display_type],
        total=len(document.questions),
        html=html_name,
        data_file=DATA_FILENAME,
    )

    logger.info(
        f"Bundle exportado: {html_name} ({len(document.questions)} perguntas, {display_type.value})"
    )
    return bundle
