"""Quiz Builder Exceptions - Hierarquia de erros do nucleo.

Erros de validacao corrigiveis pelo usuario (campo faltando, resposta vazia)
NAO estao aqui: sao devolvidos como objetos de resultado com um
``ValidationReason``. As excecoes abaixo representam violacoes de contrato
(bug do chamador) ou falhas de formato em fronteiras de importacao/exportacao.
"""


class QuizBuilderError(Exception):
    """Erro base do quiz builder."""


# =============================================================================
# VIOLACOES DE CONTRATO
# =============================================================================


class QuizContractError(QuizBuilderError):
    """Precondicao violada pelo chamador (indice invalido, estado invalido)."""


class QuestionIndexError(QuizContractError, IndexError):
    """Indice de pergunta fora dos limites do documento."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Indice {index} fora dos limites (0..{size - 1})")


class QuestionNotFoundError(QuizContractError, KeyError):
    """ID de pergunta inexistente no documento."""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Pergunta {question_id} não encontrada")

    def __str__(self) -> str:
        return self.args[0]


class QuizNotFoundError(QuizContractError, KeyError):
    """ID de quiz inexistente no store."""

    def __init__(self, quiz_id: str):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz {quiz_id} não encontrado")

    def __str__(self) -> str:
        return self.args[0]


# =============================================================================
# FRONTEIRAS (importacao / exportacao)
# =============================================================================


class DocumentFormatError(QuizBuilderError, ValueError):
    """Payload serializado nao corresponde a um QuizDocument valido."""

    def __init__(self, message: str, errors: list | None = None):
        self.errors = errors or []
        super().__init__(message)


class CsvImportError(QuizBuilderError, ValueError):
    """Linha de CSV invalida."""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        self.message = message
        super().__init__(f"Linha {line_number}: {message}")


class ExportError(QuizBuilderError):
    """Documento nao pode ser exportado (ex.: nenhuma pergunta)."""
