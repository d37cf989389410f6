"""Quiz Storage - Serializacao, importacao CSV e workspaces em memoria."""

from .csv_loader import CsvParseResult, ImportMode, import_csv, parse_csv, sample_csv
from .document_codec import deserialize_document, dumps, loads, serialize_document
from .quiz_store import QuizStore, QuizWorkspace

__all__ = [
    "serialize_document",
    "deserialize_document",
    "dumps",
    "loads",
    "CsvParseResult",
    "ImportMode",
    "parse_csv",
    "import_csv",
    "sample_csv",
    "QuizStore",
    "QuizWorkspace",
]
