"""Core module - shared state do servidor."""

from __future__ import annotations

from typing import Optional

from quiz_builder.config import get_config
from quiz_builder.storage.quiz_store import QuizStore

# =============================================================================
# GLOBAL STATE
# =============================================================================

# Store global de workspaces (quiz_id -> QuizWorkspace)
store: Optional[QuizStore] = None


def get_store() -> QuizStore:
    """Retorna store global, criando na primeira chamada."""
    global store
    if store is None:
        store = QuizStore(config=get_config())
    return store


def reset_store() -> QuizStore:
    """Descarta todos os workspaces (usado em testes e no shutdown)."""
    global store
    store = QuizStore(config=get_config())
    return store
