# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Ambiente isolado para cada teste: variaveis de ambiente, config e store
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env():
    """Configura variaveis de ambiente e recarrega config/store."""
    env_vars = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "ERROR",
        "QUIZ_COPY_MARKER": " (copia)",
        "QUIZ_DEFAULT_TITLE": "Novo Quiz",
    }
    with patch.dict(os.environ, env_vars):
        from quiz_builder.config import reload_config

        import app_state

        reload_config()
        app_state.reset_store()
        yield

    from quiz_builder.config import reload_config

    reload_config()


@pytest.fixture
def clean_env():
    """Limpa variaveis de ambiente para testes isolados."""
    with patch.dict(os.environ, {}, clear=True):
        yield
