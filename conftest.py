# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Ambiente isolado para testes unitários sem chamadas ao modelo
# =============================================================================

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Adicionar root ao path (server.py fica na raiz)
sys.path.insert(0, str(Path(__file__).parent))


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_env():
    """Configura variáveis de ambiente para testes."""
    env_vars = {
        "ANTHROPIC_API_KEY": "test-key-123",
        "QUIZ_GENERATION_TIMEOUT": "1",
        "QUIZ_FALLBACK_MARKER": "true",
        "LOG_LEVEL": "ERROR",
    }
    with patch.dict(os.environ, env_vars):
        yield


@pytest.fixture
def clean_env():
    """Limpa variáveis de ambiente para testes isolados."""
    with patch.dict(os.environ, {}, clear=True):
        yield
