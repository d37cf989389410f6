# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Documentos, perguntas e clientes HTTP de exemplo
# =============================================================================

import pytest


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def client():
    """Cliente de teste FastAPI."""
    from fastapi.testclient import TestClient

    from server import app

    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# FIXTURES DE DADOS DE TESTE
# =============================================================================


@pytest.fixture
def sample_choice_question():
    """Pergunta de multipla escolha (resposta correta = indice 0)."""
    from quiz_builder.models.schemas import ChoiceQuestion

    return ChoiceQuestion(
        id="q1",
        question="Qual a montanha mais alta do Japao?",
        choices=["Monte Fuji", "Kita-dake", "Yari-ga-take", "Tate-yama"],
        answer=0,
        explanation="O Monte Fuji tem 3776m.",
    )


@pytest.fixture
def sample_text_question():
    """Pergunta de texto com uma unica resposta."""
    from quiz_builder.models.schemas import TextQuestion

    return TextQuestion(
        id="q2",
        question="What is the capital of Japan?",
        answer="Tokyo",
        explanation="Tokyo is the capital since 1868.",
    )


@pytest.fixture
def sample_multi_text_question():
    """Pergunta de texto com varias grafias aceitas."""
    from quiz_builder.models.schemas import TextQuestion

    return TextQuestion(
        id="q3",
        question="Qual a capital do Japao (qualquer escrita)?",
        answer=["東京", "tokyo", "トウキョウ"],
    )


@pytest.fixture
def sample_document(sample_choice_question, sample_text_question, sample_multi_text_question):
    """Documento com perguntas choice/text/text-multiplas."""
    from quiz_builder.models.schemas import QuizDocument, QuizMeta

    return QuizDocument(
        meta=QuizMeta(title="Quiz de Exemplo"),
        questions=[sample_choice_question, sample_text_question, sample_multi_text_question],
    )


@pytest.fixture
def two_question_document(sample_choice_question, sample_text_question):
    from quiz_builder.models.schemas import QuizDocument, QuizMeta

    return QuizDocument(
        meta=QuizMeta(title="Dois"),
        questions=[sample_choice_question, sample_text_question],
    )


@pytest.fixture
def sample_document_data():
    """Documento serializado (formato do bundle exportado)."""
    return {
        "meta": {"title": "Quiz Serializado", "shuffle": False, "displayType": "list"},
        "questions": [
            {
                "id": "q1",
                "type": "choice",
                "question": "1+1=?",
                "image": "",
                "choices": ["1", "2", "3", "4"],
                "choiceImages": ["", "", "", ""],
                "answer": 1,
                "explanation": "",
            },
            {
                "id": "q2",
                "type": "text",
                "question": "Capital do Japao?",
                "image": "",
                "answer": ["東京", "tokyo"],
                "explanation": "Aceita duas escritas.",
            },
        ],
    }


@pytest.fixture
def editor(sample_document):
    from quiz_builder.engine.editor import QuestionEditor

    return QuestionEditor(sample_document)
