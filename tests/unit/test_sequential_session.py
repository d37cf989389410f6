# =============================================================================
# TESTES - Sequential Session
# =============================================================================
# Testes unitarios para o modo uma-pergunta-por-vez
# =============================================================================

import random

import pytest


class TestSequentialSessionStart:
    """Testes para inicio e restart."""

    def test_starts_awaiting_first(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase

        session = SequentialSession(sample_document)

        assert session.phase == SessionPhase.AWAITING_ANSWER
        assert session.current_index == 0
        assert session.current_question.id == "q1"
        assert session.score == 0

    def test_empty_document_finishes_immediately(self):
        """Documento sem perguntas termina com 0/0."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase
        from quiz_builder.models.schemas import QuizDocument

        session = SequentialSession(QuizDocument())

        assert session.phase == SessionPhase.FINISHED
        summary = session.summary()
        assert summary.score == 0
        assert summary.total == 0
        assert summary.percentage == 0

    def test_restart_clears_progress(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase

        session = SequentialSession(sample_document)
        session.submit(0)
        session.advance()

        session.restart()

        assert session.phase == SessionPhase.AWAITING_ANSWER
        assert session.current_index == 0
        assert session.score == 0
        assert session.answers == {}

    def test_questions_copied_from_document(self, sample_document):
        """Edicoes no documento nao afetam a tentativa em andamento."""
        from quiz_builder.engine.sequential_session import SequentialSession

        session = SequentialSession(sample_document)
        sample_document.questions[0].question = "Editada"

        assert session.current_question.question != "Editada"

    def test_shuffle_uses_rng(self, sample_document):
        """Embaralhamento e deterministico com RNG semeado."""
        from quiz_builder.engine.sequential_session import SequentialSession

        sample_document.meta.shuffle = True

        first = SequentialSession(sample_document, rng=random.Random(7))
        second = SequentialSession(sample_document, rng=random.Random(7))

        assert [q.id for q in first.questions] == [q.id for q in second.questions]
        assert sorted(q.id for q in first.questions) == ["q1", "q2", "q3"]
        assert [q.id for q in sample_document.questions] == ["q1", "q2", "q3"]


class TestSequentialSessionSubmit:
    """Testes para envio de respostas."""

    def test_correct_choice(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase

        session = SequentialSession(sample_document)

        result = session.submit(0)

        assert result.accepted is True
        assert result.phase == SessionPhase.ANSWERED
        assert result.feedback.is_correct is True
        assert session.score == 1

    def test_incorrect_choice(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession

        session = SequentialSession(sample_document)

        result = session.submit(2)

        assert result.feedback.is_correct is False
        assert result.feedback.correct_answer == "Monte Fuji"
        assert session.score == 0

    def test_blank_text_rejected(self, sample_document):
        """Resposta vazia nao muda o estado."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase, ValidationReason

        session = SequentialSession(sample_document)
        session.submit(0)
        session.advance()

        result = session.submit("   ")

        assert result.accepted is False
        assert result.reason == ValidationReason.EMPTY_CANDIDATE
        assert session.phase == SessionPhase.AWAITING_ANSWER
        assert "q2" not in session.answers

    def test_none_choice_rejected(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import ValidationReason

        session = SequentialSession(sample_document)

        result = session.submit(None)

        assert result.reason == ValidationReason.EMPTY_CANDIDATE

    @pytest.mark.parametrize("candidate", ["", "   "])
    def test_blank_string_on_choice_rejected(self, sample_document, candidate):
        """String vazia em choice nao conta como resposta."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase, ValidationReason

        session = SequentialSession(sample_document)

        result = session.submit(candidate)

        assert result.accepted is False
        assert result.reason == ValidationReason.EMPTY_CANDIDATE
        assert session.phase == SessionPhase.AWAITING_ANSWER
        assert session.answers == {}

    @pytest.mark.parametrize("candidate", ["0", 1.5, True])
    def test_wrong_type_on_choice_rejected(self, sample_document, candidate):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase, ValidationReason

        session = SequentialSession(sample_document)

        result = session.submit(candidate)

        assert result.reason == ValidationReason.INVALID_CANDIDATE
        assert session.phase == SessionPhase.AWAITING_ANSWER
        assert session.score == 0

    def test_wrong_type_on_text_rejected(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase, ValidationReason

        session = SequentialSession(sample_document)
        session.submit(0)
        session.advance()

        result = session.submit(42)

        assert result.reason == ValidationReason.INVALID_CANDIDATE
        assert session.phase == SessionPhase.AWAITING_ANSWER
        assert "q2" not in session.answers

    def test_double_submit_is_contract_error(self, sample_document):
        """A resposta de uma pergunta fica travada apos o envio."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.exceptions import QuizContractError

        session = SequentialSession(sample_document)
        session.submit(2)

        with pytest.raises(QuizContractError):
            session.submit(0)
        assert session.score == 0

    def test_wrong_question_id(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.exceptions import QuizContractError

        session = SequentialSession(sample_document)

        with pytest.raises(QuizContractError):
            session.submit(0, question_id="q2")

    def test_matching_question_id(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession

        session = SequentialSession(sample_document)

        assert session.submit(0, question_id="q1").accepted is True


class TestSequentialSessionAdvance:
    """Testes para avanco e fim da tentativa."""

    def test_advance_before_answer(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.exceptions import QuizContractError

        session = SequentialSession(sample_document)

        with pytest.raises(QuizContractError):
            session.advance()

    def test_full_run(self, sample_document):
        """Fluxo completo: 2 de 3 corretas."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import ResultTier, SessionPhase

        session = SequentialSession(sample_document)

        session.submit(0)
        session.advance()
        session.submit(" tokyo ")
        session.advance()
        session.submit("Kyoto")
        snapshot = session.advance()

        assert snapshot.phase == SessionPhase.FINISHED
        assert snapshot.summary.score == 2
        assert snapshot.summary.total == 3
        assert snapshot.summary.percentage == 67
        assert snapshot.summary.tier == ResultTier.GOOD

    def test_two_questions_one_correct(self, two_question_document):
        """Correta na primeira, incorreta na segunda: 1 de 2."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.models.enums import SessionPhase

        session = SequentialSession(two_question_document)

        session.submit(0)
        session.advance()
        session.submit("Osaka")
        snapshot = session.advance()

        assert snapshot.phase == SessionPhase.FINISHED
        assert snapshot.summary.score == 1
        assert snapshot.summary.total == 2

    def test_finished_rejects_commands(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.exceptions import QuizContractError

        session = SequentialSession(sample_document)
        for answer in (0, "Tokyo", "東京"):
            session.submit(answer)
            session.advance()

        with pytest.raises(QuizContractError):
            session.submit(0)
        with pytest.raises(QuizContractError):
            session.advance()
        assert session.current_question is None

    def test_snapshot_progress(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession

        session = SequentialSession(sample_document)
        session.submit(0)

        snapshot = session.snapshot()

        assert snapshot.answered_count == 1
        assert snapshot.progress == pytest.approx(1 / 3)
        assert snapshot.last_feedback is not None
        assert snapshot.summary is None
