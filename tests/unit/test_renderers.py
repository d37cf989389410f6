# =============================================================================
# TESTES - Renderers
# =============================================================================
# Testes unitarios para as views do builder e dos players
# =============================================================================


class TestBuilderList:
    """Testes para a lista de perguntas do builder."""

    def test_items(self, sample_document):
        from quiz_builder.render.views import render_builder_list

        view = render_builder_list(sample_document, text_limit=10)

        assert view.total == 3
        first = view.items[0]
        assert first.type_label == "Multipla escolha"
        assert first.short_question == "Qual a mon..."
        assert first.answer_preview == "A) Monte Fuji"
        assert view.items[2].answer_preview == "東京 / tokyo / トウキョウ"

    def test_move_buttons_by_position(self, sample_document):
        from quiz_builder.render.views import render_builder_list

        view = render_builder_list(sample_document)

        assert [i.can_move_up for i in view.items] == [False, True, True]
        assert [i.can_move_down for i in view.items] == [True, True, False]

    def test_empty_document(self):
        from quiz_builder.models.schemas import QuizDocument
        from quiz_builder.render.views import render_builder_list

        view = render_builder_list(QuizDocument())

        assert view.is_empty
        assert view.items == []

    def test_shorten(self):
        from quiz_builder.render.views import shorten

        assert shorten("curto", 10) == "curto"
        assert shorten("abcdefghij", 10) == "abcdefghij"
        assert shorten("abcdefghijk", 10) == "abcdefghij..."


class TestSequentialView:
    """Testes para a tela do modo sequencial."""

    def test_awaiting(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.render.views import render_sequential

        view = render_sequential(SequentialSession(sample_document))

        assert view.progress_label == "1 / 3"
        assert len(view.question.choices) == 4
        assert view.question.input_disabled is False
        assert view.feedback is None
        assert view.can_advance is False

    def test_answered_highlights(self, sample_document):
        """Apos responder: correta em destaque, escolhida marcada como incorreta."""
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.render.views import render_sequential

        session = SequentialSession(sample_document)
        session.submit(2)

        view = render_sequential(session)

        highlights = [c.highlight for c in view.question.choices]
        assert highlights == ["correct", None, "incorrect", None]
        assert all(c.disabled for c in view.question.choices)
        assert view.feedback.is_correct is False
        assert "Monte Fuji" in view.feedback.headline
        assert view.can_advance is True

    def test_text_feedback_lists_alternates(self, sample_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.render.views import render_sequential

        session = SequentialSession(sample_document)
        for answer in (0, "Tokyo"):
            session.submit(answer)
            session.advance()
        session.submit("tokyo")

        view = render_sequential(session)

        assert view.question.text_answer == "tokyo"
        assert view.feedback.is_correct is True
        assert view.feedback.other_answers == ["tokyo", "トウキョウ"]

    def test_finished(self, two_question_document):
        from quiz_builder.engine.sequential_session import SequentialSession
        from quiz_builder.render.views import render_sequential

        session = SequentialSession(two_question_document)
        for answer in (0, "Tokyo"):
            session.submit(answer)
            session.advance()

        view = render_sequential(session)

        assert view.question is None
        assert view.result.percentage == 100


class TestListView:
    """Testes para a tela do modo lista."""

    def test_collecting(self, sample_document):
        from quiz_builder.engine.list_session import ListSession
        from quiz_builder.render.views import render_list

        session = ListSession(sample_document)
        session.record_answer("q1", 1)

        view = render_list(session)

        assert view.answered_count == 1
        assert view.can_grade is True
        assert view.items[0].question.choices[1].selected is True
        assert all(item.feedback is None for item in view.items)

    def test_graded(self, sample_document):
        from quiz_builder.engine.list_session import ListSession
        from quiz_builder.render.views import render_list

        session = ListSession(sample_document)
        session.record_answer("q1", 0)
        session.grade(confirm_gaps=True)

        view = render_list(session)

        assert view.can_grade is False
        assert view.result.score == 1
        assert view.items[0].feedback.is_correct is True
        assert view.items[1].feedback.is_correct is False
        assert view.items[1].answered is False
        assert view.items[1].question.input_disabled is True
