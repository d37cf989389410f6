# =============================================================================
# TESTES - Export Bundle
# =============================================================================
# Testes unitarios para geracao do bundle HTML/JSON
# =============================================================================

import json

import pytest


class TestExportBundle:
    """Testes para arquivos exportados."""

    def test_sequential_files(self, sample_document):
        from quiz_builder.export.bundle import DATA_FILENAME, build_export_bundle

        bundle = build_export_bundle(sample_document)

        assert bundle.main_file == "quiz-allinone.html"
        assert set(bundle.files) == {"quiz-allinone.html", DATA_FILENAME, "README.txt"}
        html = bundle.files["quiz-allinone.html"]
        assert 'src="quiz.js"' in html
        assert 'href="quiz.css"' in html

    def test_list_files(self, sample_document):
        from quiz_builder.export.bundle import build_export_bundle
        from quiz_builder.models.enums import DisplayType

        sample_document.meta.display_type = DisplayType.LIST

        bundle = build_export_bundle(sample_document)

        assert bundle.main_file == "quiz-allinone-list.html"
        assert 'src="quiz-list.js"' in bundle.files["quiz-allinone-list.html"]

    def test_data_file_matches_document(self, sample_document):
        """Dados exportados sao o documento serializado sem alteracoes."""
        from quiz_builder.export.bundle import DATA_FILENAME, build_export_bundle
        from quiz_builder.storage.document_codec import serialize_document

        bundle = build_export_bundle(sample_document)

        assert json.loads(bundle.files[DATA_FILENAME]) == serialize_document(sample_document)

    def test_script_tag_escaped(self, sample_document):
        from quiz_builder.export.bundle import build_export_bundle

        sample_document.questions[0].explanation = "</script><b>x</b>"

        html = build_export_bundle(sample_document).files["quiz-allinone.html"]

        assert "</script><b>" not in html
        assert "<\\/script>" in html

    def test_empty_document_rejected(self):
        from quiz_builder.exceptions import ExportError
        from quiz_builder.export.bundle import build_export_bundle
        from quiz_builder.models.schemas import QuizDocument

        with pytest.raises(ExportError):
            build_export_bundle(QuizDocument())
