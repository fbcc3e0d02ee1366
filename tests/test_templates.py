"""Tests for starter templates."""

import pytest

from folio.core.errors import UnknownDocumentKindError
from folio.core.pipeline import process
from folio.core.schema import DocumentKind
from folio.core.templates import render_template


class TestRenderTemplate:
    @pytest.mark.parametrize("kind", list(DocumentKind))
    def test_template_passes_validation(self, kind):
        """Every template is a valid document as-is."""
        process(render_template(kind), kind)

    def test_profile_template_has_header(self):
        text = render_template("profile")
        assert text.startswith("# Personal page")
        assert "contact_info:" in text

    def test_project_template_dates(self):
        text = render_template(DocumentKind.PROJECT)
        assert "start_date: 2024-01-15" in text

    def test_unknown_kind(self):
        with pytest.raises(UnknownDocumentKindError):
            render_template("resume")
