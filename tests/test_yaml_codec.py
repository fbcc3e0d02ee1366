"""Tests for YAML decode/encode."""

from datetime import date

import pytest

from folio.core.errors import YamlSyntaxError
from folio.core.schema import ProjectDocument
from folio.core.yaml_codec import decode, encode


class TestDecode:
    """Tests for decode()."""

    def test_decode_mapping(self):
        """Plain mapping decodes to a dict."""
        tree = decode("name: Ada\nbio: Engineer\n")
        assert tree == {"name": "Ada", "bio": "Engineer"}

    def test_decode_empty_document(self):
        """Empty text decodes to None."""
        assert decode("") is None

    def test_decode_date_scalar(self):
        """Unquoted ISO dates become date objects."""
        tree = decode("start_date: 2024-01-15\n")
        assert tree["start_date"] == date(2024, 1, 15)

    def test_malformed_yaml_raises(self):
        """Unbalanced flow sequence is a syntax error."""
        with pytest.raises(YamlSyntaxError) as exc_info:
            decode("name: [unclosed\n")
        assert exc_info.value.code == "INVALID_YAML"
        assert exc_info.value.message.startswith("Failed to parse YAML")

    def test_duplicate_top_level_key_raises(self):
        """Repeated key is rejected instead of last-one-wins."""
        with pytest.raises(YamlSyntaxError) as exc_info:
            decode("name: A\nname: B\n")
        assert "duplicated mapping key" in exc_info.value.message

    def test_duplicate_nested_key_raises(self):
        """Duplicates inside list items are rejected too."""
        text = (
            "name: A\n"
            "bio: B\n"
            "skills:\n"
            "  - name: Python\n"
            "    name: Go\n"
        )
        with pytest.raises(YamlSyntaxError):
            decode(text)

    def test_duplicate_integer_key_raises(self):
        """Non-string keys are checked for duplicates too."""
        with pytest.raises(YamlSyntaxError):
            decode("1: a\n1: b\n")

    @pytest.mark.parametrize("text", ["true: a\n1: b\n", "false: a\n0: b\n", "1: a\n1.0: b\n"])
    def test_equal_but_distinct_keys_allowed(self, text):
        """Keys of different YAML types are not duplicates."""
        tree = decode(text)
        assert isinstance(tree, dict)

    def test_bool_key_beside_profile_fields(self):
        """Stray non-string keys do not break an otherwise valid document."""
        tree = decode("name: Ada\nbio: Engineer\ntrue: x\n1: y\n")
        assert tree["name"] == "Ada"

    def test_same_key_in_sibling_mappings_allowed(self):
        """The same key in different list items is not a duplicate."""
        tree = decode("skills:\n  - name: Python\n  - name: Go\n")
        assert tree == {"skills": [{"name": "Python"}, {"name": "Go"}]}


class TestEncode:
    """Tests for encode()."""

    def test_keeps_declared_field_order(self):
        """Fields come out in model order, not sorted."""
        doc = ProjectDocument(name="Zed", description="Alpha")
        text = encode(doc)
        assert text.index("name:") < text.index("description:")

    def test_omits_absent_fields(self):
        """None-valued optional fields are not emitted."""
        doc = ProjectDocument(name="Zed", description="Alpha")
        text = encode(doc)
        assert "tech_stack" not in text
        assert "null" not in text

    def test_multiline_string_uses_block_style(self):
        """Multi-line text is emitted as a literal block."""
        text = encode({"bio": "line one\nline two"})
        assert "bio: |" in text
        assert decode(text) == {"bio": "line one\nline two"}

    def test_dates_emitted_as_iso(self):
        """Dates are written as plain YYYY-MM-DD scalars."""
        doc = ProjectDocument(
            name="Zed", description="Alpha", start_date=date(2024, 1, 15)
        )
        assert "start_date: 2024-01-15" in encode(doc)

    def test_unicode_kept_readable(self):
        """Non-ASCII text is not escaped."""
        assert "María" in encode({"name": "María"})
