"""Tests for the folio CLI."""

from typer.testing import CliRunner

from folio.cli.commands import app

runner = CliRunner()


class TestValidateCommand:
    """Tests for `folio validate`."""

    def test_valid_profile(self, tmp_path, profile_yaml):
        path = tmp_path / "profile.yaml"
        path.write_text(profile_yaml, encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "Valid profile document" in result.output

    def test_invalid_project_lists_issues(self, tmp_path):
        path = tmp_path / "project.yaml"
        path.write_text("name: App\n", encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path), "--kind", "project"])

        assert result.exit_code == 1
        assert "description" in result.output
        assert "Required" in result.output

    def test_duplicate_keys(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text("name: A\nname: B\nbio: C\n", encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "duplicated mapping key" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "File not found" in result.output


class TestSlugCommand:
    def test_slug(self):
        result = runner.invoke(app, ["slug", "My Awesome Project!! 2024"])
        assert result.exit_code == 0
        assert result.output.strip() == "my-awesome-project-2024"

    def test_empty_slug(self):
        result = runner.invoke(app, ["slug", "!!!"])
        assert result.exit_code == 1


class TestTemplateCommand:
    def test_prints_template(self):
        result = runner.invoke(app, ["template", "project"])
        assert result.exit_code == 0
        assert result.output.startswith("# Project page")

    def test_writes_file(self, tmp_path):
        out = tmp_path / "profile.yaml"
        result = runner.invoke(app, ["template", "profile", "--output", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith("# Personal page")
