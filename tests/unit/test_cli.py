"""
Tests for the mfexport command line.
"""

import json

import pytest

from multiformat_export import cli


@pytest.fixture
def template_file(temp_dir, meeting_template):
    path = temp_dir / "meeting.md.j2"
    path.write_text(meeting_template, encoding="utf-8")
    return path


@pytest.fixture
def data_file(temp_dir, meeting_data):
    path = temp_dir / "meeting.json"
    path.write_text(json.dumps(meeting_data), encoding="utf-8")
    return path


class TestRender:

    def test_render_md_and_html(self, template_file, data_file, temp_dir, capsys):
        out_dir = temp_dir / "out"
        code = cli.main([
            "render", str(template_file),
            "--data", str(data_file),
            "--format", "md", "--format", "html",
            "--output-dir", str(out_dir),
            "--name", "weekly",
        ])
        assert code == 0
        assert (out_dir / "weekly.md").read_text(encoding="utf-8").startswith("# Weekly Sync")
        assert "<h1>Weekly Sync</h1>" in (out_dir / "weekly.html").read_text(encoding="utf-8")
        assert "✅" in capsys.readouterr().out

    def test_default_name_is_template_stem(self, template_file, data_file, temp_dir):
        code = cli.main([
            "render", str(template_file), "-d", str(data_file), "-f", "md", "-o", str(temp_dir),
        ])
        assert code == 0
        assert (temp_dir / "meeting.md.md").exists()

    def test_missing_template(self, temp_dir, capsys):
        assert cli.main(["render", str(temp_dir / "nope.md")]) == 1
        assert "Template not found" in capsys.readouterr().out

    def test_bad_data_file(self, template_file, temp_dir, capsys):
        bad = temp_dir / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        assert cli.main(["render", str(template_file), "--data", str(bad)]) == 1
        assert "Cannot read data file" in capsys.readouterr().out

    def test_template_error(self, temp_dir, capsys):
        broken = temp_dir / "broken.md"
        broken.write_text("{% for x in %}", encoding="utf-8")
        assert cli.main(["render", str(broken), "-f", "md", "-o", str(temp_dir)]) == 1
        assert "Template error" in capsys.readouterr().out

    def test_unknown_format_rejected(self, template_file):
        with pytest.raises(SystemExit):
            cli.main(["render", str(template_file), "--format", "xls"])


class TestMisc:

    def test_formats(self, capsys):
        assert cli.main(["formats"]) == 0
        out = capsys.readouterr().out
        for name in ("md", "html", "pdf", "docx"):
            assert name in out

    def test_no_command(self):
        assert cli.main([]) == 1

    def test_load_data_without_path(self):
        assert cli.load_data(None) == {}


class TestPdfConfiguration:
    """A broken PDF setup is reported, not raised"""

    @pytest.fixture
    def missing_template_settings(self, temp_dir, monkeypatch):
        from config.settings import Settings

        configured = Settings(pdf_template_path=temp_dir / "missing.typ")
        monkeypatch.setattr(cli, "settings", configured)
        return configured

    def test_missing_template_reported(self, template_file, data_file, temp_dir,
                                       missing_template_settings, capsys):
        code = cli.main([
            "render", str(template_file), "-d", str(data_file), "-f", "pdf", "-o", str(temp_dir),
        ])
        assert code == 1
        out = capsys.readouterr().out
        assert "❌" in out
        assert "Pdf error" in out

    def test_markdown_unaffected(self, template_file, data_file, temp_dir,
                                 missing_template_settings):
        code = cli.main([
            "render", str(template_file), "-d", str(data_file), "-f", "md", "-o", str(temp_dir),
        ])
        assert code == 0
        assert (temp_dir / "meeting.md.md").exists()

    def test_template_without_placeholder(self, template_file, temp_dir, monkeypatch, capsys):
        from config.settings import Settings

        bad = temp_dir / "page.typ"
        bad.write_text("#set page(paper: \"a4\")\n", encoding="utf-8")
        monkeypatch.setattr(cli, "settings", Settings(pdf_template_path=bad))

        assert cli.main(["render", str(template_file), "-f", "pdf", "-o", str(temp_dir)]) == 1
        assert "{{content}}" in capsys.readouterr().out
