from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from kodium.cli import app


def _write_project(root: Path) -> None:
    (root / "content" / "posts").mkdir(parents=True)
    (root / "kodium.yml").write_text(
        "site:\n  url: https://example.com\n  name: Example\n  description: Testing\n",
        encoding="utf-8",
    )
    (root / "content" / "posts" / "hello.md").write_text(
        "---\ntitle: Hello\ndate: 2023-06-01\ntags: [swift]\n---\nHello there.",
        encoding="utf-8",
    )


def test_build_writes_site(tmp_path: Path) -> None:
    runner = CliRunner()
    project = tmp_path / "proj"
    _write_project(project)

    result = runner.invoke(app, ["build", "--config", str(project)])

    assert result.exit_code == 0, result.output
    output = project / "Output"
    assert (output / "index.html").exists()
    assert (output / "posts" / "hello" / "index.html").exists()
    assert (output / "tags" / "swift" / "index.html").exists()
    assert (output / "feed.rss").exists()
    assert (output / "sitemap.xml").exists()
    assert "Example" in (output / "index.html").read_text(encoding="utf-8")


def test_build_respects_output_override(tmp_path: Path) -> None:
    runner = CliRunner()
    project = tmp_path / "proj"
    _write_project(project)
    target = tmp_path / "public_html"

    result = runner.invoke(app, ["build", "--config", str(project), "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert (target / "index.html").exists()
    assert not (project / "Output").exists()


def test_build_reports_content_errors(tmp_path: Path) -> None:
    runner = CliRunner()
    project = tmp_path / "proj"
    _write_project(project)
    (project / "content" / "posts" / "undated.md").write_text(
        "---\ntitle: Undated\n---\n", encoding="utf-8"
    )

    result = runner.invoke(app, ["build", "--config", str(project)])

    assert result.exit_code == 1
    assert "Content error" in result.output


def test_build_reports_colliding_pages(tmp_path: Path) -> None:
    runner = CliRunner()
    project = tmp_path / "proj"
    _write_project(project)
    (project / "content" / "posts.md").write_text("---\ntitle: Posts\n---\n", encoding="utf-8")

    result = runner.invoke(app, ["build", "--config", str(project)])

    assert result.exit_code == 1
    assert "Publishing failed" in result.output
    assert not (project / "Output").exists()

def test_build_rejects_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["build", "--config", str(tmp_path / "missing.yml")])

    assert result.exit_code != 0


def test_clean_removes_output(tmp_path: Path) -> None:
    runner = CliRunner()
    project = tmp_path / "proj"
    _write_project(project)
    assert runner.invoke(app, ["build", "--config", str(project)]).exit_code == 0

    result = runner.invoke(app, ["clean", "--config", str(project)])

    assert result.exit_code == 0, result.output
    assert not (project / "Output").exists()
