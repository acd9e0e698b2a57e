from pathlib import Path

from bs4 import BeautifulSoup
import pytest
from typer.testing import CliRunner

from prismview.ui.cli import app
from prismview.ui.cli.diagnostics import CliEmitter
import prismview.ui.cli.state as cli_state


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_configuration(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PRISMVIEW_CONFIG", str(tmp_path / "missing-config.yml"))
    monkeypatch.delenv("PRISMVIEW_HOME", raising=False)


@pytest.fixture
def source_file(tmp_path: Path, cpp_source: str) -> Path:
    target = tmp_path / "main.cpp"
    target.write_text(cpp_source, encoding="utf-8")
    return target


def test_without_arguments_prints_help(runner: CliRunner) -> None:
    result = runner.invoke(app, [])

    assert "render" in result.output
    assert "permit" in result.output


def test_render_fragment(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(
        app,
        [
            "render",
            str(source_file),
            "--line-start",
            "5",
            "--column-start",
            "11",
            "--column-end",
            "25",
            "--title",
            "Moved <b>argc</b>",
            "--fragment",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("<pre>")
    assert '<span class="code-mark">std::move(argc)</span>' in result.stdout
    assert '<td class="analysis-warning-title">Moved <b>argc</b></td>' in result.stdout
    assert "<html" not in result.stdout


def test_render_page_with_theme(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(
        app, ["render", str(source_file), "-l", "2", "--theme", "okaidia", "--asset-root", "/assets"]
    )

    assert result.exit_code == 0, result.output
    soup = BeautifulSoup(result.stdout, "html.parser")
    hrefs = [link["href"] for link in soup.find_all("link")]
    assert "/assets/css/prism-okaidia.css" in hrefs
    assert soup.title.get_text() == "main.cpp"
    assert len(soup.find_all("code")) == 3


def test_render_uses_icon_root(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(
        app,
        [
            "render",
            str(source_file),
            "-l",
            "1",
            "--icon",
            "warning.svg",
            "--icon-root",
            "https://ci.example.com/images",
            "--fragment",
        ],
    )

    assert result.exit_code == 0, result.output
    assert '<img src="https://ci.example.com/images/warning.svg" class="icon-md">' in result.stdout


def test_render_uses_configured_theme(
    runner: CliRunner, source_file: Path, tmp_path: Path
) -> None:
    config = tmp_path / "config.yml"
    config.write_text("theme: TWILIGHT\n", encoding="utf-8")

    result = runner.invoke(app, ["render", str(source_file), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "css/prism-twilight.css" in result.stdout


def test_render_writes_output_file(
    runner: CliRunner, source_file: Path, tmp_path: Path
) -> None:
    target = tmp_path / "out" / "main.html"

    result = runner.invoke(app, ["render", str(source_file), "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert target.exists()
    assert "<!DOCTYPE html>" in target.read_text(encoding="utf-8")
    assert "<pre>" not in result.stdout


def test_render_rejects_unknown_theme(runner: CliRunner, source_file: Path) -> None:
    result = runner.invoke(app, ["render", str(source_file), "--theme", "neon"])

    assert result.exit_code == 1
    assert "Unknown theme" in result.output
    assert "OKAIDIA" in result.output


def test_render_warns_when_source_cannot_be_decoded(runner: CliRunner, tmp_path: Path) -> None:
    source = tmp_path / "binary.java"
    source.write_bytes(b"class A {}\n\xff\xfe\x00broken\n")

    result = runner.invoke(app, ["render", str(source), "--fragment"])

    assert result.exit_code == 0, result.output
    assert "Unable to read" in result.output
    assert "UnicodeDecodeError" in result.output
    assert not result.stdout.startswith("<pre>")


def test_render_requires_existing_file(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["render", str(tmp_path / "missing.java")])

    assert result.exit_code != 0


def test_render_reports_invalid_configuration(
    runner: CliRunner, source_file: Path, tmp_path: Path
) -> None:
    config = tmp_path / "config.yml"
    config.write_text("colour: red\n", encoding="utf-8")

    result = runner.invoke(app, ["render", str(source_file), "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_permit_prints_sorted_directories(
    runner: CliRunner, workspace: Path
) -> None:
    (workspace / "module-b").mkdir()
    (workspace / "module-a").mkdir()

    result = runner.invoke(
        app, ["permit", str(workspace), "glob:module-*", str(workspace / "lib")]
    )

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines == ["lib", "module-a", "module-b"]


def test_permit_reports_removed_directories(
    runner: CliRunner, workspace: Path, other_folder: Path
) -> None:
    result = runner.invoke(app, ["permit", str(workspace), str(other_folder), "src"])

    assert result.exit_code == 0
    assert workspace.joinpath("src").as_posix() in result.output
    assert "Removing non-workspace" in result.output


def test_permit_strict_fails_on_removed_directories(
    runner: CliRunner, workspace: Path, other_folder: Path
) -> None:
    result = runner.invoke(app, ["permit", "--strict", str(workspace), str(other_folder)])

    assert result.exit_code == 1


def test_permit_accepts_approved_directories(
    runner: CliRunner, workspace: Path, other_folder: Path, tmp_path: Path
) -> None:
    config = tmp_path / "config.yml"
    config.write_text(f"source_directories:\n  - {other_folder.as_posix()}\n", encoding="utf-8")
    extra = tmp_path / "extra"

    result = runner.invoke(
        app,
        [
            "permit",
            "--config",
            str(config),
            "--approved",
            extra.as_posix(),
            "--strict",
            str(workspace),
            str(other_folder),
            str(extra),
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(result.stdout.splitlines()) == sorted(
        [other_folder.as_posix(), extra.as_posix()]
    )


def test_themes_lists_catalogue(runner: CliRunner) -> None:
    result = runner.invoke(app, ["themes"])

    assert result.exit_code == 0, result.output
    assert "OKAIDIA" in result.stdout
    assert "prism-solarizedlight.css" in result.stdout


def test_cli_emitter_counts_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[tuple[str, str]] = []

    def fake_render(level: str, message: str, *, exception: BaseException | None = None) -> None:
        captured.append((level, message))

    monkeypatch.setattr(cli_state, "render_message", fake_render)
    emitter = CliEmitter(cli_state.CLIState())

    emitter.error("first")
    emitter.warning("second")
    emitter.error("third")

    assert emitter.error_count == 2
    assert captured == [("error", "first"), ("warning", "second"), ("error", "third")]


def test_cli_emitter_shows_events_when_verbose(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[tuple[str, str]] = []
    monkeypatch.setattr(
        "prismview.ui.cli.diagnostics.render_message",
        lambda level, message, **_: captured.append((level, message)),
    )
    quiet = cli_state.CLIState()
    verbose = cli_state.CLIState(verbosity=1)

    CliEmitter(quiet).event("page_written", {"path": "out.html"})
    CliEmitter(verbose).event("page_written", {"path": "out.html"})

    assert captured == [("info", "Wrote out.html")]
