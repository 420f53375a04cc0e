"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests._fixtures.wiki_builder import WikiBuilder
from wikinav.cli import _build_parser, main


def _write_wiki(wiki_builder: WikiBuilder, config: str) -> Path:
    wiki_builder.write(
        {
            ".wikinav.yml": config,
            "design/game-ai/game-ai-learning-roadmap.md": "# Game AI Roadmap\n",
            "design/game-ai/module-01-fsm.md": "# State Machines\n",
        }
    )
    return wiki_builder.path()


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build"])
    assert args.verbose is True
    assert args.command == "build"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["check", "--verbose"])
    assert args.verbose is True
    assert args.command == "check"


def test_cli_strict_defaults_to_config() -> None:
    parser = _build_parser()
    assert parser.parse_args(["build"]).strict is None
    assert parser.parse_args(["build", "--strict"]).strict is True


def test_build_prints_json_sidebar(
    wiki_builder: WikiBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(wiki_builder, "topics:\n  design/game-ai: Game AI\n")

    main(["build", str(root)])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "/design/game-ai/": [
            {
                "text": "Game AI",
                "items": [
                    {"text": "Game AI Roadmap", "link": "/design/game-ai/game-ai-learning-roadmap.md"},
                    {"text": "State Machines", "link": "/design/game-ai/module-01-fsm.md"},
                ],
            }
        ]
    }


def test_build_writes_file_with_nav(
    wiki_builder: WikiBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(
        wiki_builder, "sections:\n  design: Design\ntopics:\n  design/game-ai: Game AI\n"
    )
    out = tmp_path / "nav.json"

    main(["build", str(root), "--out", str(out), "--nav"])

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert set(payload) == {"sidebar", "nav"}
    assert payload["nav"] == [
        {
            "text": "Design",
            "items": [{"text": "Game AI", "link": "/design/game-ai/game-ai-learning-roadmap"}],
        }
    ]
    assert "Navigation written to" in capsys.readouterr().out


def test_build_exits_on_missing_topic(
    wiki_builder: WikiBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(wiki_builder, "topics:\n  design/missing: Missing\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(root)])

    assert excinfo.value.code == 1
    assert "Topic directory not found" in capsys.readouterr().err


def test_build_exits_on_invalid_config(
    wiki_builder: WikiBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(wiki_builder, "topics: [oops]\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(root)])

    assert excinfo.value.code == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_check_reports_counts_and_fails_on_empty_topic(
    wiki_builder: WikiBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(
        wiki_builder, "topics:\n  design/game-ai: Game AI\n  art-audio/sound-design: Sound Design\n"
    )
    wiki_builder.mkdir("art-audio/sound-design")

    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(root)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert "/design/game-ai/: 2 entries" in captured.out
    assert "/art-audio/sound-design/: 0 entries" in captured.out
    assert "art-audio/sound-design" in captured.err


def test_check_prints_counts_even_with_strict_config(
    wiki_builder: WikiBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(
        wiki_builder,
        "strict: true\ntopics:\n  design/game-ai: Game AI\n  design/empty: Empty\n",
    )
    wiki_builder.mkdir("design/empty")

    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(root)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert "/design/game-ai/: 2 entries" in captured.out
    assert "/design/empty/: 0 entries" in captured.out
    assert "Empty topics: design/empty" in captured.err


def test_strict_config_still_fails_build(
    wiki_builder: WikiBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    root = _write_wiki(wiki_builder, "strict: true\ntopics:\n  design/empty: Empty\n")
    wiki_builder.mkdir("design/empty")

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(root)])

    assert excinfo.value.code == 1
    assert "Topics produced no sidebar entries" in capsys.readouterr().err


def test_log_file_captures_build(wiki_builder: WikiBuilder, tmp_path: Path) -> None:
    root = _write_wiki(
        wiki_builder, "topics:\n  design/game-ai: Game AI\n  design/empty: Empty\n"
    )
    wiki_builder.mkdir("design/empty")
    log_file = tmp_path / "wikinav.log"

    main(
        [
            "--quiet",
            "--log-file",
            str(log_file),
            "build",
            str(root),
            "--out",
            str(tmp_path / "nav.json"),
        ]
    )

    text = log_file.read_text(encoding="utf-8")
    assert "design/game-ai: topic role, 2 entries" in text
    assert "WARNING wikinav.orchestrator: design/empty: produced no sidebar entries" in text
    assert "Built navigation for 2 topic(s)" in text
