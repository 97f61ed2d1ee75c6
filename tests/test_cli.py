"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from metrics_orchestrator.cli.main import main


class TestTargetsCommand:
    """Tests for the targets subcommand."""

    def test_compact_json(self, targets_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the normalized document as compact JSON."""
        main(["targets", "--config", str(targets_file)])
        out = capsys.readouterr().out
        data = json.loads(out)
        assert [t["slug"] for t in data["targets"]] == [
            "octocat-profile",
            "hello-world",
            "secret-sauce",
        ]
        assert "\n  " not in out

    def test_pretty_json(self, targets_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--pretty indents the output."""
        main(["targets", "--config", str(targets_file), "--pretty"])
        out = capsys.readouterr().out
        assert '\n  "targets"' in out
        assert json.loads(out)["targets"][1]["branch_name"] == "ci/custom-hello"

    def test_validation_error_exits_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Configuration errors go to stderr with exit status 1."""
        config = tmp_path / "targets.yaml"
        config.write_text(
            "targets:\n"
            "  - {owner: octocat, repo: metrics, type: open_source}\n"
            "  - {owner: octocat, repo: metrics, type: open_source}\n",
            encoding="utf-8",
        )
        with pytest.raises(SystemExit) as exc_info:
            main(["targets", "--config", str(config)])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "duplicate slug 'metrics'" in captured.err
        assert captured.out == ""

    def test_missing_file_exits_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Unreadable config is reported with its path."""
        missing = tmp_path / "nope.yaml"
        with pytest.raises(SystemExit) as exc_info:
            main(["targets", "--config", str(missing)])
        assert exc_info.value.code == 1
        assert "failed to read configuration" in capsys.readouterr().err

    def test_config_required(self) -> None:
        """argparse rejects a missing --config."""
        with pytest.raises(SystemExit) as exc_info:
            main(["targets"])
        assert exc_info.value.code == 2

    def test_non_utf8_file_exits_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Undecodable config is reported on stderr without a traceback."""
        config = tmp_path / "targets.yaml"
        config.write_bytes(b"\xff\xfe")
        with pytest.raises(SystemExit) as exc_info:
            main(["targets", "--config", str(config)])
        assert exc_info.value.code == 1
        assert "failed to read configuration" in capsys.readouterr().err

    def test_subcommand_required(self) -> None:
        """argparse rejects a call without a subcommand."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


class TestOpenSourceCommand:
    """Tests for the open-source subcommand."""

    def test_default_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without input, prints the default repository names."""
        main(["open-source"])
        assert json.loads(capsys.readouterr().out) == ["masterror", "telegram-webapp-sdk"]

    def test_descriptors(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--descriptors prints objects."""
        main(["open-source", "--input", '[{"repository": "r", "contributors_branch": "dev"}]', "--descriptors"])
        assert json.loads(capsys.readouterr().out) == [
            {"repository": "r", "contributors_branch": "dev"}
        ]

    def test_invalid_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Invalid JSON exits 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["open-source", "--input", "[]"])
        assert exc_info.value.code == 1
        assert "non-empty JSON array" in capsys.readouterr().err


class TestRenderCommand:
    """Tests for the render subcommands."""

    def test_profile(self, capsys: pytest.CaptureFixture[str]) -> None:
        """render profile prints normalized inputs."""
        main(["render", "profile", "--target-user", "octocat", "--include-private", "yes"])
        data = json.loads(capsys.readouterr().out)
        assert data["target_user"] == "octocat"
        assert data["include_private"] == "true"

    def test_repository_uses_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Owner falls back to GITHUB_REPOSITORY."""
        monkeypatch.setenv("GITHUB_REPOSITORY", "octocat/workflows")
        main(["render", "repository", "--target-repo", "masterror"])
        data = json.loads(capsys.readouterr().out)
        assert data["target_owner"] == "octocat"
        assert data["branch_name"] == "ci/metrics-refresh-masterror"

    def test_repository_explicit_github_repo(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--github-repo wins over the environment."""
        main(["render", "repository", "--target-repo", "r", "--github-repo", "someone/x"])
        assert json.loads(capsys.readouterr().out)["target_owner"] == "someone"
