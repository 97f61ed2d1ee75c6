"""Unit tests for open-source repository resolution."""

import pytest

from metrics_orchestrator.errors import ConfigValidationError
from metrics_orchestrator.open_source import (
    OpenSourceRepository,
    resolve_open_source_repositories,
    resolve_open_source_targets,
)


class TestResolveOpenSourceTargets:
    """Tests for resolve_open_source_targets."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_defaults_when_input_missing(self, raw) -> None:
        """Missing input returns the default repositories on main."""
        targets = resolve_open_source_targets(raw)
        assert [t.repository for t in targets] == ["masterror", "telegram-webapp-sdk"]
        assert all(t.contributors_branch == "main" for t in targets)

    def test_bare_names_trimmed(self) -> None:
        """Bare names are trimmed and default to main."""
        targets = resolve_open_source_targets('["alpha", " beta "]')
        assert targets == [
            OpenSourceRepository(repository="alpha", contributors_branch="main"),
            OpenSourceRepository(repository="beta", contributors_branch="main"),
        ]

    def test_descriptor_objects(self) -> None:
        """Objects may set the contributors branch."""
        targets = resolve_open_source_targets(
            '[{"repository": "repo", "contributors_branch": " develop "}, {"repository": "other"}]'
        )
        assert targets[0].contributors_branch == "develop"
        assert targets[1].contributors_branch == "main"

    def test_mixed_items(self) -> None:
        """Names and objects can be mixed."""
        names = resolve_open_source_repositories('["a", {"repository": "b"}]')
        assert names == ["a", "b"]

    @pytest.mark.parametrize("raw", ["not json", '{"repository": "x"}', "[1, 2]"])
    def test_invalid_json(self, raw: str) -> None:
        """Malformed or wrongly shaped input is rejected."""
        with pytest.raises(ConfigValidationError, match="invalid repositories JSON"):
            resolve_open_source_targets(raw)

    def test_empty_array(self) -> None:
        """An empty array is rejected."""
        with pytest.raises(ConfigValidationError, match="non-empty JSON array"):
            resolve_open_source_targets("[]")

    def test_blank_name(self) -> None:
        """Blank names are rejected."""
        with pytest.raises(ConfigValidationError, match="repository names cannot be empty strings"):
            resolve_open_source_targets('["ok", "  "]')

    def test_contributors_branch_with_whitespace(self) -> None:
        """Contributors branch must not contain whitespace."""
        with pytest.raises(ConfigValidationError, match="contributors_branch cannot contain whitespace"):
            resolve_open_source_targets('[{"repository": "r", "contributors_branch": "a b"}]')
