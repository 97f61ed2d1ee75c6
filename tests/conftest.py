"""Pytest fixtures for metrics-orchestrator tests."""

from pathlib import Path
from typing import Callable

import pytest

from metrics_orchestrator.models.raw import TargetEntry, TargetKind


def make_entry(**kwargs) -> TargetEntry:
    """Build a TargetEntry with open-source defaults; kwargs override."""
    defaults = {
        "owner": "octocat",
        "repository": "hello-world",
        "kind": TargetKind.OPEN_SOURCE,
    }
    defaults.update(kwargs)
    return TargetEntry(**defaults)


@pytest.fixture
def entry_factory() -> Callable[..., TargetEntry]:
    """Factory for TargetEntry instances."""
    return make_entry


@pytest.fixture
def sample_targets_yaml() -> str:
    """Targets document mixing kinds and key aliases."""
    return """
targets:
  - owner: octocat
    type: profile
  - user: octocat
    repo: hello-world
    type: open_source
    branch: ci/custom-hello
  - owner: octocat
    repository: Secret_Sauce
    type: private_project
    display_name: "  Secret  "
    badge:
      style: flat_square
      widget:
        columns: 2
        alignment: center
        border_radius: 8
"""


@pytest.fixture
def targets_file(tmp_path: Path, sample_targets_yaml: str) -> Path:
    """sample_targets_yaml written to disk."""
    path = tmp_path / "targets.yaml"
    path.write_text(sample_targets_yaml, encoding="utf-8")
    return path
