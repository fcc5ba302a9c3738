from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from .helpers import BASE_TIME, commit_at, merge_at, run_git_command

# --- Global & Core Fixtures ---


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def git_workspace(tmp_path: Path) -> Path:
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()
    run_git_command(repo_path, ["init", "-q"])
    run_git_command(repo_path, ["config", "user.email", "test@daglp.dev"])
    run_git_command(repo_path, ["config", "user.name", "DagLP Test"])
    return repo_path


@pytest.fixture
def merged_history_repo(git_workspace: Path):
    """
    构建一个带合并提交的仓库:

        A --- B --- C ------- M
         \\                  /
          F1 --- F2 --- F3

    最长路径为 A, F1, F2, F3, M。
    返回 (repo_path, {name: hash})。
    """
    repo = git_workspace
    hashes: Dict[str, str] = {}

    hashes["A"] = commit_at(repo, "A", BASE_TIME + 1000)
    main_branch = run_git_command(repo, ["rev-parse", "--abbrev-ref", "HEAD"])
    hashes["B"] = commit_at(repo, "B", BASE_TIME + 2000)
    hashes["C"] = commit_at(repo, "C", BASE_TIME + 3000)

    run_git_command(repo, ["checkout", "-q", "-b", "feature", hashes["A"]])
    hashes["F1"] = commit_at(repo, "F1", BASE_TIME + 1500)
    hashes["F2"] = commit_at(repo, "F2", BASE_TIME + 1600)
    hashes["F3"] = commit_at(repo, "F3", BASE_TIME + 1700)

    run_git_command(repo, ["checkout", "-q", main_branch])
    hashes["M"] = merge_at(repo, "feature", "M", BASE_TIME + 4000)
    return repo, hashes


# --- CLI Layer Fixtures ---


@pytest.fixture
def mock_cli_bus(monkeypatch):
    m_bus = MagicMock()
    # 让 bus.get 返回传入的 msg_id，方便测试断言语义
    m_bus.get.side_effect = lambda msg_id, **kwargs: msg_id
    monkeypatch.setattr("pydaglp.cli.commands.longest.bus", m_bus)
    return m_bus


@pytest.fixture
def history_file(tmp_path: Path):
    def _write(lines, name: str = "history.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
