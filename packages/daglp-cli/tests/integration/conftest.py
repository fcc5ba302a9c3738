from pydaglp.test_utils.fixtures import git_workspace, history_file, merged_history_repo, mock_cli_bus, runner

__all__ = ["git_workspace", "history_file", "merged_history_repo", "mock_cli_bus", "runner"]
