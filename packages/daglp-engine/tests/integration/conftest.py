from pydaglp.test_utils.fixtures import git_workspace, merged_history_repo

__all__ = ["git_workspace", "merged_history_repo"]
