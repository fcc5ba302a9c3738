import logging
import shutil
import subprocess
from pathlib import Path
from typing import Iterator, List

from pydaglp.interfaces.exceptions import CommitSourceError

logger = logging.getLogger(__name__)

# git log 的时间占位符
TIMESTAMP_FORMATS = {
    "author": "%at",
    "committer": "%ct",
}


class GitCommitLog:
    """
    以 `git log --topo-order` 的形式从仓库中读取提交记录，
    每行为 `<hash> <timestamp> <parent> ...`，可直接交给 parse_records。
    """

    def __init__(self, repo_dir: Path, timestamp_kind: str = "author"):
        if not shutil.which("git"):
            raise CommitSourceError("'git' command not found. Install Git and make sure it is on PATH.")
        if timestamp_kind not in TIMESTAMP_FORMATS:
            raise CommitSourceError(
                f"Unknown timestamp kind '{timestamp_kind}', expected one of: {', '.join(TIMESTAMP_FORMATS)}"
            )

        self.root = repo_dir.resolve()
        self.timestamp_kind = timestamp_kind
        self._ensure_git_repo()

    def _ensure_git_repo(self):
        result = self._run(["rev-parse", "--is-inside-work-tree"], check=False)
        if result.returncode != 0 or result.stdout.strip() != "true":
            raise CommitSourceError(f"'{self.root}' is not a Git repository.")

    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ["git"] + args,
                cwd=self.root,
                capture_output=True,
                text=True,
                check=check,
            )
        except subprocess.CalledProcessError as e:
            logger.error(f"Git command error: {e.stderr}")
            raise CommitSourceError(f"Git command failed: git {' '.join(args)}\n{e.stderr}") from e
        except OSError as e:
            raise CommitSourceError(f"Cannot run git in '{self.root}': {e}") from e

    def log_args(self, rev: str) -> List[str]:
        # 以 '-' 开头的修订会被 git 当作选项解析 (如 --output=<file>)
        if not rev or rev.startswith("-"):
            raise CommitSourceError(f"Invalid revision '{rev}': a revision must not be empty or start with '-'.")
        pretty = f"--pretty=format:%H {TIMESTAMP_FORMATS[self.timestamp_kind]} %P"
        return ["log", "--topo-order", pretty, rev, "--"]

    def lines(self, rev: str = "HEAD") -> Iterator[str]:
        result = self._run(self.log_args(rev))
        logger.debug(f"git log {rev} returned {len(result.stdout)} bytes from {self.root}")
        yield from result.stdout.splitlines()
