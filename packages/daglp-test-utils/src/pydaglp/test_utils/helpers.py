import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple


# 固定的提交时间基准 (2023-11-14)，测试中的时间戳都基于它偏移
BASE_TIME = 1_700_000_000


def run_git_command(cwd: Path, args: List[str], env: Optional[Dict[str, str]] = None) -> str:
    full_env = os.environ.copy()
    if env:
        full_env.update(env)
    result = subprocess.run(["git"] + args, cwd=cwd, env=full_env, capture_output=True, text=True, check=True)
    return result.stdout.strip()


def commit_at(repo: Path, message: str, timestamp: int) -> str:
    """在固定的作者/提交时间创建一个空提交，返回其哈希。"""
    date = f"@{timestamp} +0000"
    env = {"GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date}
    run_git_command(repo, ["commit", "--allow-empty", "-q", "-m", message], env=env)
    return run_git_command(repo, ["rev-parse", "HEAD"])


def merge_at(repo: Path, branch: str, message: str, timestamp: int) -> str:
    date = f"@{timestamp} +0000"
    env = {"GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date}
    run_git_command(repo, ["merge", "--no-ff", "-q", "-m", message, branch], env=env)
    return run_git_command(repo, ["rev-parse", "HEAD"])


def history_lines(records: Sequence[Tuple]) -> List[str]:
    """
    将 (commit, timestamp, *parents) 元组转换为 git log 风格的输入行。
    """
    return [" ".join(str(field) for field in record) for record in records]


def linear_history(length: int, base_timestamp: int = 1000) -> List[str]:
    """
    生成一条长度为 length 的线性历史，按拓扑顺序 (最新在前)。
    c{length-1} -> ... -> c0
    """
    lines = []
    for i in reversed(range(length)):
        parent = f" c{i - 1}" if i > 0 else ""
        lines.append(f"c{i} {base_timestamp + i}{parent}")
    return lines
