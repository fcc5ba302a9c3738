import logging
from pathlib import Path
from typing import Iterable

from pydaglp.engine.builder import GraphBuilder
from pydaglp.engine.git_log import GitCommitLog
from pydaglp.engine.longest_path import LongestPathEngine
from pydaglp.engine.parser import parse_records
from pydaglp.interfaces.exceptions import CommitSourceError, CycleDetectedError
from pydaglp.interfaces.result import DagLPResult

logger = logging.getLogger(__name__)


def run_longest_path(lines: Iterable[str], source: str = "<stdin>") -> DagLPResult:
    """
    完整流程：解析 -> 建图 -> 求最长路径。

    成功时 `data` 为 根 -> 终点 的 CommitNode 列表；输入为空时为空列表。
    """
    builder = GraphBuilder()
    try:
        store = builder.build(parse_records(lines))
    except CommitSourceError as e:
        # 惰性数据源在迭代时才会失败
        logger.error("读取提交记录失败", exc_info=True)
        return DagLPResult(
            success=False, exit_code=1, message="engine.error.source", error=e, msg_kwargs={"error": str(e)}
        )

    if builder.end is None:
        return DagLPResult(
            success=True, exit_code=0, message="longest.info.emptyInput", data=[], msg_kwargs={"source": source}
        )

    engine = LongestPathEngine(store)
    try:
        path = engine.reconstruct_path(builder.end)
    except CycleDetectedError as e:
        logger.error(f"Cycle detected while walking from {builder.end.identifier}")
        return DagLPResult(
            success=False,
            exit_code=1,
            message="engine.error.cycle",
            error=e,
            msg_kwargs={"identifier": e.identifier},
        )

    logger.debug(f"Longest path: {len(path)} commits after {engine.computations} node computations.")
    return DagLPResult(
        success=True,
        exit_code=0,
        message="longest.success.summary",
        data=path,
        msg_kwargs={
            "count": len(path),
            "length": len(path) - 1,
            "start": path[0].short_hash,
            "end": path[-1].short_hash,
        },
    )


def longest_path_from_repo(repo_dir: Path, rev: str = "HEAD", timestamp_kind: str = "author") -> DagLPResult:
    try:
        commit_log = GitCommitLog(repo_dir, timestamp_kind=timestamp_kind)
    except CommitSourceError as e:
        return DagLPResult(
            success=False, exit_code=1, message="engine.error.source", error=e, msg_kwargs={"error": str(e)}
        )
    return run_longest_path(commit_log.lines(rev), source=f"{commit_log.root} ({rev})")
