import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydaglp.application.pipeline import longest_path_from_repo, run_longest_path
from pydaglp.common.messaging import bus
from pydaglp.engine.config import ConfigManager
from pydaglp.engine.emitter import format_path, format_path_json
from pydaglp.interfaces.result import DagLPResult

from ..config import DEFAULT_WORK_DIR
from ..logger_config import setup_logging

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


def _run_from_file(ctx: typer.Context, input_file: Path) -> DagLPResult:
    if input_file.is_dir():
        bus.error("common.error.pathNotFile", path=input_file)
        ctx.exit(1)
    try:
        with open(input_file, "r", encoding="utf-8", errors="replace") as f:
            return run_longest_path(f, source=str(input_file))
    except OSError as e:
        logger.debug(f"Cannot open input {input_file}", exc_info=True)
        bus.error("common.error.cannotOpen", path=input_file, reason=e.strerror or str(e))
        ctx.exit(1)


def _emit(result: DagLPResult, output_format: str):
    if output_format == "json":
        bus.data(format_path_json(result.data))
        return
    for line in format_path(result.data):
        bus.data(line)


def register(app: typer.Typer):
    @app.command(name="longest")
    def longest_command(
        ctx: typer.Context,
        input_file: Annotated[
            Optional[Path],
            typer.Argument(
                metavar="INPUT",
                help="`git log --topo-order --pretty=format:'%H %at %P'` 格式的输入文件。省略时读取标准输入。",
            ),
        ] = None,
        repo: Annotated[
            Optional[Path],
            typer.Option("--repo", "-r", help="直接从该 Git 仓库读取提交历史。", file_okay=False, dir_okay=True),
        ] = None,
        rev: Annotated[
            Optional[str], typer.Option("--rev", help="配合 --repo 使用的起始修订 (默认读取配置 git.rev)。")
        ] = None,
        json_output: Annotated[bool, typer.Option("--json", help="以 JSON 格式将路径输出到 stdout。")] = False,
        work_dir: Annotated[
            Path,
            typer.Option(
                "--work-dir", "-w", help="读取 .daglp/config.yml 的目录", file_okay=False, dir_okay=True, resolve_path=True
            ),
        ] = DEFAULT_WORK_DIR,
        debug: Annotated[bool, typer.Option("--debug", hidden=True)] = False,
    ):
        """
        输出从根提交到最新提交的最长祖先链，每行为 `<commit> <timestamp>`。
        """
        setup_logging("DEBUG" if debug else None)
        config = ConfigManager(work_dir)

        output_format = "json" if json_output else str(config.get("output.format", "text")).lower()
        if output_format not in OUTPUT_FORMATS:
            bus.error("longest.error.badFormat", format=output_format)
            ctx.exit(1)

        if input_file is not None and repo is not None:
            bus.error("longest.error.conflictingSources")
            ctx.exit(2)

        if repo is not None:
            result = longest_path_from_repo(
                repo,
                rev=rev or config.get("git.rev", "HEAD"),
                timestamp_kind=config.get("git.timestamp", "author"),
            )
        elif input_file is not None:
            result = _run_from_file(ctx, input_file)
        else:
            stdin = typer.get_text_stream("stdin", encoding="utf-8", errors="replace")
            result = run_longest_path(stdin, source="<stdin>")

        if not result.success:
            bus.error(result.message, **result.msg_kwargs)
            ctx.exit(result.exit_code)

        if not result.data:
            bus.info(result.message, **result.msg_kwargs)
            ctx.exit(0)

        _emit(result, output_format)
        if debug:
            bus.success(result.message, **result.msg_kwargs)
