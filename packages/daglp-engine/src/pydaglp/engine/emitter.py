import json
from typing import Iterator, List

from pydaglp.interfaces.models import CommitNode

from .parser import UNSET_TIMESTAMP


def format_line(node: CommitNode) -> str:
    timestamp = UNSET_TIMESTAMP if node.timestamp is None else str(node.timestamp)
    return f"{node.identifier} {timestamp}"


def format_path(path: List[CommitNode]) -> Iterator[str]:
    for node in path:
        yield format_line(node)


def format_path_json(path: List[CommitNode]) -> str:
    data = [
        {"commit": node.identifier, "timestamp": node.timestamp, "depth": depth}
        for depth, node in enumerate(path)
    ]
    return json.dumps(data, indent=2, ensure_ascii=False)
