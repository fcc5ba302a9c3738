import logging
from typing import Iterable, Iterator, Optional

from pydaglp.interfaces.models import CommitRecord

logger = logging.getLogger(__name__)

# 输出中用来表示“时间戳未知”的记号，解析时原样还原为 None
UNSET_TIMESTAMP = "-"


def parse_timestamp(token: Optional[str]) -> Optional[int]:
    if token is None or token == UNSET_TIMESTAMP:
        return None
    if not token.isdecimal():
        logger.warning(f"Malformed timestamp '{token}', treating it as unset.")
        return None
    return int(token)


def parse_record(line: str) -> Optional[CommitRecord]:
    """
    将一行 `<identifier> <timestamp> [<parent> ...]` 解析为 CommitRecord。

    空行返回 None。不校验标识符格式，不去重父节点。
    """
    tokens = line.split()
    if not tokens:
        return None

    identifier = tokens[0]
    timestamp = parse_timestamp(tokens[1] if len(tokens) > 1 else None)
    return CommitRecord(identifier=identifier, timestamp=timestamp, parents=tokens[2:])


def parse_records(lines: Iterable[str]) -> Iterator[CommitRecord]:
    for line in lines:
        record = parse_record(line)
        if record is not None:
            yield record
