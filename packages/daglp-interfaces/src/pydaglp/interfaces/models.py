from __future__ import annotations

import dataclasses
from typing import List, Optional


@dataclasses.dataclass
class CommitRecord:
    # 一行输入解析出的记录
    identifier: str
    timestamp: Optional[int]  # None: 时间戳缺失或无法解析
    parents: List[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class CommitNode:
    """
    提交历史图谱中的一个节点。

    边与回溯链接都以 GraphStore 中的槽位索引 (index) 表示，
    节点本身只由 GraphStore 持有。
    """

    identifier: str
    index: int
    timestamp: Optional[int] = None  # None: 尚未见到该提交的主记录

    # 出边：指向父提交，保持输入中的顺序
    edges: List[int] = dataclasses.field(default_factory=list)

    # --- 最长路径字段 (由 LongestPathEngine 填充) ---
    longest_path_length: Optional[int] = None
    longest_path_predecessor: Optional[int] = None

    @property
    def short_hash(self) -> str:
        return self.identifier[:7]

    @property
    def is_root(self) -> bool:
        return not self.edges
