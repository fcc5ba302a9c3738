import logging
from typing import Dict, Iterator, List, Optional

from pydaglp.interfaces.exceptions import UnknownCommitError
from pydaglp.interfaces.models import CommitNode

logger = logging.getLogger(__name__)


class GraphStore:
    """
    提交图谱的节点仓库 (arena)。

    每个节点占据一个稳定的整数槽位，边与回溯链接均存储为槽位索引。
    一次运行构建一个 GraphStore，由 GraphBuilder 写入，之后由
    LongestPathEngine 只读使用。
    """

    def __init__(self):
        self._nodes: List[CommitNode] = []
        self._index: Dict[str, int] = {}

    def get_or_create(self, identifier: str, timestamp: Optional[int] = None) -> CommitNode:
        slot = self._index.get(identifier)
        if slot is not None:
            node = self._nodes[slot]
            # 仅作为父节点被引用时不携带时间戳，不能覆盖已知值
            if timestamp is not None:
                node.timestamp = timestamp
            return node

        node = CommitNode(identifier=identifier, index=len(self._nodes), timestamp=timestamp)
        self._nodes.append(node)
        self._index[identifier] = node.index
        return node

    def get(self, identifier: str) -> CommitNode:
        slot = self._index.get(identifier)
        if slot is None:
            raise UnknownCommitError(identifier)
        return self._nodes[slot]

    def node(self, index: int) -> CommitNode:
        return self._nodes[index]

    def neighbors(self, node: CommitNode) -> List[CommitNode]:
        return [self._nodes[i] for i in node.edges]

    def add_edge(self, child: CommitNode, parent: CommitNode):
        child.edges.append(parent.index)

    @property
    def edge_count(self) -> int:
        return sum(len(n.edges) for n in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[CommitNode]:
        return iter(self._nodes)
