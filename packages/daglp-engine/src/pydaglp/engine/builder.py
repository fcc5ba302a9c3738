import logging
from typing import Iterable, Optional

from pydaglp.interfaces.models import CommitNode, CommitRecord

from .graph_store import GraphStore

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    按输入顺序消费 CommitRecord，在 GraphStore 中创建节点并连接
    子提交 -> 父提交 的有向边。第一条记录对应的节点即为终点 (end node)。
    """

    def __init__(self, store: Optional[GraphStore] = None):
        self.store = store if store is not None else GraphStore()
        self.end: Optional[CommitNode] = None
        self.records_seen = 0

    def add_record(self, record: CommitRecord) -> CommitNode:
        node = self.store.get_or_create(record.identifier, record.timestamp)
        if self.end is None:
            self.end = node
        self.records_seen += 1

        for parent_id in record.parents:
            logger.debug(f"{parent_id} parent of {record.identifier}")
            parent = self.store.get_or_create(parent_id)
            self.store.add_edge(node, parent)
        return node

    def build(self, records: Iterable[CommitRecord]) -> GraphStore:
        for record in records:
            self.add_record(record)
        logger.debug(
            f"Graph built from {self.records_seen} records: "
            f"{len(self.store)} commits, {self.store.edge_count} edges."
        )
        return self.store
