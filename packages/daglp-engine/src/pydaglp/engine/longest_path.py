import logging
from typing import List, Optional, Set

from pydaglp.interfaces.exceptions import CycleDetectedError
from pydaglp.interfaces.models import CommitNode

from .graph_store import GraphStore

logger = logging.getLogger(__name__)


class LongestPathEngine:
    """
    在 GraphStore 上计算最长路径。

    每个节点的最长出路径长度 (边数) 只计算一次并缓存在节点上。
    遍历使用显式栈的后序 DFS，因此链条长度不受解释器递归深度限制；
    栈上标记用于发现环。
    """

    def __init__(self, store: GraphStore):
        self.store = store
        # 实际执行的节点计算次数，缓存命中不计入
        self.computations = 0

    def compute_longest_length(self, node: CommitNode) -> int:
        if node.longest_path_length is not None:
            return node.longest_path_length

        on_stack: Set[int] = {node.index}
        # 每个栈帧: [节点槽位, 下一条待访问出边的位置]
        stack: List[List[int]] = [[node.index, 0]]

        while stack:
            frame = stack[-1]
            current = self.store.node(frame[0])

            if frame[1] < len(current.edges):
                neighbor = self.store.node(current.edges[frame[1]])
                frame[1] += 1
                if neighbor.longest_path_length is not None:
                    continue
                if neighbor.index in on_stack:
                    raise CycleDetectedError(neighbor.identifier)
                on_stack.add(neighbor.index)
                stack.append([neighbor.index, 0])
                continue

            # 所有邻居都已求值：比最长的邻居多一条边，无出边时为 0
            longest = -1
            for neighbor in self.store.neighbors(current):
                if neighbor.longest_path_length > longest:
                    longest = neighbor.longest_path_length
            current.longest_path_length = longest + 1
            self.computations += 1
            logger.debug(f"longest length of {current.identifier} = {current.longest_path_length}")

            on_stack.discard(current.index)
            stack.pop()

        return node.longest_path_length

    def _select_next(self, node: CommitNode) -> CommitNode:
        # 严格大于：长度相同时保留出边顺序中靠前的邻居
        neighbors = self.store.neighbors(node)
        chosen = neighbors[0]
        for neighbor in neighbors[1:]:
            if neighbor.longest_path_length > chosen.longest_path_length:
                chosen = neighbor
        return chosen

    def reconstruct_path(self, end: CommitNode) -> List[CommitNode]:
        """
        从终点出发沿最长邻居前进直到根提交，返回 根 -> 终点 的节点序列。
        """
        self.compute_longest_length(end)

        end.longest_path_predecessor = None
        current = end
        while not current.is_root:
            chosen = self._select_next(current)
            chosen.longest_path_predecessor = current.index
            current = chosen

        path = [current]
        while path[-1] is not end:
            path.append(self.store.node(path[-1].longest_path_predecessor))
        return path


def find_longest_path(store: GraphStore, end: Optional[CommitNode]) -> List[CommitNode]:
    if end is None:
        return []
    return LongestPathEngine(store).reconstruct_path(end)
