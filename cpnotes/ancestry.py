"""Binary lifting on a rooted tree: k-th ancestors and lowest common ancestors."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping


class BinaryLifting:
    """Jump tables over a rooted tree given as ``{node: children}``."""

    def __init__(self, children: Mapping[Hashable, Iterable[Hashable]], root: Hashable) -> None:
        self.root = root
        self._depth: dict = {root: 0}
        self._up: dict = {root: []}
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for child in children.get(node, ()):
                if child in self._depth:
                    raise ValueError(f"node {child!r} appears more than once")
                self._depth[child] = self._depth[node] + 1
                jumps = [node]
                while True:
                    level = len(jumps) - 1
                    above = self._up[jumps[-1]]
                    if level >= len(above):
                        break
                    jumps.append(above[level])
                self._up[child] = jumps
                queue.append(child)

    def depth(self, node: Hashable) -> int:
        """Distance from the root."""
        return self._depth[node]

    def kth_ancestor(self, node: Hashable, k: int) -> Hashable | None:
        """The ancestor ``k`` levels up, or None if the root is passed."""
        if k < 0:
            raise ValueError("k must be non-negative")
        if node not in self._up:
            raise KeyError(node)
        level = 0
        while k:
            if k & 1:
                jumps = self._up[node]
                if level >= len(jumps):
                    return None
                node = jumps[level]
            k >>= 1
            level += 1
        return node

    def lca(self, a: Hashable, b: Hashable) -> Hashable:
        """Lowest common ancestor of ``a`` and ``b``."""
        da, db = self.depth(a), self.depth(b)
        if da > db:
            a = self.kth_ancestor(a, da - db)
        elif db > da:
            b = self.kth_ancestor(b, db - da)
        if a == b:
            return a
        for level in reversed(range(len(self._up[a]))):
            up_a, up_b = self._up[a], self._up[b]
            if level < len(up_a) and up_a[level] != up_b[level]:
                a, b = up_a[level], up_b[level]
        return self._up[a][0]