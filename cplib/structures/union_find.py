"""
Union-Find (Disjoint Set Union) over the integers ``0 .. n-1``.

UnionFind uses path compression and union by size.  PersistentUnionFind
drops path compression and records every merge in an undo log, so the
structure can be rolled back to any earlier snapshot.
"""

from __future__ import annotations


class UnionFind:
    """
    Union-Find with path compression and union by size.

    Example:
        >>> uf = UnionFind(5)
        >>> uf.unite(0, 1)
        True
        >>> uf.same(0, 1)
        True
        >>> uf.size(0)
        2
    """

    def __init__(self, n: int) -> None:
        self._parent: list[int] = list(range(n))
        self._size: list[int] = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the root of the set containing *x*."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point every node on the path at the root
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """
        Merge the sets containing *x* and *y*.

        Returns False when they were already in the same set.
        """
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False

        if self._size[x_root] < self._size[y_root]:
            x_root, y_root = y_root, x_root
        self._parent[y_root] = x_root
        self._size[x_root] += self._size[y_root]
        return True

    def same(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Number of elements in the set containing *x*."""
        return self._size[self.find(x)]

    def groups(self) -> list[list[int]]:
        """All sets, each sorted, ordered by their smallest element."""
        by_root: dict[int, list[int]] = {}
        for x in range(len(self._parent)):
            by_root.setdefault(self.find(x), []).append(x)
        return list(by_root.values())


class PersistentUnionFind:
    """
    Union-Find with snapshots and rollback.

    Every successful ``unite`` appends ``(child_root, parent_root)`` to an
    undo log; ``rollback`` pops entries until the log is back to the
    requested version.  Without path compression ``find`` is O(log n).
    """

    def __init__(self, n: int) -> None:
        self._parent: list[int] = list(range(n))
        self._size: list[int] = [1] * n
        self._history: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        while self._parent[x] != x:
            x = self._parent[x]
        return x

    def unite(self, x: int, y: int) -> bool:
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False

        if self._size[x_root] < self._size[y_root]:
            x_root, y_root = y_root, x_root
        self._parent[y_root] = x_root
        self._size[x_root] += self._size[y_root]
        self._history.append((y_root, x_root))
        return True

    def same(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        return self._size[self.find(x)]

    # ── Versioning ─────────────────────────────────────────────────

    def snapshot(self) -> int:
        """Return a version id for the current state."""
        return len(self._history)

    def undo(self) -> None:
        """Revert the most recent successful ``unite``."""
        if not self._history:
            raise IndexError("Nothing to undo.")
        child, parent = self._history.pop()
        self._parent[child] = child
        self._size[parent] -= self._size[child]

    def rollback(self, version: int) -> None:
        """Revert every merge made after *version* was taken."""
        if not 0 <= version <= len(self._history):
            raise ValueError(
                f"Unknown version {version}; "
                f"current version is {len(self._history)}."
            )
        while len(self._history) > version:
            self.undo()
