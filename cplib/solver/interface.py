"""
Engine Interface — abstract base for the rank-ordered DP engines.

Design: Strategy pattern.  Each engine takes a rules object and a set of
start states and returns a DPTable, so callers can swap BucketEngine,
PullEngine or PushEngine without touching the problem definition code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from typing import Any

from cplib.core.config import EngineConfig
from cplib.core.table import DPTable


class EngineInterface(ABC):
    """
    Abstract engine that discovers a state graph and evaluates it.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    @abstractmethod
    def solve(self, rules: Any, roots: Iterable[Hashable]) -> DPTable:
        """
        Evaluate every state reachable from *roots*.

        Parameters
        ----------
        rules : the problem definition (engine-specific rules class)
        roots : start states of the discovery

        Returns
        -------
        DPTable mapping every evaluated state to its value.
        """
        ...
