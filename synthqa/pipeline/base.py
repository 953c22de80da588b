import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .context import PipelineContext

logger = logging.getLogger(__name__)

END = "END"


class StageNotFoundError(LookupError):
    """Raised when the runner reaches a node with no registered stage."""


class Stage(ABC):
    """
    Base class for all pipeline stages.

    A stage reads the context and returns a partial update (key -> new value).
    It must not raise for per-item failures; those are appended to the
    errors list in the returned update instead.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    async def execute(self, context: PipelineContext) -> Dict[Any, Any]:
        """Execute stage logic and return the keys to replace."""
        pass


class GraphRunner:
    """Linear chain of named stages with map-based successor lookup."""

    def __init__(self):
        self.nodes: Dict[str, Stage] = {}
        self.edges: Dict[str, str] = {}
        self.start_node: str = ""

    def add_node(self, name: str, stage: Stage) -> "GraphRunner":
        self.nodes[name] = stage
        return self

    def add_edge(self, from_node: str, to_node: str) -> "GraphRunner":
        """Register the single successor of from_node (replaces any previous one)."""
        self.edges[from_node] = to_node
        return self

    def set_start(self, name: str) -> "GraphRunner":
        self.start_node = name
        return self

    @classmethod
    def chain(cls, stages: List[Stage]) -> "GraphRunner":
        """Build a runner executing stages in list order, ending at END."""
        runner = cls()
        for stage in stages:
            runner.add_node(stage.name, stage)
        for current, following in zip(stages, stages[1:]):
            runner.add_edge(current.name, following.name)
        if stages:
            runner.set_start(stages[0].name)
            runner.add_edge(stages[-1].name, END)
        return runner

    def order(self) -> List[str]:
        """Node names in execution order, following edges from the start."""
        names = []
        current = self.start_node
        while current and current != END and current not in names:
            names.append(current)
            current = self.edges.get(current, END)
        return names

    async def invoke(self, context: PipelineContext) -> PipelineContext:
        """
        Run stages from the start node until END.

        Raises:
            StageNotFoundError if a node on the path has no registered stage
        """
        current_context = context
        current_node = self.start_node

        while current_node and current_node != END:
            stage = self.nodes.get(current_node)
            if stage is None:
                raise StageNotFoundError(f"Node {current_node} not found")

            logger.debug(f"Running stage {current_node}")
            partial = await stage.execute(current_context)
            current_context = current_context.merge(partial or {})

            current_node = self.edges.get(current_node, END)

        return current_context

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"GraphRunner(stages={self.order()})"
