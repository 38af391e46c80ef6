"""Directed graph of connections between named components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Source:
    """A component and one of its outputs."""

    component: str
    output: str


@dataclass(frozen=True)
class Target:
    """A component and one of its inputs."""

    component: str
    input: str


@dataclass(frozen=True)
class Connection:
    """A directed connection from a source output to a target input."""

    source: Source
    target: Target


class CycleError(ValueError):
    """Raised when component dependencies form a cycle."""

    def __init__(self) -> None:
        super().__init__("Cycle detected in component dependencies")


SourceLike = Union[Source, "tuple[str, str]"]
TargetLike = Union[Target, "tuple[str, str]"]


class ComponentGraph:
    """Components as nodes, connections as directed edges."""

    def __init__(self) -> None:
        self._nodes: dict[str, None] = {}
        self._edges: list[Connection] = []

    def connect(self, source: SourceLike, target: TargetLike) -> None:
        """Connect a source output to a target input, adding components as needed."""
        if not isinstance(source, Source):
            source = Source(*source)
        if not isinstance(target, Target):
            target = Target(*target)
        self._nodes.setdefault(source.component)
        self._nodes.setdefault(target.component)
        self._edges.append(Connection(source, target))

    def call_order(self) -> list[str]:
        """Component names ordered so each follows all its dependencies.

        Raises CycleError if the graph has a cycle.
        """
        in_degree = {name: 0 for name in self._nodes}
        successors: dict[str, list[str]] = {name: [] for name in self._nodes}
        for edge in self._edges:
            successors[edge.source.component].append(edge.target.component)
            in_degree[edge.target.component] += 1

        ready = [name for name in self._nodes if in_degree[name] == 0]
        order: list[str] = []
        while ready:
            name = ready.pop(0)
            order.append(name)
            for nxt in successors[name]:
                in_degree[nxt] -= 1
                if in_degree[nxt] == 0:
                    ready.append(nxt)

        if len(order) != len(self._nodes):
            raise CycleError()
        return order

    def node_count(self) -> int:
        """Number of components."""
        return len(self._nodes)

    def edge_count(self) -> int:
        """Number of connections."""
        return len(self._edges)

    def incoming_connections(self, component: str) -> Iterator[Source]:
        """Sources feeding the component, most recently connected first."""
        return (
            edge.source for edge in reversed(self._edges) if edge.target.component == component
        )

    def outgoing_connections(self, component: str) -> Iterator[Target]:
        """Targets fed by the component, most recently connected first."""
        return (
            edge.target for edge in reversed(self._edges) if edge.source.component == component
        )