"""Family graph: people, kinship edges and the queries run over them."""

from __future__ import annotations

import subprocess
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional

# Relatives further than this many generations down get nothing.
_MAX_HEIR_DISTANCE = 4


class Sex(IntEnum):
    MALE = 0
    FEMALE = 1


class Relation(IntEnum):
    """What the target of an edge is to its owner."""

    PARENT = 0
    CHILD = 1

    @property
    def opposite(self) -> "Relation":
        return Relation(1 - self.value)


class FamilyGraphError(Exception):
    """Base class for every error raised by the family graph."""


class InvalidArgumentError(FamilyGraphError, ValueError):
    """Arguments are malformed or inconsistent."""


class DuplicateDudeError(FamilyGraphError):
    """A person with that name is already in the graph."""


class DuplicateEdgeError(FamilyGraphError):
    """The two people are already connected."""


class NoChangeError(FamilyGraphError):
    """An edit would leave everything as it was."""


class EdgeNotFoundError(FamilyGraphError, LookupError):
    """The two people are not connected."""


class DudeNotFoundError(FamilyGraphError, LookupError):
    """No person with that name is in the graph."""


class NameTakenError(FamilyGraphError):
    """The new name already belongs to someone else."""


class NoHeirsError(FamilyGraphError):
    """Nobody is entitled to a share of the money."""


@dataclass
class Edge:
    to: int
    relation: Relation


@dataclass
class Dude:
    """A person; birth None means unknown, death None means alive."""

    name: str
    sex: Sex
    birth: Optional[int] = None
    death: Optional[int] = None
    edges: List[Edge] = field(default_factory=list)

    @property
    def alive(self) -> bool:
        return self.death is None


def _dates_invalid(birth: Optional[int], death: Optional[int]) -> bool:
    return birth is not None and death is not None and death < birth


class FamilyGraph:
    """A family tree stored as an undirected graph of typed edges."""

    def __init__(self) -> None:
        self._dudes: List[Dude] = []

    def __len__(self) -> int:
        return len(self._dudes)

    def __iter__(self) -> Iterator[Dude]:
        return iter(self._dudes)

    def __getitem__(self, index: int) -> Dude:
        return self._dudes[index]

    def search(self, name: str) -> Optional[int]:
        """Return the index of the person called name, or None."""
        for index, dude in enumerate(self._dudes):
            if dude.name == name:
                return index
        return None

    def _index(self, name: str) -> int:
        index = self.search(name)
        if index is None:
            raise DudeNotFoundError(name)
        return index

    def add_dude(self, name: str, sex: Sex, birth: Optional[int], death: Optional[int]) -> None:
        if not name or _dates_invalid(birth, death):
            raise InvalidArgumentError("invalid name or dates")
        if self.search(name) is not None:
            raise DuplicateDudeError(name)
        self._dudes.append(Dude(name, Sex(sex), birth, death))

    def delete_dude(self, name: str) -> None:
        """Remove a person; the last person takes over the freed index."""
        index = self._index(name)
        for dude in self._dudes:
            dude.edges = [edge for edge in dude.edges if edge.to != index]

        last_index = len(self._dudes) - 1
        last = self._dudes.pop()
        if index != last_index:
            self._dudes[index] = last
            for dude in self._dudes:
                for edge in dude.edges:
                    if edge.to == last_index:
                        edge.to = index

    def edit_dude(
        self,
        old_name: str,
        new_name: Optional[str],
        sex: Optional[Sex],
        birth: Optional[int],
        death: Optional[int],
    ) -> None:
        """Edit a person. A given new_name always counts as a change; sex None keeps it."""
        if old_name is None:
            raise InvalidArgumentError("old name is required")
        index = self._index(old_name)
        if _dates_invalid(birth, death):
            raise InvalidArgumentError("death precedes birth")

        dude = self._dudes[index]
        changed = False
        if new_name is not None:
            if any(i != index and other.name == new_name for i, other in enumerate(self._dudes)):
                raise NameTakenError(new_name)
            dude.name = new_name
            changed = True
        if sex is not None and sex != dude.sex:
            dude.sex = Sex(sex)
            changed = True
        if birth != dude.birth:
            dude.birth = birth
            changed = True
        if death != dude.death:
            dude.death = death
            changed = True
        if not changed:
            raise NoChangeError(old_name)

    def _check_pair(self, source: int, target: int) -> None:
        if source == target:
            raise InvalidArgumentError("a person cannot be related to themselves")

    def _add_one_edge(self, source: int, target: int, relation: Relation) -> None:
        self._check_pair(source, target)
        edges = self._dudes[source].edges
        if any(edge.to == target for edge in edges):
            raise DuplicateEdgeError(f"{source} -> {target}")
        edges.insert(0, Edge(target, Relation(relation)))

    def add_edge(self, from_name: str, to_name: str, relation: Relation) -> None:
        """Record that to_name is from_name's relation, and the reverse link."""
        source, target = self._index(from_name), self._index(to_name)
        relation = Relation(relation)
        self._add_one_edge(source, target, relation)
        self._add_one_edge(target, source, relation.opposite)

    def _delete_one_edge(self, source: int, target: int) -> None:
        self._check_pair(source, target)
        dude = self._dudes[source]
        kept = [edge for edge in dude.edges if edge.to != target]
        if len(kept) == len(dude.edges):
            raise EdgeNotFoundError(f"{source} -> {target}")
        dude.edges = kept

    def delete_edge(self, from_name: str, to_name: str) -> None:
        source, target = self._index(from_name), self._index(to_name)
        self._delete_one_edge(source, target)
        self._delete_one_edge(target, source)

    def _edit_one_edge(self, source: int, target: int, relation: Relation) -> None:
        self._check_pair(source, target)
        edge = next((e for e in self._dudes[source].edges if e.to == target), None)
        if edge is None:
            raise EdgeNotFoundError(f"{source} -> {target}")
        if edge.relation == relation:
            raise NoChangeError(f"{source} -> {target}")
        edge.relation = relation

    def edit_edge(self, from_name: str, to_name: str, relation: Relation) -> None:
        source, target = self._index(from_name), self._index(to_name)
        relation = Relation(relation)
        self._edit_one_edge(source, target, relation)
        self._edit_one_edge(target, source, relation.opposite)

    def kinship_distance(self, from_name: str, to_name: str) -> Optional[int]:
        """Number of edges on the shortest path between two people, or None."""
        source, target = self._index(from_name), self._index(to_name)
        dist = {source: 0}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for edge in self._dudes[current].edges:
                if edge.to not in dist:
                    dist[edge.to] = dist[current] + 1
                    queue.append(edge.to)
        return dist.get(target)

    def oldest_living_male_ancestor(self, name: str) -> Optional[int]:
        """Index of the earliest-born living man among the ancestors, or None."""
        start = self._index(name)
        visited = [False] * len(self._dudes)
        best: Optional[int] = None
        best_birth: Optional[int] = None

        def visit(index: int) -> None:
            nonlocal best, best_birth
            visited[index] = True
            dude = self._dudes[index]
            if dude.alive and dude.sex == Sex.MALE and dude.birth is not None:
                if best_birth is None or dude.birth < best_birth:
                    best, best_birth = index, dude.birth
            for edge in dude.edges:
                if edge.relation == Relation.PARENT and not visited[edge.to]:
                    visit(edge.to)

        for edge in self._dudes[start].edges:
            if edge.relation == Relation.PARENT and not visited[edge.to]:
                visit(edge.to)
        return best

    def distance_matrix(self) -> List[List[Optional[int]]]:
        """Generations down from each person to each other; None if not a descendant."""
        size = len(self._dudes)
        matrix: List[List[Optional[int]]] = [
            [0 if i == j else None for j in range(size)] for i in range(size)
        ]
        for i, dude in enumerate(self._dudes):
            for edge in dude.edges:
                if edge.relation == Relation.CHILD:
                    matrix[i][edge.to] = 1
        for k in range(size):
            for i in range(size):
                via = matrix[i][k]
                if via is None:
                    continue
                for j in range(size):
                    rest = matrix[k][j]
                    if rest is None:
                        continue
                    current = matrix[i][j]
                    if current is None or current > via + rest:
                        matrix[i][j] = via + rest
        return matrix

    def distribute_money(self, name: str, amount: float) -> dict:
        """Split amount among living descendants, halving per generation."""
        if not self._dudes or name is None or amount <= 0:
            raise InvalidArgumentError("invalid graph, name or amount")
        source = self._index(name)
        row = self.distance_matrix()[source]
        weights = [
            1.0 / 2 ** (distance - 1)
            if i != source
            and distance is not None
            and distance < _MAX_HEIR_DISTANCE
            and self._dudes[i].alive
            else 0.0
            for i, distance in enumerate(row)
        ]
        total = sum(weights)
        if total == 0:
            raise NoHeirsError(name)
        unit = amount / total
        return {
            self._dudes[i].name: weight * unit
            for i, weight in enumerate(weights)
            if weight
        }

    def describe_dude(self, index: int) -> str:
        if not 0 <= index < len(self._dudes):
            raise InvalidArgumentError(f"no person at index {index}")
        dude = self._dudes[index]
        sex = "WOMAN" if dude.sex == Sex.FEMALE else "MAN"
        parts = [f"[{index}]: {dude.name}, {sex}, "]
        if dude.birth is None:
            parts.append("year of birth unknown, \n")
        else:
            parts.append(f"was born in {dude.birth}, ")
        parts.append("ALIVE\n" if dude.alive else f"died in {dude.death}\n")
        parts.append("Immediate family:\n")
        pronoun = "her" if dude.sex == Sex.FEMALE else "his"
        for edge in dude.edges:
            kind = "parent" if edge.relation == Relation.PARENT else "child"
            parts.append(f"\t{self._dudes[edge.to].name} {pronoun} {kind}\n")
        parts.append("\n")
        return "".join(parts)

    def describe(self) -> str:
        if not self._dudes:
            return "Graph is empty\n"
        header = f"\nYour family tree (number of dudes: {len(self._dudes)})\n"
        return header + "".join(self.describe_dude(i) for i in range(len(self._dudes)))

    def to_dot(self) -> str:
        lines = [
            "digraph FAMILY_GRAPH {\n",
            "  rankdir=TB;\n",
            "  node [shape=box, style=filled, fillcolor=lightblue];\n",
        ]
        for i, dude in enumerate(self._dudes):
            color = "pink" if dude.sex == Sex.FEMALE else "lightblue"
            born = "----" if dude.birth is None else str(dude.birth)
            died = "ALIVE" if dude.alive else str(dude.death)
            lines.append(
                f'  "{i}_{dude.name}" [label="{dude.name}\\n{born} - {died}", '
                f'fillcolor="{color}"];\n'
            )
        for i, dude in enumerate(self._dudes):
            for edge in dude.edges:
                target = self._dudes[edge.to].name
                lines.append(
                    f'  "{i}_{dude.name}" -> "{edge.to}_{target}" [arrowhead=none];\n'
                )
        lines.append("}\n")
        return "".join(lines)

    def export_to_dot(self, filename: str) -> None:
        if not filename:
            raise InvalidArgumentError("filename is required")
        try:
            with open(filename, "w", encoding="utf-8") as handle:
                handle.write(self.to_dot())
        except OSError as exc:
            raise InvalidArgumentError(f"cannot write {filename}") from exc


def generate_image(filename: str) -> None:
    """Render a DOT file to filename + '.png' with Graphviz."""
    if not filename:
        raise InvalidArgumentError("filename is required")
    try:
        result = subprocess.run(["dot", "-Tpng", filename, "-o", f"{filename}.png"])
    except OSError as exc:
        raise InvalidArgumentError("cannot run dot") from exc
    if result.returncode != 0:
        raise InvalidArgumentError(f"dot failed on {filename}")