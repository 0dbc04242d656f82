"""Flattening and creation ordering.

All records, including nested policy bodies, end up in one list. Records
are created before statements; among records of the same class, a record
is created before anything that refers to its role (if A owns B, A is
created first). Otherwise the original order is preserved.
"""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Any

from ..capabilities import RoleBearing, referenced_records_of
from ..exceptions import DependencyCycleError
from ..types import Record
from .base import ResolverPass


def sort_score(record: Any) -> int:
    """Sort record creation ahead of every other statement."""
    return -1 if isinstance(record, Record) else 0


def dependency_graph(records: list[Any]) -> dict[int, set[int]]:
    """Map each record's position to the positions of records it depends on.

    B depends on A when one of B's referenced records has A's roleid.
    Dependencies only count between records of the same sort score; a
    statement always follows every record anyway.
    """
    by_roleid: dict[str, list[int]] = defaultdict(list)
    for idx, record in enumerate(records):
        if isinstance(record, RoleBearing):
            by_roleid[record.roleid].append(idx)

    depends_on: dict[int, set[int]] = defaultdict(set)
    for b_idx, record in enumerate(records):
        roleids = {ref.roleid for ref in referenced_records_of(record) if isinstance(ref, RoleBearing)}
        for roleid in roleids:
            for a_idx in by_roleid.get(roleid, ()):
                if a_idx == b_idx or sort_score(records[a_idx]) != sort_score(record):
                    continue
                depends_on[b_idx].add(a_idx)
    return depends_on


def _on_cycle(start: int, stuck: set[int], dependents: dict[int, list[int]]) -> bool:
    """Whether ``start`` can reach itself through unordered records."""
    seen: set[int] = set()
    pending = [child for child in dependents[start] if child in stuck]
    while pending:
        idx = pending.pop()
        if idx == start:
            return True
        if idx in seen:
            continue
        seen.add(idx)
        pending.extend(child for child in dependents[idx] if child in stuck)
    return False


def topological_order(records: list[Any]) -> list[Any]:
    """Order ``records`` so that every dependency comes first.

    Kahn's algorithm, always releasing the ready record with the lowest
    (sort score, original position) next.

    Raises:
        DependencyCycleError: if two records depend on each other, or a
            longer chain of dependencies loops back on itself.
    """
    depends_on = dependency_graph(records)

    for b_idx in sorted(depends_on):
        for a_idx in sorted(depends_on[b_idx]):
            if a_idx < b_idx and b_idx in depends_on.get(a_idx, ()):
                a, b = records[a_idx], records[b_idx]
                raise DependencyCycleError(
                    f"Dependency cycle encountered between {a} and {b}",
                    records=[str(a), str(b)],
                )

    dependents: dict[int, list[int]] = defaultdict(list)
    in_degree = [0] * len(records)
    for b_idx, parents in depends_on.items():
        in_degree[b_idx] = len(parents)
        for a_idx in parents:
            dependents[a_idx].append(b_idx)

    ready = [(sort_score(record), idx) for idx, record in enumerate(records) if in_degree[idx] == 0]
    heapq.heapify(ready)

    ordered: list[Any] = []
    while ready:
        _, idx = heapq.heappop(ready)
        ordered.append(records[idx])
        for child in dependents[idx]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                heapq.heappush(ready, (sort_score(records[child]), child))

    if len(ordered) != len(records):
        stuck = {idx for idx, degree in enumerate(in_degree) if degree > 0}
        cycle = [str(records[idx]) for idx in sorted(stuck) if _on_cycle(idx, stuck, dependents)]
        raise DependencyCycleError(
            f"Dependency cycle encountered between {', '.join(cycle)}",
            records=cycle,
        )
    return ordered


class FlattenResolver(ResolverPass):
    """Flattens all records and policy bodies into one ordered list."""

    name = "flatten"

    def __init__(self, account: str, ownerid: str) -> None:
        super().__init__(account, ownerid)
        self._result: list[Any] = []

    def resolve(self, records: Any) -> list[Any]:
        self._result = []
        self.traverse(records, set(), self.resolve_record, self.on_resolve_policy)
        self.logger.debug("Ordering %d records", len(self._result))
        return topological_order(self._result)

    def resolve_record(self, record: Any, visited: set[int]) -> None:
        self._result.append(record)

    def on_resolve_policy(self, policy: Any, visited: set[int]) -> None:
        body = policy.detach_body()
        self.traverse(body, visited, self.resolve_record, self.on_resolve_policy)
