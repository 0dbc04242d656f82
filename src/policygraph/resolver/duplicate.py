"""Duplicate declaration detection."""

from __future__ import annotations

from typing import Any

from ..capabilities import Identifiable, kind_name_of
from ..exceptions import DuplicateRecordError
from .base import ResolverPass, iter_records


class DuplicateResolver(ResolverPass):
    """Raises an exception if the same record is declared more than once.

    Expects flattened input; referenced records are not visited.
    """

    name = "duplicate"

    def resolve(self, records: Any) -> list[Any]:
        flat = list(iter_records(records))
        seen: set[tuple[str, Any]] = set()
        for record in flat:
            if not isinstance(record, Identifiable):
                continue
            key = (kind_name_of(record), record.id)
            if key in seen:
                raise DuplicateRecordError(
                    f"{record} is declared more than once",
                    kind=key[0],
                    id=record.id,
                )
            seen.add(key)
        return flat
