from __future__ import annotations

from typing import List, Sequence, Set

from tcconvert.models.testcase_import import TestCase

ID_PREFIX = "TC"
ID_PAD_WIDTH = 2


def assign_missing_ids(records: Sequence[TestCase]) -> List[TestCase]:
    """
    Fill empty IDs with ``TC01``, ``TC02`` ... in order of appearance.

    Only records that receive an ID advance the counter. Explicit IDs are
    never touched, and a generated value already used explicitly elsewhere in
    the sequence is skipped.
    """
    taken: Set[str] = {record.id.upper() for record in records if record.id}
    counter = 1
    assigned: List[TestCase] = []

    for record in records:
        if record.id:
            assigned.append(record)
            continue
        candidate = _format_id(counter)
        while candidate in taken:
            counter += 1
            candidate = _format_id(counter)
        taken.add(candidate)
        counter += 1
        assigned.append(record.model_copy(update={"id": candidate}))

    return assigned


def _format_id(counter: int) -> str:
    return f"{ID_PREFIX}{counter:0{ID_PAD_WIDTH}d}"
