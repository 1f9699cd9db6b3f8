from __future__ import annotations

from typing import Dict, List

from tcconvert.models.testcase_import import DEFAULT_PRIORITY, SECTION_FIELDS, SectionKind, TestCase


class OpenTestCase:
    """The test case currently being accumulated by a parser pass."""

    def __init__(self, id: str = "", title: str = "", priority: str = DEFAULT_PRIORITY):
        self.id = id
        self.title = title
        self.priority = priority or DEFAULT_PRIORITY
        self.sections: Dict[SectionKind, List[str]] = {kind: [] for kind in SECTION_FIELDS}

    def append(self, section: SectionKind, content: str) -> None:
        if section is SectionKind.NONE or not content:
            return
        self.sections[section].append(content)

    def seal(self) -> TestCase:
        return TestCase(
            id=self.id,
            title=self.title,
            priority=self.priority,
            **{field: tuple(self.sections[kind]) for kind, field in SECTION_FIELDS.items()},
        )
