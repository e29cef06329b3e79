# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SectionsMixin - ordered, id-keyed sections shared by accordions and tabs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class SectionsMixin:
    """Keep an ordered mapping of sections with an active marker.

    Each section is a dict with ``title``, ``content`` and ``active``.
    The host class must provide mark_for_rebuild(); it may override
    is_multiple_allowed() to let several sections be active at once.
    """

    def _init_sections(self) -> None:
        self.sections: dict[str, dict[str, Any]] = {}
        self.active_section = ''

    def is_multiple_allowed(self) -> bool:
        return False

    def activates_first_section(self) -> bool:
        """True when the first section added becomes active on its own."""
        return False

    def add_sections(self, sections: Any) -> SectionsMixin:
        """Add sections from a list of dicts or a mapping of id to dict.

        List items without an ``id`` are named ``section-N``.
        """
        if isinstance(sections, Mapping):
            items = [(section_id, section) for section_id, section in sections.items()]
        else:
            items = [(section.get('id'), section) for section in sections]
        for section_id, section in items:
            if not section_id:
                section_id = f"section-{len(self.sections) + 1}"
            self.add_section(
                str(section_id),
                section.get('title', ''),
                section.get('content', ''),
                bool(section.get('active', False)),
            )
        return self

    def add_section(self, section_id: str, title: Any, content: Any, active: bool = False) -> SectionsMixin:
        self.sections[section_id] = {'title': title, 'content': content, 'active': False}
        if active or (self.activates_first_section() and not self.active_section):
            self.set_section_active(section_id)
        self.mark_for_rebuild()
        return self

    def remove_section(self, section_id: str) -> SectionsMixin:
        """Drop a section; removing the active one activates the first left."""
        if section_id not in self.sections:
            return self
        del self.sections[section_id]
        if self.active_section == section_id:
            self.active_section = next(iter(self.sections), '')
            if self.active_section:
                self.sections[self.active_section]['active'] = True
        self.mark_for_rebuild()
        return self

    def set_section_active(self, section_id: str) -> SectionsMixin:
        """Activate a section, deactivating the others unless multiple are allowed."""
        if section_id not in self.sections:
            return self
        if not self.is_multiple_allowed():
            for key, section in self.sections.items():
                section['active'] = key == section_id
        else:
            self.sections[section_id]['active'] = True
        self.active_section = section_id
        self.mark_for_rebuild()
        return self

    def get_sections(self) -> dict[str, dict[str, Any]]:
        return {key: dict(section) for key, section in self.sections.items()}

    def get_section(self, section_id: str) -> dict[str, Any] | None:
        section = self.sections.get(section_id)
        return dict(section) if section is not None else None

    def get_active_section(self) -> str:
        return self.active_section
