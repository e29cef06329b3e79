# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TableBuilder - fluent ``<table>`` assembled at render time.

Example:
    >>> table = (TableBuilder()
    ...          .headers(['Name', 'Role'])
    ...          .data([{'name': 'Ada', 'role': 'admin'}], columns=['name', 'role'])
    ...          .striped())
    >>> table.render()
    '<table class="striped"><thead><tr><th>Name</th><th>Role</th></tr></thead><tbody><tr><td>Ada</td><td>admin</td></tr></tbody></table>'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..elements import Button
from ..node import Element


def _cell(tag: str, content: Any, attributes: Mapping[str, Any] | None = None) -> Element:
    """Table cell; plain values are escaped, elements are kept as they are."""
    return Element(tag, content, attributes, escape_content=not isinstance(content, Element))


class TableBuilder(Element):
    """A table whose caption, header and rows are regenerated on render."""

    def __init__(self, attributes: Mapping[str, Any] | None = None, **attr: Any) -> None:
        super().__init__('table', None, attributes, **attr)
        self._headers: list[Any] = []
        self._rows: list[dict[str, Any]] = []
        self._caption = ''
        self._sortable = False
        self._actions: list[Any] = []

    def headers(self, headers: list[Any]) -> TableBuilder:
        """Replace the headers; items are strings or ``{'text', 'attributes'}`` dicts."""
        self._headers = list(headers)
        return self.mark_for_rebuild()

    def header(self, text: str, attributes: Mapping[str, Any] | None = None) -> TableBuilder:
        self._headers.append({'text': text, 'attributes': dict(attributes or {})})
        return self.mark_for_rebuild()

    def row(self, cells: list[Any], attributes: Mapping[str, Any] | None = None) -> TableBuilder:
        self._rows.append({'cells': list(cells), 'attributes': dict(attributes or {})})
        return self.mark_for_rebuild()

    def data(self, data: list[Any], columns: list[str] | None = None) -> TableBuilder:
        """Add one row per item.

        Mappings are read by column name (all values in order when no
        columns are given), other objects by attribute, scalars become a
        single-cell row.
        """
        for item in data:
            if isinstance(item, Mapping):
                cells = [item.get(c, '') for c in columns] if columns else list(item.values())
            elif columns and not isinstance(item, (str, int, float, Element)):
                cells = [getattr(item, c, '') for c in columns]
            else:
                cells = [item]
            self.row(cells)
        return self

    def caption(self, caption: str) -> TableBuilder:
        self._caption = caption
        return self.mark_for_rebuild()

    def striped(self, striped: bool = True) -> TableBuilder:
        return self.toggle_class('striped', striped)

    def sortable(self, sortable: bool = True) -> TableBuilder:
        self._sortable = sortable
        self.toggle_class('sortable', sortable)
        return self.mark_for_rebuild()

    def actions(self, actions: list[Any], header_text: str = 'Actions') -> TableBuilder:
        """Add an actions column.

        Actions are names (``'edit'``, ``'delete'``, ...) rendered as buttons,
        or dicts with ``text``, ``url`` and optional ``classes`` and
        ``attributes`` rendered as links.
        """
        self._actions = list(actions)
        if actions:
            self.header(header_text, {'class': 'actions-column'})
        return self.mark_for_rebuild()

    def responsive(self) -> TableBuilder:
        return self.add_class('responsive')

    def full_width(self) -> TableBuilder:
        return self.set_style('width', '100%')

    def _action_element(self, action: Any) -> Element | None:
        if isinstance(action, str):
            classes = ['button', 'button-secondary']
            if action == 'delete':
                classes.append('button-link-delete')
            classes.append(f"action-{action}")
            return Button(action.capitalize(), 'button', class_=classes)
        if isinstance(action, Mapping) and 'text' in action and 'url' in action:
            link = Element('a', action['text'], href=action['url'])
            link.add_class(action.get('classes', ['button', 'button-secondary']))
            return link.set_attributes(action.get('attributes') or {})
        return None

    def _actions_cell(self) -> Element:
        cell = Element('td', class_='actions')
        elements = [e for e in map(self._action_element, self._actions) if e is not None]
        for index, element in enumerate(elements):
            if index:
                cell.add_child(' ')
            cell.add_child(element)
        return cell

    def rebuild(self) -> None:
        children: list[Element] = []
        if self._caption:
            children.append(_cell('caption', self._caption))
        if self._headers:
            header_row = Element('tr')
            for header in self._headers:
                if isinstance(header, Mapping):
                    th = _cell('th', header.get('text', ''), header.get('attributes'))
                else:
                    th = _cell('th', header)
                header_row.add_child(th.toggle_class('sortable', self._sortable))
            children.append(Element('thead', header_row))
        if self._rows:
            body = Element('tbody')
            for row in self._rows:
                tr = Element('tr', [_cell('td', cell) for cell in row['cells']], row['attributes'])
                if self._actions:
                    tr.add_child(self._actions_cell())
                body.add_child(tr)
            children.append(body)
        self.set_content(children)
