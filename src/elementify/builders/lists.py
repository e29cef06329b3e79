# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ListBuilder - fluent ``<ul>``/``<ol>`` menus and lists."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..node import Element


class ListBuilder(Element):
    """List of items, links, headers, dividers and nested submenus.

    Example:
        >>> (ListBuilder().navigation()
        ...  .link('Home', '/', active=True)
        ...  .link('Docs', '/docs')).render()
        '<ul class="nav" role="navigation"><li class="active"><a href="/" class="active">Home</a></li><li><a href="/docs">Docs</a></li></ul>'
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None, **attr: Any) -> None:
        super().__init__('ul', None, attributes, **attr)
        self._items: list[dict[str, Any]] = []

    def _add(self, kind: str, **data: Any) -> ListBuilder:
        self._items.append({'type': kind, **data})
        return self.mark_for_rebuild()

    def item(self, content: Any, attributes: Mapping[str, Any] | None = None) -> ListBuilder:
        return self._add('item', content=content, attributes=dict(attributes or {}))

    def link(
        self,
        text: str,
        url: str,
        attributes: Mapping[str, Any] | None = None,
        active: bool = False,
    ) -> ListBuilder:
        return self._add('link', text=text, url=url, attributes=dict(attributes or {}), active=active)

    def current(self, text: str, attributes: Mapping[str, Any] | None = None) -> ListBuilder:
        """Add the current page as plain text marked ``current active``."""
        return self._add('text', text=text, attributes=dict(attributes or {}), classes='current active')

    def header(self, text: str, attributes: Mapping[str, Any] | None = None) -> ListBuilder:
        return self._add('text', text=text, attributes=dict(attributes or {}), classes='list-header')

    def divider(self, class_name: str = 'divider') -> ListBuilder:
        return self._add('divider', classes=class_name)

    def submenu(self, label: str, items: Any, attributes: Mapping[str, Any] | None = None) -> ListBuilder:
        """Add a nested list.

        items is a mapping of url to text, or a list whose entries are
        ``{'text', 'url'}`` dicts or plain content.
        """
        return self._add('submenu', label=label, items=items, attributes=dict(attributes or {}))

    def ordered(self) -> ListBuilder:
        self.tag = 'ol'
        return self

    def unordered(self) -> ListBuilder:
        self.tag = 'ul'
        return self

    def navigation(self) -> ListBuilder:
        return self.add_class('nav').set_attribute('role', 'navigation')

    def horizontal(self) -> ListBuilder:
        return self.add_class('horizontal')

    def vertical(self) -> ListBuilder:
        return self.add_class('vertical')

    @staticmethod
    def _submenu_list(items: Any) -> Element:
        submenu = Element('ul')
        if isinstance(items, Mapping):
            for url, text in items.items():
                submenu.add_child(Element('li', Element('a', text, href=url)))
            return submenu
        for entry in items:
            if isinstance(entry, Mapping) and 'text' in entry and 'url' in entry:
                link = Element('a', entry['text'], entry.get('attributes'), href=entry['url'])
                submenu.add_child(Element('li', link))
            else:
                submenu.add_child(Element('li', entry))
        return submenu

    def _build_item(self, data: dict[str, Any]) -> Element:
        kind = data['type']
        if kind == 'link':
            link = Element('a', data['text'], href=data['url'])
            link.set_attributes(data['attributes']).toggle_class('active', data['active'])
            return Element('li', link).toggle_class('active', data['active'])
        if kind == 'text':
            return Element('li', data['text'], escape_content=True, class_=data['classes']).set_attributes(data['attributes'])
        if kind == 'divider':
            return Element('li', class_=data['classes'])
        if kind == 'submenu':
            li = Element('li', escape_content=True, class_='has-submenu').set_attributes(data['attributes'])
            return li.add_child(data['label']).add_child(self._submenu_list(data['items']))
        return Element('li', data['content'], data['attributes'])

    def rebuild(self) -> None:
        self.set_content([self._build_item(data) for data in self._items])
