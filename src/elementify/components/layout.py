# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Layout components: cards and breadcrumb trails."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from markupsafe import escape

from ..component import Component, choose
from ..node import Element

CARD_VARIANTS = ('default', 'compact', 'borderless', 'no-padding')


class Card(Component):
    """Content card with optional header, body, footer and top image.

    Args:
        content: Body content.
        title: Header title, rendered as an escaped ``h3``.
        footer: Footer content.
        attributes: Wrapper attributes.
        variant: One of CARD_VARIANTS; anything but ``default`` adds a
            ``card--<variant>`` class.

    Example:
        >>> Card('Body', 'Title', variant='default').render()
        '<div class="card"><div class="card-header"><h3>Title</h3></div><div class="card-body">Body</div></div>'
    """

    component_type = 'card'

    def __init__(
        self,
        content: Any = None,
        title: Any = '',
        footer: Any = None,
        attributes: Mapping[str, Any] | None = None,
        variant: str = 'compact',
    ) -> None:
        super().__init__('div', None, attributes)
        self._header: Any = None
        self._body: list[Any] = []
        self._footer: Any = None
        self._image: Element | None = None
        self._variant = 'default'
        self.set_variant(variant)
        if title:
            self.set_header(title)
        if content is not None:
            self.set_body(content)
        if footer is not None:
            self.set_footer(footer)

    def set_header(self, content: Any) -> Card:
        """Set the header; strings become an escaped ``h3`` title."""
        self._header = content
        return self.mark_for_rebuild()

    def set_body(self, content: Any) -> Card:
        self._body = []
        return self.add_to_body(content)

    def add_to_body(self, content: Any) -> Card:
        """Append one item or every item of a list or tuple."""
        self._body.extend(content if isinstance(content, (list, tuple)) else [content])
        return self.mark_for_rebuild()

    def set_footer(self, content: Any) -> Card:
        self._footer = content
        return self.mark_for_rebuild()

    def set_image(self, src: str, alt: str = '', attributes: Mapping[str, Any] | None = None) -> Card:
        """Show an image above the header."""
        image = Element('img', None, {'class': 'card-img-top', 'src': src, 'alt': alt})
        self._image = image.set_attributes(attributes or {})
        return self.mark_for_rebuild()

    def set_variant(self, variant: str) -> Card:
        self._variant = choose(variant, CARD_VARIANTS, 'default')
        self.remove_class(lambda token: token.startswith('card--'))
        if self._variant != 'default':
            self.add_class(f"card--{self._variant}")
        return self

    def get_variant(self) -> str:
        return self._variant

    def rebuild(self) -> None:
        header = None
        if isinstance(self._header, str):
            header = self.create_header(self.create_text_element('h3', self._header))
        elif self._header is not None:
            header = self.create_header(self._header)
        body = self.create_body(self._body) if self._body else None
        footer = self.create_footer(self._footer) if self._footer is not None else None
        self.set_content([self._image, header, body, footer])


def default_transform(segment: str) -> str:
    """Turn a path segment into a label: ``my-page`` gives ``My page``."""
    return (segment[:1].upper() + segment[1:]).replace('-', ' ').replace('_', ' ')


class Breadcrumbs(Component):
    """Breadcrumb trail; the last item is the current page.

    Items are strings, dicts with ``text`` and optional ``url``, or
    elements used as they are.
    """

    component_type = 'breadcrumbs'

    def __init__(
        self,
        items: list[Any] | None = None,
        separator: str = '/',
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__('nav', None, attributes, separator=separator, show_icons=True)
        self.set_aria('label', 'Breadcrumb')
        self.items: list[Any] = []
        self.add_items(items or [])

    @classmethod
    def from_path(
        cls,
        path: str,
        base_url: str = '',
        separator: str = '/',
        home_text: str | None = 'Home',
        home_url: str = '/',
        transform: Callable[[str], str] | None = default_transform,
        attributes: Mapping[str, Any] | None = None,
    ) -> Breadcrumbs:
        """Build a trail from a URL path such as ``/shop/shoes/red``.

        Every segment but the last links to ``base_url`` plus the path up
        to that segment.
        """
        items: list[Any] = []
        if home_text:
            items.append({'text': home_text, 'url': home_url})
        segments = [segment for segment in path.strip('/').split('/') if segment]
        current = ''
        for index, segment in enumerate(segments):
            current += f"/{segment}"
            text = transform(segment) if transform else segment
            if index == len(segments) - 1:
                items.append(text)
            else:
                items.append({'text': text, 'url': base_url.rstrip('/') + current})
        return cls(items, separator, attributes)

    def add_item(self, item: Any) -> Breadcrumbs:
        self.items.append(item)
        return self.mark_for_rebuild()

    def add_items(self, items: list[Any]) -> Breadcrumbs:
        for item in items:
            self.add_item(item)
        return self

    def set_items(self, items: list[Any]) -> Breadcrumbs:
        self.items = []
        self.mark_for_rebuild()
        return self.add_items(items)

    def remove_item(self, index: int) -> Breadcrumbs:
        if 0 <= index < len(self.items):
            del self.items[index]
            self.mark_for_rebuild()
        return self

    def get_items(self) -> list[Any]:
        return list(self.items)

    def get_item(self, index: int) -> Any:
        return self.items[index] if 0 <= index < len(self.items) else None

    def set_separator(self, separator: str) -> Breadcrumbs:
        return self.set_option('separator', separator)

    def get_separator(self) -> str:
        return self.options['separator']

    def show_icons(self, show: bool = True) -> Breadcrumbs:
        return self.toggle_option('show_icons', show)

    def _item_content(self, item: Any, is_last: bool) -> list[Any]:
        if isinstance(item, Element):
            return [item]
        icon = None
        if isinstance(item, Mapping):
            text, url = item.get('text', ''), item.get('url')
            if item.get('icon') and self.options['show_icons']:
                icon = Element('span', class_=['dashicons', f"dashicons-{item['icon']}"])
        else:
            text, url = str(item), '#'
        if is_last or not url:
            return [icon, escape(text)]
        return [icon, Element('a', text, href=url)]

    def rebuild(self) -> None:
        trail = Element('ol', class_='breadcrumb')
        last = len(self.items) - 1
        separator = self.options['separator']
        for index, item in enumerate(self.items):
            is_last = index == last
            li = Element('li', self._item_content(item, is_last))
            li.toggle_class('active', is_last).toggle_attribute('aria-current', 'page', is_last)
            if not is_last and separator:
                li.add_child(self.create_text_element('span', separator, {'class': 'separator'}))
            trail.add_child(li)
        self.set_content(trail)
