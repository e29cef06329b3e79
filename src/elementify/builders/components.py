# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fluent front ends for cards, notices and breadcrumbs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import IO, Any

from ..components.layout import Breadcrumbs, Card, default_transform
from ..components.notice import Notice


class CardBuilder(Card):
    """Card with chainable, declarative setters.

    Example:
        >>> CardBuilder().title('Stats').content('42 users').borderless()
    """

    def title(self, title: Any) -> CardBuilder:
        return self.set_header(title)

    header = title

    def content(self, content: Any) -> CardBuilder:
        return self.set_body(content)

    body = content

    def footer(self, footer: Any) -> CardBuilder:
        return self.set_footer(footer)

    def image(self, src: str, alt: str = '', attributes: Mapping[str, Any] | None = None) -> CardBuilder:
        return self.set_image(src, alt, attributes)

    def variant(self, variant: str) -> CardBuilder:
        return self.set_variant(variant)

    def compact(self) -> CardBuilder:
        return self.set_variant('compact')

    def borderless(self) -> CardBuilder:
        return self.set_variant('borderless')

    def no_padding(self) -> CardBuilder:
        return self.set_variant('no-padding')


class NoticeBuilder:
    """Builds a Notice with an icon and action buttons.

    Example:
        >>> NoticeBuilder('Payment failed').error().icon('warning') \\
        ...     .primary_action('Retry', '/retry').render()
    """

    def __init__(
        self,
        message: Any = '',
        notice_type: str = 'info',
        dismissible: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.notice = Notice(message, notice_type, dismissible, attributes)

    @classmethod
    def quick_success(cls, message: str, action_text: str | None = None,
                      action_url: str | None = None) -> NoticeBuilder:
        """Dismissible success notice with an optional primary action."""
        builder = cls(message, 'success', True)
        if action_text and action_url:
            builder.primary_action(action_text, action_url)
        return builder

    @classmethod
    def quick_error(cls, message: str, retry_text: str | None = None,
                    retry_url: str | None = None) -> NoticeBuilder:
        """Dismissible error notice with a warning icon and optional retry."""
        builder = cls(message, 'error', True).icon('warning')
        if retry_text and retry_url:
            builder.primary_action(retry_text, retry_url)
        return builder

    def success(self) -> NoticeBuilder:
        self.notice.set_type('success')
        return self

    def warning(self) -> NoticeBuilder:
        self.notice.set_type('warning')
        return self

    def error(self) -> NoticeBuilder:
        self.notice.set_type('error')
        return self

    def info(self) -> NoticeBuilder:
        self.notice.set_type('info')
        return self

    def dismissible(self, dismissible: bool = True) -> NoticeBuilder:
        self.notice.set_dismissible(dismissible)
        return self

    def content(self, message: Any) -> NoticeBuilder:
        self.notice.set_message(message)
        return self

    def action(self, text: str, url: str, attributes: Mapping[str, Any] | None = None,
               primary: bool = False) -> NoticeBuilder:
        self.notice.add_action(text, url, attributes, primary)
        return self

    def primary_action(self, text: str, url: str,
                       attributes: Mapping[str, Any] | None = None) -> NoticeBuilder:
        return self.action(text, url, attributes, primary=True)

    def secondary_action(self, text: str, url: str,
                         attributes: Mapping[str, Any] | None = None) -> NoticeBuilder:
        return self.action(text, url, attributes, primary=False)

    def icon(self, icon: str) -> NoticeBuilder:
        self.notice.set_icon(icon)
        return self

    def inline(self) -> NoticeBuilder:
        self.notice.add_class('inline')
        return self

    def add_class(self, classes: Any) -> NoticeBuilder:
        self.notice.add_class(classes)
        return self

    def set_attribute(self, name: str, value: Any) -> NoticeBuilder:
        self.notice.set_attribute(name, value)
        return self

    def build(self) -> Notice:
        return self.notice

    def render(self) -> str:
        return self.notice.render()

    def output(self, stream: IO[str] | None = None) -> None:
        self.notice.output(stream)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.notice.__html__()


class BreadcrumbBuilder:
    """Builds a Breadcrumbs trail item by item.

    Example:
        >>> (BreadcrumbBuilder().home().link('Shop', '/shop')
        ...  .current('Shoes').chevron_separator().render())
    """

    def __init__(
        self,
        items: list[Any] | None = None,
        separator: str = '/',
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.breadcrumbs = Breadcrumbs(items, separator, attributes)

    @classmethod
    def create_from_path(cls, path: str, base_url: str = '', **options: Any) -> BreadcrumbBuilder:
        return cls().from_path(path, base_url, **options)

    def _item(self, text: str, url: str | None, icon: str | None) -> BreadcrumbBuilder:
        item: dict[str, Any] = {'text': text}
        if url is not None:
            item['url'] = url
        if icon:
            item['icon'] = icon
        self.breadcrumbs.add_item(item)
        return self

    def home(self, text: str = 'Home', url: str = '/', icon: str | None = 'admin-home') -> BreadcrumbBuilder:
        return self._item(text, url, icon)

    def link(self, text: str, url: str, icon: str | None = None) -> BreadcrumbBuilder:
        return self._item(text, url, icon)

    def current(self, text: str, icon: str | None = None) -> BreadcrumbBuilder:
        return self._item(text, None, icon)

    def separator(self, separator: str) -> BreadcrumbBuilder:
        self.breadcrumbs.set_separator(separator)
        return self

    def arrow_separator(self) -> BreadcrumbBuilder:
        return self.separator('→')

    def chevron_separator(self) -> BreadcrumbBuilder:
        return self.separator('›')

    def slash_separator(self) -> BreadcrumbBuilder:
        return self.separator('/')

    def no_icons(self) -> BreadcrumbBuilder:
        self.breadcrumbs.show_icons(False)
        return self

    def add_class(self, classes: Any) -> BreadcrumbBuilder:
        self.breadcrumbs.add_class(classes)
        return self

    def from_path(
        self,
        path: str,
        base_url: str = '',
        home_text: str | None = None,
        home_url: str = '/',
        home_icon: str | None = 'admin-home',
        segment_icon: str | None = None,
        transform: Callable[[str], str] | None = None,
    ) -> BreadcrumbBuilder:
        """Replace the items with a trail for a URL path."""
        self.breadcrumbs.set_items([])
        if home_text:
            self.home(home_text, home_url, home_icon)
        transform = transform or default_transform
        segments = [segment for segment in path.strip('/').split('/') if segment]
        current = ''
        for index, segment in enumerate(segments):
            current += f"/{segment}"
            if index == len(segments) - 1:
                self.current(transform(segment), segment_icon)
            else:
                self.link(transform(segment), base_url.rstrip('/') + current, segment_icon)
        return self

    def get_breadcrumbs(self) -> Breadcrumbs:
        return self.breadcrumbs

    def render(self) -> str:
        return self.breadcrumbs.render()

    def output(self, stream: IO[str] | None = None) -> None:
        self.breadcrumbs.output(stream)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.breadcrumbs.__html__()
