# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Notice - admin-style message box (info, success, warning, error)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..component import Component, choose
from ..node import Element

NOTICE_TYPES = ('info', 'success', 'warning', 'error')


class Notice(Component):
    """Message box whose content is wrapped in a paragraph.

    Example:
        >>> Notice.success('Saved.', dismissible=True).render()
        '<div class="notice notice-success is-dismissible"><p>Saved.</p></div>'
    """

    component_type = 'notice'

    def __init__(
        self,
        message: Any = None,
        notice_type: str = 'info',
        dismissible: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__('div', None, attributes)
        self.message = message
        self.notice_type = choose(notice_type, NOTICE_TYPES, 'info')
        self.dismissible = dismissible
        self.icon = ''
        self.actions: list[dict[str, Any]] = []
        self.add_class(f"notice-{self.notice_type}")
        self.toggle_class('is-dismissible', dismissible)

    @classmethod
    def info(cls, message: Any, dismissible: bool = False, attributes: Mapping[str, Any] | None = None) -> Notice:
        return cls(message, 'info', dismissible, attributes)

    @classmethod
    def success(cls, message: Any, dismissible: bool = False, attributes: Mapping[str, Any] | None = None) -> Notice:
        return cls(message, 'success', dismissible, attributes)

    @classmethod
    def warning(cls, message: Any, dismissible: bool = False, attributes: Mapping[str, Any] | None = None) -> Notice:
        return cls(message, 'warning', dismissible, attributes)

    @classmethod
    def error(cls, message: Any, dismissible: bool = False, attributes: Mapping[str, Any] | None = None) -> Notice:
        return cls(message, 'error', dismissible, attributes)

    def get_type(self) -> str:
        return self.notice_type

    def is_dismissible(self) -> bool:
        return self.dismissible

    def set_type(self, notice_type: str) -> Notice:
        """Switch the type; unknown types are ignored."""
        if notice_type in NOTICE_TYPES:
            self.remove_class([f"notice-{t}" for t in NOTICE_TYPES])
            self.add_class(f"notice-{notice_type}")
            self.notice_type = notice_type
        return self

    def set_dismissible(self, dismissible: bool) -> Notice:
        self.dismissible = dismissible
        return self.toggle_class('is-dismissible', dismissible)

    def set_message(self, message: Any) -> Notice:
        self.message = message
        return self.mark_for_rebuild()

    def set_icon(self, icon: str) -> Notice:
        """Show a dashicon before the message; an empty name removes it."""
        self.icon = icon
        return self.mark_for_rebuild()

    def add_action(
        self,
        text: str,
        url: str,
        attributes: Mapping[str, Any] | None = None,
        primary: bool = False,
    ) -> Notice:
        """Append an action link rendered as a button below the message."""
        self.actions.append({
            'text': text,
            'url': url,
            'attributes': dict(attributes or {}),
            'primary': primary,
        })
        return self.mark_for_rebuild()

    def clear_actions(self) -> Notice:
        self.actions = []
        return self.mark_for_rebuild()

    def create_actions(self) -> Element:
        wrapper = Element('div', class_='notice-actions', style={'margin-top': '10px'})
        for action in self.actions:
            link = Element('a', action['text'], href=action['url'])
            link.add_class(['button', 'button-primary' if action['primary'] else 'button-secondary'])
            link.set_attributes(action['attributes']).set_style('margin-right', '10px')
            wrapper.add_child(link)
        return wrapper

    def rebuild(self) -> None:
        message = self.message
        trusted = isinstance(message, (Element, list, tuple)) or hasattr(message, '__html__')
        if message is not None and not trusted:
            message = str(message)
        paragraph = Element('p', message)
        if self.icon:
            paragraph.prepend_child(Element(
                'span',
                class_=['dashicons', f"dashicons-{self.icon}"],
                style={'margin-right': '8px', 'vertical-align': 'middle'},
            ))
        if self.actions:
            paragraph.add_child(self.create_actions())
        self.set_content(paragraph)
