# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tooltip - wraps a target element with a positioned tooltip bubble."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..component import Component, choose
from ..node import Element

POSITIONS = ('top', 'right', 'bottom', 'left')
TRIGGERS = ('hover', 'click', 'focus')
THEMES = ('default', 'light', 'dark', 'info', 'warning', 'error')


class Tooltip(Component):
    """Target plus tooltip content, wired through ``data-tooltip-*`` attributes.

    Options:
        position: One of POSITIONS.
        trigger: One of TRIGGERS.
        delay: Show delay in milliseconds; 0 omits the attribute.
        arrow: Add the ``tooltip-arrow`` class.
        theme: One of THEMES.
        max_width: Maximum width in pixels.
        html: Trust the tooltip text as markup instead of escaping it.

    Example:
        >>> Tooltip('Help', 'More <info>').render()
        '<div class="tooltip-wrapper"><span data-tooltip="true" data-tooltip-position="top" data-tooltip-trigger="hover">Help</span><div class="tooltip-content tooltip-top tooltip-theme-default tooltip-arrow">More &lt;info&gt;</div></div>'
    """

    component_type = 'tooltip'
    base_class = 'tooltip-wrapper'
    default_options = {
        'position': 'top',
        'trigger': 'hover',
        'delay': 0,
        'arrow': True,
        'theme': 'default',
        'max_width': None,
        'html': False,
    }

    def __init__(
        self,
        target: Element | str,
        tooltip: Any,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__('div', options, attributes)
        self.target = target if isinstance(target, Element) else Element('span', target)
        self.tooltip = tooltip
        self.options['position'] = choose(self.options['position'], POSITIONS, 'top')
        self.options['trigger'] = choose(self.options['trigger'], TRIGGERS, 'hover')
        self.options['theme'] = choose(self.options['theme'], THEMES, 'default')

    def get_target(self) -> Element:
        return self.target

    def set_position(self, position: str) -> Tooltip:
        return self.set_option('position', choose(position, POSITIONS, 'top'))

    def set_trigger(self, trigger: str) -> Tooltip:
        return self.set_option('trigger', choose(trigger, TRIGGERS, 'hover'))

    def set_theme(self, theme: str) -> Tooltip:
        return self.set_option('theme', choose(theme, THEMES, 'default'))

    def set_tooltip(self, tooltip: Any, html: bool = False) -> Tooltip:
        """Replace the tooltip text; html=True trusts it as markup."""
        self.tooltip = tooltip
        return self.set_option('html', html)

    def create_tooltip_content(self) -> Element:
        position, theme = self.options['position'], self.options['theme']
        bubble = Element(
            'div', self.tooltip,
            escape_content=not self.options['html'],
            class_=['tooltip-content', f"tooltip-{position}", f"tooltip-theme-{theme}"],
        )
        bubble.toggle_class('tooltip-arrow', bool(self.options['arrow']))
        if self.options['max_width']:
            bubble.set_style('max-width', f"{self.options['max_width']}px")
        return bubble

    def rebuild(self) -> None:
        self.target.set_attributes({
            'data-tooltip': 'true',
            'data-tooltip-position': self.options['position'],
            'data-tooltip-trigger': self.options['trigger'],
            'data-tooltip-delay': self.options['delay'] or None,
        })
        self.set_content([self.target, self.create_tooltip_content()])
