# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Interactive components: accordion, tabs, modal and form widgets.

The markup carries the classes and data attributes the companion scripts
hook into (``data-section``, ``data-tab``, ``data-open-modal``, ...). The
scripts themselves are not part of this package.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..component import Component
from ..config import formatter, generate_id
from ..elements import Button, Input, Label
from ..node import Element
from .sections import SectionsMixin


class Accordion(SectionsMixin, Component):
    """Collapsible sections, one open at a time unless allow_multiple.

    Example:
        >>> acc = Accordion([{'id': 'faq-1', 'title': 'Why?', 'content': 'Because.'}])
        >>> acc.set_section_active('faq-1')
    """

    component_type = 'accordion'

    def __init__(
        self,
        sections: Any = None,
        allow_multiple: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self._init_sections()
        super().__init__('div', {'allow_multiple': allow_multiple}, attributes)
        self.set_data('allow-multiple', 'true' if allow_multiple else 'false')
        if sections:
            self.add_sections(sections)

    def is_multiple_allowed(self) -> bool:
        return bool(self.options['allow_multiple'])

    def set_allow_multiple(self, allow: bool) -> Accordion:
        """Change the policy; when disabled only the first active section stays open."""
        self.options['allow_multiple'] = allow
        self.set_data('allow-multiple', 'true' if allow else 'false')
        if not allow:
            found = False
            for section_id, section in self.sections.items():
                if section['active']:
                    if found:
                        section['active'] = False
                    else:
                        found = True
                        self.active_section = section_id
        return self.mark_for_rebuild()

    def rebuild(self) -> None:
        children = []
        for section_id, section in self.sections.items():
            active = section['active']
            header = Element('div', section['title'], class_='accordion-header')
            header.toggle_class('active', active).set_data('section', section_id)
            content = Element('div', section['content'], id=section_id, class_='accordion-content')
            content.set_styles({'display': 'block' if active else 'none'})
            children.extend([header, content])
        self.set_content(children)


class Tabs(SectionsMixin, Component):
    """Tab navigation with one visible panel; the first tab is active by default."""

    component_type = 'tabs'
    base_class = 'tabs-container'

    def __init__(
        self,
        tabs: Any = None,
        active_tab: str = '',
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self._init_sections()
        super().__init__('div', None, attributes)
        if tabs:
            self.add_sections(tabs)
        if active_tab:
            self.set_active_tab(active_tab)

    def activates_first_section(self) -> bool:
        return True

    def add_tab(self, tab_id: str, title: Any, content: Any) -> Tabs:
        return self.add_section(tab_id, title, content)

    def remove_tab(self, tab_id: str) -> Tabs:
        return self.remove_section(tab_id)

    def set_active_tab(self, tab_id: str) -> Tabs:
        return self.set_section_active(tab_id)

    def get_active_tab(self) -> str:
        if self.active_section in self.sections:
            return self.active_section
        return next(iter(self.sections), '')

    def get_tabs(self) -> dict[str, dict[str, Any]]:
        return self.get_sections()

    def get_tab(self, tab_id: str) -> dict[str, Any] | None:
        return self.get_section(tab_id)

    def rebuild(self) -> None:
        active_tab = self.get_active_tab()
        nav = Element('ul', class_='tabs-nav')
        panels = Element('div', class_='tabs-content')
        for tab_id, tab in self.sections.items():
            active = tab_id == active_tab
            link = Element('a', tab['title'], href=f"#{tab_id}")
            link.set_data('tab', tab_id).toggle_class('active', active)
            nav.add_child(Element('li', link))
            panel = Element('div', tab['content'], id=tab_id, class_='tab-content')
            panels.add_child(panel.toggle_class('active', active))
        self.set_content([nav, panels])


class Modal(Component):
    """Overlay dialog with title, body and footer, hidden until opened.

    Args:
        title: Title text (escaped) or an element.
        content: Initial body content.
        buttons: Footer buttons, see set_footer_buttons().
        attributes: Wrapper attributes; an ``id`` is generated when missing.
        closeable: Render the close control.
    """

    component_type = 'modal'
    base_class = 'modal-overlay'
    default_options = {'closeable': True, 'visible': False}

    def __init__(
        self,
        title: Any = '',
        content: Any = None,
        buttons: list[Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
        closeable: bool = True,
    ) -> None:
        super().__init__('div', {'closeable': closeable}, attributes)
        if not self.get_attribute('id'):
            self.set_id(generate_id('modal-'))
        self.set_style('display', 'none')
        self._title: Any = None
        self._body: list[Any] = []
        self._footer: Any = None
        if title:
            self.set_title(title)
        if content is not None:
            self.set_body(content)
        if buttons:
            self.set_footer_buttons(buttons)

    @property
    def modal_id(self) -> str:
        return self.get_attribute('id')

    def set_title(self, title: Any) -> Modal:
        self._title = title
        return self.mark_for_rebuild()

    def set_body(self, content: Any) -> Modal:
        self._body = []
        return self.add_to_body(content)

    def add_to_body(self, content: Any) -> Modal:
        self._body.extend(content if isinstance(content, (list, tuple)) else [content])
        return self.mark_for_rebuild()

    def set_footer(self, content: Any) -> Modal:
        self._footer = content
        return self.mark_for_rebuild()

    def set_footer_buttons(self, buttons: list[Any]) -> Modal:
        """Replace the footer with buttons.

        Each item is an element or a dict with ``text`` and optional
        ``type``, ``class``, ``id``, ``data`` (mapping) and ``action``
        (rendered as ``data-modal-action``).
        """
        footer = []
        for item in buttons:
            if isinstance(item, Element):
                footer.append(item)
            elif isinstance(item, Mapping) and 'text' in item:
                button = Button(item['text'], item.get('type', 'button'))
                if item.get('class'):
                    button.add_class(item['class'])
                if item.get('id'):
                    button.set_id(item['id'])
                for key, value in (item.get('data') or {}).items():
                    button.set_data(key, value)
                if item.get('action'):
                    button.set_data('modal-action', item['action'])
                footer.append(button)
        self._footer = footer
        return self.mark_for_rebuild()

    def set_closeable(self, closeable: bool) -> Modal:
        return self.toggle_option('closeable', closeable)

    def set_visible(self, visible: bool) -> Modal:
        self.options['visible'] = visible
        return self.set_style('display', 'block' if visible else 'none')

    def create_trigger(self, text: Any, attributes: Mapping[str, Any] | None = None) -> Button:
        """Return a button that opens this modal."""
        button = Button(text, 'button', attributes)
        return button.set_data('open-modal', self.modal_id)

    def create_trigger_link(self, text: Any, attributes: Mapping[str, Any] | None = None) -> Element:
        """Return a link that opens this modal."""
        link = Element('a', text, attributes)
        link.set_attribute('href', f"#{self.modal_id}")
        return link.set_data('open-modal', self.modal_id)

    def rebuild(self) -> None:
        wrapper = Element('div', class_='modal-content')
        if self.options['closeable']:
            wrapper.add_child(Element(
                'span', '×', {'class': 'modal-close', 'data-modal': self.modal_id},
                escape_content=True,
            ))
        if self._title:
            title = self._title
            if isinstance(title, str):
                title = Element('span', title, escape_content=True)
            wrapper.add_child(Element('h3', title, class_='modal-title'))
        if self._body:
            wrapper.add_child(Element('div', self._body, class_='modal-body'))
        if self._footer:
            wrapper.add_child(Element('div', self._footer, class_='modal-footer'))
        self.set_content(wrapper)


class Toggle(Component):
    """Checkbox rendered as an on/off switch."""

    component_type = 'toggle'
    base_class = 'toggle-container'

    def __init__(
        self,
        name: str,
        checked: bool = False,
        value: Any = '1',
        label: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        disabled: bool = False,
    ) -> None:
        self.name = name
        super().__init__(
            'div', None, attributes,
            checked=checked, value=value, label=label, disabled=disabled,
        )

    def set_checked(self, checked: bool) -> Toggle:
        return self.toggle_option('checked', checked)

    def set_disabled(self, disabled: bool) -> Toggle:
        return self.toggle_option('disabled', disabled)

    def set_value(self, value: Any) -> Toggle:
        return self.set_option('value', value)

    def set_label(self, label: str | None) -> Toggle:
        return self.set_option('label', label)

    def rebuild(self) -> None:
        input_id = f"toggle-{self.name}"
        disabled = self.options['disabled']
        self.toggle_class('toggle-disabled', bool(disabled))
        checkbox = Input('checkbox', self.name, self.options['value'], class_='toggle-input', id=input_id)
        checkbox.set_checked(bool(self.options['checked'])).set_disabled(bool(disabled))
        switch = Label(Element('span', class_='toggle-slider'), input_id, class_='toggle-switch')
        children = [checkbox, switch]
        if self.options['label']:
            children.append(Element('span', self.options['label'], class_='toggle-label'))
        self.set_content(children)


class Featured(Component):
    """Star control marking an item as featured."""

    component_type = 'featured'
    base_class = 'featured-container'

    def __init__(
        self,
        name: str,
        featured: bool = False,
        label: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        disabled: bool = False,
    ) -> None:
        self.name = name
        super().__init__('div', None, attributes, featured=featured, label=label, disabled=disabled)

    def set_featured(self, featured: bool) -> Featured:
        return self.toggle_option('featured', featured)

    def set_disabled(self, disabled: bool) -> Featured:
        return self.toggle_option('disabled', disabled)

    def set_label(self, label: str | None) -> Featured:
        return self.set_option('label', label)

    def rebuild(self) -> None:
        featured = bool(self.options['featured'])
        disabled = bool(self.options['disabled'])
        self.toggle_class('is-featured', featured)
        self.toggle_class('featured-disabled', disabled)
        text = formatter().gettext('Remove from featured' if featured else 'Mark as featured')
        star = Element('span', attributes={
            'class': ['dashicons', 'dashicons-star-filled' if featured else 'dashicons-star-empty'],
            'role': 'button',
            'tabindex': '-1' if disabled else '0',
            'aria-label': text,
            'title': text,
        })
        children = [star]
        if self.options['label']:
            children.append(Element('span', self.options['label'], class_='featured-label'))
        self.set_content(children)


class Range(Component):
    """Range slider with an optional live value display."""

    component_type = 'range'
    base_class = 'range-container'

    def __init__(
        self,
        name: str,
        value: Any = 50,
        minimum: Any = 0,
        maximum: Any = 100,
        step: Any = 1,
        display_value: bool = True,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.name = name
        super().__init__(
            'div', None, attributes,
            value=value, min=minimum, max=maximum, step=step, display_value=display_value,
        )

    def set_value(self, value: Any) -> Range:
        return self.set_option('value', value)

    def set_min(self, minimum: Any) -> Range:
        return self.set_option('min', minimum)

    def set_max(self, maximum: Any) -> Range:
        return self.set_option('max', maximum)

    def set_step(self, step: Any) -> Range:
        return self.set_option('step', step)

    def set_display_value(self, display: bool) -> Range:
        return self.toggle_option('display_value', display)

    def rebuild(self) -> None:
        input_id = f"range-{self.name}"
        display_id = f"range-value-{self.name}"
        slider = Input('range', self.name, self.options['value'], {
            'class': 'range-input',
            'id': input_id,
            'step': self.options['step'],
            'min': self.options['min'],
            'max': self.options['max'],
            'data-display-id': display_id,
            'aria-labelledby': display_id,
        })
        inner = Element('div', slider, class_='range-inner')
        if self.options['display_value']:
            inner.add_child(Element('span', self.options['value'], {
                'class': 'range-value', 'id': display_id, 'aria-live': 'polite',
            }))
        self.set_content(inner)


class Clipboard(Component):
    """Read-only text with a copy-to-clipboard button.

    Options:
        display_text: Text shown instead of the copied text.
        max_length: Truncate the shown text (0 disables).
        add_ellipsis: Append ``...`` to truncated text.
        width: CSS width of the wrapper.
        tooltip: Wrapper title.
    """

    component_type = 'clipboard'
    base_class = 'clipboard-container'
    default_options = {
        'display_text': '',
        'max_length': 0,
        'add_ellipsis': True,
        'width': '180px',
        'tooltip': 'Click to copy',
    }

    def __init__(
        self,
        text: str,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.text = text
        self.clipboard_id = generate_id('clipboard-')
        super().__init__('div', options, attributes)
        if self.options['width']:
            self.set_style('width', self.options['width'])
        if self.options['tooltip']:
            self.add_tooltip(formatter().gettext(self.options['tooltip']))

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> Clipboard:
        self.text = text
        return self.mark_for_rebuild()

    def set_display_text(self, display_text: str) -> Clipboard:
        return self.set_option('display_text', display_text)

    def set_max_length(self, length: int, add_ellipsis: bool = True) -> Clipboard:
        return self.set_options({'max_length': length, 'add_ellipsis': add_ellipsis})

    def set_width(self, width: str) -> Clipboard:
        self.options['width'] = width
        return self.set_style('width', width)

    def set_tooltip(self, tooltip: str) -> Clipboard:
        self.options['tooltip'] = tooltip
        return self.add_tooltip(tooltip)

    def get_display_text(self) -> str:
        text = self.options['display_text'] or self.text
        max_length = int(self.options['max_length'] or 0)
        if 0 < max_length < len(text):
            text = text[:max_length]
            if self.options['add_ellipsis']:
                text += '...'
        return text

    def rebuild(self) -> None:
        button = Button(
            Element('span', class_='dashicons dashicons-clipboard'),
            'button',
            {
                'class': 'clipboard-button',
                'data-clipboard-id': self.clipboard_id,
                'aria-label': formatter().gettext('Copy to clipboard'),
            },
        )
        field = Element('div', [
            Element('span', self.get_display_text(), class_='clipboard-text', escape_content=True),
            button,
        ], class_='clipboard-field')
        hidden = Input('hidden', value=self.text, attributes={
            'id': self.clipboard_id,
            'readonly': True,
            'aria-hidden': 'true',
        })
        self.set_content([field, hidden])
