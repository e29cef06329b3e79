# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Form elements: buttons, inputs, labels, selects and field wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import generate_id
from .node import Element


class Button(Element):
    """A ``<button>`` with an explicit type (submit by default)."""

    def __init__(
        self,
        content: Any = '',
        button_type: str = 'submit',
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('button', content, attributes, **attr)
        self.set_attribute('type', button_type)

    def set_disabled(self, disabled: bool = True) -> Button:
        return self.set_attribute('disabled', disabled)


class Input(Element):
    """An ``<input>`` of any type."""

    def __init__(
        self,
        input_type: str = 'text',
        name: str = '',
        value: Any = None,
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('input', None, attributes, **attr)
        self.set_attribute('type', input_type)
        if name:
            self.set_attribute('name', name)
        if value is not None:
            self.set_value(value)

    def set_value(self, value: Any) -> Input:
        return self.set_attribute('value', value)

    def set_placeholder(self, placeholder: str) -> Input:
        return self.set_attribute('placeholder', placeholder)

    def set_required(self, required: bool = True) -> Input:
        return self.set_attribute('required', required)

    def set_disabled(self, disabled: bool = True) -> Input:
        return self.set_attribute('disabled', disabled)

    def set_readonly(self, readonly: bool = True) -> Input:
        return self.set_attribute('readonly', readonly)

    def set_checked(self, checked: bool = True) -> Input:
        return self.set_attribute('checked', checked)

    def set_min(self, minimum: Any) -> Input:
        return self.set_attribute('min', minimum)

    def set_max(self, maximum: Any) -> Input:
        return self.set_attribute('max', maximum)

    def set_step(self, step: Any) -> Input:
        return self.set_attribute('step', step)

    def set_pattern(self, pattern: str) -> Input:
        return self.set_attribute('pattern', pattern)

    def set_autocomplete(self, value: str) -> Input:
        return self.set_attribute('autocomplete', value)


class Label(Element):
    """A ``<label>`` bound to a control id."""

    def __init__(
        self,
        content: Any = None,
        for_id: str = '',
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('label', content, attributes, **attr)
        if for_id:
            self.set_attribute('for', for_id)


class Textarea(Element):
    """A ``<textarea>``; its text is always escaped."""

    def __init__(
        self,
        name: str = '',
        content: Any = '',
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('textarea', content, attributes, escape_content=True, **attr)
        if name:
            self.set_attribute('name', name)

    def set_rows(self, rows: int) -> Textarea:
        return self.set_attribute('rows', int(rows))

    def set_cols(self, cols: int) -> Textarea:
        return self.set_attribute('cols', int(cols))

    def set_placeholder(self, placeholder: str) -> Textarea:
        return self.set_attribute('placeholder', placeholder)

    def set_required(self, required: bool = True) -> Textarea:
        return self.set_attribute('required', required)

    def set_disabled(self, disabled: bool = True) -> Textarea:
        return self.set_attribute('disabled', disabled)

    def set_readonly(self, readonly: bool = True) -> Textarea:
        return self.set_attribute('readonly', readonly)


def _selected_set(selected: Any) -> set[str]:
    if selected is None:
        return set()
    if isinstance(selected, (list, tuple, set, frozenset)):
        return {str(value) for value in selected}
    return {str(selected)}


def _normalize_options(options: Any, selected: Any) -> list[dict[str, Any]]:
    """Turn a mapping or a list of option dicts into option records.

    Mappings go from value to label; list items are dicts with ``value``,
    ``label`` and optional ``attributes``, or plain values used as both.
    """
    chosen = _selected_set(selected)
    if isinstance(options, Mapping):
        items = [{'value': value, 'label': label} for value, label in options.items()]
    else:
        items = [
            dict(item) if isinstance(item, Mapping) else {'value': item, 'label': item}
            for item in options
        ]
    records = []
    for item in items:
        value = str(item['value'])
        records.append({
            'value': value,
            'label': item.get('label', value),
            'selected': value in chosen,
            'attributes': dict(item.get('attributes') or {}),
        })
    return records


class Select(Element):
    """A ``<select>`` whose options are regenerated on render.

    Example:
        >>> Select('size', {'s': 'Small', 'm': 'Medium'}, selected='m').render()
        '<select name="size"><option value="s">Small</option><option value="m" selected>Medium</option></select>'
    """

    def __init__(
        self,
        name: str = '',
        options: Any = None,
        selected: Any = None,
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('select', None, attributes, **attr)
        self._options: list[dict[str, Any]] = []
        self._optgroups: list[dict[str, Any]] = []
        if name:
            self.set_attribute('name', name)
        if options:
            self.add_options(options, selected)
        self.mark_for_rebuild()

    def add_option(
        self,
        value: Any,
        label: Any,
        selected: bool = False,
        attributes: Mapping[str, Any] | None = None,
    ) -> Select:
        self._options.append({
            'value': str(value),
            'label': label,
            'selected': selected,
            'attributes': dict(attributes or {}),
        })
        return self.mark_for_rebuild()

    def add_options(self, options: Any, selected: Any = None) -> Select:
        self._options.extend(_normalize_options(options, selected))
        return self.mark_for_rebuild()

    def add_optgroup(
        self,
        label: str,
        options: Any,
        selected: Any = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> Select:
        self._optgroups.append({
            'label': label,
            'options': _normalize_options(options, selected),
            'attributes': dict(attributes or {}),
        })
        return self.mark_for_rebuild()

    def set_selected(self, selected: Any) -> Select:
        """Select exactly the given value or values."""
        chosen = _selected_set(selected)
        for record in self._all_options():
            record['selected'] = record['value'] in chosen
        return self.mark_for_rebuild()

    def get_selected(self) -> list[str]:
        return [record['value'] for record in self._all_options() if record['selected']]

    def _all_options(self) -> list[dict[str, Any]]:
        records = list(self._options)
        for group in self._optgroups:
            records.extend(group['options'])
        return records

    def set_multiple(self, multiple: bool = True) -> Select:
        """Toggle multiple selection, adding ``[]`` to the field name."""
        self.set_attribute('multiple', multiple)
        name = self.get_attribute('name')
        if multiple and name and not name.endswith('[]'):
            self.set_attribute('name', f"{name}[]")
        return self

    def set_required(self, required: bool = True) -> Select:
        return self.set_attribute('required', required)

    def set_disabled(self, disabled: bool = True) -> Select:
        return self.set_attribute('disabled', disabled)

    def set_size(self, size: int) -> Select:
        return self.set_attribute('size', int(size))

    @staticmethod
    def _option_element(record: Mapping[str, Any]) -> Element:
        option = Element('option', record['label'], {'value': record['value']}, escape_content=True)
        option.set_attributes(record['attributes'])
        return option.set_attribute('selected', bool(record['selected']))

    def rebuild(self) -> None:
        children: list[Element] = [self._option_element(r) for r in self._options]
        for group in self._optgroups:
            optgroup = Element('optgroup', None, {'label': group['label']})
            optgroup.set_attributes(group['attributes'])
            optgroup.set_content([self._option_element(r) for r in group['options']])
            children.append(optgroup)
        self.set_content(children)


class Form(Element):
    """A ``<form>``; the method is stored lowercase."""

    def __init__(
        self,
        action: str = '',
        method: str = 'post',
        content: Any = None,
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('form', content, attributes, **attr)
        if action:
            self.set_attribute('action', action)
        if method:
            self.set_attribute('method', method.lower())

    def set_file_upload(self, enable: bool = True) -> Form:
        """Switch the encoding for file uploads on or off."""
        return self.set_attribute('enctype', 'multipart/form-data' if enable else None)


class Field(Element):
    """A ``div.field-wrapper`` grouping a label, a control and help text.

    Args:
        control: An element, or a name for a new text input.
        label: Label text; when given the control gets an id.
        description: Help text rendered as ``p.description``.
    """

    def __init__(
        self,
        control: Element | str,
        label: str = '',
        description: str = '',
        attributes: Mapping[str, Any] | None = None,
        **attr: Any,
    ) -> None:
        super().__init__('div', None, attributes, **attr)
        self.add_class('field-wrapper')
        if isinstance(control, Element):
            self.control = control
        else:
            self.control = Input('text', control)
            self.control.set_id(control)

        if not self.control.has_attribute('id') and label:
            name = self.control.get_attribute('name')
            self.control.set_id(f"field-{name}" if name else generate_id('field-'))

        self.label: Label | None = None
        self.description: Element | None = None
        self.error: Element | None = None
        if label:
            self.set_label(label)
        if description:
            self.set_description(description)
        self.mark_for_rebuild()

    def get_input(self) -> Element:
        return self.control

    def set_label(self, text: str) -> Field:
        self.label = Label(text, self.control.get_attribute('id', ''))
        return self.mark_for_rebuild()

    def set_description(self, text: str) -> Field:
        self.description = Element('p', text, class_='description')
        return self.mark_for_rebuild()

    def set_error(self, message: str) -> Field:
        """Attach an error message; an empty message clears it."""
        self.toggle_class('has-error', bool(message))
        self.error = Element('p', message, class_='error-message') if message else None
        return self.mark_for_rebuild()

    def rebuild(self) -> None:
        self.set_content([self.label, self.control, self.description, self.error])
