# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FormBuilder - a Form with one method per field type."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..components.interactive import Range
from ..elements import Button, Field, Form, Input, Label, Select, Textarea
from ..node import Element

logger = logging.getLogger(__name__)

SIMPLE_FIELD_TYPES = ('text', 'email', 'password', 'number', 'date', 'textarea', 'file')


class FormBuilder(Form):
    """Form assembled from labelled fields.

    Example:
        >>> form = (FormBuilder('/signup')
        ...         .text_field('username', 'Username')
        ...         .email_field('email', 'Email', 'We never share it.')
        ...         .submit_button('Sign up'))
    """

    def add_field(
        self,
        control: Element,
        label: str = '',
        description: str = '',
    ) -> FormBuilder:
        """Wrap control in a Field and append it."""
        return self.add_child(Field(control, label, description))

    def _input_field(
        self,
        input_type: str,
        name: str,
        label: str,
        description: str,
        attributes: Mapping[str, Any] | None,
    ) -> FormBuilder:
        return self.add_field(Input(input_type, name, None, attributes), label, description)

    def text_field(self, name: str, label: str = '', description: str = '',
                   attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self._input_field('text', name, label, description, attributes)

    def email_field(self, name: str, label: str = '', description: str = '',
                    attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self._input_field('email', name, label, description, attributes)

    def password_field(self, name: str, label: str = '', description: str = '',
                       attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self._input_field('password', name, label, description, attributes)

    def number_field(self, name: str, label: str = '', description: str = '',
                     attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self._input_field('number', name, label, description, attributes)

    def date_field(self, name: str, label: str = '', description: str = '',
                   attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self._input_field('date', name, label, description, attributes)

    def file_field(self, name: str, label: str = '', description: str = '',
                   attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        """Add a file input and switch the form to multipart encoding."""
        self.set_file_upload(True)
        return self._input_field('file', name, label, description, attributes)

    def textarea_field(self, name: str, label: str = '', description: str = '',
                       attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self.add_field(Textarea(name, '', attributes), label, description)

    def select_field(
        self,
        name: str,
        options: Any,
        selected: Any = None,
        label: str = '',
        description: str = '',
        attributes: Mapping[str, Any] | None = None,
    ) -> FormBuilder:
        return self.add_field(Select(name, options, selected, attributes), label, description)

    def checkbox_field(
        self,
        name: str,
        value: Any = '1',
        checked: bool = False,
        label: str = '',
        attributes: Mapping[str, Any] | None = None,
    ) -> FormBuilder:
        checkbox = Input('checkbox', name, value, attributes).set_checked(checked)
        return self.add_field(checkbox, label)

    def range_field(
        self,
        name: str,
        value: Any = 50,
        minimum: Any = 0,
        maximum: Any = 100,
        step: Any = 1,
        label: str = '',
        description: str = '',
        show_value: bool = True,
    ) -> FormBuilder:
        """Add a Range slider; the label points at the slider input."""
        field = Field(Range(name, value, minimum, maximum, step, show_value), '', description)
        if label:
            field.label = Label(label, f"range-{name}")
        return self.add_child(field)

    def submit_button(self, text: str = 'Submit', attributes: Mapping[str, Any] | None = None) -> FormBuilder:
        return self.add_child(Button(text, 'submit', attributes))

    def fields(self, fields: Mapping[str, Mapping[str, Any]]) -> FormBuilder:
        """Add fields from a mapping of name to config.

        Each config has a ``type`` (default ``text``) plus ``label``,
        ``description`` and ``attributes``; ``select`` also reads
        ``options`` and ``selected``, ``checkbox`` reads ``value`` and
        ``checked``, ``range`` reads ``value``, ``min``, ``max``, ``step``
        and ``show_value``. Unknown types are skipped.
        """
        for name, config in fields.items():
            field_type = config.get('type', 'text')
            label = config.get('label', '')
            description = config.get('description', '')
            attributes = config.get('attributes')
            if field_type == 'select':
                self.select_field(name, config.get('options', {}), config.get('selected'),
                                  label, description, attributes)
            elif field_type == 'checkbox':
                self.checkbox_field(name, config.get('value', '1'), config.get('checked', False),
                                    label, attributes)
            elif field_type == 'range':
                self.range_field(name, config.get('value', 50), config.get('min', 0),
                                 config.get('max', 100), config.get('step', 1),
                                 label, description, config.get('show_value', True))
            elif field_type in SIMPLE_FIELD_TYPES:
                getattr(self, f"{field_type}_field")(name, label, description, attributes)
            else:
                logger.debug("skipping field %r with unknown type %r", name, field_type)
        return self
