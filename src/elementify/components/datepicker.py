# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DatePicker - text input paired with a calendar container."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..component import Component
from ..config import formatter
from ..elements import Input
from ..node import Element


def _flag(value: bool) -> str:
    return 'true' if value else 'false'


class DatePicker(Component):
    """Date input configured through data attributes.

    Options:
        format: Date format handed to the calendar script.
        min_date, max_date: Selectable range (``YYYY-MM-DD``).
        placeholder: Input placeholder.
        readonly, disabled: Input state.
        show_clear, show_today: Calendar buttons.
        first_day: First day of the week, 0 (Sunday) to 6.
        locale: Calendar locale.
    """

    component_type = 'datepicker'
    base_class = 'datepicker-wrapper'
    default_options = {
        'format': 'Y-m-d',
        'min_date': '',
        'max_date': '',
        'placeholder': 'Select a date',
        'readonly': False,
        'disabled': False,
        'show_clear': True,
        'show_today': True,
        'first_day': 0,
        'locale': '',
    }

    def __init__(
        self,
        name: str = '',
        value: str = '',
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.name = name
        self.selected_date = value
        super().__init__('div', options, attributes)
        self.options['first_day'] = self._clamp_day(self.options['first_day'])

    @staticmethod
    def _clamp_day(day: Any) -> int:
        return max(0, min(6, int(day)))

    def set_date(self, date: str) -> DatePicker:
        self.selected_date = date
        return self.mark_for_rebuild()

    def set_format(self, fmt: str) -> DatePicker:
        return self.set_option('format', fmt)

    def set_min_date(self, date: str) -> DatePicker:
        return self.set_option('min_date', date)

    def set_max_date(self, date: str) -> DatePicker:
        return self.set_option('max_date', date)

    def set_placeholder(self, placeholder: str) -> DatePicker:
        return self.set_option('placeholder', placeholder)

    def set_readonly(self, readonly: bool = True) -> DatePicker:
        return self.toggle_option('readonly', readonly)

    def set_disabled(self, disabled: bool = True) -> DatePicker:
        return self.toggle_option('disabled', disabled)

    def show_clear_button(self, show: bool = True) -> DatePicker:
        return self.toggle_option('show_clear', show)

    def show_today_button(self, show: bool = True) -> DatePicker:
        return self.toggle_option('show_today', show)

    def set_first_day(self, day: int) -> DatePicker:
        return self.set_option('first_day', self._clamp_day(day))

    def set_locale(self, locale: str) -> DatePicker:
        return self.set_option('locale', locale)

    def create_input(self) -> Input:
        field = Input('text', self.name, self.selected_date or None, {
            'class': 'datepicker-input',
            'placeholder': formatter().gettext(self.options['placeholder']),
            'data-datepicker': 'true',
            'data-format': self.options['format'],
            'autocomplete': 'off',
            'data-min-date': self.options['min_date'] or None,
            'data-max-date': self.options['max_date'] or None,
        })
        return field.set_readonly(bool(self.options['readonly'])).set_disabled(bool(self.options['disabled']))

    def create_calendar(self) -> Element:
        return Element('div', attributes={
            'class': 'datepicker-calendar',
            'data-first-day': self.options['first_day'],
            'data-locale': self.options['locale'],
            'data-show-clear': _flag(self.options['show_clear']),
            'data-show-today': _flag(self.options['show_today']),
        })

    def rebuild(self) -> None:
        container = Element('div', [
            self.create_input(),
            Element('span', '📅', class_='datepicker-icon'),
        ], class_='datepicker-input-container')
        self.set_content([container, self.create_calendar()])
