# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Display components: read-only renderings of values.

Numbers, sizes, dates and labels go through the active Formatter, so
locale rules and translations are decided by the application.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..component import Component, choose
from ..config import formatter
from ..node import Element

logger = logging.getLogger(__name__)

SIZES = ('small', 'medium', 'large')


class ProgressBar(Component):
    """Horizontal bar showing current / total as a percentage.

    Options:
        current_percentage: Explicit percentage overriding current/total.
        size: ``small``, ``medium`` or ``large``.
        show_percentage: Label with ``N%``.
        show_current: Label with the current value.
        show_total: Label with the total; with show_current the label
            reads ``current / total``.

    Example:
        >>> ProgressBar(30, 60, {'show_percentage': True}).render()
        '<div class="progress-bar medium"><div class="progress-container"><div class="progress" style="width: 50%;"></div><div class="label">50%</div></div></div>'
    """

    component_type = 'progress-bar'
    default_options = {
        'current_percentage': None,
        'size': 'medium',
        'show_percentage': False,
        'show_current': False,
        'show_total': False,
    }

    def __init__(
        self,
        current: float,
        total: float = 100,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.current = max(0, current)
        self.total = max(1, total)
        super().__init__('div', options, attributes)
        self.options['size'] = choose(self.options['size'], SIZES, 'medium')
        self.add_class(self.options['size'])

    def get_percentage(self) -> int:
        """Percentage shown by the bar, capped at 100."""
        explicit = self.options['current_percentage']
        if isinstance(explicit, (int, float)) and not isinstance(explicit, bool):
            percentage = int(explicit)
        else:
            percentage = int(self.current / self.total * 100)
        return min(100, percentage)

    def set_current(self, value: float) -> ProgressBar:
        self.current = max(0, value)
        return self.mark_for_rebuild()

    def set_total(self, value: float) -> ProgressBar:
        self.total = max(1, value)
        return self.mark_for_rebuild()

    def set_size(self, size: str) -> ProgressBar:
        if size in SIZES:
            self.options['size'] = size
            self.remove_class(SIZES).add_class(size)
        return self

    def show_percentage(self, show: bool = True) -> ProgressBar:
        return self.toggle_option('show_percentage', show)

    def show_current(self, show: bool = True) -> ProgressBar:
        return self.toggle_option('show_current', show)

    def show_total(self, show: bool = True) -> ProgressBar:
        return self.toggle_option('show_total', show)

    def get_label_text(self) -> str:
        show_current = self.options['show_current']
        show_total = self.options['show_total']
        if show_current and show_total:
            return f"{self.current} / {self.total}"
        text = f"{self.get_percentage()}%" if self.options['show_percentage'] else ''
        if show_current:
            text += str(self.current)
        elif show_total:
            text += str(self.total)
        return text

    def rebuild(self) -> None:
        container = Element('div', class_='progress-container')
        container.add_child(Element('div', class_='progress', style={'width': f"{self.get_percentage()}%"}))
        label = self.get_label_text()
        if label:
            container.add_child(Element('div', label, class_='label'))
        self.set_content(container)


STATUS_ICONS = {
    'default': 'marker',
    'success': 'yes',
    'warning': 'warning',
    'error': 'no',
    'info': 'info',
    'active': 'yes-alt',
    'inactive': 'marker',
    'pending': 'clock',
    'blocked': 'shield',
    'unpaid': 'money-alt',
    'paid': 'yes-alt',
    'revoked': 'no-alt',
    'processing': 'update',
    'completed': 'yes-alt',
    'refunded': 'money-alt',
    'partially_refunded': 'money',
    'failed': 'dismiss',
    'cancelled': 'no',
}


class StatusBadge(Component):
    """Inline badge with a status modifier class and an optional icon."""

    component_type = 'status-badge'
    default_options = {'icon': '', 'position': 'before', 'dashicon': True}

    def __init__(
        self,
        label: str,
        status: str = 'default',
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.label = label
        self.status = status
        options = dict(options or {})
        options.setdefault('icon', STATUS_ICONS.get(status, ''))
        super().__init__('span', options, attributes)
        self.add_class(f"status-badge--{status}")

    def get_label(self) -> str:
        return self.label

    def get_status(self) -> str:
        return self.status

    def set_label(self, label: str) -> StatusBadge:
        self.label = label
        return self.mark_for_rebuild()

    def set_status(self, status: str) -> StatusBadge:
        """Swap the status modifier; fills in the status icon if none is set."""
        self.remove_class(f"status-badge--{self.status}")
        self.status = status
        self.add_class(f"status-badge--{status}")
        if not self.options['icon'] and status in STATUS_ICONS:
            self.options['icon'] = STATUS_ICONS[status]
        return self.mark_for_rebuild()

    def set_icon(self, icon: str, is_dashicon: bool = True) -> StatusBadge:
        return self.set_options({'icon': icon, 'dashicon': is_dashicon})

    def set_position(self, position: str) -> StatusBadge:
        if position in ('before', 'after'):
            self.set_option('position', position)
        return self

    def use_dashicons(self, use: bool = True) -> StatusBadge:
        return self.toggle_option('dashicon', use)

    def create_icon(self) -> Element | None:
        icon = self.options['icon']
        if not icon:
            return None
        classes = ['dashicons', f"dashicons-{icon}"] if self.options['dashicon'] else icon
        return Element('span', Element('span', class_=classes), class_='status-badge__icon')

    def rebuild(self) -> None:
        icon = self.create_icon()
        text = self.create_text_element('span', self.label, {'class': 'status-badge__text'})
        if self.options['position'] == 'after':
            self.set_content([text, icon])
        else:
            self.set_content([icon, text])


RATING_ICONS = {
    'stars': ('★', '★', 'dashicons-star-filled'),
    'hearts': ('♡', '♥', 'dashicons-heart'),
    'thumbs': ('👍', '👍', 'dashicons-thumbs-up'),
}


class Rating(Component):
    """Star, heart or thumb rating with partial fill.

    Options:
        max: Highest rating.
        show_value: Append the numeric value.
        precision: Decimals of the numeric value.
        style: ``stars``, ``hearts``, ``thumbs`` or ``custom``.
        empty_icon, filled_icon: Characters used by the custom style.
        dashicons: Render dashicon spans instead of characters.
        empty_color, filled_color: Icon colors.
        size: Character size in pixels.
        tooltip: Wrapper title.
        show_max: Render ``value/max`` instead of ``value``.
    """

    component_type = 'rating'
    default_options = {
        'max': 5,
        'show_value': True,
        'precision': 1,
        'style': 'stars',
        'empty_icon': '★',
        'filled_icon': '★',
        'dashicons': False,
        'empty_color': '#ccc',
        'filled_color': '#ffb900',
        'size': 16,
        'tooltip': '',
        'show_max': True,
    }

    def __init__(
        self,
        rating: float,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.rating = float(rating)
        super().__init__('div', options, attributes)
        self.options['max'] = max(1, int(self.options['max']))
        if self.options['tooltip']:
            self.add_tooltip(self.options['tooltip'])

    def get_rating(self) -> float:
        return self.rating

    def set_rating(self, rating: float) -> Rating:
        self.rating = float(rating)
        return self.mark_for_rebuild()

    def set_max(self, maximum: int) -> Rating:
        return self.set_option('max', max(1, int(maximum)))

    def set_precision(self, precision: int) -> Rating:
        return self.set_option('precision', max(0, int(precision)))

    def set_icon_style(self, style: str) -> Rating:
        if style in (*RATING_ICONS, 'custom'):
            self.set_option('style', style)
        return self

    def set_icons(self, empty_icon: str, filled_icon: str) -> Rating:
        return self.set_options({'empty_icon': empty_icon, 'filled_icon': filled_icon, 'style': 'custom'})

    def set_colors(self, empty_color: str, filled_color: str) -> Rating:
        return self.set_options({'empty_color': empty_color, 'filled_color': filled_color})

    def set_size(self, size: int) -> Rating:
        return self.set_option('size', max(1, int(size)))

    def set_tooltip(self, tooltip: str) -> Rating:
        self.options['tooltip'] = tooltip
        return self.add_tooltip(tooltip)

    def show_value(self, show: bool = True) -> Rating:
        return self.toggle_option('show_value', show)

    def show_max(self, show: bool = True) -> Rating:
        return self.toggle_option('show_max', show)

    def use_dashicons(self, use: bool = True) -> Rating:
        return self.toggle_option('dashicons', use)

    def get_clamped_rating(self) -> float:
        return min(max(0.0, self.rating), self.options['max'])

    def _dashicon(self, icon: str, color: str) -> Element:
        return Element('span', class_=['dashicons', icon], style={'color': color})

    def _build_dashicons(self, container: Element, rating: float) -> None:
        filled_icon = RATING_ICONS.get(self.options['style'], RATING_ICONS['stars'])[2]
        empty_icon = filled_icon.replace('-filled', '-empty')
        empty_color = self.options['empty_color']
        filled_color = self.options['filled_color']
        container.add_class('dashicons-rating')

        full = math.floor(rating)
        partial = rating - full
        for _ in range(full):
            container.add_child(self._dashicon(filled_icon, filled_color))
        remaining = self.options['max'] - full
        if partial > 0:
            wrapper = Element('span', class_='rating-partial-wrapper',
                              style={'position': 'relative', 'display': 'inline-block'})
            wrapper.add_child(self._dashicon(empty_icon, empty_color))
            wrapper.add_child(self._dashicon(filled_icon, filled_color).set_styles({
                'position': 'absolute', 'top': '0', 'left': '0',
                'overflow': 'hidden', 'width': f"{partial * 100:g}%",
            }))
            container.add_child(wrapper)
            remaining -= 1
        for _ in range(remaining):
            container.add_child(self._dashicon(empty_icon, empty_color))

    def _build_characters(self, container: Element, rating: float) -> None:
        maximum = self.options['max']
        size = f"{self.options['size']}px"
        if self.options['style'] == 'custom':
            empty_icon, filled_icon = self.options['empty_icon'], self.options['filled_icon']
        else:
            empty_icon, filled_icon, _ = RATING_ICONS.get(self.options['style'], RATING_ICONS['stars'])
        percent = rating / maximum * 100
        container.set_styles({'display': 'inline-block', 'position': 'relative',
                              'unicode-bidi': 'bidi-override'})
        container.add_child(Element('div', empty_icon * maximum, class_='rating-empty', style={
            'color': self.options['empty_color'], 'font-size': size,
        }))
        container.add_child(Element('div', filled_icon * maximum, class_='rating-filled', style={
            'color': self.options['filled_color'], 'width': f"{percent:g}%", 'font-size': size,
            'overflow': 'hidden', 'white-space': 'nowrap',
            'position': 'absolute', 'top': '0', 'left': '0',
        }))

    def rebuild(self) -> None:
        rating = self.get_clamped_rating()
        container = Element('div', class_='rating-container')
        if self.options['dashicons']:
            self._build_dashicons(container, rating)
        else:
            self._build_characters(container, rating)
        wrapper = Element('div', container, class_='rating-wrapper')
        if self.options['show_value']:
            text = formatter().number_format(rating, self.options['precision'])
            if self.options['show_max']:
                text += f"/{self.options['max']}"
            wrapper.add_child(Element('span', text, class_='rating-value', style={
                'margin-left': '5px', 'vertical-align': 'middle',
            }))
        self.set_content(wrapper)


class BooleanIcon(Component):
    """Yes/no icon for a boolean-ish value; other values render as text."""

    component_type = 'boolean-icon'
    default_options = {
        'true_value': True,
        'false_value': False,
        'true_icon': 'yes-alt',
        'false_icon': 'no-alt',
        'true_label': 'Yes',
        'false_label': 'No',
        'use_dashicons': True,
    }

    def __init__(
        self,
        value: Any,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.value = value
        super().__init__('span', options, attributes)

    def set_value(self, value: Any) -> BooleanIcon:
        self.value = value
        return self.mark_for_rebuild()

    def set_true_value(self, value: Any) -> BooleanIcon:
        return self.set_option('true_value', value)

    def set_false_value(self, value: Any) -> BooleanIcon:
        return self.set_option('false_value', value)

    def set_true_icon(self, icon: str) -> BooleanIcon:
        return self.set_option('true_icon', icon)

    def set_false_icon(self, icon: str) -> BooleanIcon:
        return self.set_option('false_icon', icon)

    def set_true_label(self, label: str) -> BooleanIcon:
        return self.set_option('true_label', label)

    def set_false_label(self, label: str) -> BooleanIcon:
        return self.set_option('false_label', label)

    def use_dashicons(self, use: bool = True) -> BooleanIcon:
        return self.toggle_option('use_dashicons', use)

    def rebuild(self) -> None:
        for state in ('true', 'false'):
            self.remove_class(f"boolean-icon--{state}")
            icon = self.options[f"{state}_icon"]
            self.remove_class(['dashicons', f"dashicons-{icon}", icon])
        self.remove_attribute('aria-label').remove_attribute('title')

        if self.value == self.options['true_value']:
            state = 'true'
        elif self.value == self.options['false_value']:
            state = 'false'
        else:
            self.set_content(formatter().escape(self.value))
            return

        self.add_class(f"boolean-icon--{state}")
        icon = self.options[f"{state}_icon"]
        self.clear_children()
        if icon.startswith('<'):
            self.add_raw_content(icon)
            return
        label = formatter().gettext(self.options[f"{state}_label"])
        self.set_aria('label', label).add_tooltip(label)
        self.add_class(['dashicons', f"dashicons-{icon}"] if self.options['use_dashicons'] else icon)


class ColorSwatch(Component):
    """Color sample with the color value next to it."""

    component_type = 'color-swatch'
    default_options = {
        'size': 20,
        'shape': 'square',
        'show_value': True,
        'value_format': '{}',
        'tooltip': '',
        'border': True,
        'border_color': 'rgba(0,0,0,0.1)',
    }

    def __init__(
        self,
        color: str,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.color = color
        super().__init__('span', options, attributes)
        self.options['shape'] = choose(self.options['shape'], ('square', 'circle'), 'square')
        if self.options['tooltip']:
            self.add_tooltip(self.options['tooltip'])

    def get_color(self) -> str:
        return self.color

    def set_color(self, color: str) -> ColorSwatch:
        self.color = color
        return self.mark_for_rebuild()

    def set_size(self, size: int) -> ColorSwatch:
        return self.set_option('size', max(1, int(size)))

    def set_shape(self, shape: str) -> ColorSwatch:
        if shape in ('square', 'circle'):
            self.set_option('shape', shape)
        return self

    def show_value(self, show: bool = True) -> ColorSwatch:
        return self.toggle_option('show_value', show)

    def set_value_format(self, value_format: str) -> ColorSwatch:
        return self.set_option('value_format', value_format)

    def set_tooltip(self, tooltip: str) -> ColorSwatch:
        self.options['tooltip'] = tooltip
        return self.add_tooltip(tooltip)

    def show_border(self, show: bool = True) -> ColorSwatch:
        return self.toggle_option('border', show)

    def set_border_color(self, color: str) -> ColorSwatch:
        return self.set_option('border_color', color)

    def rebuild(self) -> None:
        size = f"{int(self.options['size'])}px"
        styles = {
            'display': 'inline-block',
            'width': size,
            'height': size,
            'background-color': self.color,
            'border-radius': '50%' if self.options['shape'] == 'circle' else '3px',
            'vertical-align': 'middle',
        }
        if self.options['border']:
            styles['border'] = f"1px solid {self.options['border_color']}"
        wrapper = Element('span', Element('span', class_='color-swatch__sample', style=styles),
                          class_='color-swatch__wrapper')
        if self.options['show_value']:
            text = self.options['value_format'].format(self.color)
            wrapper.add_child(self.create_text_element('span', text, {
                'class': 'color-swatch__value',
                'style': {'margin-left': '5px', 'vertical-align': 'middle'},
            }))
        self.set_content(wrapper)


class FileSize(Component):
    """Human readable byte count, e.g. ``1.50 KiB``.

    Options:
        decimals: Decimal digits.
        binary: Base 1024 units (KiB) or base 1000 units (KB).
        format: Template wrapping the size, ``{}`` marks the value.
        tooltip: Explicit title.
        tooltip_raw: Title with the raw byte count when no tooltip is set.
        raw_format: Template for the raw byte title.
    """

    component_type = 'filesize'
    default_options = {
        'decimals': 2,
        'binary': True,
        'format': '{}',
        'tooltip': '',
        'tooltip_raw': False,
        'raw_format': '{} bytes',
    }

    def __init__(
        self,
        size: Any,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__('span', options, attributes)
        self.bytes = self._coerce(size)
        self._update_tooltip()

    @staticmethod
    def _coerce(size: Any) -> int:
        try:
            return max(0, int(float(size)))
        except (TypeError, ValueError):
            logger.debug("non numeric file size %r, using 0", size)
            return 0

    def _update_tooltip(self) -> None:
        if self.options['tooltip']:
            self.add_tooltip(self.options['tooltip'])
        elif self.options['tooltip_raw']:
            raw = formatter().number_format(self.bytes)
            self.add_tooltip(self.options['raw_format'].format(raw))

    def get_bytes(self) -> int:
        return self.bytes

    def set_bytes(self, size: Any) -> FileSize:
        self.bytes = self._coerce(size)
        self._update_tooltip()
        return self.mark_for_rebuild()

    def set_decimals(self, decimals: int) -> FileSize:
        return self.set_option('decimals', max(0, int(decimals)))

    def use_binary(self, binary: bool = True) -> FileSize:
        return self.toggle_option('binary', binary)

    def set_format(self, fmt: str) -> FileSize:
        return self.set_option('format', fmt)

    def set_tooltip(self, tooltip: str) -> FileSize:
        self.options['tooltip'] = tooltip
        return self.add_tooltip(tooltip)

    def show_raw_tooltip(self, show: bool = True) -> FileSize:
        self.options['tooltip_raw'] = show
        self._update_tooltip()
        return self

    def set_raw_format(self, fmt: str) -> FileSize:
        self.options['raw_format'] = fmt
        self._update_tooltip()
        return self

    def get_formatted_size(self) -> str:
        return formatter().size_format(self.bytes, self.options['decimals'], self.options['binary'])

    def rebuild(self) -> None:
        text = self.options['format'].format(self.get_formatted_size())
        self.set_content(self.create_text_element('span', text))


SHORT_UNITS = ((1_000_000_000, 'B'), (1_000_000, 'M'), (1_000, 'K'))


def normalize_number(value: Any) -> int | float | None:
    """Parse a number, tolerating thousands commas and spaces.

    Returns None for empty or non numeric input; whole floats become ints.
    """
    if value is None or value == '' or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(',', '').replace(' ', '')
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isfinite(number) and number == int(number):
        return int(number)
    return number


class NumberFormat(Component):
    """Formatted number with optional sign, affixes and colorization."""

    component_type = 'number'
    default_options = {
        'decimals': 0,
        'thousands_sep': None,
        'decimal_point': None,
        'prefix': '',
        'suffix': '',
        'format': '{}',
        'empty_value': '',
        'tooltip': '',
        'colorize': False,
        'positive_class': 'positive',
        'negative_class': 'negative',
        'neutral_class': 'neutral',
        'show_sign': False,
        'short_format': False,
    }

    def __init__(
        self,
        value: Any,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.value = normalize_number(value)
        super().__init__('span', options, attributes)
        if self.options['tooltip']:
            self.add_tooltip(self.options['tooltip'])

    def get_value(self) -> int | float | None:
        return self.value

    def set_value(self, value: Any) -> NumberFormat:
        self.value = normalize_number(value)
        return self.mark_for_rebuild()

    def set_decimals(self, decimals: int) -> NumberFormat:
        return self.set_option('decimals', max(0, int(decimals)))

    def set_separators(self, thousands_sep: str, decimal_point: str) -> NumberFormat:
        return self.set_options({'thousands_sep': thousands_sep, 'decimal_point': decimal_point})

    def set_wrapping(self, prefix: str = '', suffix: str = '') -> NumberFormat:
        return self.set_options({'prefix': prefix, 'suffix': suffix})

    def set_format(self, fmt: str) -> NumberFormat:
        return self.set_option('format', fmt)

    def set_empty_value(self, text: str) -> NumberFormat:
        return self.set_option('empty_value', text)

    def set_tooltip(self, tooltip: str) -> NumberFormat:
        self.options['tooltip'] = tooltip
        return self.add_tooltip(tooltip)

    def enable_colorize(self, enable: bool = True) -> NumberFormat:
        return self.toggle_option('colorize', enable)

    def set_color_classes(self, positive: str, negative: str, neutral: str) -> NumberFormat:
        self._clear_color_classes()
        return self.set_options({
            'positive_class': positive,
            'negative_class': negative,
            'neutral_class': neutral,
        })

    def show_sign(self, show: bool = True) -> NumberFormat:
        return self.toggle_option('show_sign', show)

    def enable_short_format(self, enable: bool = True) -> NumberFormat:
        return self.toggle_option('short_format', enable)

    def _number_format(self, number: float) -> str:
        return formatter().number_format(
            number,
            self.options['decimals'],
            self.options['decimal_point'],
            self.options['thousands_sep'],
        )

    def format_number(self, number: float) -> str:
        if self.options['short_format']:
            sign = '-' if number < 0 else ''
            for limit, unit in SHORT_UNITS:
                if abs(number) >= limit:
                    return f"{sign}{self._number_format(abs(number) / limit)}{unit}"
        return self._number_format(number)

    def _clear_color_classes(self) -> None:
        self.remove_class([
            self.options['positive_class'],
            self.options['negative_class'],
            self.options['neutral_class'],
        ])

    def rebuild(self) -> None:
        self._clear_color_classes()
        if self.value is None:
            self.set_content(formatter().escape(self.options['empty_value']))
            return

        formatted = self.format_number(self.value)
        if self.options['show_sign'] and self.value > 0:
            formatted = f"+{formatted}"
        text = self.options['format'].format(f"{self.options['prefix']}{formatted}{self.options['suffix']}")
        self.set_content(formatter().escape(text))

        if self.options['colorize']:
            if self.value > 0:
                self.add_class(self.options['positive_class'])
            elif self.value < 0:
                self.add_class(self.options['negative_class'])
            else:
                self.add_class(self.options['neutral_class'])


def to_timestamp(value: Any) -> float | None:
    """Convert a timestamp, datetime or ISO 8601 string to a Unix timestamp."""
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).timestamp()
        except ValueError:
            logger.debug("unparseable time %r", value)
    return None


class TimeAgo(Component):
    """Relative time such as ``5 mins ago``, with the exact date as title.

    Options:
        show_tooltip: Put the formatted date in the title.
        tooltip_format: strftime pattern for the title.
        future_format, past_format: Templates, ``{}`` marks the distance.
        threshold: Above this many seconds show the absolute date.
        cutoff: Same as threshold, checked second.
    """

    component_type = 'timeago'
    default_options = {
        'show_tooltip': True,
        'tooltip_format': '',
        'future_format': 'in {}',
        'past_format': '{} ago',
        'threshold': 0,
        'cutoff': 0,
    }

    def __init__(
        self,
        time: Any,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__('span', options, attributes)
        self.update_time(time)

    def update_time(self, time: Any) -> TimeAgo:
        timestamp = to_timestamp(time)
        self.timestamp = formatter().now() if timestamp is None else timestamp
        return self.mark_for_rebuild()

    def set_threshold(self, seconds: int) -> TimeAgo:
        return self.set_option('threshold', max(0, int(seconds)))

    def set_cutoff(self, seconds: int) -> TimeAgo:
        return self.set_option('cutoff', max(0, int(seconds)))

    def show_tooltip(self, show: bool = True) -> TimeAgo:
        return self.toggle_option('show_tooltip', show)

    def set_tooltip_format(self, fmt: str) -> TimeAgo:
        return self.set_option('tooltip_format', fmt)

    def set_future_format(self, fmt: str) -> TimeAgo:
        return self.set_option('future_format', fmt)

    def set_past_format(self, fmt: str) -> TimeAgo:
        return self.set_option('past_format', fmt)

    def get_text(self) -> str:
        fmt = formatter()
        now = fmt.now()
        diff = abs(self.timestamp - now)
        threshold, cutoff = self.options['threshold'], self.options['cutoff']
        if (threshold > 0 and diff > threshold) or (cutoff > 0 and diff > cutoff):
            return fmt.format_datetime(self.timestamp)
        template = self.options['future_format'] if self.timestamp > now else self.options['past_format']
        return fmt.gettext(template).format(fmt.human_time_diff(self.timestamp, now))

    def rebuild(self) -> None:
        fmt = formatter()
        if self.options['show_tooltip']:
            self.add_tooltip(fmt.format_datetime(self.timestamp, self.options['tooltip_format'] or None))
        else:
            self.remove_attribute('title')
        self.set_content(fmt.escape(self.get_text()))
