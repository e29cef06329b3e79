# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Formatter - locale and clock services used by display components.

Components never format numbers, dates or translated strings themselves.
They call the active Formatter (see ``elementify.config``), so an
application can plug in its own locale rules, translation catalogue or a
frozen clock for tests.

Example:
    Swapping the decimal conventions::

        from elementify.config import configure
        from elementify.formatting import Formatter

        class ItalianFormatter(Formatter):
            decimal_point = ','
            thousands_sep = '.'

        configure(formatter=ItalianFormatter())
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Any

from markupsafe import escape

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

BINARY_UNITS = ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB')
DECIMAL_UNITS = ('B', 'KB', 'MB', 'GB', 'TB', 'PB')


class Formatter:
    """Default, locale-neutral formatter.

    Attributes:
        decimal_point: Decimal separator used when none is given.
        thousands_sep: Thousands separator used when none is given.
        datetime_format: strftime pattern used by format_datetime.
    """

    decimal_point = '.'
    thousands_sep = ','
    datetime_format = '%Y-%m-%d %H:%M'

    def escape(self, value: Any) -> str:
        """HTML-escape a value for text or attribute context."""
        return str(escape(value))

    def gettext(self, text: str) -> str:
        """Translate a message. The default returns it unchanged."""
        return text

    def now(self) -> float:
        """Current time as a Unix timestamp."""
        return time.time()

    def number_format(
        self,
        value: float,
        decimals: int = 0,
        decimal_point: str | None = None,
        thousands_sep: str | None = None,
    ) -> str:
        """Format a number with grouped thousands.

        Args:
            value: The number to format.
            decimals: Digits after the decimal point.
            decimal_point: Override for the decimal separator.
            thousands_sep: Override for the thousands separator.

        Returns:
            The formatted number, e.g. ``1,234.50``.
        """
        if decimal_point is None:
            decimal_point = self.decimal_point
        if thousands_sep is None:
            thousands_sep = self.thousands_sep
        decimals = max(0, int(decimals))
        text = f"{float(value):,.{decimals}f}"
        integer, _, fraction = text.partition('.')
        integer = integer.replace(',', thousands_sep)
        return f"{integer}{decimal_point}{fraction}" if fraction else integer

    def size_format(self, size: float, decimals: int = 2, binary: bool = True) -> str:
        """Format a byte count with the largest fitting unit.

        Example:
            >>> Formatter().size_format(1536)
            '1.50 KiB'
            >>> Formatter().size_format(1500, binary=False)
            '1.50 KB'
        """
        units = BINARY_UNITS if binary else DECIMAL_UNITS
        base = 1024 if binary else 1000
        size = max(float(size), 0.0)
        index = 0
        while size >= base and index < len(units) - 1:
            size /= base
            index += 1
        return f"{self.number_format(size, decimals)} {units[index]}"

    def human_time_diff(self, start: float, end: float | None = None) -> str:
        """Describe the distance between two timestamps in words.

        Args:
            start: First Unix timestamp.
            end: Second Unix timestamp, defaults to now().

        Returns:
            A string such as ``5 mins`` or ``1 year``.
        """
        if end is None:
            end = self.now()
        diff = abs(int(end) - int(start))

        for limit, unit, singular, plural in (
            (HOUR, MINUTE, 'min', 'mins'),
            (DAY, HOUR, 'hour', 'hours'),
            (WEEK, DAY, 'day', 'days'),
            (MONTH, WEEK, 'week', 'weeks'),
            (YEAR, MONTH, 'month', 'months'),
        ):
            if diff < limit:
                count = max(1, round(diff / unit))
                break
        else:
            count = max(1, round(diff / YEAR))
            singular, plural = 'year', 'years'

        word = singular if count == 1 else plural
        return f"{count} {self.gettext(word)}"

    def format_datetime(self, timestamp: float, fmt: str | None = None) -> str:
        """Format a Unix timestamp with a strftime pattern."""
        return datetime.fromtimestamp(timestamp).strftime(fmt or self.datetime_format)
