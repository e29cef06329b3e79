# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Ready-made components. Importing this package fills Component.registry."""

from .datepicker import DatePicker
from .display import (
    BooleanIcon,
    ColorSwatch,
    FileSize,
    NumberFormat,
    ProgressBar,
    Rating,
    StatusBadge,
    TimeAgo,
)
from .interactive import Accordion, Clipboard, Featured, Modal, Range, Tabs, Toggle
from .layout import Breadcrumbs, Card
from .notice import Notice
from .sections import SectionsMixin
from .tooltip import Tooltip

__all__ = [
    'SectionsMixin',
    # Interactive
    'Accordion',
    'Tabs',
    'Modal',
    'Toggle',
    'Featured',
    'Range',
    'Clipboard',
    'DatePicker',
    'Tooltip',
    # Display
    'ProgressBar',
    'StatusBadge',
    'Rating',
    'BooleanIcon',
    'ColorSwatch',
    'FileSize',
    'NumberFormat',
    'TimeAgo',
    # Layout and messages
    'Card',
    'Breadcrumbs',
    'Notice',
]
