# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Elementify - fluent HTML elements and components.

Build HTML as a tree of Element objects, configure them with chainable
setters and render the tree to a string. Components such as tabs, modals,
notices or progress bars keep their own state and regenerate their
children right before rendering.
"""

__version__ = "0.1.0"

from .builders import (
    BreadcrumbBuilder,
    CardBuilder,
    FormBuilder,
    ListBuilder,
    NoticeBuilder,
    TableBuilder,
)
from .component import Component
from .components import (
    Accordion,
    BooleanIcon,
    Breadcrumbs,
    Card,
    Clipboard,
    ColorSwatch,
    DatePicker,
    Featured,
    FileSize,
    Modal,
    Notice,
    NumberFormat,
    ProgressBar,
    Range,
    Rating,
    StatusBadge,
    Tabs,
    TimeAgo,
    Toggle,
    Tooltip,
)
from .config import Settings, configure, get_settings, reset_settings
from .create import Create, create
from .elements import Button, Field, Form, Input, Label, Select, Textarea
from .exceptions import (
    ComponentError,
    ElementifyError,
    InvalidAttributeError,
    InvalidContentError,
    InvalidCriteriaError,
    UnknownTagError,
)
from .formatting import Formatter
from .node import Element

__all__ = [
    # Core classes
    "Element",
    "Component",
    "Create",
    "create",
    # Form elements
    "Button",
    "Input",
    "Label",
    "Textarea",
    "Select",
    "Form",
    "Field",
    # Components
    "Accordion",
    "Tabs",
    "Modal",
    "Toggle",
    "Featured",
    "Range",
    "Clipboard",
    "DatePicker",
    "Tooltip",
    "ProgressBar",
    "StatusBadge",
    "Rating",
    "BooleanIcon",
    "ColorSwatch",
    "FileSize",
    "NumberFormat",
    "TimeAgo",
    "Card",
    "Breadcrumbs",
    "Notice",
    # Builders
    "TableBuilder",
    "ListBuilder",
    "FormBuilder",
    "CardBuilder",
    "NoticeBuilder",
    "BreadcrumbBuilder",
    # Configuration
    "Formatter",
    "Settings",
    "configure",
    "get_settings",
    "reset_settings",
    # Exceptions
    "ElementifyError",
    "InvalidAttributeError",
    "InvalidContentError",
    "InvalidCriteriaError",
    "UnknownTagError",
    "ComponentError",
]
