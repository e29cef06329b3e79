# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fluent builders for tables, lists, forms, cards, notices and breadcrumbs."""

from .components import BreadcrumbBuilder, CardBuilder, NoticeBuilder
from .form import FormBuilder
from .lists import ListBuilder
from .table import TableBuilder

__all__ = [
    'TableBuilder',
    'ListBuilder',
    'FormBuilder',
    'CardBuilder',
    'NoticeBuilder',
    'BreadcrumbBuilder',
]
