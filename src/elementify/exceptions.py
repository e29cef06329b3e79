# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Elementify exceptions."""

from __future__ import annotations


class ElementifyError(Exception):
    """Base exception for Elementify errors."""

    pass


class InvalidAttributeError(ElementifyError, TypeError):
    """Raised when an attribute value cannot be rendered."""

    pass


class InvalidContentError(ElementifyError, TypeError):
    """Raised when a child of an unsupported type is added to an element."""

    pass


class InvalidCriteriaError(ElementifyError, ValueError):
    """Raised when a descendant query uses an unknown criteria key."""

    pass


class UnknownTagError(ElementifyError, AttributeError):
    """Raised when the factory is asked for a tag that is not HTML5."""

    pass


class ComponentError(ElementifyError):
    """Raised when a component type is unknown or misconfigured."""

    pass
