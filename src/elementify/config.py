# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Process-wide settings: the active formatter and the id generator."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from .formatting import Formatter

logger = logging.getLogger(__name__)


def default_id_factory(prefix: str = '') -> str:
    """Return a unique id, e.g. ``modal-5f2b9c1e3a7d4``."""
    return f"{prefix}{uuid.uuid4().hex[:13]}"


@dataclass(frozen=True)
class Settings:
    """Active library settings.

    Attributes:
        formatter: Formatter used for numbers, dates and translations.
        id_factory: Callable returning a unique id for a given prefix.
    """

    formatter: Formatter = field(default_factory=Formatter)
    id_factory: Callable[[str], str] = default_id_factory


_settings = Settings()


def get_settings() -> Settings:
    """Return the active settings."""
    return _settings


def configure(**changes: Any) -> Settings:
    """Replace some settings and return the previous ones.

    Example:
        >>> previous = configure(id_factory=lambda prefix: f"{prefix}1")
        >>> configure(**vars(previous))
    """
    global _settings
    previous = _settings
    _settings = replace(_settings, **changes)
    logger.debug("elementify settings updated: %s", ', '.join(changes))
    return previous


def reset_settings() -> None:
    """Restore the default settings."""
    global _settings
    _settings = Settings()


def formatter() -> Formatter:
    """Shortcut for the active formatter."""
    return _settings.formatter


def generate_id(prefix: str = '') -> str:
    """Shortcut for the active id factory."""
    return _settings.id_factory(prefix)
