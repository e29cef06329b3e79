# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures."""

import itertools

import pytest

from elementify.config import configure, reset_settings
from elementify.formatting import Formatter

NOW = 1_700_000_000


class FrozenFormatter(Formatter):
    """Formatter with a fixed clock."""

    def now(self):
        return float(NOW)


@pytest.fixture(autouse=True)
def _default_settings():
    """Every test starts and ends with the default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sequential_ids():
    """Replace random ids with ``<prefix>1``, ``<prefix>2``..."""
    counter = itertools.count(1)
    configure(id_factory=lambda prefix='': f"{prefix}{next(counter)}")


@pytest.fixture
def frozen_clock():
    """Freeze Formatter.now() at NOW."""
    configure(formatter=FrozenFormatter())
    return NOW
