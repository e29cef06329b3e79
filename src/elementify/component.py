# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Component - abstract base class for stateful UI widgets.

A component is an Element whose children are generated from option state.
Constructors and mutators only record state and flag the component; the
tree is regenerated by rebuild() right before the next render.

Subclasses declare a ``component_type`` and are registered automatically,
so they can be looked up by name:

    >>> Component.get_component('card')
    <class 'elementify.components.layout.Card'>

Writing a component::

    class Badge(Component):
        component_type = 'badge'
        default_options = {'label': ''}

        def __init__(self, label='', options=None, attributes=None):
            super().__init__('span', options, attributes, label=label)

        def rebuild(self):
            self.set_content(self.create_text_element('span', self.option('label')))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from markupsafe import Markup, escape

from .exceptions import ComponentError
from .node import Element

logger = logging.getLogger(__name__)

T = TypeVar('T')


def choose(value: T, allowed: Iterable[T], default: T) -> T:
    """Return value if it is allowed, default otherwise."""
    if value in allowed:
        return value
    logger.debug("unsupported value %r, using %r", value, default)
    return default


class Component(Element, ABC):
    """Abstract base for every widget.

    Class attributes:
        component_type: Registry key and default base class.
        base_class: CSS class always present on the wrapper. Defaults to
            component_type.
        default_options: Options merged under the caller's options.

    Args:
        tag: Wrapper tag.
        options: Caller options, merged over default_options.
        attributes: Wrapper attributes.
        **option_values: Options passed as keywords; they win over
            ``options``.
    """

    component_type: str = ''
    base_class: str | None = None
    default_options: Mapping[str, Any] = {}

    registry: dict[str, type[Component]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register subclasses that declare their own component_type."""
        super().__init_subclass__(**kwargs)
        component_type = cls.__dict__.get('component_type')
        if component_type:
            if component_type in Component.registry:
                logger.debug("component type %r redefined by %s", component_type, cls.__name__)
            Component.registry[component_type] = cls

    @classmethod
    def get_component(cls, component_type: str) -> type[Component]:
        """Return the component class registered for component_type.

        Raises:
            ComponentError: If no component is registered with that name.
        """
        try:
            return Component.registry[component_type]
        except KeyError:
            raise ComponentError(f"Unknown component type: {component_type!r}") from None

    def __init__(
        self,
        tag: str = 'div',
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
        **option_values: Any,
    ) -> None:
        super().__init__(tag, attributes=attributes, escape_content=False)
        self.options: dict[str, Any] = dict(self.default_options)
        self.options.update(options or {})
        self.options.update(option_values)
        self.prepare_base_class()
        self.mark_for_rebuild()

    # ------------------------------------------------------------------
    # Base class and escaping
    # ------------------------------------------------------------------

    def get_base_class(self) -> str:
        return self.base_class or self.component_type

    def prepare_base_class(self) -> Component:
        """Make sure the base class is present exactly once."""
        base = self.get_base_class()
        if base:
            self.add_class(base)
        return self

    @property
    def escape_content(self) -> bool:
        """Components never escape their own content."""
        return False

    def set_escape_content(self, escape_content: bool) -> Component:
        logger.debug("%s ignores set_escape_content(%r)", type(self).__name__, escape_content)
        return self

    # ------------------------------------------------------------------
    # Rebuild
    # ------------------------------------------------------------------

    @abstractmethod
    def rebuild(self) -> None:
        """Discard all children and regenerate them from option state."""

    def ensure_built(self) -> Component:
        super().ensure_built()
        self.prepare_base_class()
        return self

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def set_option(self, name: str, value: Any) -> Component:
        """Change one option and flag the component for rebuild."""
        self.options[name] = value
        return self.mark_for_rebuild()

    def set_options(self, options: Mapping[str, Any]) -> Component:
        self.options.update(options)
        return self.mark_for_rebuild()

    def toggle_option(self, name: str, value: bool | None = None) -> Component:
        """Set a boolean option, or flip it when value is None."""
        if value is None:
            value = not self.options.get(name, False)
        return self.set_option(name, bool(value))

    # ------------------------------------------------------------------
    # Content helpers
    # ------------------------------------------------------------------

    def add_raw_content(self, content: Any) -> Component:
        """Append content as trusted markup."""
        return self.add_child(Markup(content))

    def add_safe_content(self, content: Any) -> Component:
        """Append content escaped once, whatever the wrapper does."""
        return self.add_child(escape(content))

    def create_text_element(
        self, tag: str, text: Any, attributes: Mapping[str, Any] | None = None
    ) -> Element:
        """Create an element whose text is always escaped."""
        return Element(tag, text, attributes, escape_content=True)

    def create_container(
        self,
        tag: str = 'div',
        children: Any = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> Element:
        """Create a container that keeps its children unescaped."""
        return Element(tag, children, attributes, escape_content=False)

    def create_part(
        self,
        tag: str,
        content: Any,
        part: str,
        attributes: Mapping[str, Any] | None = None,
        escape_content: bool = False,
    ) -> Element:
        """Create a named part carrying the ``<type>-<part>`` class.

        Example:
            >>> card.create_part('div', 'Hi', 'body').render()
            '<div class="card-body">Hi</div>'
        """
        element = Element(tag, content, attributes, escape_content=escape_content)
        return element.add_class(f"{self.component_type}-{part}")

    def create_header(self, content: Any, attributes: Mapping[str, Any] | None = None) -> Element:
        return self.create_part('div', content, 'header', attributes)

    def create_body(self, content: Any, attributes: Mapping[str, Any] | None = None) -> Element:
        return self.create_part('div', content, 'body', attributes)

    def create_footer(self, content: Any, attributes: Mapping[str, Any] | None = None) -> Element:
        return self.create_part('div', content, 'footer', attributes)

    def create_content(self, content: Any, attributes: Mapping[str, Any] | None = None) -> Element:
        return self.create_part('div', content, 'content', attributes)

    def create_title(
        self, content: Any, level: int = 3, attributes: Mapping[str, Any] | None = None
    ) -> Element:
        """Create an escaped ``h<level>`` title, level clamped to 1..6."""
        level = min(6, max(1, int(level)))
        return self.create_part(f"h{level}", content, 'title', attributes, escape_content=True)
