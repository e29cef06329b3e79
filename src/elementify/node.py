# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - the HTML node every builder, form element and component extends.

An Element is a tag, an ordered attribute mapping and an ordered list of
children. Rendering walks the tree and serializes it to a string; nothing
is emitted until render() is called, so the tree can be freely mutated.

Children may be:
    - Element instances, rendered with their own escaping rule.
    - Plain strings and numbers, escaped iff this element escapes content.
    - Objects implementing ``__html__`` (e.g. markupsafe.Markup), trusted
      and emitted verbatim.
    - None, kept as a placeholder that renders to nothing.

Example:
    >>> ul = Element('ul', ['a', 'b'])
    >>> ul.render()
    '<ul>ab</ul>'
    >>> Element('p', '<b>x</b>').render()
    '<p>&lt;b&gt;x&lt;/b&gt;</p>'
    >>> Element('img', src='logo.png', alt='Logo').render()
    '<img src="logo.png" alt="Logo" />'
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import IO, Any, Callable

from markupsafe import Markup, escape

from .exceptions import InvalidAttributeError, InvalidContentError, InvalidCriteriaError
from .tags import is_raw_html_element, is_self_closing

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float)
_CRITERIA_KEYS = frozenset({'tag', 'class', 'id', 'attributes'})


def attribute_name(key: str) -> str:
    """Convert a Python keyword into an HTML attribute name.

    A trailing underscore is dropped and inner underscores become hyphens,
    so ``class_`` becomes ``class`` and ``data_id`` becomes ``data-id``.
    """
    return key.rstrip('_').replace('_', '-')


def split_classes(value: Any) -> list[str]:
    """Return the class tokens of a string or an iterable of strings."""
    if value is None or value is False:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Iterable):
        tokens: list[str] = []
        for item in value:
            tokens.extend(split_classes(item))
        return tokens
    raise InvalidAttributeError(f"Invalid class value: {value!r}")


def parse_styles(value: Any) -> dict[str, str]:
    """Parse a style string or mapping into an ordered property dict.

    Empty properties and values are dropped.
    """
    styles: dict[str, str] = {}
    if value is None or value is False:
        return styles
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, str):
        items = (decl.partition(':')[::2] for decl in value.split(';'))
    else:
        raise InvalidAttributeError(f"Invalid style value: {value!r}")
    for prop, val in items:
        prop = str(prop).strip()
        val = '' if val is None else str(val).strip()
        if prop and val:
            styles[prop] = val
    return styles


def format_styles(styles: Mapping[str, str]) -> str:
    """Serialize a property dict as ``prop: value;`` declarations."""
    return ' '.join(f"{prop}: {val};" for prop, val in styles.items())


class Element:
    """A single HTML element with attributes and children.

    Args:
        tag: The element's tag name, e.g. ``'div'``.
        content: Optional initial content (one child or a sequence).
        attributes: Optional mapping of attribute names to values.
        escape_content: True or False to force escaping of raw-string
            children. None picks False for container tags listed in
            RAW_HTML_ELEMENTS and True for every other tag.
        **attr: Extra attributes as keywords (``class_='x'``).

    Attributes:
        tag: The tag name.
        self_closing: True for void elements such as ``img`` or ``br``.
    """

    def __init__(
        self,
        tag: str,
        content: Any = None,
        attributes: Mapping[str, Any] | None = None,
        escape_content: bool | None = None,
        **attr: Any,
    ) -> None:
        self.tag = tag
        self.self_closing = is_self_closing(tag)
        if escape_content is None:
            escape_content = not is_raw_html_element(tag)
        self._escape_content = bool(escape_content)
        self._attributes: dict[str, str | bool] = {}
        self._children: list[Any] = []
        self._needs_rebuild = False

        if attributes:
            self.set_attributes(attributes)
        for key, value in attr.items():
            self.set_attribute(attribute_name(key), value)
        if content is not None:
            self.add_content(content)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.tag!r} "
            f"attributes={len(self._attributes)} children={len(self._children)}>"
        )

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> Markup:
        """Render as trusted markup for markupsafe-aware templates."""
        return Markup(self.render())

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def set_attribute(self, name: str, value: Any) -> Element:
        """Set an attribute.

        True stores a bare attribute, False and None remove it. ``class``
        accepts a string or an iterable of strings and ``style`` a string
        or a mapping; both are normalized. Other scalars are stored as
        strings.

        Raises:
            InvalidAttributeError: If the name is empty or the value is
                not a scalar.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidAttributeError(f"Invalid attribute name: {name!r}")
        name = name.strip()

        if value is None or value is False:
            self._attributes.pop(name, None)
            return self
        if value is True:
            self._attributes[name] = True
            return self

        # class and style are rewritten in place to keep their position
        if name == 'class':
            tokens: list[str] = []
            for token in split_classes(value):
                if token not in tokens:
                    tokens.append(token)
            self._store_classes(tokens)
            return self
        if name == 'style':
            styles = parse_styles(value)
            if styles:
                self._attributes['style'] = format_styles(styles)
            else:
                self._attributes.pop('style', None)
            return self

        if not isinstance(value, _SCALARS):
            raise InvalidAttributeError(
                f"Attribute {name!r} must be a scalar, got {type(value).__name__}"
            )
        self._attributes[name] = str(value)
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> Element:
        """Set several attributes at once."""
        for name, value in attributes.items():
            self.set_attribute(name, value)
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Return an attribute value, or default if it is not set."""
        return self._attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def remove_attribute(self, name: str) -> Element:
        self._attributes.pop(name, None)
        return self

    def get_attributes(self) -> dict[str, str | bool]:
        """Return a copy of the attribute mapping."""
        return dict(self._attributes)

    def toggle_attribute(self, name: str, value: Any = True, condition: bool = True) -> Element:
        """Set the attribute when condition holds, remove it otherwise."""
        if condition:
            return self.set_attribute(name, value)
        return self.remove_attribute(name)

    def set_id(self, element_id: str) -> Element:
        return self.set_attribute('id', element_id)

    def set_data(self, name: str, value: Any) -> Element:
        """Set a ``data-*`` attribute."""
        return self.set_attribute(f"data-{name}", value)

    def set_aria(self, name: str, value: Any) -> Element:
        """Set an ``aria-*`` attribute."""
        return self.set_attribute(f"aria-{name}", value)

    def add_tooltip(self, text: str) -> Element:
        """Attach a native tooltip via the ``title`` attribute."""
        return self.set_attribute('title', text)

    # ------------------------------------------------------------------
    # Classes
    # ------------------------------------------------------------------

    def get_classes(self) -> list[str]:
        value = self._attributes.get('class')
        return value.split() if isinstance(value, str) else []

    def _store_classes(self, tokens: list[str]) -> None:
        if tokens:
            self._attributes['class'] = ' '.join(tokens)
        else:
            self._attributes.pop('class', None)

    def add_class(self, classes: str | Iterable[str]) -> Element:
        """Add one or more class tokens, ignoring those already present."""
        tokens = self.get_classes()
        for token in split_classes(classes):
            if token not in tokens:
                tokens.append(token)
        self._store_classes(tokens)
        return self

    def has_class(self, class_name: str) -> bool:
        return class_name in self.get_classes()

    def remove_class(self, classes: str | Iterable[str] | Callable[[str], bool]) -> Element:
        """Remove class tokens.

        Args:
            classes: A string, an iterable of strings, or a predicate
                called with each token; tokens for which it returns True
                are removed.

        Example:
            >>> el.remove_class(lambda c: c.startswith('card--'))
        """
        if callable(classes):
            predicate = classes
        else:
            doomed = set(split_classes(classes))
            predicate = doomed.__contains__
        self._store_classes([t for t in self.get_classes() if not predicate(t)])
        return self

    def toggle_class(self, classes: str | Iterable[str], condition: bool | None = None) -> Element:
        """Add, remove or flip class tokens.

        With condition None every token is flipped; otherwise tokens are
        added when condition is true and removed when it is false.
        """
        for token in split_classes(classes):
            add = (not self.has_class(token)) if condition is None else condition
            if add:
                self.add_class(token)
            else:
                self.remove_class(token)
        return self

    # ------------------------------------------------------------------
    # Styles
    # ------------------------------------------------------------------

    def get_styles(self) -> dict[str, str]:
        return parse_styles(self._attributes.get('style'))

    def set_styles(self, styles: Mapping[str, Any]) -> Element:
        """Merge style properties; None or empty values remove a property."""
        current = self.get_styles()
        for prop, value in styles.items():
            prop = str(prop).strip()
            value = '' if value is None else str(value).strip()
            if value:
                current[prop] = value
            else:
                current.pop(prop, None)
        if current:
            self._attributes['style'] = format_styles(current)
        else:
            self._attributes.pop('style', None)
        return self

    def set_style(self, prop: str, value: Any) -> Element:
        return self.set_styles({prop: value})

    def remove_style(self, prop: str) -> Element:
        return self.set_styles({prop: None})

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    @property
    def escape_content(self) -> bool:
        """Whether raw-string children are HTML-escaped when rendered."""
        return self._escape_content

    def set_escape_content(self, escape_content: bool) -> Element:
        self._escape_content = bool(escape_content)
        return self

    @staticmethod
    def _check_child(child: Any) -> Any:
        if child is None or isinstance(child, Element) or hasattr(child, '__html__'):
            return child
        if isinstance(child, _SCALARS) and not isinstance(child, bool):
            return child
        raise InvalidContentError(f"Unsupported child type: {type(child).__name__}")

    def add_child(self, child: Any) -> Element:
        """Append one child. Ignored on self-closing elements."""
        if self.self_closing:
            logger.debug("ignoring child added to self-closing <%s>", self.tag)
            return self
        self._children.append(self._check_child(child))
        return self

    def prepend_child(self, child: Any) -> Element:
        """Insert one child before the existing ones."""
        if self.self_closing:
            logger.debug("ignoring child added to self-closing <%s>", self.tag)
            return self
        self._children.insert(0, self._check_child(child))
        return self

    def add_content(self, content: Any) -> Element:
        """Append a single child or every item of a list or tuple."""
        if isinstance(content, (list, tuple)):
            for item in content:
                self.add_child(item)
        else:
            self.add_child(content)
        return self

    def set_content(self, content: Any) -> Element:
        """Replace all children with content."""
        self._children = []
        return self.add_content(content)

    def clear_children(self) -> Element:
        self._children = []
        return self

    def get_children(self) -> list[Any]:
        """Return a copy of the children, rebuilding first if needed."""
        self.ensure_built()
        return list(self._children)

    # ------------------------------------------------------------------
    # Rebuild
    # ------------------------------------------------------------------

    @property
    def needs_rebuild(self) -> bool:
        return self._needs_rebuild

    def mark_for_rebuild(self) -> Element:
        """Flag the element so rebuild() runs before the next render."""
        self._needs_rebuild = True
        return self

    def rebuild(self) -> None:
        """Regenerate children from internal state. No-op for plain elements."""

    def ensure_built(self) -> Element:
        """Run rebuild() once if the element is flagged."""
        if self._needs_rebuild:
            logger.debug("rebuilding %r", self)
            self.rebuild()
            self._needs_rebuild = False
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_attributes(self) -> str:
        """Serialize the attributes, with a leading space when non-empty."""
        parts = []
        for name, value in self._attributes.items():
            if value is True:
                parts.append(str(escape(name)))
            else:
                parts.append(f'{escape(name)}="{escape(value)}"')
        return ' ' + ' '.join(parts) if parts else ''

    def render_content(self) -> str:
        """Serialize the children only."""
        self.ensure_built()
        if self.self_closing:
            return ''
        should_escape = self.escape_content
        chunks = []
        for child in self._children:
            if child is None:
                continue
            if isinstance(child, Element):
                chunks.append(child.render())
            elif hasattr(child, '__html__'):
                chunks.append(str(child.__html__()))
            elif should_escape:
                chunks.append(str(escape(child)))
            else:
                chunks.append(str(child))
        return ''.join(chunks)

    def render(self) -> str:
        """Serialize the element and its subtree to HTML."""
        self.ensure_built()
        attributes = self.render_attributes()
        if self.self_closing:
            return f"<{self.tag}{attributes} />"
        return f"<{self.tag}{attributes}>{self.render_content()}</{self.tag}>"

    def output(self, stream: IO[str] | None = None) -> None:
        """Write the rendered markup to stream (stdout by default)."""
        (stream or sys.stdout).write(self.render())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def iter_descendants(self, recursive: bool = True) -> Iterator[Element]:
        """Yield descendant elements in document order."""
        for child in self.get_children():
            if isinstance(child, Element):
                yield child
                if recursive:
                    yield from child.iter_descendants(recursive=True)

    def find_descendants(
        self,
        criteria: Mapping[str, Any] | None = None,
        recursive: bool = True,
        **kwargs: Any,
    ) -> list[Element]:
        """Return descendant elements matching every given criterion.

        Args:
            criteria: Mapping with any of ``tag``, ``class``, ``id`` and
                ``attributes``. ``class`` may be one token or several, all
                of which must be present. ``attributes`` maps names to the
                expected value; True only checks presence.
            recursive: False restricts the search to direct children.
            **kwargs: Criteria as keywords (``class_`` for ``class``).

        Raises:
            InvalidCriteriaError: If a criteria key is not recognized.

        Example:
            >>> page.find_descendants(tag='li', class_='active')
        """
        merged = dict(criteria or {})
        merged.update({key.rstrip('_'): value for key, value in kwargs.items()})
        unknown = set(merged) - _CRITERIA_KEYS
        if unknown:
            raise InvalidCriteriaError(
                f"Unknown criteria: {', '.join(sorted(unknown))}"
            )
        return [el for el in self.iter_descendants(recursive) if el._matches(merged)]

    def find_first(self, criteria: Mapping[str, Any] | None = None, **kwargs: Any) -> Element | None:
        """Return the first matching descendant, or None."""
        found = self.find_descendants(criteria, **kwargs)
        return found[0] if found else None

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self.find_first(id=element_id)

    def _matches(self, criteria: Mapping[str, Any]) -> bool:
        tag = criteria.get('tag')
        if tag is not None and self.tag.lower() != str(tag).lower():
            return False
        classes = criteria.get('class')
        if classes is not None:
            own = self.get_classes()
            if not all(token in own for token in split_classes(classes)):
                return False
        element_id = criteria.get('id')
        if element_id is not None and self._attributes.get('id') != str(element_id):
            return False
        for name, expected in (criteria.get('attributes') or {}).items():
            if name not in self._attributes:
                return False
            if expected is True:
                continue
            if self._attributes[name] != str(expected):
                return False
        return True
