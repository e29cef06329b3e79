# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag tables shared by elements and the factory.

SELF_CLOSING_TAGS are rendered as ``<tag />`` and never carry children.
RAW_HTML_ELEMENTS are containers whose raw-string children are emitted
unescaped unless escaping is requested explicitly.
"""

from __future__ import annotations

SELF_CLOSING_TAGS: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

RAW_HTML_ELEMENTS: frozenset[str] = frozenset({
    # Generic and form containers
    'div', 'span', 'form', 'fieldset', 'label', 'legend', 'optgroup',
    'select', 'option', 'datalist', 'output',
    # Sectioning
    'article', 'section', 'main', 'aside', 'nav', 'header', 'footer',
    'figure', 'figcaption', 'address', 'blockquote', 'summary', 'details',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'hgroup',
    # Tables
    'table', 'thead', 'tbody', 'tfoot', 'tr', 'td', 'th', 'caption',
    'colgroup', 'col',
    # Lists
    'ul', 'ol', 'dl', 'li', 'dt', 'dd', 'menu',
    # Interactive and media
    'dialog', 'menuitem', 'button', 'keygen', 'meter', 'progress',
    'picture', 'audio', 'video', 'canvas', 'map', 'svg', 'iframe',
    'object', 'param', 'embed', 'template', 'slot', 'portal',
    # Legacy and inline
    'marquee', 'nobr', 'time', 'wbr', 'bdi', 'bdo', 'cite', 'data', 'pre',
    'q', 'ruby', 'rt', 'rp', 's', 'small', 'mark',
    # Component pseudo-tags
    'card', 'card-body', 'card-header', 'card-footer',
    'modal', 'modal-title', 'modal-body', 'modal-footer', 'modal-content',
    'accordion', 'accordion-header', 'accordion-content',
    'tab', 'tab-content', 'tabs-nav', 'tabs-content',
})

HTML5_TAGS: frozenset[str] = frozenset({
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio', 'b',
    'base', 'bdi', 'bdo', 'blockquote', 'body', 'br', 'button', 'canvas',
    'caption', 'cite', 'code', 'col', 'colgroup', 'data', 'datalist', 'dd',
    'del', 'details', 'dfn', 'dialog', 'div', 'dl', 'dt', 'em', 'embed',
    'fieldset', 'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3',
    'h4', 'h5', 'h6', 'head', 'header', 'hgroup', 'hr', 'html', 'i',
    'iframe', 'img', 'input', 'ins', 'kbd', 'label', 'legend', 'li', 'link',
    'main', 'map', 'mark', 'menu', 'meta', 'meter', 'nav', 'noscript',
    'object', 'ol', 'optgroup', 'option', 'output', 'p', 'param', 'picture',
    'pre', 'progress', 'q', 'rp', 'rt', 'ruby', 's', 'samp', 'script',
    'search', 'section', 'select', 'slot', 'small', 'source', 'span',
    'strong', 'style', 'sub', 'summary', 'sup', 'svg', 'table', 'tbody',
    'td', 'template', 'textarea', 'tfoot', 'th', 'thead', 'time', 'title',
    'tr', 'track', 'u', 'ul', 'var', 'video', 'wbr',
})


def is_self_closing(tag: str) -> bool:
    """Return True if tag is a void element."""
    return tag.lower() in SELF_CLOSING_TAGS


def is_raw_html_element(tag: str) -> bool:
    """Return True if tag keeps raw-string children unescaped by default."""
    return tag.lower() in RAW_HTML_ELEMENTS
