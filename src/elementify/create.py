# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Create - one-call factory for elements, form controls and components.

Every HTML5 tag is available as a method through ``__getattr__``; the
tags that need more than content and attributes (links, lists, media,
form controls) have explicit shortcuts.

Example:
    Building a small fragment::

        from elementify import create

        card = create.div(class_='profile')
        card.add_child(create.h2('Ada Lovelace'))
        card.add_child(create.mailto('ada@example.com'))
        card.add_child(create.section('Bio', id='bio'))
        html = card.render()
"""

from __future__ import annotations

import logging
import mimetypes
import re
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

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
from .elements import Button, Field, Form, Input, Label, Select, Textarea
from .exceptions import UnknownTagError
from .node import Element
from .tags import HTML5_TAGS

logger = logging.getLogger(__name__)

Attributes = Mapping[str, Any] | None

SOCIAL_ICONS = frozenset({
    'share', 'share-alt', 'share-alt2', 'rss', 'email', 'email-alt', 'email-alt2',
    'networking', 'amazon', 'facebook', 'facebook-alt', 'google', 'instagram',
    'linkedin', 'pinterest', 'podio', 'reddit', 'spotify', 'twitch', 'twitter',
    'twitter-alt', 'whatsapp', 'xing', 'youtube',
})


def _mime_type(src: str) -> str:
    return mimetypes.guess_type(src)[0] or ''


def _encode(value: str) -> str:
    return quote(value, safe='')


def _share_url(base: str, **params: str) -> str:
    """Build a share URL; the first parameter is always sent, the others when set."""
    query = [
        f"{key}={_encode(value)}"
        for index, (key, value) in enumerate(params.items())
        if value or index == 0
    ]
    return f"{base}?{'&'.join(query)}"


def _coordinate(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith('.0') else text


class Create:
    """Factory for elements and components.

    Plain tags accept ``(content=None, attributes=None, **attr)``:

        >>> create.section('Intro', class_='lead').render()
        '<section class="lead">Intro</section>'

    Names that are neither shortcuts nor HTML5 tags raise UnknownTagError.
    """

    def __getattr__(self, name: str) -> Callable[..., Element]:
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        if name in HTML5_TAGS:
            return self._make_tag_method(name)
        raise UnknownTagError(f"'{name}' is not a valid HTML tag")

    def _make_tag_method(self, name: str) -> Callable[..., Element]:
        """Create a factory method for a specific tag."""

        def tag_method(content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
            return Element(name, content, attributes, **attr)

        tag_method.__name__ = name
        return tag_method

    # ------------------------------------------------------------------
    # Basic elements
    # ------------------------------------------------------------------

    def element(self, tag: str, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return Element(tag, content, attributes, **attr)

    def div(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('div', content, attributes, **attr)

    def span(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('span', content, attributes, **attr)

    def p(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('p', content, attributes, **attr)

    def blockquote(self, content: Any = None, cite: str = '', attributes: Attributes = None,
                   **attr: Any) -> Element:
        quote_ = Element('blockquote', content, attributes, **attr)
        if cite:
            quote_.set_attribute('cite', cite)
        return quote_

    def code(self, content: str, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('code', content, attributes, **attr)

    def pre(self, content: str, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('pre', content, attributes, **attr)

    def time(self, datetime: str, content: Any = None, attributes: Attributes = None,
             **attr: Any) -> Element:
        """``<time datetime=...>``; the content defaults to the datetime text."""
        element = Element('time', content or datetime, {'datetime': datetime}, **attr)
        return element.set_attributes(attributes or {})

    def heading(self, level: int, content: Any = None, attributes: Attributes = None,
                **attr: Any) -> Element:
        """Heading ``h1``..``h6``; out-of-range levels are clamped."""
        level = max(1, min(6, int(level)))
        return Element(f"h{level}", content, attributes, **attr)

    def h1(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self.heading(1, content, attributes, **attr)

    def h2(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self.heading(2, content, attributes, **attr)

    def h3(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self.heading(3, content, attributes, **attr)

    def h4(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self.heading(4, content, attributes, **attr)

    def h5(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self.heading(5, content, attributes, **attr)

    def h6(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self.heading(6, content, attributes, **attr)

    def hr(self, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('hr', None, attributes, **attr)

    def br(self, count: int = 1, attributes: Attributes = None, **attr: Any) -> Element | None:
        """One ``<br />``, or several wrapped in a span. None when count < 1."""
        if count <= 0:
            return None
        if count == 1:
            return Element('br', None, attributes, **attr)
        return Element('span', [Element('br', None, attributes, **attr) for _ in range(count)])

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def a(self, href: str, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        link = Element('a', content, {'href': href}, **attr)
        return link.set_attributes(attributes or {})

    def mailto(self, email: str, content: Any = None, attributes: Attributes = None,
               **attr: Any) -> Element:
        email = email.strip()
        return self.a(f"mailto:{email}", email if content is None else content, attributes, **attr)

    def tel(self, phone: str, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        """Phone link; the href keeps only digits and ``+``."""
        clean = re.sub(r'[^0-9+]', '', phone)
        return self.a(f"tel:{clean}", phone if content is None else content, attributes, **attr)

    def sms(self, phone: str, message: str = '', content: Any = None, attributes: Attributes = None,
            **attr: Any) -> Element:
        href = 'sms:' + re.sub(r'[^0-9+]', '', phone)
        if message:
            href += '?body=' + quote(message, safe='')
        return self.a(href, phone if content is None else content, attributes, **attr)

    def download(self, url: str, filename: str = '', content: Any = None, attributes: Attributes = None,
                 **attr: Any) -> Element:
        link = self.a(url, content, attributes, **attr)
        return link.set_attribute('download', filename or True)

    def external_link(self, url: str, content: Any = None, attributes: Attributes = None,
                      **attr: Any) -> Element:
        """Link opening in a new tab with ``rel="noopener noreferrer"``."""
        link = Element('a', content, {'href': url, 'target': '_blank', 'rel': 'noopener noreferrer'}, **attr)
        return link.set_attributes(attributes or {})

    def anchor(self, section: str, content: Any = None, attributes: Attributes = None,
               **attr: Any) -> Element:
        return self.a(f"#{section}", section if content is None else content, attributes, **attr)

    def protocol(self, protocol: str, path: str, content: Any = None, attributes: Attributes = None,
                 **attr: Any) -> Element:
        """Link with a custom scheme, e.g. ``protocol('skype', 'alice?call')``."""
        href = f"{protocol}:{path}"
        return self.a(href, href if content is None else content, attributes, **attr)

    # ------------------------------------------------------------------
    # Maps
    # ------------------------------------------------------------------

    def _map_link(self, base: str, address: str, content: Any, attributes: Attributes,
                  attr: dict[str, Any]) -> Element:
        return self.a(base + _encode(address), address if content is None else content, attributes, **attr)

    def google_map(self, address: str, content: Any = None, attributes: Attributes = None,
                   **attr: Any) -> Element:
        return self._map_link('https://maps.google.com/?q=', address, content, attributes, attr)

    def bing_map(self, address: str, content: Any = None, attributes: Attributes = None,
                 **attr: Any) -> Element:
        return self._map_link('https://www.bing.com/maps?q=', address, content, attributes, attr)

    def apple_map(self, address: str, content: Any = None, attributes: Attributes = None,
                  **attr: Any) -> Element:
        return self._map_link('https://maps.apple.com/?q=', address, content, attributes, attr)

    def osm_map(self, address: str, content: Any = None, attributes: Attributes = None,
                **attr: Any) -> Element:
        return self._map_link('https://www.openstreetmap.org/search?query=', address, content, attributes, attr)

    def device_map(self, address: str, content: Any = None, attributes: Attributes = None,
                   **attr: Any) -> Element:
        """``geo:`` link opened by the device's default map application."""
        return self._map_link('geo:0,0?q=', address, content, attributes, attr)

    def map(self, address: str, platform: str = 'google', content: Any = None,
            attributes: Attributes = None, **attr: Any) -> Element:
        """Map link for ``google``, ``bing``, ``apple`` or ``osm``; others use Google."""
        method = {
            'bing': self.bing_map,
            'apple': self.apple_map,
            'osm': self.osm_map,
            'openstreetmap': self.osm_map,
        }.get(platform.lower(), self.google_map)
        return method(address, content, attributes, **attr)

    def coordinates_map(self, latitude: float, longitude: float, platform: str = 'google',
                        content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        lat, lon = _coordinate(latitude), _coordinate(longitude)
        platform = platform.lower()
        if platform == 'bing':
            href = f"https://www.bing.com/maps?cp={lat}~{lon}&lvl=16"
        elif platform == 'apple':
            href = f"https://maps.apple.com/?ll={lat},{lon}"
        elif platform in ('osm', 'openstreetmap'):
            href = f"https://www.openstreetmap.org/?mlat={lat}&mlon={lon}&zoom=16"
        else:
            href = f"https://maps.google.com/?q={lat},{lon}"
        return self.a(href, f"{lat}, {lon}" if content is None else content, attributes, **attr)

    # ------------------------------------------------------------------
    # Social
    # ------------------------------------------------------------------

    def whatsapp(self, phone: str, message: str = '', content: Any = None, attributes: Attributes = None,
                 **attr: Any) -> Element:
        href = 'https://wa.me/' + re.sub(r'[^0-9+]', '', phone)
        if message:
            href += '?text=' + _encode(message)
        return self.a(href, phone if content is None else content, attributes, **attr)

    def twitter_share(self, text: str, url: str = '', hashtags: str = '', content: Any = 'Share on Twitter',
                      attributes: Attributes = None, **attr: Any) -> Element:
        href = _share_url('https://twitter.com/intent/tweet', text=text, url=url, hashtags=hashtags)
        return self.external_link(href, content, attributes, **attr)

    def facebook_share(self, url: str, content: Any = 'Share on Facebook', attributes: Attributes = None,
                       **attr: Any) -> Element:
        href = _share_url('https://www.facebook.com/sharer/sharer.php', u=url)
        return self.external_link(href, content, attributes, **attr)

    def linkedin_share(self, url: str, title: str = '', content: Any = 'Share on LinkedIn',
                       attributes: Attributes = None, **attr: Any) -> Element:
        href = _share_url('https://www.linkedin.com/sharing/share-offsite/', url=url, title=title)
        return self.external_link(href, content, attributes, **attr)

    def social_share(self, platform: str, url: str, params: Mapping[str, str] | None = None,
                     content: Any = None, attributes: Attributes = None, **attr: Any) -> Element | None:
        """Share link for twitter/x, facebook, linkedin, pinterest or reddit.

        Returns None for other platforms.
        """
        platform = platform.lower()
        params = params or {}
        if content is None:
            content = f"Share on {platform.capitalize()}"
        if platform in ('twitter', 'x'):
            return self.twitter_share(params.get('text', ''), url, params.get('hashtags', ''),
                                      content, attributes, **attr)
        if platform == 'facebook':
            return self.facebook_share(url, content, attributes, **attr)
        if platform == 'linkedin':
            return self.linkedin_share(url, params.get('title', ''), content, attributes, **attr)
        if platform == 'pinterest':
            href = _share_url('https://pinterest.com/pin/create/button/', url=url,
                              description=params.get('description', ''), media=params.get('media', ''))
        elif platform == 'reddit':
            href = _share_url('https://www.reddit.com/submit', url=url, title=params.get('title', ''))
        else:
            logger.debug("no share link for platform %r", platform)
            return None
        return self.external_link(href, content, attributes, **attr)

    def social_links(self, profiles: Mapping[str, str], attributes: Attributes = None,
                     show_text: bool = True) -> Element:
        """``ul.social-links-list`` of profile links with dashicons.

        profiles maps a platform name (``facebook``, ``youtube``, ...) to
        the profile URL.
        """
        items = []
        for platform, url in profiles.items():
            key = platform.lower()
            content: list[Any] = []
            if key in SOCIAL_ICONS:
                content.append(self.span(class_=['dashicons', f"dashicons-{key}"]))
            if show_text:
                content.append(f" {platform.capitalize()}" if content else platform.capitalize())
            link = self.external_link(url, content, {
                'class': ['social-icon', f"social-icon-{key}"],
                'aria-label': f"Visit our {platform} page",
            })
            items.append(self.li(link))
        social = Element('ul', items, {'class': 'social-links-list'})
        social.toggle_class('social-links-icon-only', not show_text)
        return social.set_attributes(attributes or {})

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def li(self, content: Any = None, attributes: Attributes = None, **attr: Any) -> Element:
        return Element('li', content, attributes, **attr)

    def _list(self, tag: str, items: list[Any], attributes: Attributes, attr: dict[str, Any]) -> Element:
        wrapper = Element(tag, None, attributes, **attr)
        for item in items:
            if isinstance(item, Element) and item.tag == 'li':
                wrapper.add_child(item)
            else:
                wrapper.add_child(self.li(item))
        return wrapper

    def ul(self, items: list[Any] | None = None, attributes: Attributes = None, **attr: Any) -> Element:
        """Unordered list; items that are not ``li`` elements get wrapped."""
        return self._list('ul', items or [], attributes, attr)

    def ol(self, items: list[Any] | None = None, attributes: Attributes = None, **attr: Any) -> Element:
        return self._list('ol', items or [], attributes, attr)

    def dl(self, items: Mapping[Any, Any] | None = None, attributes: Attributes = None,
           **attr: Any) -> Element:
        """Definition list from a term to definition mapping."""
        dl = Element('dl', None, attributes, **attr)
        for term, definition in (items or {}).items():
            dl.add_child(Element('dt', term))
            dl.add_child(Element('dd', definition))
        return dl

    def menu(self, items: list[Any], attributes: Attributes = None, **attr: Any) -> Element:
        """``ul.menu`` from elements, strings or dicts with ``text``, ``href``,
        ``active`` and ``class``."""
        menu = Element('ul', None, {'class': 'menu'}, **attr)
        menu.set_attributes(attributes or {})
        for item in items:
            if isinstance(item, Mapping) and 'text' in item:
                li = self.li()
                if 'href' in item:
                    link = self.a(item['href'], item['text'])
                    li.add_child(link.toggle_class('active', bool(item.get('active'))))
                else:
                    li.set_content(item['text'])
                if item.get('class'):
                    li.add_class(item['class'])
                menu.add_child(li)
            elif isinstance(item, Element) and item.tag == 'li':
                menu.add_child(item)
            else:
                menu.add_child(self.li(item))
        return menu

    def dropdown(self, label: str, items: Mapping[str, Any] | list[Any], attributes: Attributes = None,
                 **attr: Any) -> Element:
        """Toggle button plus ``div.dropdown-menu``.

        Items are an href to label mapping, or a list of elements and dicts
        with ``text`` plus ``href``/``active`` or ``divider``.
        """
        dropdown = Element('div', None, {'class': 'dropdown'}, **attr)
        dropdown.set_attributes(attributes or {})
        toggle = Button(label, 'button', {'class': 'dropdown-toggle'})
        toggle.set_aria('haspopup', 'true').set_aria('expanded', 'false')
        menu = Element('div', None, {'class': 'dropdown-menu'})
        entries = items.items() if isinstance(items, Mapping) else enumerate(items)
        for key, item in entries:
            if isinstance(item, str) and isinstance(key, str):
                menu.add_child(self.a(key, item, class_='dropdown-item'))
            elif isinstance(item, Element):
                if item.tag == 'a':
                    item.add_class('dropdown-item')
                menu.add_child(item)
            elif isinstance(item, Mapping) and 'text' in item:
                if 'href' in item:
                    link = self.a(item['href'], item['text'], class_='dropdown-item')
                    menu.add_child(link.toggle_class('active', bool(item.get('active'))))
                elif item.get('divider'):
                    menu.add_child(Element('div', None, class_='dropdown-divider'))
                else:
                    menu.add_child(Element('div', item['text'], class_='dropdown-header'))
        return dropdown.add_content([toggle, menu])

    def link_list(self, links: Mapping[str, Any] | list[Any], attributes: Attributes = None,
                  ordered: bool = False) -> Element:
        """List of links from an href to text mapping, ``a`` elements, or
        dicts with ``href`` and ``text`` (other keys become attributes)."""
        items = []
        entries = links.items() if isinstance(links, Mapping) else enumerate(links)
        for key, link in entries:
            if isinstance(link, Element) and link.tag == 'a':
                items.append(link)
            elif isinstance(link, Mapping) and 'href' in link and 'text' in link:
                extra = {k: v for k, v in link.items() if k not in ('href', 'text')}
                items.append(self.a(link['href'], link['text'], extra))
            elif isinstance(key, str):
                items.append(self.a(key, link))
            else:
                logger.debug("skipping link list item %r", link)
        return self._list('ol' if ordered else 'ul', items, attributes, {})

    # ------------------------------------------------------------------
    # Layout and media
    # ------------------------------------------------------------------

    def figure(self, content: Any, caption: str = '', attributes: Attributes = None, **attr: Any) -> Element:
        figure = Element('figure', content, attributes, **attr)
        if caption:
            figure.add_child(Element('figcaption', caption))
        return figure

    def table(self, data: list[list[Any]] | None = None, headers: list[Any] | None = None,
              attributes: Attributes = None, **attr: Any) -> Element:
        """Static table from header labels and rows of cells.

        Cell text is escaped; use TableBuilder for captions, sorting or
        action columns.
        """
        table = Element('table', None, attributes, **attr)
        if headers:
            row = Element('tr', [Element('th', header, escape_content=True) for header in headers])
            table.add_child(Element('thead', row))
        if data:
            body = Element('tbody')
            for cells in data:
                body.add_child(Element('tr', [Element('td', cell, escape_content=True) for cell in cells]))
            table.add_child(body)
        return table

    def details(self, summary: str, content: Any, is_open: bool = False, attributes: Attributes = None,
                **attr: Any) -> Element:
        details = Element('details', None, attributes, **attr)
        details.toggle_attribute('open', True, is_open)
        details.add_child(Element('summary', summary, escape_content=True))
        return details.add_content(content)

    def img(self, src: str, alt: str = '', attributes: Attributes = None, **attr: Any) -> Element:
        img = Element('img', None, {'src': src, 'alt': alt}, **attr)
        return img.set_attributes(attributes or {})

    def source(self, src: str, source_type: str, attributes: Attributes = None, **attr: Any) -> Element:
        source = Element('source', None, {'src': src, 'type': source_type}, **attr)
        return source.set_attributes(attributes or {})

    def _media(self, tag: str, src: Any, controls: bool, attributes: Attributes, attr: dict[str, Any]) -> Element:
        media = Element(tag, None, attributes, **attr)
        media.toggle_attribute('controls', True, controls)
        for item in [src] if isinstance(src, str) else src:
            if isinstance(item, str):
                media.add_child(self.source(item, _mime_type(item)))
            elif isinstance(item, Mapping) and 'src' in item and 'type' in item:
                media.add_child(self.source(item['src'], item['type']))
        return media

    def audio(self, src: Any, controls: bool = True, attributes: Attributes = None, **attr: Any) -> Element:
        """Audio player; src is a URL or a list of URLs or ``{'src', 'type'}`` dicts."""
        return self._media('audio', src, controls, attributes, attr)

    def video(self, src: Any, controls: bool = True, attributes: Attributes = None, **attr: Any) -> Element:
        return self._media('video', src, controls, attributes, attr)

    def picture(self, sources: list[Any], img_src: str, alt: str = '', attributes: Attributes = None,
                **attr: Any) -> Element:
        picture = Element('picture', None, attributes, **attr)
        for item in sources:
            if isinstance(item, Element):
                picture.add_child(item)
            elif isinstance(item, Mapping) and 'src' in item:
                source = Element('source', srcset=item['src'], type=item.get('type') or _mime_type(item['src']))
                if 'media' in item:
                    source.set_attribute('media', item['media'])
                picture.add_child(source)
        return picture.add_child(self.img(img_src, alt))

    def iframe(self, src: str, title: str, attributes: Attributes = None, **attr: Any) -> Element:
        frame = Element('iframe', None, {'src': src, 'title': title, 'frameborder': '0', 'loading': 'lazy'},
                        **attr)
        return frame.set_attributes(attributes or {})

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def form(self, action: str = '', method: str = 'post', attributes: Attributes = None) -> Form:
        return Form(action, method, None, attributes)

    def fieldset(self, content: Any = None, legend: str = '', attributes: Attributes = None,
                 **attr: Any) -> Element:
        fieldset = Element('fieldset', None, attributes, **attr)
        if legend:
            fieldset.add_child(Element('legend', legend, escape_content=True))
        if content is not None:
            fieldset.add_content(content)
        return fieldset

    def label(self, content: Any, for_id: str = '', attributes: Attributes = None) -> Label:
        return Label(content, for_id, attributes)

    def field(self, control: Element | str, label: str = '', description: str = '',
              attributes: Attributes = None) -> Field:
        return Field(control, label, description, attributes)

    def button(self, content: Any, button_type: str = 'submit', attributes: Attributes = None) -> Button:
        return Button(content, button_type, attributes)

    def submit(self, content: Any = 'Submit', attributes: Attributes = None) -> Button:
        return Button(content, 'submit', attributes)

    def input(self, input_type: str, name: str, value: Any = None, attributes: Attributes = None) -> Input:
        return Input(input_type, name, value, attributes)

    def text(self, name: str, value: Any = '', attributes: Attributes = None) -> Input:
        return Input('text', name, value, attributes)

    def email(self, name: str, value: Any = '', attributes: Attributes = None) -> Input:
        return Input('email', name, value, attributes)

    def number(self, name: str, value: Any = '', attributes: Attributes = None) -> Input:
        return Input('number', name, value, attributes)

    def date(self, name: str, value: Any = '', attributes: Attributes = None) -> Input:
        return Input('date', name, value, attributes)

    def password(self, name: str, attributes: Attributes = None) -> Input:
        return Input('password', name, '', attributes)

    def checkbox(self, name: str, value: Any = '1', checked: bool = False, attributes: Attributes = None) -> Input:
        return Input('checkbox', name, value, attributes).set_checked(checked)

    def radio(self, name: str, value: Any, checked: bool = False, attributes: Attributes = None) -> Input:
        return Input('radio', name, value, attributes).set_checked(checked)

    def hidden(self, name: str, value: Any = '', attributes: Attributes = None) -> Input:
        return Input('hidden', name, value, attributes)

    def file(self, name: str, attributes: Attributes = None) -> Input:
        return Input('file', name, None, attributes)

    def color(self, name: str, value: str = '#000000', attributes: Attributes = None) -> Input:
        return Input('color', name, value, attributes)

    def textarea(self, name: str, content: str = '', attributes: Attributes = None) -> Textarea:
        return Textarea(name, content, attributes)

    def select(self, name: str, options: Any = None, selected: Any = None, attributes: Attributes = None) -> Select:
        return Select(name, options, selected, attributes)

    def datalist(self, datalist_id: str, options: Any, attributes: Attributes = None) -> Element:
        """``<datalist>`` of options; a mapping gives value to label."""
        datalist = Element('datalist', None, {'id': datalist_id})
        datalist.set_attributes(attributes or {})
        if isinstance(options, Mapping):
            for value, label in options.items():
                datalist.add_child(Element('option', value=value, label=label))
        else:
            for value in options:
                datalist.add_child(Element('option', value=value))
        return datalist

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def component(self, component_type: str, *args: Any, **kwargs: Any) -> Component:
        """Instantiate a registered component by its type name.

        Raises:
            ComponentError: If no component is registered under that name.
        """
        return Component.get_component(component_type)(*args, **kwargs)

    def accordion(self, sections: Any = None, allow_multiple: bool = False,
                  attributes: Attributes = None) -> Accordion:
        return Accordion(sections, allow_multiple, attributes)

    def tabs(self, tabs: Any = None, active_tab: str = '', attributes: Attributes = None) -> Tabs:
        return Tabs(tabs, active_tab, attributes)

    def modal(self, title: Any = '', content: Any = None, buttons: list[Any] | None = None,
              attributes: Attributes = None, closeable: bool = True) -> Modal:
        return Modal(title, content, buttons, attributes, closeable)

    def toggle(self, name: str, checked: bool = False, value: Any = '1', label: str | None = None,
               attributes: Attributes = None, disabled: bool = False) -> Toggle:
        return Toggle(name, checked, value, label, attributes, disabled)

    def featured(self, name: str, featured: bool = False, label: str | None = None,
                 attributes: Attributes = None, disabled: bool = False) -> Featured:
        return Featured(name, featured, label, attributes, disabled)

    def range(self, name: str, value: Any = 50, minimum: Any = 0, maximum: Any = 100, step: Any = 1,
              display_value: bool = True, attributes: Attributes = None) -> Range:
        return Range(name, value, minimum, maximum, step, display_value, attributes)

    def clipboard(self, text: str, options: Attributes = None, attributes: Attributes = None) -> Clipboard:
        return Clipboard(text, options, attributes)

    def datepicker(self, name: str = '', value: str = '', options: Attributes = None,
                   attributes: Attributes = None) -> DatePicker:
        return DatePicker(name, value, options, attributes)

    def tooltip(self, target: Element | str, tooltip: Any, options: Attributes = None,
                attributes: Attributes = None) -> Tooltip:
        return Tooltip(target, tooltip, options, attributes)

    def click_tooltip(self, target: Element | str, tooltip: Any, options: Attributes = None,
                      attributes: Attributes = None) -> Tooltip:
        return Tooltip(target, tooltip, {**(options or {}), 'trigger': 'click'}, attributes)

    def focus_tooltip(self, target: Element | str, tooltip: Any, options: Attributes = None,
                      attributes: Attributes = None) -> Tooltip:
        return Tooltip(target, tooltip, {**(options or {}), 'trigger': 'focus'}, attributes)

    def progress_bar(self, current: float, total: float = 100, options: Attributes = None,
                     attributes: Attributes = None) -> ProgressBar:
        return ProgressBar(current, total, options, attributes)

    def badge(self, label: str, status: str = 'default', options: Attributes = None,
              attributes: Attributes = None) -> StatusBadge:
        return StatusBadge(label, status, options, attributes)

    def rating(self, rating: float, options: Attributes = None, attributes: Attributes = None) -> Rating:
        return Rating(rating, options, attributes)

    def boolean_icon(self, value: Any, options: Attributes = None, attributes: Attributes = None) -> BooleanIcon:
        return BooleanIcon(value, options, attributes)

    def color_swatch(self, color: str, options: Attributes = None, attributes: Attributes = None) -> ColorSwatch:
        return ColorSwatch(color, options, attributes)

    def filesize(self, size: Any, options: Attributes = None, attributes: Attributes = None) -> FileSize:
        return FileSize(size, options, attributes)

    def number_format(self, value: Any, options: Attributes = None, attributes: Attributes = None) -> NumberFormat:
        return NumberFormat(value, options, attributes)

    def timeago(self, time: Any, options: Attributes = None, attributes: Attributes = None) -> TimeAgo:
        return TimeAgo(time, options, attributes)

    def card(self, content: Any = None, title: Any = '', footer: Any = None, attributes: Attributes = None,
             variant: str = 'compact') -> Card:
        return Card(content, title, footer, attributes, variant)

    def breadcrumbs(self, items: list[Any] | None = None, separator: str = '/',
                    attributes: Attributes = None) -> Breadcrumbs:
        return Breadcrumbs(items, separator, attributes)

    def breadcrumbs_from_path(self, path: str, base_url: str = '', **options: Any) -> Breadcrumbs:
        return Breadcrumbs.from_path(path, base_url, **options)

    def notice(self, message: Any = None, notice_type: str = 'info', dismissible: bool = False,
               attributes: Attributes = None) -> Notice:
        return Notice(message, notice_type, dismissible, attributes)

    def info_notice(self, message: Any, dismissible: bool = False, attributes: Attributes = None) -> Notice:
        return Notice(message, 'info', dismissible, attributes)

    def success_notice(self, message: Any, dismissible: bool = False, attributes: Attributes = None) -> Notice:
        return Notice(message, 'success', dismissible, attributes)

    def warning_notice(self, message: Any, dismissible: bool = False, attributes: Attributes = None) -> Notice:
        return Notice(message, 'warning', dismissible, attributes)

    def error_notice(self, message: Any, dismissible: bool = False, attributes: Attributes = None) -> Notice:
        return Notice(message, 'error', dismissible, attributes)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def table_builder(self, attributes: Attributes = None) -> TableBuilder:
        return TableBuilder(attributes)

    def list_builder(self, attributes: Attributes = None) -> ListBuilder:
        return ListBuilder(attributes)

    def form_builder(self, action: str = '', method: str = 'post', attributes: Attributes = None) -> FormBuilder:
        return FormBuilder(action, method, None, attributes)

    def card_builder(self, attributes: Attributes = None) -> CardBuilder:
        return CardBuilder(attributes=attributes)

    def notice_builder(self, message: Any = '', notice_type: str = 'info',
                       attributes: Attributes = None) -> NoticeBuilder:
        return NoticeBuilder(message, notice_type, False, attributes)

    def breadcrumb_builder(self, attributes: Attributes = None) -> BreadcrumbBuilder:
        return BreadcrumbBuilder(attributes=attributes)


create = Create()
