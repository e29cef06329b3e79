# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Element: attributes, classes, styles, content, rendering, queries."""

import io

import pytest
from markupsafe import Markup

from elementify import Element, InvalidAttributeError, InvalidContentError, InvalidCriteriaError
from elementify.node import attribute_name, format_styles, parse_styles, split_classes


class TestHelpers:
    """Tests for module-level helpers."""

    def test_attribute_name(self):
        """Test keyword to attribute name conversion."""
        assert attribute_name('class_') == 'class'
        assert attribute_name('data_id') == 'data-id'
        assert attribute_name('href') == 'href'

    def test_split_classes(self):
        """Test class tokens from strings and iterables."""
        assert split_classes('a  b') == ['a', 'b']
        assert split_classes(['a', 'b c']) == ['a', 'b', 'c']
        assert split_classes(None) == []

    def test_parse_and_format_styles(self):
        """Test style parsing drops empty declarations."""
        styles = parse_styles('color: red; ; margin:0 ;width:')
        assert styles == {'color': 'red', 'margin': '0'}
        assert format_styles(styles) == 'color: red; margin: 0;'


class TestElementRender:
    """Tests for rendering."""

    def test_raw_container_keeps_strings(self):
        """Test container tags do not escape raw strings."""
        assert Element('ul', ['a', 'b']).render() == '<ul>ab</ul>'
        assert Element('div', '<b>x</b>').render() == '<div><b>x</b></div>'

    def test_text_tags_escape(self):
        """Test non-container tags escape raw strings."""
        assert Element('p', '<b>x</b>').render() == '<p>&lt;b&gt;x&lt;/b&gt;</p>'

    def test_explicit_escape_flag(self):
        """Test escape_content overrides the tag default."""
        assert Element('div', '<i>', escape_content=True).render() == '<div>&lt;i&gt;</div>'
        assert Element('p', '<i>', escape_content=False).render() == '<p><i></p>'

    def test_self_closing(self):
        """Test void elements render as <tag />."""
        assert Element('br').render() == '<br />'
        assert Element('img', src='logo.png', alt='Logo').render() == '<img src="logo.png" alt="Logo" />'

    def test_self_closing_ignores_children(self):
        """Test children added to void elements are dropped."""
        br = Element('br', 'ignored').add_child('x').prepend_child('y')
        assert br.render() == '<br />'
        assert br.get_children() == []

    def test_boolean_and_escaped_attributes(self):
        """Test bare attributes and attribute escaping."""
        el = Element('input', type='checkbox', checked=True, title='a "b" <c>')
        assert el.render() == '<input type="checkbox" checked title="a &#34;b&#34; &lt;c&gt;" />'

    def test_markup_children_are_trusted(self):
        """Test __html__ children are emitted verbatim."""
        assert Element('p', Markup('<em>x</em>')).render() == '<p><em>x</em></p>'

    def test_nested_elements_render_once(self):
        """Test child elements keep their own escaping."""
        div = Element('div', [Element('p', '<'), '<'])
        assert div.render() == '<div><p>&lt;</p><</div>'

    def test_escaping_does_not_cascade(self):
        """Test a raw container inside an escaping parent keeps its own rule."""
        assert Element('p', Element('div', '<b>x</b>')).render() == '<p><div><b>x</b></div></p>'
        assert Element('div', Element('p', '<b>')).render() == '<div><p>&lt;b&gt;</p></div>'

    def test_none_children_render_nothing(self):
        """Test None placeholders are skipped."""
        assert Element('div', [None, 'a', None]).render() == '<div>a</div>'

    def test_numbers_are_children(self):
        """Test numeric children are rendered as text."""
        assert Element('span', [1, 2.5]).render() == '<span>12.5</span>'

    def test_str_and_html(self):
        """Test __str__ and __html__ return the rendered markup."""
        el = Element('b', 'x')
        assert str(el) == '<b>x</b>'
        assert isinstance(el.__html__(), Markup)
        assert el.__html__() == '<b>x</b>'

    def test_output_writes_to_stream(self):
        """Test output() writes the markup to a stream."""
        stream = io.StringIO()
        Element('i', 'x').output(stream)
        assert stream.getvalue() == '<i>x</i>'

    def test_render_content_only(self):
        """Test render_content serializes children without the tag."""
        assert Element('div', [Element('b', 'x'), 'y']).render_content() == '<b>x</b>y'


class TestElementAttributes:
    """Tests for attribute handling."""

    def test_scalars_are_strings(self):
        """Test numeric attribute values are stored as strings."""
        el = Element('input', maxlength=10)
        assert el.get_attribute('maxlength') == '10'

    def test_false_and_none_remove(self):
        """Test False and None remove an attribute."""
        el = Element('input', disabled=True)
        el.set_attribute('disabled', False)
        assert not el.has_attribute('disabled')
        el.set_attribute('title', 'x').set_attribute('title', None)
        assert el.get_attributes() == {}

    def test_invalid_values_raise(self):
        """Test non-scalar values raise InvalidAttributeError."""
        el = Element('div')
        with pytest.raises(InvalidAttributeError):
            el.set_attribute('data-x', {'a': 1})
        with pytest.raises(InvalidAttributeError):
            el.set_attribute('', 'x')

    def test_invalid_attribute_is_type_error(self):
        """Test InvalidAttributeError is also a TypeError."""
        with pytest.raises(TypeError):
            Element('div').set_attribute('data-x', object())

    def test_toggle_attribute(self):
        """Test toggle_attribute sets or removes by condition."""
        el = Element('details')
        el.toggle_attribute('open', True, True)
        assert el.get_attribute('open') is True
        el.toggle_attribute('open', True, False)
        assert not el.has_attribute('open')

    def test_data_aria_and_tooltip(self):
        """Test data-*, aria-* and title helpers."""
        el = Element('div').set_data('id', 5).set_aria('label', 'Box').add_tooltip('Hi')
        assert el.render() == '<div data-id="5" aria-label="Box" title="Hi"></div>'

    def test_get_attribute_default(self):
        """Test get_attribute returns the default when missing."""
        assert Element('div').get_attribute('id', 'none') == 'none'

    def test_remove_attribute(self):
        """Test remove_attribute and set_id."""
        el = Element('div').set_id('main')
        assert el.get_attribute('id') == 'main'
        el.remove_attribute('id')
        assert not el.has_attribute('id')


class TestElementClasses:
    """Tests for class handling."""

    def test_add_class_is_idempotent(self):
        """Test adding an existing class does nothing."""
        el = Element('div').add_class('a b').add_class(['b', 'c']).add_class('a')
        assert el.get_classes() == ['a', 'b', 'c']
        assert el.render() == '<div class="a b c"></div>'

    def test_class_attribute_is_normalized(self):
        """Test the class attribute accepts lists and collapses whitespace."""
        el = Element('div', class_=['x', ' y  z '])
        assert el.get_attribute('class') == 'x y z'

    def test_set_class_replaces(self):
        """Test set_attribute('class') replaces existing tokens."""
        el = Element('div', class_='a').set_attribute('class', 'b')
        assert el.get_classes() == ['b']

    def test_set_class_keeps_position(self):
        """Test rewriting the class attribute keeps its place and drops duplicates."""
        el = Element('div', class_='a', id='x').set_attribute('class', 'b c b')
        assert list(el.get_attributes()) == ['class', 'id']
        assert el.render() == '<div class="b c" id="x"></div>'
        el.set_attribute('class', '')
        assert list(el.get_attributes()) == ['id']

    def test_remove_class(self):
        """Test removal by string, iterable and predicate."""
        el = Element('div', class_='a b card--x card--y')
        el.remove_class('a')
        assert el.get_classes() == ['b', 'card--x', 'card--y']
        el.remove_class(lambda token: token.startswith('card--'))
        assert el.get_classes() == ['b']
        el.remove_class(['b'])
        assert not el.has_attribute('class')

    def test_toggle_class(self):
        """Test toggle_class with and without a condition."""
        el = Element('div')
        el.toggle_class('on')
        assert el.has_class('on')
        el.toggle_class('on')
        assert not el.has_class('on')
        el.toggle_class('on', True).toggle_class('on', True)
        assert el.get_classes() == ['on']
        el.toggle_class('on', False)
        assert el.get_classes() == []


class TestElementStyles:
    """Tests for style handling."""

    def test_set_styles_merges(self):
        """Test set_styles merges into existing properties."""
        el = Element('div', style='color: red')
        el.set_styles({'margin': '0'})
        assert el.get_styles() == {'color': 'red', 'margin': '0'}
        assert el.get_attribute('style') == 'color: red; margin: 0;'

    def test_style_mapping_and_removal(self):
        """Test a style mapping and removing properties."""
        el = Element('div', style={'width': '10px', 'height': '5px'})
        el.remove_style('width')
        assert el.get_attribute('style') == 'height: 5px;'
        el.set_style('height', None)
        assert not el.has_attribute('style')

    def test_set_style_attribute_replaces(self):
        """Test set_attribute('style') replaces all properties."""
        el = Element('div', style='color: red').set_attribute('style', 'margin: 0')
        assert el.get_styles() == {'margin': '0'}

    def test_set_style_attribute_keeps_position(self):
        """Test rewriting the style attribute keeps its place."""
        el = Element('div', style='color: red', id='x').set_attribute('style', {'margin': '0'})
        assert el.render() == '<div style="margin: 0;" id="x"></div>'


class TestElementContent:
    """Tests for children management."""

    def test_add_and_prepend(self):
        """Test appending and prepending children."""
        el = Element('div', 'b').add_child('c').prepend_child('a')
        assert el.render() == '<div>abc</div>'

    def test_add_content_list(self):
        """Test add_content flattens one level of list or tuple."""
        el = Element('div').add_content(('a', Element('br')))
        assert el.render() == '<div>a<br /></div>'

    def test_set_content_replaces(self):
        """Test set_content drops existing children."""
        el = Element('div', ['a', 'b']).set_content('c')
        assert el.get_children() == ['c']

    def test_clear_children(self):
        """Test clear_children removes everything."""
        assert Element('div', 'a').clear_children().render() == '<div></div>'

    def test_invalid_children_raise(self):
        """Test unsupported child types raise InvalidContentError."""
        el = Element('div')
        with pytest.raises(InvalidContentError):
            el.add_child(True)
        with pytest.raises(InvalidContentError):
            el.add_child({'a': 1})

    def test_get_children_is_a_copy(self):
        """Test mutating the returned list does not change the element."""
        el = Element('div', 'a')
        el.get_children().append('b')
        assert el.render() == '<div>a</div>'


class CountingElement(Element):
    """Element that counts and records its rebuilds."""

    def __init__(self):
        super().__init__('ul')
        self.items = []
        self.rebuilds = 0

    def add_item(self, text):
        self.items.append(text)
        return self.mark_for_rebuild()

    def rebuild(self):
        self.rebuilds += 1
        self.set_content([Element('li', item) for item in self.items])


class TestElementRebuild:
    """Tests for the rebuild protocol."""

    def test_rebuild_runs_once_per_mark(self):
        """Test rebuild runs once after marking, however often rendered."""
        el = CountingElement().add_item('a')
        assert el.needs_rebuild
        assert el.render() == '<ul><li>a</li></ul>'
        el.render()
        el.render_content()
        assert el.rebuilds == 1
        assert not el.needs_rebuild

    def test_mark_again_rebuilds_again(self):
        """Test a new mark triggers a new rebuild."""
        el = CountingElement().add_item('a')
        el.render()
        el.add_item('b')
        assert el.render() == '<ul><li>a</li><li>b</li></ul>'
        assert el.rebuilds == 2

    def test_queries_trigger_rebuild(self):
        """Test get_children and find_descendants see rebuilt children."""
        el = CountingElement().add_item('a')
        assert len(el.get_children()) == 1
        assert [li.tag for li in el.find_descendants(tag='li')] == ['li']
        assert el.rebuilds == 1

    def test_plain_element_has_no_pending_rebuild(self):
        """Test a plain element is never flagged."""
        el = Element('div')
        assert not el.needs_rebuild
        el.mark_for_rebuild().ensure_built()
        assert not el.needs_rebuild


@pytest.fixture
def page():
    """A small nested tree."""
    return Element('div', [
        Element('ul', [
            Element('li', 'one', class_='item active', id='first'),
            Element('li', Element('a', 'two', href='/two', class_='item'), class_='item'),
        ], id='menu'),
        Element('p', 'text', data_role='note'),
    ])


class TestElementQueries:
    """Tests for find_descendants and friends."""

    def test_document_order(self, page):
        """Test descendants are returned depth-first in document order."""
        tags = [el.tag for el in page.find_descendants()]
        assert tags == ['ul', 'li', 'li', 'a', 'p']

    def test_non_recursive(self, page):
        """Test recursive=False only looks at direct children."""
        assert [el.tag for el in page.find_descendants(recursive=False)] == ['ul', 'p']

    def test_by_class(self, page):
        """Test class criteria require every token."""
        assert len(page.find_descendants(class_='item')) == 3
        found = page.find_descendants({'class': 'item active'})
        assert [el.get_attribute('id') for el in found] == ['first']

    def test_by_tag_and_class(self, page):
        """Test several criteria are combined."""
        found = page.find_descendants(tag='a', class_='item')
        assert found[0].get_attribute('href') == '/two'

    def test_by_attributes(self, page):
        """Test attribute criteria by value and by presence."""
        assert page.find_first(attributes={'data-role': 'note'}).tag == 'p'
        assert page.find_first(attributes={'href': True}).tag == 'a'
        assert page.find_first(attributes={'href': '/other'}) is None

    def test_get_element_by_id(self, page):
        """Test lookup by id."""
        assert page.get_element_by_id('menu').tag == 'ul'
        assert page.get_element_by_id('missing') is None

    def test_unknown_criteria_raise(self, page):
        """Test unknown criteria keys raise InvalidCriteriaError."""
        with pytest.raises(InvalidCriteriaError, match='colour'):
            page.find_descendants(colour='red')
        with pytest.raises(ValueError):
            page.find_descendants({'name': 'x'})

    def test_repr(self):
        """Test the debug representation."""
        assert repr(Element('div', 'a', id='x')) == "<Element 'div' attributes=1 children=1>"
