# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Component base class and its registry."""

import pytest
from markupsafe import Markup

from elementify import Card, Component, ComponentError
from elementify.component import choose


class Badge(Component):
    """Minimal component used by the tests."""

    component_type = 'test-badge'
    default_options = {'label': '', 'size': 'medium'}

    def __init__(self, label='', options=None, attributes=None):
        self.rebuilds = 0
        super().__init__('span', options, attributes, label=label)

    def rebuild(self):
        self.rebuilds += 1
        self.set_content(self.create_text_element('span', self.option('label')))


class TestComponentRegistry:
    """Tests for automatic registration."""

    def test_subclass_is_registered(self):
        """Test declaring component_type registers the class."""
        assert Component.get_component('test-badge') is Badge

    def test_builtin_components_registered(self):
        """Test importing the package registers the bundled components."""
        assert Component.get_component('card') is Card
        for name in ('accordion', 'tabs', 'modal', 'notice', 'tooltip', 'timeago'):
            assert name in Component.registry

    def test_unknown_component_raises(self):
        """Test unknown names raise ComponentError."""
        with pytest.raises(ComponentError, match='nope'):
            Component.get_component('nope')

    def test_subclass_without_type_not_registered(self):
        """Test subclasses inheriting component_type do not overwrite the entry."""

        class BigBadge(Badge):
            pass

        assert Component.get_component('test-badge') is Badge

    def test_cannot_instantiate_abstract(self):
        """Test Component itself is abstract."""
        with pytest.raises(TypeError):
            Component()


class TestComponentOptions:
    """Tests for option handling."""

    def test_options_merge_order(self):
        """Test defaults < options < keyword options."""
        badge = Badge('kw', {'label': 'opt', 'size': 'large'})
        assert badge.options == {'label': 'kw', 'size': 'large'}

    def test_defaults_are_per_instance(self):
        """Test mutating options does not leak into other instances."""
        first = Badge('a')
        first.set_option('size', 'small')
        assert Badge('b').option('size') == 'medium'
        assert Badge.default_options['size'] == 'medium'

    def test_option_default(self):
        """Test option() falls back to the given default."""
        assert Badge().option('missing', 42) == 42

    def test_toggle_option(self):
        """Test toggle_option sets or flips a boolean."""
        badge = Badge()
        badge.toggle_option('flag')
        assert badge.option('flag') is True
        badge.toggle_option('flag')
        assert badge.option('flag') is False
        badge.toggle_option('flag', 1)
        assert badge.option('flag') is True

    def test_set_options_marks_rebuild(self):
        """Test changing options schedules a rebuild."""
        badge = Badge('a')
        badge.render()
        badge.set_options({'label': 'b'})
        assert badge.needs_rebuild
        assert badge.render() == '<span class="test-badge"><span>b</span></span>'
        assert badge.rebuilds == 2


class TestComponentRendering:
    """Tests for rendering and escaping rules."""

    def test_base_class_and_text_escaping(self):
        """Test the base class is added and text parts are escaped."""
        badge = Badge('<b>')
        assert badge.render() == '<span class="test-badge"><span>&lt;b&gt;</span></span>'

    def test_base_class_once_after_rebuilds(self):
        """Test repeated rebuilds keep a single base class."""
        badge = Badge('x', attributes={'class': 'extra'})
        for label in ('a', 'b', 'c'):
            badge.set_option('label', label)
            badge.render()
        assert badge.get_classes() == ['extra', 'test-badge']

    def test_base_class_restored(self):
        """Test a removed base class comes back on the next build."""
        badge = Badge('x')
        badge.remove_class('test-badge')
        badge.mark_for_rebuild()
        assert badge.has_class('test-badge') is False
        badge.render()
        assert badge.has_class('test-badge')

    def test_wrapper_never_escapes(self):
        """Test the wrapper ignores set_escape_content."""
        badge = Badge()
        badge.set_escape_content(True)
        assert badge.escape_content is False

    def test_raw_and_safe_content(self):
        """Test add_raw_content trusts and add_safe_content escapes."""
        badge = Badge()
        badge.render()
        badge.add_raw_content('<i>r</i>').add_safe_content('<i>s</i>')
        assert badge.render_content().endswith('<i>r</i>&lt;i&gt;s&lt;/i&gt;')

    def test_parts(self):
        """Test part helpers add the <type>-<part> class."""
        badge = Badge()
        assert badge.create_header('H').render() == '<div class="test-badge-header">H</div>'
        assert badge.create_body('B').render() == '<div class="test-badge-body">B</div>'
        assert badge.create_footer('F').render() == '<div class="test-badge-footer">F</div>'
        assert badge.create_content('C').render() == '<div class="test-badge-content">C</div>'

    def test_title_level_is_clamped(self):
        """Test create_title clamps the level and escapes."""
        badge = Badge()
        assert badge.create_title('<T>', 9).render() == '<h6 class="test-badge-title">&lt;T&gt;</h6>'
        assert badge.create_title('T', 0).tag == 'h1'

    def test_container_does_not_escape(self):
        """Test create_container keeps raw strings."""
        assert Badge().create_container('p', '<br>').render() == '<p><br></p>'

    def test_html_protocol(self):
        """Test components drop into markupsafe-aware templates."""
        assert Markup('<div>{}</div>').format(Badge('x')) == (
            '<div><span class="test-badge"><span>x</span></span></div>'
        )


class TestChoose:
    """Tests for the choose helper."""

    def test_allowed_value(self):
        """Test an allowed value is returned."""
        assert choose('b', ('a', 'b'), 'a') == 'b'

    def test_fallback(self):
        """Test unsupported values fall back to the default."""
        assert choose('z', ('a', 'b'), 'a') == 'a'
