# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for accordions, tabs, modals and interactive form widgets."""

from elementify import Accordion, Clipboard, Element, Featured, Modal, Range, Tabs, Toggle
from elementify.config import configure
from elementify.formatting import Formatter

FAQ = [
    {'id': 'one', 'title': 'First', 'content': 'A'},
    {'title': 'Second', 'content': 'B', 'active': True},
]


class TestAccordion:
    """Tests for Accordion."""

    def test_render(self):
        """Test headers and panels with the active section open."""
        acc = Accordion(FAQ)
        assert acc.render() == (
            '<div class="accordion" data-allow-multiple="false">'
            '<div class="accordion-header" data-section="one">First</div>'
            '<div id="one" class="accordion-content" style="display: none;">A</div>'
            '<div class="accordion-header active" data-section="section-2">Second</div>'
            '<div id="section-2" class="accordion-content" style="display: block;">B</div>'
            '</div>'
        )

    def test_single_active(self):
        """Test activating a section closes the others."""
        acc = Accordion(FAQ)
        acc.set_section_active('one')
        assert acc.get_active_section() == 'one'
        assert [s['active'] for s in acc.get_sections().values()] == [True, False]

    def test_multiple_active(self):
        """Test allow_multiple keeps several sections open."""
        acc = Accordion(FAQ, allow_multiple=True)
        acc.set_section_active('one')
        assert [s['active'] for s in acc.get_sections().values()] == [True, True]
        acc.set_allow_multiple(False)
        assert [s['active'] for s in acc.get_sections().values()] == [True, False]
        assert acc.get_attribute('data-allow-multiple') == 'false'

    def test_remove_active_section(self):
        """Test removing the active section activates the first one left."""
        acc = Accordion(FAQ)
        acc.remove_section('section-2')
        assert acc.get_active_section() == 'one'
        assert acc.get_section('one')['active'] is True
        assert acc.get_section('section-2') is None

    def test_unknown_section_ignored(self):
        """Test activating a missing section changes nothing."""
        acc = Accordion(FAQ)
        acc.set_section_active('missing')
        assert acc.get_active_section() == 'section-2'

    def test_mapping_of_sections(self):
        """Test sections given as a mapping keep their ids."""
        acc = Accordion({'x': {'title': 'X', 'content': 'x'}})
        assert list(acc.get_sections()) == ['x']


class TestTabs:
    """Tests for Tabs."""

    def test_first_tab_active_by_default(self):
        """Test the first tab is active when none is chosen."""
        tabs = Tabs().add_tab('a', 'A', 'Alpha').add_tab('b', 'B', 'Beta')
        assert tabs.get_active_tab() == 'a'
        assert tabs.render() == (
            '<div class="tabs-container">'
            '<ul class="tabs-nav">'
            '<li><a href="#a" data-tab="a" class="active">A</a></li>'
            '<li><a href="#b" data-tab="b">B</a></li></ul>'
            '<div class="tabs-content">'
            '<div id="a" class="tab-content active">Alpha</div>'
            '<div id="b" class="tab-content">Beta</div></div>'
            '</div>'
        )

    def test_active_tab_argument(self):
        """Test the constructor can pick the active tab."""
        tabs = Tabs([{'id': 'a', 'title': 'A'}, {'id': 'b', 'title': 'B'}], 'b')
        assert tabs.get_active_tab() == 'b'

    def test_first_tab_flag(self):
        """Test the first tab is flagged active in the stored sections."""
        tabs = Tabs().add_tab('a', 'A', 'Alpha').add_tab('b', 'B', 'Beta')
        assert tabs.get_tab('a')['active'] is True
        assert tabs.get_tab('b')['active'] is False
        assert tabs.get_active_section() == 'a'
        assert tabs.find_first(tag='div', id='b').has_class('active')

    def test_remove_tab(self):
        """Test removing a tab and reading the rest."""
        tabs = Tabs().add_tab('a', 'A', 'x').add_tab('b', 'B', 'y')
        tabs.remove_tab('a')
        assert list(tabs.get_tabs()) == ['b']
        assert tabs.get_tab('b')['title'] == 'B'
        assert tabs.get_active_tab() == 'b'


class TestModal:
    """Tests for Modal."""

    def test_render(self, sequential_ids):
        """Test the full modal structure."""
        modal = Modal('Hello <you>', 'Body', [{'text': 'OK', 'class': 'primary', 'action': 'close'}])
        assert modal.modal_id == 'modal-1'
        assert modal.render() == (
            '<div class="modal-overlay" id="modal-1" style="display: none;">'
            '<div class="modal-content">'
            '<span class="modal-close" data-modal="modal-1">×</span>'
            '<h3 class="modal-title"><span>Hello &lt;you&gt;</span></h3>'
            '<div class="modal-body">Body</div>'
            '<div class="modal-footer">'
            '<button type="button" class="primary" data-modal-action="close">OK</button>'
            '</div></div></div>'
        )

    def test_given_id_kept(self):
        """Test an explicit id is not replaced."""
        assert Modal(attributes={'id': 'confirm'}).modal_id == 'confirm'

    def test_not_closeable(self):
        """Test the close control can be dropped."""
        modal = Modal('T', closeable=False)
        assert modal.find_first(class_='modal-close') is None

    def test_triggers(self):
        """Test trigger button and link point at the modal."""
        modal = Modal(attributes={'id': 'm'})
        assert modal.create_trigger('Open').render() == (
            '<button type="button" data-open-modal="m">Open</button>'
        )
        assert modal.create_trigger_link('Open').render() == (
            '<a href="#m" data-open-modal="m">Open</a>'
        )

    def test_visibility(self):
        """Test set_visible switches the display style."""
        modal = Modal(attributes={'id': 'm'}).set_visible(True)
        assert modal.get_styles()['display'] == 'block'

    def test_list_body(self):
        """Test a list body adds each item as its own child."""
        modal = Modal('T', ['a', Element('b', 'x')])
        assert modal.find_first(class_='modal-body').render() == '<div class="modal-body">a<b>x</b></div>'
        modal.add_to_body(['c'])
        assert modal.find_first(class_='modal-body').get_children()[-1] == 'c'

    def test_body_additions(self):
        """Test add_to_body appends after set_body."""
        modal = Modal(attributes={'id': 'm'}).set_body('a').add_to_body('b')
        assert modal.find_first(class_='modal-body').render() == '<div class="modal-body">ab</div>'


class TestToggle:
    """Tests for Toggle."""

    def test_render(self):
        """Test the switch markup."""
        toggle = Toggle('notify', checked=True, label='Notify me')
        assert toggle.render() == (
            '<div class="toggle-container">'
            '<input class="toggle-input" id="toggle-notify" type="checkbox" name="notify" value="1" checked />'
            '<label class="toggle-switch" for="toggle-notify"><span class="toggle-slider"></span></label>'
            '<span class="toggle-label">Notify me</span>'
            '</div>'
        )

    def test_disabled(self):
        """Test disabling marks the wrapper and the input."""
        toggle = Toggle('x').set_disabled(True)
        toggle.render()
        assert toggle.has_class('toggle-disabled')
        assert toggle.find_first(tag='input').get_attribute('disabled') is True


class TestFeatured:
    """Tests for Featured."""

    def test_states(self):
        """Test the star icon and labels follow the featured flag."""
        featured = Featured('post-1', featured=True, label='Featured')
        star = featured.find_first(class_='dashicons')
        assert star.has_class('dashicons-star-filled')
        assert star.get_attribute('aria-label') == 'Remove from featured'
        assert featured.has_class('is-featured')
        featured.set_featured(False)
        star = featured.find_first(class_='dashicons')
        assert star.has_class('dashicons-star-empty')
        assert not featured.has_class('is-featured')

    def test_translated_labels(self):
        """Test labels go through the formatter's gettext."""

        class Upper(Formatter):
            def gettext(self, text):
                return text.upper()

        configure(formatter=Upper())
        star = Featured('x').find_first(class_='dashicons')
        assert star.get_attribute('title') == 'MARK AS FEATURED'

    def test_disabled_not_focusable(self):
        """Test a disabled star leaves the tab order."""
        featured = Featured('x', disabled=True)
        assert featured.find_first(class_='dashicons').get_attribute('tabindex') == '-1'


class TestRange:
    """Tests for Range."""

    def test_structure(self):
        """Test slider and live value ids."""
        slider = Range('volume', 30, 0, 50, 5)
        field = slider.get_element_by_id('range-volume')
        assert field.get_attributes()['type'] == 'range'
        assert field.get_attribute('value') == '30'
        assert field.get_attribute('max') == '50'
        assert field.get_attribute('data-display-id') == 'range-value-volume'
        assert slider.get_element_by_id('range-value-volume').render() == (
            '<span class="range-value" id="range-value-volume" aria-live="polite">30</span>'
        )

    def test_hidden_value(self):
        """Test the value display can be turned off."""
        slider = Range('v').set_display_value(False)
        assert slider.find_first(class_='range-value') is None
        slider.set_value(70)
        assert slider.get_element_by_id('range-v').get_attribute('value') == '70'


class TestClipboard:
    """Tests for Clipboard."""

    def test_render(self, sequential_ids):
        """Test the copy button is wired to the hidden input."""
        clip = Clipboard('secret-key-<1>')
        assert clip.render() == (
            '<div class="clipboard-container" style="width: 180px;" title="Click to copy">'
            '<div class="clipboard-field">'
            '<span class="clipboard-text">secret-key-&lt;1&gt;</span>'
            '<button class="clipboard-button" data-clipboard-id="clipboard-1" '
            'aria-label="Copy to clipboard" type="button">'
            '<span class="dashicons dashicons-clipboard"></span></button>'
            '</div>'
            '<input id="clipboard-1" readonly aria-hidden="true" type="hidden" value="secret-key-&lt;1&gt;" />'
            '</div>'
        )

    def test_id_is_stable(self):
        """Test re-rendering keeps the same id."""
        clip = Clipboard('x')
        first = clip.render()
        clip.mark_for_rebuild()
        assert clip.render() == first

    def test_truncation(self):
        """Test display text truncation and ellipsis."""
        clip = Clipboard('abcdefgh', {'max_length': 3})
        assert clip.get_display_text() == 'abc...'
        clip.set_max_length(3, add_ellipsis=False)
        assert clip.get_display_text() == 'abc'
        clip.set_display_text('shown')
        assert clip.get_display_text() == 'sho'
