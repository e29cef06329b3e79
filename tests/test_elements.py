# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for form elements."""

from elementify import Button, Field, Form, Input, Label, Select, Textarea


class TestButtonInputLabel:
    """Tests for Button, Input and Label."""

    def test_button(self):
        """Test button type and disabling."""
        button = Button('Save', 'button').set_disabled()
        assert button.render() == '<button type="button" disabled>Save</button>'

    def test_input(self):
        """Test input attributes in order."""
        field = Input('email', 'mail', 'a@b.c').set_required().set_placeholder('you@')
        assert field.render() == (
            '<input type="email" name="mail" value="a@b.c" required placeholder="you@" />'
        )

    def test_input_numeric_setters(self):
        """Test min, max and step are stored as strings."""
        field = Input('number', 'qty').set_min(1).set_max(10).set_step(0.5)
        assert field.get_attribute('min') == '1'
        assert field.get_attribute('step') == '0.5'

    def test_input_checked_toggles(self):
        """Test set_checked(False) removes the attribute."""
        box = Input('checkbox', 'ok', '1').set_checked()
        assert box.has_attribute('checked')
        box.set_checked(False)
        assert not box.has_attribute('checked')

    def test_label(self):
        """Test label binding and markup content."""
        assert Label('Name <em>*</em>', 'x').render() == '<label for="x">Name <em>*</em></label>'


class TestTextarea:
    """Tests for Textarea."""

    def test_content_always_escaped(self):
        """Test textarea text is escaped."""
        area = Textarea('bio', '</textarea><script>').set_rows(3)
        assert area.render() == (
            '<textarea name="bio" rows="3">&lt;/textarea&gt;&lt;script&gt;</textarea>'
        )


class TestSelect:
    """Tests for Select."""

    def test_mapping_options(self):
        """Test options from a mapping with one selected value."""
        select = Select('size', {'s': 'Small', 'm': 'Medium'}, selected='m')
        assert select.render() == (
            '<select name="size"><option value="s">Small</option>'
            '<option value="m" selected>Medium</option></select>'
        )

    def test_list_options_and_labels_escaped(self):
        """Test list options and escaping of labels."""
        select = Select('x', [1, {'value': 2, 'label': '<two>', 'attributes': {'data-n': 2}}])
        assert select.render() == (
            '<select name="x"><option value="1">1</option>'
            '<option value="2" data-n="2">&lt;two&gt;</option></select>'
        )

    def test_optgroup_and_selection(self):
        """Test optgroups and set_selected across groups."""
        select = Select('car', {'a': 'Audi'})
        select.add_optgroup('Italian', {'f': 'Fiat', 'l': 'Lancia'})
        select.set_selected(['a', 'l'])
        assert select.get_selected() == ['a', 'l']
        assert select.render() == (
            '<select name="car"><option value="a" selected>Audi</option>'
            '<optgroup label="Italian"><option value="f">Fiat</option>'
            '<option value="l" selected>Lancia</option></optgroup></select>'
        )

    def test_add_option_after_render(self):
        """Test options added later show up on the next render."""
        select = Select('n', {'1': 'One'})
        select.render()
        select.add_option('2', 'Two', selected=True)
        assert select.get_selected() == ['2']
        assert '<option value="2" selected>Two</option>' in select.render()

    def test_multiple(self):
        """Test multiple selection adds [] to the name once."""
        select = Select('tags').set_multiple().set_multiple()
        assert select.get_attribute('name') == 'tags[]'
        assert select.get_attribute('multiple') is True


class TestForm:
    """Tests for Form."""

    def test_method_lowercase(self):
        """Test the method is stored lowercase."""
        form = Form('/save', 'POST')
        assert form.render() == '<form action="/save" method="post"></form>'

    def test_file_upload(self):
        """Test toggling multipart encoding."""
        form = Form().set_file_upload()
        assert form.get_attribute('enctype') == 'multipart/form-data'
        form.set_file_upload(False)
        assert not form.has_attribute('enctype')


class TestField:
    """Tests for Field wrappers."""

    def test_name_creates_text_input(self):
        """Test a string control becomes a text input with an id."""
        field = Field('email', 'Email')
        assert field.render() == (
            '<div class="field-wrapper"><label for="email">Email</label>'
            '<input type="text" name="email" id="email" /></div>'
        )

    def test_label_assigns_id(self):
        """Test a labelled control without id gets field-<name>."""
        field = Field(Input('text', 'city'), 'City')
        assert field.get_input().get_attribute('id') == 'field-city'

    def test_generated_id_without_name(self, sequential_ids):
        """Test unnamed controls get a generated id."""
        field = Field(Textarea(), 'Notes')
        assert field.get_input().get_attribute('id') == 'field-1'

    def test_no_label_keeps_control_untouched(self):
        """Test no id is added when there is no label."""
        field = Field(Input('text', 'q'))
        assert not field.get_input().has_attribute('id')

    def test_description_and_error(self):
        """Test description and error rendering order."""
        field = Field(Input('text', 'q'), '', 'Search <terms>')
        field.set_error('Required')
        assert field.render() == (
            '<div class="field-wrapper has-error"><input type="text" name="q" />'
            '<p class="description">Search &lt;terms&gt;</p>'
            '<p class="error-message">Required</p></div>'
        )
        field.set_error('')
        assert 'error-message' not in field.render()
        assert not field.has_class('has-error')
