# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AdminPage - Example settings screen assembled with elementify.

A didactic example showing elements, builders and components working
together on one page.
"""

from __future__ import annotations

from elementify import BreadcrumbBuilder, Element, FormBuilder, NoticeBuilder, create


class AdminPage:
    """A settings page with a breadcrumb trail, a notice and a form.

    This is the "cover" class that owns the page tree and exposes a
    small, task-oriented API.

    Example:
        >>> page = AdminPage('Settings', '/admin/settings/general')
        >>> page.saved('Options saved.')
        >>> page.form.text_field('site_name', 'Site name')
        >>> html = page.render()
    """

    def __init__(self, title: str, path: str = '/', **attr):
        """Create a new page.

        Args:
            title: Page heading.
            path: Current URL path, used for the breadcrumb trail.
            **attr: Attributes for the page wrapper.
        """
        self.title = title
        self.breadcrumbs = BreadcrumbBuilder().from_path(path, home_text='Dashboard').chevron_separator()
        self.notices: list[NoticeBuilder] = []
        self.form = FormBuilder(path)
        self.sidebar = create.card(title='Help', variant='borderless')
        self._attr = attr

    def saved(self, message: str) -> AdminPage:
        self.notices.append(NoticeBuilder.quick_success(message))
        return self

    def failed(self, message: str, retry_url: str | None = None) -> AdminPage:
        self.notices.append(NoticeBuilder.quick_error(message, 'Retry' if retry_url else None, retry_url))
        return self

    def help(self, text: str) -> AdminPage:
        self.sidebar.add_to_body(create.p(text))
        return self

    def build(self) -> Element:
        """Assemble the page tree."""
        page = create.main(None, class_='admin-page', **self._attr)
        page.add_child(self.breadcrumbs)
        page.add_child(create.h1(self.title))
        page.add_content(self.notices)
        columns = create.div(class_='columns')
        columns.add_child(create.section(self.form, class_='content'))
        columns.add_child(create.aside(self.sidebar))
        return page.add_child(columns)

    def render(self) -> str:
        return self.build().render()


def demo() -> str:
    page = AdminPage('General settings', '/admin/settings/general')
    page.saved('Settings saved.')
    page.help('Changes apply to every visitor.')
    page.form.fields({
        'site_name': {'label': 'Site name', 'description': 'Shown in the title bar.'},
        'language': {'type': 'select', 'label': 'Language', 'options': {'en': 'English', 'it': 'Italiano'}},
        'public': {'type': 'checkbox', 'label': 'Public site', 'checked': True},
        'posts_per_page': {'type': 'range', 'label': 'Posts per page', 'value': 10, 'min': 1, 'max': 50},
    })
    page.form.submit_button('Save changes')
    return page.render()


if __name__ == '__main__':
    print(demo())
