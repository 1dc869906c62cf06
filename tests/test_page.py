import pytest

from zepkit.page import (
    ADMIN_PATH,
    EXTERNAL_PAGES,
    LAYOUT_TEMPLATES,
    MENU_ITEMS,
    BreadCrumb,
    Page,
    new_page,
    slugify,
)


def test_slugify_drops_non_letters():
    assert slugify("Hello World 2!") == "helloworld"


@pytest.mark.parametrize("title", ["Sessions", "User Details (42)", "a-b_c d", ""])
def test_slugify_invariants(title):
    slug = slugify(title)
    assert slug == slug.lower()
    assert all(c.isascii() and c.isalpha() for c in slug)
    assert slugify(slug) == slug


def test_menu_items_from_sidebar():
    page = new_page("Dashboard", "", ADMIN_PATH, [], [], None)
    items = page.menu_items
    assert [m.name for m in items] == [
        "Dashboard",
        "Users",
        "Sessions",
        "Collections",
        "Settings",
        "Documentation",
    ]
    assert items[0].path == "/admin"
    assert items[1].path == "/admin/users"
    docs = items[-1]
    assert docs.external is True
    assert docs.path == EXTERNAL_PAGES["docs"].url
    assert all(not m.external for m in items[:-1])
    assert all(m.icon.startswith("<svg") for m in items)


def test_external_pages_titles():
    assert {k: v.title for k, v in EXTERNAL_PAGES.items()} == {
        "website": "Website",
        "docs": "Documentation",
        "github": "GitHub",
    }


def test_new_page_fields():
    crumbs = [BreadCrumb("Users", "/admin/users")]
    page = new_page("User Sessions", "sub", "/admin/users/x", ["t.html"], crumbs, {"k": 1})
    assert page.title == "User Sessions"
    assert page.sub_title == "sub"
    assert page.path == "/admin/users/x"
    assert page.templates == ["t.html"]
    assert page.bread_crumbs == crumbs
    assert page.data == {"k": 1}
    assert page.slug == slugify("User Sessions")
    assert page.menu_items == list(MENU_ITEMS)


def test_page_default_slug():
    assert Page("Settings").slug == slugify("Settings")


def _recorder(calls):
    def renderer(entry, files, page):
        calls.append((entry, files, page))
        return "rendered"

    return renderer


def test_render_partial_for_htmx():
    calls = []
    page = new_page("Users", "", "/admin/users", ["templates/pages/users.html"], [], None)
    result = page.render({"hx-request": "true"}, _recorder(calls))
    assert result == "rendered"
    assert calls == [("Content", ["templates/pages/users.html"], page)]


@pytest.mark.parametrize("headers", [{}, {"HX-Request": "false"}])
def test_render_full_layout(headers):
    calls = []
    page = new_page("Users", "", "/admin/users", ["templates/pages/users.html"], [], None)
    page.render(headers, _recorder(calls))
    entry, files, rendered = calls[0]
    assert entry == "Layout"
    assert files == [*LAYOUT_TEMPLATES, "templates/pages/users.html"]
    assert rendered is page