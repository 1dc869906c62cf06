"""Admin pages, breadcrumbs and the sidebar menu."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from zepkit.icons import (
    COLLECTIONS_ICON,
    DASHBOARD_ICON,
    DOCS_ICON,
    SESSIONS_ICON,
    SETTINGS_ICON,
    USERS_ICON,
)

ADMIN_PATH = "/admin"

LAYOUT_TEMPLATES = (
    "templates/pages/index.html",
    "templates/components/layout/*.html",
    "templates/components/content/*.html",
)

_NON_ALPHA = re.compile(r"[^a-zA-Z]+")


@dataclass(frozen=True)
class ExternalPage:
    """A link to a page outside the admin interface."""

    title: str
    url: str


EXTERNAL_PAGES: dict[str, ExternalPage] = {
    "website": ExternalPage("Website", "https://example.com"),
    "docs": ExternalPage("Documentation", "https://docs.example.com"),
    "github": ExternalPage("GitHub", "https://source.example.com"),
}


@dataclass(frozen=True)
class MenuItem:
    """An entry of the sidebar menu; ``icon`` holds trusted SVG markup."""

    name: str
    path: str
    external: bool = False
    icon: str = ""
    content_id: str = ""


MENU_ITEMS: tuple[MenuItem, ...] = (
    MenuItem("Dashboard", ADMIN_PATH, icon=DASHBOARD_ICON),
    MenuItem("Users", ADMIN_PATH + "/users", icon=USERS_ICON),
    MenuItem("Sessions", ADMIN_PATH + "/sessions", icon=SESSIONS_ICON),
    MenuItem("Collections", ADMIN_PATH + "/collections", icon=COLLECTIONS_ICON),
    MenuItem("Settings", ADMIN_PATH + "/settings", icon=SETTINGS_ICON),
    MenuItem(
        "Documentation", EXTERNAL_PAGES["docs"].url, external=True, icon=DOCS_ICON
    ),
)


@dataclass
class BreadCrumb:
    title: str
    path: str


def slugify(s: str) -> str:
    """Drop every non-letter from ``s`` and lower-case the rest."""
    return _NON_ALPHA.sub("", s).lower()


Renderer = Callable[[str, list, "Page"], Any]


@dataclass
class Page:
    """An admin page: its title, templates, navigation and data."""

    title: str
    sub_title: str = ""
    path: str = ""
    templates: list[str] = field(default_factory=list)
    bread_crumbs: list[BreadCrumb] = field(default_factory=list)
    data: Any = None
    menu_items: list[MenuItem] = field(default_factory=lambda: list(MENU_ITEMS))
    slug: str = ""

    def __post_init__(self) -> None:
        if not self.slug:
            self.slug = slugify(self.title)

    def render(self, headers: Mapping[str, str], renderer: Renderer) -> Any:
        """Render the page with ``renderer(entry_template, template_files, page)``.

        An htmx request (``HX-Request: true``) gets only the "Content" template
        of the page; any other request gets the full "Layout".
        """
        hx_request = next(
            (v for k, v in headers.items() if k.lower() == "hx-request"), None
        )
        if hx_request == "true":
            return renderer("Content", list(self.templates), self)
        return renderer("Layout", [*LAYOUT_TEMPLATES, *self.templates], self)


def new_page(
    title: str,
    sub_title: str,
    path: str,
    templates: list[str],
    bread_crumbs: list[BreadCrumb],
    data: Any,
) -> Page:
    """Build a page carrying the standard sidebar menu."""
    return Page(
        title=title,
        sub_title=sub_title,
        path=path,
        templates=list(templates),
        bread_crumbs=list(bread_crumbs),
        data=data,
        menu_items=list(MENU_ITEMS),
        slug=slugify(title),
    )