"""
Layout service: which shell a client should render.

With a session: the authenticated shell and its five pages.
Without one: only the public login page, and a redirect to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.services.auth import CurrentSession


@dataclass(frozen=True)
class NavItem:
    name: str
    href: str


NAVIGATION: tuple[NavItem, ...] = (
    NavItem("Dashboard", "/"),
    NavItem("Assessment", "/assessment"),
    NavItem("Decision Log", "/decisions"),
    NavItem("Automations", "/automations"),
    NavItem("Team Metrics", "/team"),
)

PUBLIC_NAVIGATION: tuple[NavItem, ...] = (NavItem("Sign in", "/login"),)

HOME = "/"
LOGIN = "/login"


@dataclass
class Layout:
    authenticated: bool
    session: Optional[CurrentSession]
    navigation: tuple[NavItem, ...]
    redirect: Optional[str]


def resolve_layout(session: Optional[CurrentSession], path: Optional[str] = None) -> Layout:
    """
    Pick the shell for `path`. Unknown paths redirect to the shell's home;
    with no path, only the signed-out shell redirects (to the login page).
    """
    if session is None:
        redirect = None if path == LOGIN else LOGIN
        return Layout(False, None, PUBLIC_NAVIGATION, redirect)

    known = {item.href for item in NAVIGATION}
    redirect = HOME if path is not None and path not in known else None
    return Layout(True, session, NAVIGATION, redirect)
