"""
Layout router.

GET /layout  — authenticated shell or public login page
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.auth import optional_session
from app.schemas.layout import LayoutResponse, LayoutUser, NavItemOut
from app.services.auth import CurrentSession
from app.services.layout import resolve_layout

router = APIRouter(tags=["layout"])


@router.get(
    "/layout",
    response_model=LayoutResponse,
    summary="Which shell to render for the current session",
)
def layout(
    path: Optional[str] = Query(
        default=None,
        description="Page the client is about to render, e.g. `/decisions`.",
        examples=["/team"],
    ),
    session: Optional[CurrentSession] = Depends(optional_session),
):
    """
    With a valid session: the five authenticated pages. Without one: the
    login page only, with `redirect="/login"`. Unknown paths redirect to
    the shell's home page.
    """
    result = resolve_layout(session, path)
    return LayoutResponse(
        authenticated=result.authenticated,
        user=LayoutUser(user_id=session.user_id, email=session.email) if session else None,
        navigation=[NavItemOut(name=i.name, href=i.href) for i in result.navigation],
        redirect=result.redirect,
    )
