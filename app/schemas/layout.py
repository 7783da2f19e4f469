from typing import Optional
from pydantic import BaseModel


class NavItemOut(BaseModel):
    name: str
    href: str


class LayoutUser(BaseModel):
    user_id: str
    email: str


class LayoutResponse(BaseModel):
    authenticated: bool
    user: Optional[LayoutUser] = None
    navigation: list[NavItemOut]
    redirect: Optional[str] = None
