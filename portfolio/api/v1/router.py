"""
Router assembly.

Public routes never touch the auth gate. Every admin route except login is
guarded by ``get_current_admin`` at the router level.
"""

from fastapi import APIRouter, Depends

from portfolio.api.v1.helpers.authentication import get_current_admin
from portfolio.api.v1.endpoints import auth, content, messages, projects

public_router = APIRouter()
public_router.include_router(
    projects.public_router, prefix="/projects", tags=["projects"]
)
public_router.include_router(content.public_router, prefix="/content", tags=["content"])
public_router.include_router(messages.public_router, prefix="/contact", tags=["contact"])

# Login is public, /me endpoints declare get_current_admin themselves
admin_auth_router = APIRouter()
admin_auth_router.include_router(auth.router, prefix="/admin/auth", tags=["admin"])

admin_router = APIRouter(prefix="/admin", dependencies=[Depends(get_current_admin)])
admin_router.include_router(
    projects.admin_router, prefix="/projects", tags=["admin"]
)
admin_router.include_router(content.admin_router, prefix="/content", tags=["admin"])
admin_router.include_router(
    messages.admin_router, prefix="/messages", tags=["admin"]
)
