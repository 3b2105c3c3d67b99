"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from leftover_chef.api.serializers import serialize_stats

if TYPE_CHECKING:
    from leftover_chef.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token; reject all when none is set."""
    if not admin_token or not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/stats", dependencies=[Depends(require_admin)])
async def stats(request: Request) -> dict[str, object]:
    """Return usage statistics for the recipe stores."""
    container: AppContainer = request.app.state.container
    return serialize_stats(container.stats_service.compute_stats())


@router.delete("/data", dependencies=[Depends(require_admin)])
async def clear_all(request: Request) -> dict[str, str]:
    """Delete history, favorites and preferences."""
    container: AppContainer = request.app.state.container
    if not container.stats_service.clear_all():
        raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
    return {"status": "ok"}
