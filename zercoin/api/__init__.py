from fastapi import APIRouter

from zercoin.api.routers import admin, ledger, reports


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(ledger.router, prefix="/ledger", tags=["ledger"])
    router.include_router(admin.router, prefix="/admin", tags=["admin"])
    router.include_router(reports.router, prefix="/reports", tags=["reports"])
    return router


__all__ = [
    "create_api_router",
]
