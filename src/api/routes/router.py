"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.router import router as admin_router
from api.routes.auth.router import router as auth_router
from api.routes.booking.router import router as booking_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Pagina publica de agendamento
    api_router.include_router(booking_router, tags=["booking"])

    # Painel de administracao e setup do consultor
    api_router.include_router(admin_router, tags=["admin"])
    api_router.include_router(auth_router, tags=["auth"])

    return api_router
