"""Rotas HTTP da API: adapters de entrada.

Estrutura:
- routes/booking/: disponibilidade e reserva (pagina publica)
- routes/admin/: configuracao de runtime e consultores
- routes/auth/: fluxo OAuth do Google
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
- schemas.py: schemas camelCase do wire
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
