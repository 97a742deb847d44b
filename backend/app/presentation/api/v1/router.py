"""Versioned API router. Every endpoint is served under ``/api/v1``."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints import (
    clients,
    dashboard,
    distributions,
    donations,
    health,
    medical_donations,
    members,
)

router = APIRouter(prefix="/api/v1")

for module in (health, members, clients, donations, medical_donations, distributions, dashboard):
    router.include_router(module.router)
