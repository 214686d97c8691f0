from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI
from pydantic import BaseModel, Field

from . import __version__
from .core import validate_password
from .breach import check_password_breach


class PasswordRequest(BaseModel):
    password: str = Field(..., description="Password to evaluate. Never stored.")


def create_app() -> FastAPI:
    app = FastAPI(
        title="pswder API",
        version=__version__,
        description="Password strength checker + Pwned Passwords breach lookup (k-anonymity).",
    )

    @app.get("/")
    def root() -> Dict[str, Any]:
        return {
            "tool": "pswder",
            "version": __version__,
            "endpoints": ["/health", "/validate", "/breach"],
            "note": "This API never stores raw passwords. Breach checks only send a 5-char SHA-1 prefix.",
        }

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/validate")
    def validate(req: PasswordRequest) -> Dict[str, Any]:
        return validate_password(req.password).to_dict()

    @app.post("/breach")
    async def breach(req: PasswordRequest) -> Dict[str, Any]:
        result = await check_password_breach(req.password)
        return result.to_dict()

    return app
