# SPDX-License-Identifier: Apache-2.0
"""Health endpoint."""
from fastapi import APIRouter

router = APIRouter(prefix="", tags=["system"])


@router.get("/health")
def health():
    """Liveness/readiness."""
    return {"status": "ok"}
