"""
Service-level routes: greeting, health check, API banner.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    logger.info("Hello from acquisitions")
    return "Hello from acquisitions"


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - _STARTED_AT,
    }


@router.get("/api")
async def api_banner() -> Dict[str, str]:
    return {"message": "Acquisitions API is running"}
