"""
EvoFit Protocol Engine API Server Entry Point

Run with:
  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from protocol_engine import __version__
from protocol_engine.catalog.ailments import AILMENT_CATALOG
from protocol_engine.catalog.protocols import PROTOCOL_CATALOG
from protocol_engine.catalog.router import router as catalog_router
from protocol_engine.matching.router import router as matching_router
from protocol_engine.session.registry import SESSION_REGISTRY
from protocol_engine.session.router import router as sessions_router
from protocol_engine.settings import CORS_ORIGINS, LOG_LEVEL
from protocol_engine.shared.errors import ProtocolEngineException

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="EvoFit Protocol Engine",
    description="Health protocol recommendation and consent-gated configuration",
    version=__version__,
)

# ============================================
# CORS Configuration
# ============================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ============================================
# Error Handling
# ============================================
@app.exception_handler(ProtocolEngineException)
async def protocol_engine_exception_handler(request: Request, exc: ProtocolEngineException):
    logger.info(f"{request.method} {request.url.path} -> {exc.http_code} {exc.error_code.value}")
    return JSONResponse(status_code=exc.http_code, content=jsonable_encoder(exc.to_dict()))


# ============================================
# Routers
# ============================================
app.include_router(catalog_router)
app.include_router(matching_router)
app.include_router(sessions_router)
logger.info(f"Protocol engine v{__version__}: {len(AILMENT_CATALOG)} ailments, {len(PROTOCOL_CATALOG)} protocols")


@app.get("/")
def root():
    return {"service": "EvoFit Protocol Engine", "version": __version__, "docs": "/docs"}


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": __version__,
        "ailment_count": len(AILMENT_CATALOG),
        "protocol_count": len(PROTOCOL_CATALOG),
        "active_sessions": len(SESSION_REGISTRY),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
