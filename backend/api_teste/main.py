import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import ApiError
from .core.logging_setup import setup_logging
from .db.session import init_store
from .api.v1 import system, tasks, utilities

logger = logging.getLogger(__name__)

TAGS = [
    {"name": "tarefas", "description": "Operações relacionadas a tarefas"},
    {"name": "utilidades", "description": "Ferramentas e utilitários"},
    {"name": "sistema", "description": "Informações do sistema"},
]


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return "; ".join(parts) or "Requisição inválida"


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        openapi_tags=TAGS,
        docs_url="/documentation",
        openapi_url="/documentation/json",
        redoc_url="/api-reference",
    )
    app.state.store = init_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    app.include_router(tasks.router, prefix=settings.API_PREFIX)
    app.include_router(utilities.router, prefix=settings.API_PREFIX)
    app.include_router(system.router, prefix=settings.API_PREFIX)

    @app.get("/", include_in_schema=False)
    def root():
        return {
            "message": f"{settings.APP_NAME} funcionando!",
            "version": settings.APP_VERSION,
            "documentacao": {
                "swagger": app.docs_url,
                "redoc": app.redoc_url,
                "openapi": app.openapi_url,
            },
            "rotas": {
                "tarefas": f"{settings.API_PREFIX}/tarefas",
                "utilidades": f"{settings.API_PREFIX}/utilidades",
                "sistema": f"{settings.API_PREFIX}/sistema",
            },
        }

    return app


app = create_app()


def run() -> None:
    logger.info("Servidor rodando em http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
