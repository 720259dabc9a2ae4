# main.py
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.controllers.autentication_controller import router as auth_router
from application.controllers.user_controller import router as user_router
from application.use_cases.registration_policy import INVALID_PAYLOAD_MESSAGE, field_errors
from infrastructure.logging_config import configure_logging
from infrastructure.migrations import run_migrations

logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = "http://localhost:8080"


def _origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _auto_migrate() -> bool:
    return os.environ.get("AUTO_MIGRATE", "1").strip().lower() not in ("0", "false", "no", "off")


@asynccontextmanager
async def lifespan(_: FastAPI):
    if _auto_migrate():
        try:
            run_migrations()
        except Exception:
            logger.exception("Erro ao preparar o banco de dados")
            raise
    yield


async def http_exception_handler(_: Request, exc: StarletteHTTPException):
    # payloads dict vão no topo do corpo ({message}, {field, message}, {message, errors})
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(_: Request, exc: RequestValidationError):
    # 400 com mapa campo -> mensagens, mesmo formato das regras de cadastro
    errors: dict[str, list[str]] = {}
    form_errors: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        message = err.get("msg", "invalido")
        if loc:
            errors.setdefault(loc[0], []).append(message)
        else:
            form_errors.append(message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_PAYLOAD_MESSAGE, "errors": field_errors(errors, form_errors)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Erro nao tratado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Erro interno do servidor."},
    )


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="API Marketplace de Obras e Reformas", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(auth_router)
    app.include_router(user_router)

    @app.get("/api/health")
    def health():
        return {"ok": True}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", "8081"))
    uvicorn.run(app, host="0.0.0.0", port=port)
