# rbac_admin/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rbac_admin.api.endpoints import (
    auth_endpoints,
    form_endpoints,
    form_module_endpoints,
    module_endpoints,
    person_endpoints,
    rol_endpoints,
    rol_form_endpoints,
    user_endpoints,
    user_rol_endpoints,
)
from rbac_admin.config import settings
from rbac_admin.core.exceptions import (
    AuthenticationException,
    EntityNotFoundException,
    ExternalServiceException,
    ValidationException,
)
from rbac_admin.db.init_db import initialize_database
from rbac_admin.db.session import async_engine

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# ==========================================================
# ======>      GESTIÓN DEL CICLO DE VIDA (LIFESPAN)      <======
# ==========================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("[STARTUP] '%s' v%s iniciando...", app.title, app.version)
    if settings.CREATE_TABLES_ON_STARTUP:
        await initialize_database(async_engine)
    try:
        yield
    finally:
        logger.info("[SHUTDOWN] Servidor apagándose. Cerrando conexiones...")
        await async_engine.dispose()


openapi_tags_metadata = [
    {"name": "Autenticación", "description": "Inicio de sesión y validación de tokens."},
    {"name": "Personas", "description": "Gestión de personas."},
    {"name": "Usuarios", "description": "Gestión de usuarios y contraseñas."},
    {"name": "Roles", "description": "Gestión de roles y sus formularios."},
    {"name": "Formularios", "description": "Gestión de formularios."},
    {"name": "Módulos", "description": "Gestión de módulos."},
    {"name": "Usuarios - Roles", "description": "Asignación de roles a usuarios."},
    {"name": "Roles - Formularios", "description": "Permisos de los roles sobre los formularios."},
    {"name": "Formularios - Módulos", "description": "Formularios publicados en cada módulo."},
    {"name": "Default", "description": "Endpoints de monitoreo."},
]

fastapi_app_kwargs = {
    "title": "RBAC Admin",
    "description": "Backend de administración de personas, usuarios, roles, formularios y módulos.",
    "version": "0.2.0",
    "openapi_tags": openapi_tags_metadata,
    "lifespan": lifespan,
}

if settings.ENVIRONMENT == "production":
    logger.info("Modo de producción detectado. Desactivando documentación API (Swagger/ReDoc).")
    fastapi_app_kwargs["docs_url"] = None
    fastapi_app_kwargs["redoc_url"] = None
    fastapi_app_kwargs["openapi_url"] = None

app = FastAPI(**fastapi_app_kwargs)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==========================================================
# ======>       TRADUCCIÓN DE ERRORES A RESPUESTAS HTTP     <======
# ==========================================================
# Todas las respuestas de error tienen la forma {"message": str}.

@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    logger.warning("Validación fallida en %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})


@app.exception_handler(EntityNotFoundException)
async def not_found_exception_handler(request: Request, exc: EntityNotFoundException):
    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


@app.exception_handler(AuthenticationException)
async def authentication_exception_handler(request: Request, exc: AuthenticationException):
    logger.info("Autenticación rechazada en %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"message": exc.message})


@app.exception_handler(ExternalServiceException)
async def external_service_exception_handler(request: Request, exc: ExternalServiceException):
    # La causa original solo va al log
    logger.error(
        "Error de %s en %s %s: %s", exc.service, request.method, request.url.path, exc.message,
        exc_info=exc.cause,
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": f"Solicitud inválida: {details}"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error inesperado en %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


# ==========================================================
# ======>                 ROUTERS                         <======
# ==========================================================
app.include_router(auth_endpoints.router)
app.include_router(person_endpoints.router)
app.include_router(user_endpoints.router)
app.include_router(rol_endpoints.router)
app.include_router(form_endpoints.router)
app.include_router(module_endpoints.router)
app.include_router(user_rol_endpoints.router)
app.include_router(rol_form_endpoints.router)
app.include_router(form_module_endpoints.router)


@app.get("/health", tags=["Default"])
def health_check():
    """Endpoint de monitoreo para verificar que la aplicación está viva."""
    return {"status": "ok"}
