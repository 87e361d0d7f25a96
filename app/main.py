from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
import uvicorn

from app.config.logger import get_logger
from app.config.settings import Settings
from app.shared.health.router import health_router
from app.shared.openapi import install_openapi
from app.users.exceptions import UserNotFoundError
from app.users.routes import router as users_router

settings = Settings()
logger = get_logger()


def create_app(settings: Settings = None) -> FastAPI:
    """
    Build the User API application.
    - Interactive docs are served at settings.app.docs_url.
    - The OpenAPI document declares bearer and basic auth, but no route enforces either.
    """
    settings = settings or Settings()
    app = FastAPI(
        title=settings.app.app_name,
        version=settings.app.app_version,
        description=settings.app.description,
        debug=settings.app.debug,
        docs_url=settings.app.docs_url,
        redoc_url=None,
    )
    app.state.settings = settings
    install_openapi(app)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"Server running on port {settings.app.port}", docs=settings.app.docs_url)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return settings.app.greeting

    app.include_router(users_router)
    app.include_router(health_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.app.host,
        port=settings.app.port,
        log_level=settings.app.log_level.lower(),
    )
