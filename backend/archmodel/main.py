from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from archmodel import config
from archmodel.api.routes import router
from archmodel.api.store import WorkspaceStore


def create_app() -> FastAPI:
    config.configure_logging()

    app = FastAPI(
        title=config.API_TITLE,
        version="0.1.0",
    )

    # Middleware before routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = WorkspaceStore()
    app.include_router(router)
    return app


app = create_app()
