from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

import config
from application.use_cases import TaskUseCases
from infrastructure.task_store import InMemoryTaskStore
from interfaces.api import router as task_router

# --- Basic Setup ---
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))


def create_app(store: Optional[InMemoryTaskStore] = None) -> FastAPI:
    """Builds the API around its own task store."""
    app = FastAPI(title="Task Manager")
    app.state.use_cases = TaskUseCases(store if store is not None else InMemoryTaskStore())

    # Open CORS policy: any origin, method and header
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(task_router)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Serves the single-page frontend."""
        return templates.TemplateResponse(
            request,
            "index.html",
            {"api_base": task_router.prefix, "cache_key": "tasks"},
        )

    @app.get("/health")
    async def health(request: Request):
        return {"status": "ok", "tasks": request.app.state.use_cases.count_tasks()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Task Manager on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
