import logging

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

import config
from interfaces.api import router as task_router
from interfaces.formatting import format_due_date, format_priority
from interfaces.sessions import ViewRegistry

logger = logging.getLogger(__name__)


def create_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))
    templates.env.filters["due_date"] = format_due_date
    templates.env.filters["priority"] = format_priority
    return templates


def create_app(max_views: int = config.MAX_VIEWS) -> FastAPI:
    """Builds the app; every browser view gets its own in-memory task list."""
    logging.basicConfig(level=config.LOG_LEVEL)

    app = FastAPI(title=config.APP_TITLE)
    app.state.views = ViewRegistry(max_views=max_views)
    app.state.templates = create_templates()
    app.include_router(task_router)

    logger.info(f"APP_TITLE: {config.APP_TITLE}")
    logger.info(f"TEMPLATES_DIR: {config.TEMPLATES_DIR}")
    logger.info(f"MAX_VIEWS: {max_views}")
    return app


app = create_app()
