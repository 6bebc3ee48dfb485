from fastapi import FastAPI

from webanalyzer.api.routers import create_analyze_router, create_systems_router
from webanalyzer.container import ENV, Container


def create_app(container: Container) -> FastAPI:
    """Return the FastAPI application with every router wired to `container`."""
    app = FastAPI(title="WebAnalyzer", description="Fetches a web page and summarizes its structure and links.")
    app.include_router(create_analyze_router(container.page_analyzer()))
    app.include_router(create_systems_router(ENV, container.accessibility_cache()))
    return app
