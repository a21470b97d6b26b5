"""FastAPI application factory."""

from fastapi import FastAPI

from call_intelligence.routes import gpt_router, text_analytics_router


def create_app() -> FastAPI:
    """Builds the API with the text analytics and GPT routers."""
    app = FastAPI(title="Call Intelligence Backend")
    app.include_router(text_analytics_router)
    app.include_router(gpt_router)
    return app
