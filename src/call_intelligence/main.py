"""FastAPI application entry point."""

from ddtrace import patch_all

from call_intelligence.app import create_app

patch_all()

app = create_app()
