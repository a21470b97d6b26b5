from call_intelligence.routes.gpt import router as gpt_router
from call_intelligence.routes.text_analytics import router as text_analytics_router

__all__ = ["gpt_router", "text_analytics_router"]
