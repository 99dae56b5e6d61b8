"""
resume_share/api/routes/__init__.py

Convenience exports for FastAPI routers.
This keeps `resume_share/api/main.py` imports clean and centralized.
"""

from resume_share.api.routes.resume import router as resume_router
from resume_share.api.routes.pages import router as pages_router

__all__ = [
    "resume_router",
    "pages_router",
]
