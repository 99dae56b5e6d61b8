import logging
import os
import sys
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from resume_share.api.middleware import invalidate_cache_keys
from resume_share.api.routes import pages_router, resume_router
from resume_share.config import get_download_dir, get_log_level, get_session_secret

# Load environment variables from a local .env (if present).
# Skip under pytest to avoid cross-test side effects from a developer's local .env.
if "pytest" not in sys.modules:
    # Only override if the variable is missing/empty in the current process environment.
    override = os.getenv("JWT_SECRET") in (None, "")
    load_dotenv(override=override)

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Resume Share API")

app.middleware("http")(invalidate_cache_keys)
app.add_middleware(SessionMiddleware, secret_key=get_session_secret(), same_site="lax")

app.mount(
    "/downloads",
    StaticFiles(directory=str(get_download_dir()), check_dir=False),
    name="downloads",
)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(resume_router)
app.include_router(pages_router)
