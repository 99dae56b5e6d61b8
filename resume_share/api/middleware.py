"""
Cache invalidation for handlers that change public content.

A handler lists the cache keys to drop on `request.state.delete_keys`; this
middleware deletes them once the handler has produced its response.
"""

import logging

from fastapi import Request
from starlette.concurrency import run_in_threadpool

from resume_share.db import delete_keys

logger = logging.getLogger(__name__)


async def invalidate_cache_keys(request: Request, call_next):
    response = await call_next(request)
    keys = getattr(request.state, "delete_keys", None)
    if keys:
        deleted = await run_in_threadpool(delete_keys, list(keys))
        logger.debug(f"[CACHE:DELETE][{', '.join(keys)}] removed {deleted}")
    return response
