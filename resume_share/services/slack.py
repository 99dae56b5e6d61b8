"""
Slack incoming-webhook notifications. Fire-and-forget: failures are logged,
never raised to the request that triggered them.
"""

import logging

import requests

from resume_share.config import get_slack_webhook_url

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 5


def msg(type: str, data: str) -> bool:
    """Post a `[type] data` message. Returns True if Slack accepted it."""
    url = get_slack_webhook_url()
    if not url:
        logger.debug(f"[SLACK:{type}] webhook not configured, skipping")
        return False

    try:
        r = requests.post(url, json={"text": f"[{type}] {data}"}, timeout=TIMEOUT_SECONDS)
        r.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"[SLACK:{type}] failed to post message: {e}")
        return False
    return True
