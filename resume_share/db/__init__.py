"""
resume_share/db/__init__.py

Database module exports.

All database operations are organized by domain:
- users.py: User operations (read and write)
- resumes.py: Editable resume content
- resume_pub.py: Published resume records and share settings
- share_analyse.py: Page views of published resumes
- cache.py: Redis cache entries and counters
- connection.py: Connection and schema management
"""

# Connection and schema
from .connection import connect, init_schema

# User operations
from .users import get_user_by_id, get_user_by_login, get_or_create_user

# Resume content
from .resumes import get_resume, get_resume_updated_at, update_resume

# Published resumes
from .resume_pub import (
    GITHUB_SECTIONS,
    default_github_sections,
    get_pub_by_user,
    get_pub_by_hash,
    insert_pub_resume,
    update_pub_resume,
)

# Share analytics
from .share_analyse import record_view, find_share

# Cache
from .cache import get_value, set_value, delete_keys, hincrby, hget
