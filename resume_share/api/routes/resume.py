"""
JSON endpoints for editing, publishing and sharing a user's resume.

Every endpoint that needs a published record does the same lookup-then-branch:
when the user has not published yet, the handler answers with a successful
envelope carrying the lookup's message in `error`.
"""

import logging
from sqlite3 import Connection
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Body, Depends, HTTPException, Query, Request

from resume_share.api.dependencies import Session, get_db, get_session, get_user_session
from resume_share.api.helpers import get_github_sections, make_cache_key
from resume_share.api.schemas.common import ApiResponse
from resume_share.api.schemas.resume import (
    PubResumeDTO,
    ResumeInfoDTO,
    ResumeSaveRequestDTO,
    ShareRecordsDTO,
    ShareStatusDTO,
    TemplateRequestDTO,
    ToggleRequestDTO,
)
from resume_share.config import get_app_url
from resume_share.db import cache
from resume_share.db.resume_pub import update_pub_resume
from resume_share.db.resumes import get_resume as load_resume, update_resume
from resume_share.db.share_analyse import find_share
from resume_share.db.users import get_user_by_id
from resume_share.i18n import translate
from resume_share.services import downloads_service, slack
from resume_share.services.resume_pub_service import (
    StoreResult,
    add_pub_resume,
    find_public_resume,
    get_pub_resume as load_pub_resume,
    get_update_time,
)
from resume_share.utils.date import get_seconds

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resume", tags=["resume"])


def _share_url(resume_hash: str, locale: str) -> str:
    return f"resume/{resume_hash}?locale={locale}"


def _invalidate_pub_cache(request: Request, resume_hash: str) -> None:
    """Ask the cache middleware to drop the cached public copy of a resume."""
    cache_key = make_cache_key()
    request.state.delete_keys = [cache_key(f"resume.{resume_hash}")]


def _share_status(found: StoreResult, locale: str) -> ApiResponse[ShareStatusDTO]:
    if not found.success:
        return ApiResponse(success=True, error=found.message, result=None)

    record = found.result
    return ApiResponse(
        success=True,
        result=ShareStatusDTO(
            github=record["github"],
            template=record["template"],
            open_share=record["open_share"],
            use_github=record["use_github"],
            resume_hash=record["resume_hash"],
            url=_share_url(record["resume_hash"], locale),
            github_url=None,
        ),
    )


# ------------------------------------------------------------------------------
# Resume content
# ------------------------------------------------------------------------------

@router.get("", response_model=ApiResponse[Dict[str, Any]], response_model_exclude_unset=True)
def get_resume(
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    return ApiResponse(success=True, result=load_resume(conn, session.user_id))


@router.put("", response_model=ApiResponse[ResumeInfoDTO], response_model_exclude_unset=True)
def set_resume(
    request: Request,
    body: ResumeSaveRequestDTO,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    """
    Save the user's resume and make sure a published record exists for it.
    The cached public copy is dropped by the cache middleware after the response.
    """
    user_id, login = session.user_id, session.github_login

    saved = update_resume(conn, user_id, body.resume)
    logger.info(f"[RESUME:UPDATE][{login}]")

    resume_info = None
    if saved:
        checked = find_public_resume(conn, user_id=user_id)
        if not checked.success:
            checked = add_pub_resume(conn, user_id)
        if checked.success:
            resume_info = ResumeInfoDTO(
                url=_share_url(checked.result["resume_hash"], session.locale),
                use_github=checked.result["use_github"],
                open_share=checked.result["open_share"],
            )

    published = find_public_resume(conn, user_id=user_id)
    if published.success:
        _invalidate_pub_cache(request, published.result["resume_hash"])

    background_tasks.add_task(
        slack.msg,
        "resume",
        f"Resume create or update by <https://github.com/{login}|{login}>",
    )

    return ApiResponse(
        success=True,
        message=translate(session.locale, "messages.success.save"),
        result=resume_info,
    )


@router.get("/download", response_model=ApiResponse[str], response_model_exclude_unset=True)
def download_resume(
    background_tasks: BackgroundTasks,
    hash: str = Query(...),
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    user_id, login = session.user_id, session.github_login

    update_time = get_update_time(conn, hash)
    if not update_time.success:
        raise HTTPException(status_code=404, detail=update_time.message)
    seconds = get_seconds(update_time.result["updated_at"])

    resume_url = (
        f"{get_app_url()}/resume/{hash}?locale={session.locale}&userId={user_id}&notrace=true"
    )
    background_tasks.add_task(slack.msg, "download", f"<{resume_url}|{login} resume>")
    logger.info(f"[RESUME:DOWNLOAD][{resume_url}]")
    cache.hincrby("resume", "download", 1)

    result_url = downloads_service.resume(
        load_resume(conn, update_time.result["user_id"]) or {},
        source_url=resume_url,
        folder=login,
        title=f"{seconds}-resume.pdf",
    )
    return ApiResponse(success=True, result=result_url)


@router.get("/pub", response_model=ApiResponse[PubResumeDTO], response_model_exclude_unset=True)
def get_pub_resume(
    hash: str = Query(...),
    conn: Connection = Depends(get_db),
):
    """Public resume content by hash. Successful lookups are cached until the next save."""
    key = make_cache_key()(f"resume.{hash}")
    cached = cache.get_value(key)
    if cached is not None:
        return ApiResponse(success=True, result=PubResumeDTO.model_validate(cached))

    found = load_pub_resume(conn, hash)
    if not found.success:
        return ApiResponse(success=True, message=found.message, result=None)

    dto = PubResumeDTO(**found.result)
    cache.set_value(key, dto.model_dump(by_alias=True))
    return ApiResponse(success=True, result=dto)


# ------------------------------------------------------------------------------
# Share settings
# ------------------------------------------------------------------------------

@router.get("/share/status", response_model=ApiResponse[ShareStatusDTO], response_model_exclude_unset=True)
def get_resume_status(
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    found = find_public_resume(conn, user_id=session.user_id)
    return _share_status(found, session.locale)


@router.get("/share/status/{hash}", response_model=ApiResponse[ShareStatusDTO], response_model_exclude_unset=True)
def get_pub_resume_status(
    hash: str,
    session: Session = Depends(get_session),
    conn: Connection = Depends(get_db),
):
    """
    Share settings of a public resume. When the caller came from the PDF
    download flow, the owner's GitHub page URL is attached.
    """
    found = find_public_resume(conn, resume_hash=hash)
    share = _share_status(found, session.locale)

    if share.success and share.result and session.from_download:
        user = get_user_by_id(conn, found.result["user_id"])
        if user:
            share.result.github_url = (
                f"{get_app_url()}/github/{user['github_login']}?locale={session.locale}"
            )

    return share


@router.patch("/share/status", response_model=ApiResponse[None], response_model_exclude_unset=True)
def set_resume_share_status(
    request: Request,
    body: ToggleRequestDTO,
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    found = find_public_resume(conn, user_id=session.user_id)
    if not found.success:
        return ApiResponse(success=True, error=found.message)

    update_pub_resume(conn, session.user_id, found.result["resume_hash"], {"open_share": body.enable})
    _invalidate_pub_cache(request, found.result["resume_hash"])
    key = "messages.share.toggleOpen" if body.enable else "messages.share.toggleClose"
    return ApiResponse(success=True, message=translate(session.locale, key))


@router.patch("/share/template", response_model=ApiResponse[None], response_model_exclude_unset=True)
def set_resume_share_template(
    request: Request,
    body: TemplateRequestDTO,
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    found = find_public_resume(conn, user_id=session.user_id)
    if not found.success:
        return ApiResponse(success=True, error=found.message)

    update_pub_resume(conn, session.user_id, found.result["resume_hash"], {"template": body.template})
    _invalidate_pub_cache(request, found.result["resume_hash"])
    return ApiResponse(success=True, message=translate(session.locale, "messages.resume.template"))


@router.patch("/share/github", response_model=ApiResponse[None], response_model_exclude_unset=True)
def set_resume_github_status(
    request: Request,
    body: ToggleRequestDTO,
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    found = find_public_resume(conn, user_id=session.user_id)
    if not found.success:
        return ApiResponse(success=True, error=found.message)

    update_pub_resume(conn, session.user_id, found.result["resume_hash"], {"use_github": body.enable})
    _invalidate_pub_cache(request, found.result["resume_hash"])
    key = "messages.resume.linkGithub" if body.enable else "messages.resume.unlinkGithub"
    return ApiResponse(success=True, message=translate(session.locale, key))


@router.patch("/share/github/sections", response_model=ApiResponse[None], response_model_exclude_unset=True)
def set_github_share_section(
    request: Request,
    body: Dict[str, Any] = Body(...),
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    """Merge the given section flags into the existing ones."""
    found = find_public_resume(conn, user_id=session.user_id)
    if not found.success:
        return ApiResponse(success=True, error=found.message)

    github = {**found.result["github"], **get_github_sections(body)}
    update_pub_resume(conn, session.user_id, found.result["resume_hash"], {"github": github})
    _invalidate_pub_cache(request, found.result["resume_hash"])
    return ApiResponse(success=True)


# ------------------------------------------------------------------------------
# Share analytics
# ------------------------------------------------------------------------------

@router.get("/share/records", response_model=ApiResponse[ShareRecordsDTO], response_model_exclude_unset=True)
def get_share_records(
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    found = find_public_resume(conn, user_id=session.user_id)
    if not found.success:
        return ApiResponse(
            success=True,
            error=found.message,
            result=ShareRecordsDTO(
                url="",
                open_share=False,
                view_devices=[],
                view_sources=[],
                page_views=[],
            ),
        )

    resume_hash = found.result["resume_hash"]
    records = find_share(conn, url=f"resume/{resume_hash}", user_id=session.user_id)
    return ApiResponse(
        success=True,
        result=ShareRecordsDTO(
            url=_share_url(resume_hash, session.locale),
            open_share=found.result["open_share"],
            view_devices=records["viewDevices"],
            view_sources=records["viewSources"],
            page_views=records["pageViews"],
        ),
    )
