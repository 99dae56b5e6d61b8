"""
Server-rendered pages for published resumes.

The share pages only render a shell; resume content is fetched by the page
from /api/resume/pub. Each render counts as a page view unless `notrace` is
set, which is how the PDF renderer visits a page.
"""

from pathlib import Path
from sqlite3 import Connection

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from resume_share.api.dependencies import Session, get_db, get_session, get_user_session
from resume_share.api.helpers import detect_browser, get_mobile_menu, is_mobile, referrer_source
from resume_share.db.resume_pub import get_pub_by_hash
from resume_share.db.share_analyse import record_view
from resume_share.i18n import translate
from resume_share.services.resume_pub_service import find_public_resume

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["pages"])


def _track_view(request: Request, conn: Connection, resume_hash: str, notrace: bool) -> None:
    """Record a view of a published resume, or mark the session as a download render."""
    request.session["from_download"] = notrace
    if notrace:
        return

    record = get_pub_by_hash(conn, resume_hash)
    if record is None or not record["open_share"]:
        return

    user_agent = request.headers.get("user-agent")
    record_view(
        conn,
        url=f"resume/{resume_hash}",
        user_id=record["user_id"],
        platform="mobile" if is_mobile(user_agent) else "desktop",
        browser=detect_browser(user_agent),
        source=referrer_source(request.headers.get("referer"), request.url.hostname),
    )


@router.get("/resume/share")
def get_resume_share_page(
    request: Request,
    session: Session = Depends(get_user_session),
    conn: Connection = Depends(get_db),
):
    """Send the signed-in user to their own public page."""
    found = find_public_resume(conn, user_id=session.user_id)
    if not found.success:
        return RedirectResponse("/404", status_code=302)

    resume_hash = found.result["resume_hash"]
    if is_mobile(request.headers.get("user-agent")):
        return RedirectResponse(f"/resume/{resume_hash}/mobile", status_code=302)
    return RedirectResponse(f"/resume/{resume_hash}", status_code=302)


@router.get("/resume/{hash}")
def get_pub_resume_page(
    request: Request,
    hash: str,
    userName: str = Query(""),
    userLogin: str = Query(""),
    notrace: bool = Query(False),
    session: Session = Depends(get_session),
    conn: Connection = Depends(get_db),
):
    _track_view(request, conn, hash, notrace)
    return templates.TemplateResponse(
        request,
        "resume/share.html",
        {
            "title": translate(session.locale, "resumePage.title", userName),
            "resumeHash": hash,
            "login": userLogin,
            "locale": session.locale,
            "hideFooter": True,
        },
    )


@router.get("/resume/{hash}/mobile")
def get_pub_resume_page_mobile(
    request: Request,
    hash: str,
    userName: str = Query(""),
    userLogin: str = Query(""),
    isAdmin: bool = Query(False),
    notrace: bool = Query(False),
    session: Session = Depends(get_session),
    conn: Connection = Depends(get_db),
):
    _track_view(request, conn, hash, notrace)
    return templates.TemplateResponse(
        request,
        "user/mobile/resume.html",
        {
            "title": translate(session.locale, "resumePage.title", userName),
            "resumeHash": hash,
            "login": userLogin,
            "locale": session.locale,
            "menu": get_mobile_menu(session.locale),
            "user": {"isAdmin": isAdmin},
            "hideFooter": True,
        },
    )


@router.get("/404")
def not_found_page(request: Request, session: Session = Depends(get_session)):
    return templates.TemplateResponse(
        request,
        "404.html",
        {"title": translate(session.locale, "notFound.title"), "locale": session.locale},
        status_code=404,
    )
