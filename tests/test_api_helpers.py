import pytest

from resume_share.api.helpers import (
    detect_browser,
    get_github_sections,
    get_mobile_menu,
    is_mobile,
    make_cache_key,
    referrer_source,
)


def test_get_github_sections_picks_known_keys_and_coerces():
    body = {"repos": "false", "orgs": "true", "hotmap": 0, "info": True, "unknown": True}
    assert get_github_sections(body) == {"repos": False, "orgs": True, "hotmap": False, "info": True}


def test_get_github_sections_empty_body():
    assert get_github_sections({}) == {}


@pytest.mark.parametrize(
    "ua, expected",
    [
        ("Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148", True),
        ("Mozilla/5.0 (Linux; Android 14; Pixel 8) Chrome/120.0 Mobile Safari/537.36", True),
        ("Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 Safari/605.1.15", False),
        (None, False),
    ],
)
def test_is_mobile(ua, expected):
    assert is_mobile(ua) is expected


@pytest.mark.parametrize(
    "ua, expected",
    [
        ("Mozilla/5.0 (Windows NT 10.0) Chrome/120.0 Safari/537.36 Edg/120.0", "edge"),
        ("Mozilla/5.0 (Windows NT 10.0) Chrome/120.0 Safari/537.36", "chrome"),
        ("Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0", "firefox"),
        ("Mozilla/5.0 (Macintosh) AppleWebKit/605.1.15 Version/17.0 Safari/605.1.15", "safari"),
        ("curl/8.4.0", "other"),
        ("", "unknown"),
    ],
)
def test_detect_browser(ua, expected):
    assert detect_browser(ua) == expected


def test_referrer_source():
    assert referrer_source(None) == "direct"
    assert referrer_source("https://www.google.com/search?q=x") == "google.com"
    assert referrer_source("https://twitter.com/someone") == "twitter.com"
    assert referrer_source("http://testserver/resume/abc", own_host="testserver") == "direct"


def test_make_cache_key_uses_prefix(monkeypatch):
    assert make_cache_key("p")("resume.abc") == "p.resume.abc"
    monkeypatch.setenv("CACHE_PREFIX", "staging")
    assert make_cache_key()("resume.abc") == "staging.resume.abc"


def test_mobile_menu_is_localized():
    en = {item["id"]: item["title"] for item in get_mobile_menu("en")}
    zh = {item["id"]: item["title"] for item in get_mobile_menu("zh")}
    assert en["resume"] == "Resume"
    assert zh["resume"] == "简历"
