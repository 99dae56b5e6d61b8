"""
Tests for GET /api/resume/share/records.
"""

IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
DESKTOP_CHROME_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36"


def test_records_unpublished_returns_placeholder(client, auth_headers):
    res = client.get("/api/resume/share/records", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "error": "Published resume not found",
        "result": {
            "url": "",
            "openShare": False,
            "viewDevices": [],
            "viewSources": [],
            "pageViews": [],
        },
    }


def test_records_published_without_views(client, auth_headers, published):
    body = client.get("/api/resume/share/records", headers=auth_headers).json()
    assert body["success"] is True
    assert "error" not in body
    assert body["result"] == {
        "url": f"resume/{published}?locale=en",
        "openShare": True,
        "viewDevices": [],
        "viewSources": [],
        "pageViews": [],
    }


def test_records_count_page_views(client, auth_headers, published):
    client.get(f"/resume/{published}", headers={"User-Agent": IPHONE_UA, "Referer": "https://www.google.com/search?q=mona"})
    client.get(f"/resume/{published}/mobile", headers={"User-Agent": IPHONE_UA})
    client.get(f"/resume/{published}", headers={"User-Agent": DESKTOP_CHROME_UA, "Referer": "https://news.ycombinator.com/item?id=1"})

    result = client.get("/api/resume/share/records", headers=auth_headers).json()["result"]

    devices = {(d["platform"], d["browser"]): d["count"] for d in result["viewDevices"]}
    assert devices == {("mobile", "safari"): 2, ("desktop", "chrome"): 1}

    sources = {s["from"]: s["count"] for s in result["viewSources"]}
    assert sources == {"google.com": 1, "news.ycombinator.com": 1, "direct": 1}

    assert len(result["pageViews"]) == 1
    assert result["pageViews"][0]["count"] == 3


def test_records_skip_notrace_visits(client, auth_headers, published):
    client.get(f"/resume/{published}?notrace=true")
    result = client.get("/api/resume/share/records", headers=auth_headers).json()["result"]
    assert result["pageViews"] == []


def test_records_reflect_open_share(client, auth_headers, published):
    client.patch("/api/resume/share/status", headers=auth_headers, json={"enable": False})
    result = client.get("/api/resume/share/records", headers=auth_headers).json()["result"]
    assert result["openShare"] is False


def test_records_skip_visits_while_share_closed(client, auth_headers, published):
    client.patch("/api/resume/share/status", headers=auth_headers, json={"enable": False})
    client.get(f"/resume/{published}", headers={"User-Agent": DESKTOP_CHROME_UA})
    client.get(f"/resume/{published}/mobile", headers={"User-Agent": IPHONE_UA})

    client.patch("/api/resume/share/status", headers=auth_headers, json={"enable": True})
    client.get(f"/resume/{published}", headers={"User-Agent": DESKTOP_CHROME_UA})

    result = client.get("/api/resume/share/records", headers=auth_headers).json()["result"]
    assert result["pageViews"][0]["count"] == 1
    assert result["viewDevices"] == [{"platform": "desktop", "browser": "chrome", "count": 1}]
