"""
GET /test renders both probe results as JSON blocks.
"""

from __future__ import annotations


def test_page_shows_both_backends(client):
    resp = client.get("/test")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    assert "Database Connection Test" in html
    assert "PostgreSQL:" in html
    assert "Redis:" in html
    assert "Hello from Neon!" in html
    assert "PONG" in html


def test_page_renders_failures_inline(failing_client):
    resp = failing_client.get("/test")

    assert resp.status_code == 200
    assert "connection refused" in resp.text
    assert resp.text.count('class="failed"') == 2


def test_page_follows_language_cookie(client):
    client.cookies.set("language", "zh")

    resp = client.get("/test")

    assert "数据库连接测试" in resp.text
    assert '<html lang="zh">' in resp.text
