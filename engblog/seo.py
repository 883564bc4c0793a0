from __future__ import annotations

import datetime as dt
import html
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from .render import write_text
from .utils import iso_date, join_url, utc_now

HOME_CHANGE_FREQUENCY = "daily"
HOME_PRIORITY = 1.0
POST_CHANGE_FREQUENCY = "weekly"
POST_PRIORITY = 0.7


def post_url(base_url: str, post_id: str) -> str:
    # Post pages are written as directories, so their canonical URL ends in "/".
    return join_url(base_url, f"posts/{quote(post_id)}/")


def sitemap_entries(
    summaries: list[dict], base_url: str, now: Optional[dt.datetime] = None
) -> list[dict]:
    base_url = base_url.rstrip("/")
    entries = [
        {
            "url": base_url,
            "last_modified": now or utc_now(),
            "change_frequency": HOME_CHANGE_FREQUENCY,
            "priority": HOME_PRIORITY,
        }
    ]
    for post in summaries:
        entries.append(
            {
                "url": post_url(base_url, post["id"]),
                "last_modified": post["date_dt"],
                "change_frequency": POST_CHANGE_FREQUENCY,
                "priority": POST_PRIORITY,
            }
        )
    return entries


def robots_policy(base_url: str) -> dict:
    return {
        "rules": {"user_agent": "*", "allow": "/"},
        "sitemap": join_url(base_url, "sitemap.xml"),
    }


def render_sitemap(entries: list[dict]) -> str:
    items = []
    for entry in entries:
        items.append(
            "\n".join(
                [
                    "<url>",
                    f"<loc>{html.escape(entry['url'])}</loc>",
                    f"<lastmod>{iso_date(entry['last_modified'])}</lastmod>",
                    f"<changefreq>{entry['change_frequency']}</changefreq>",
                    f"<priority>{entry['priority']:.1f}</priority>",
                    "</url>",
                ]
            )
        )
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            "\n".join(items),
            "</urlset>",
            "",
        ]
    )


def render_robots(policy: dict) -> str:
    rules = policy["rules"]
    lines = [
        f"User-Agent: {rules['user_agent']}",
        f"Allow: {rules['allow']}",
    ]
    if policy.get("sitemap"):
        lines.extend(["", f"Sitemap: {policy['sitemap']}"])
    return "\n".join(lines) + "\n"


def build_sitemap(output_dir: Path, summaries: list[dict], base_url: str) -> None:
    write_text(output_dir / "sitemap.xml", render_sitemap(sitemap_entries(summaries, base_url)))


def build_robots(output_dir: Path, base_url: str) -> None:
    write_text(output_dir / "robots.txt", render_robots(robots_policy(base_url)))
