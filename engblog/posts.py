"""Post store: Markdown files on disk to post dicts.

Every ``*.md`` file directly inside the posts directory is one post. Its id is
the filename without the extension, so ids are unique by construction.
Nothing is cached; each call reads the files again.
"""
from __future__ import annotations

from pathlib import Path

from .content import (
    FrontMatterError,
    extract_title,
    format_date,
    normalize_list_spacing,
    optional_text,
    parse_date,
    parse_front_matter,
)
from .render import render_markdown

POST_SUFFIX = ".md"


class PostNotFoundError(LookupError):
    """Raised when a post id has no matching Markdown source file."""

    def __init__(self, post_id: str):
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id


def list_post_files(posts_dir: Path) -> list[Path]:
    if not posts_dir.is_dir():
        return []
    return sorted(
        (
            path
            for path in posts_dir.iterdir()
            if path.is_file() and path.suffix == POST_SUFFIX and not path.name.startswith(".")
        ),
        key=lambda p: p.name,
    )


def post_id_for(path: Path) -> str:
    return path.name[: -len(POST_SUFFIX)]


def _read_post(path: Path) -> tuple[dict, str]:
    raw_text = path.read_text(encoding="utf-8")
    try:
        meta, body = parse_front_matter(raw_text)
        title, body = extract_title(meta, body)
        date_dt = parse_date(meta.get("date"))
    except FrontMatterError as exc:
        raise FrontMatterError(f"{path}: {exc}") from exc
    summary = {
        "id": post_id_for(path),
        "title": title,
        "date": format_date(meta.get("date")),
        "date_dt": date_dt,
        "excerpt": optional_text(meta, "excerpt"),
        "cover_image": optional_text(meta, "coverImage", "cover_image"),
    }
    return summary, body


def read_post_summary(path: Path) -> dict:
    summary, _ = _read_post(path)
    return summary


def sort_by_date_descending(summaries: list[dict]) -> list[dict]:
    # Two stable passes: id ascending first, then date descending on top.
    ordered = sorted(summaries, key=lambda post: post["id"])
    ordered.sort(key=lambda post: post["date_dt"], reverse=True)
    return ordered


def list_post_summaries(posts_dir: Path) -> list[dict]:
    summaries = [read_post_summary(path) for path in list_post_files(posts_dir)]
    return sort_by_date_descending(summaries)


def all_post_ids(posts_dir: Path) -> set[str]:
    return {post_id_for(path) for path in list_post_files(posts_dir)}


def source_path(posts_dir: Path, post_id: str) -> Path:
    if not post_id or post_id.startswith(".") or "/" in post_id or "\\" in post_id:
        raise PostNotFoundError(post_id)
    path = posts_dir / f"{post_id}{POST_SUFFIX}"
    if not path.is_file():
        raise PostNotFoundError(post_id)
    return path


def get_post(posts_dir: Path, post_id: str) -> dict:
    path = source_path(posts_dir, post_id)
    post, body = _read_post(path)
    post["content_html"] = render_markdown(normalize_list_spacing(body))
    return post
