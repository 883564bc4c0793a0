import argparse
from pathlib import Path

import pytest


def make_post(
    posts_dir: Path,
    post_id: str,
    title: str = "A post",
    date: str = "2024-01-01",
    body: str = "Some **text**.",
    extra: str = "",
) -> Path:
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / f"{post_id}.md"
    path.write_text(
        f"---\ntitle: {title}\ndate: {date}\n{extra}---\n\n{body}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def posts_dir(tmp_path):
    path = tmp_path / "posts"
    path.mkdir()
    return path


@pytest.fixture
def site_args(tmp_path):
    return argparse.Namespace(
        config=str(tmp_path / "site.toml"),
        posts=str(tmp_path / "posts"),
        static=str(tmp_path / "static"),
        output=str(tmp_path / "dist"),
        site_name="DevOps Blog",
        site_description="Engineering trends and insights",
        site_url="https://example.com/blog",
        highlight_style="default",
        clean=True,
        enable_sitemap=True,
        enable_robots=True,
    )
