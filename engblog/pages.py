from __future__ import annotations

import datetime as dt
import html
from pathlib import Path
from urllib.parse import quote

from .posts import all_post_ids, get_post
from .render import asset_url, read_template, render_template, write_text

INDEX_ROOT = "."
POST_ROOT = "../.."


def build_post_cards(summaries: list[dict], root: str) -> str:
    cards = []
    for post in summaries:
        title = html.escape(post["title"])
        url = f"{root}/posts/{quote(post['id'])}/"
        cover_html = ""
        if post.get("cover_image"):
            src = html.escape(asset_url(root, post["cover_image"]))
            cover_html = f'<div class="post-cover"><img src="{src}" alt="{title}"></div>'
        excerpt_html = ""
        if post.get("excerpt"):
            excerpt_html = f'<p class="post-excerpt">{html.escape(post["excerpt"])}</p>'
        cards.append(
            f'<li class="post-card"><a class="post-link" href="{url}">'
            f"{cover_html}"
            f'<h2 class="post-title">{title}</h2>'
            f'<small class="post-date">{html.escape(post["date"])}</small>'
            f"{excerpt_html}"
            "</a></li>"
        )
    return "\n".join(cards)


def render_page(title: str, root: str, content: str, args: object) -> str:
    return render_template(
        read_template("base.html"),
        title=html.escape(title),
        root=root,
        content=content,
        site_name=html.escape(args.site_name),
        site_description=html.escape(args.site_description),
        year=str(dt.datetime.now().year),
    )


def build_index(output_dir: Path, summaries: list[dict], args: object) -> None:
    root = INDEX_ROOT
    content = (
        '<header class="site-header">'
        f"<h1>{html.escape(args.site_name)}</h1>"
        f"<p>{html.escape(args.site_description)}</p>"
        "</header>"
        '<main><section>'
        f'<ul class="post-list">{build_post_cards(summaries, root)}</ul>'
        "</section></main>"
    )
    write_text(output_dir / "index.html", render_page(args.site_name, root, content, args))


def build_post(output_dir: Path, post: dict, args: object) -> None:
    root = POST_ROOT
    back_link = f'<a class="back-link" href="{root}/">&larr; Back to Home</a>'
    # content_html is embedded unescaped.
    content = (
        f"{back_link}"
        '<article class="post">'
        f'<h1 class="post-title">{html.escape(post["title"])}</h1>'
        f'<div class="post-date">{html.escape(post["date"])}</div>'
        f'<div class="post-body">{post["content_html"]}</div>'
        "</article>"
        f'<div class="post-footer">{back_link}</div>'
    )
    html_doc = render_page(f"{post['title']} | {args.site_name}", root, content, args)
    write_text(output_dir / "posts" / post["id"] / "index.html", html_doc)


def build_posts(output_dir: Path, posts_dir: Path, args: object) -> int:
    post_ids = sorted(all_post_ids(posts_dir))
    for post_id in post_ids:
        build_post(output_dir, get_post(posts_dir, post_id), args)
    return len(post_ids)
