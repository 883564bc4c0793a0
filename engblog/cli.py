from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .config import load_config
from .content import FrontMatterError
from .pages import build_index, build_posts
from .posts import PostNotFoundError, list_post_summaries
from .render import copy_static, highlight_css, write_text
from .seo import build_robots, build_sitemap
from .utils import clean_output_dir, parse_bool

SITE_NAME = "DevOps Blog"
SITE_DESCRIPTION = "Engineering trends and insights"
SITE_URL = "https://flacta.com/Engineerblog"


def build_site(args: argparse.Namespace) -> None:
    posts_dir = Path(args.posts)
    static_dir = Path(args.static)
    output_dir = Path(args.output)
    project_root = Path.cwd()

    if not posts_dir.is_dir():
        print(f"Posts directory not found: {posts_dir}", file=sys.stderr)
        sys.exit(1)

    if args.clean:
        clean_output_dir(output_dir, project_root)
    output_dir.mkdir(parents=True, exist_ok=True)

    if static_dir.is_dir():
        copy_static(static_dir, output_dir)
    write_text(output_dir / "css" / "codehilite.css", highlight_css(args.highlight_style))

    summaries = list_post_summaries(posts_dir)
    build_index(output_dir, summaries, args)
    post_count = build_posts(output_dir, posts_dir, args)
    print(f"Rendered {post_count} post(s).")

    site_url = (args.site_url or "").strip()
    if not site_url:
        print("No site URL configured; skipping robots.txt and sitemap.xml.", file=sys.stderr)
        return
    if args.enable_robots:
        build_robots(output_dir, site_url)
    if args.enable_sitemap:
        build_sitemap(output_dir, summaries, site_url)


def main() -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args()
    config = load_config(Path(pre_args.config))

    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = config.get(key)
        return default if value is None else parse_bool(value)

    parser = argparse.ArgumentParser(description="Static Markdown blog generator.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=cfg_str("posts", "posts"), help="Directory containing Markdown posts.")
    parser.add_argument("--static", default=cfg_str("static", "static"), help="Directory containing static assets.")
    parser.add_argument("--output", default=cfg_str("output", "dist"), help="Output directory for the site.")
    parser.add_argument("--site-name", default=cfg_str("site_name", SITE_NAME), help="Site title.")
    parser.add_argument(
        "--site-description",
        default=cfg_str("site_description", SITE_DESCRIPTION),
        help="Site description.",
    )
    parser.add_argument(
        "--site-url",
        default=cfg_str("site_url", SITE_URL),
        help="Public site URL used for robots.txt and sitemap.xml.",
    )
    parser.add_argument(
        "--highlight-style",
        default=cfg_str("highlight_style", "default"),
        help="Pygments style for code blocks.",
    )
    parser.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("clean", True),
        help="Clean output directory before build.",
    )
    parser.add_argument(
        "--enable-sitemap",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("enable_sitemap", True),
        help="Generate sitemap.xml.",
    )
    parser.add_argument(
        "--enable-robots",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("enable_robots", True),
        help="Generate robots.txt.",
    )
    args = parser.parse_args()
    start = time.perf_counter()
    try:
        build_site(args)
    except (FrontMatterError, PostNotFoundError) as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {args.output}")
