from __future__ import annotations

import shutil
from pathlib import Path

import markdown
from pygments.formatters import HtmlFormatter

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
HIGHLIGHT_CLASS = "codehilite"


def render_markdown(body: str) -> str:
    md = markdown.Markdown(
        extensions=["fenced_code", "tables", "codehilite"],
        extension_configs={"codehilite": {"css_class": HIGHLIGHT_CLASS, "guess_lang": False}},
    )
    return md.convert(body)


def highlight_css(style: str = "default") -> str:
    formatter = HtmlFormatter(style=style, cssclass=HIGHLIGHT_CLASS)
    return formatter.get_style_defs(f".{HIGHLIGHT_CLASS}")


def asset_url(root: str, path: str) -> str:
    if path.startswith(("http://", "https://", "data:", "//")):
        return path
    return f"{root}/{path.lstrip('/')}"


def render_template(template: str, **context: str) -> str:
    output = template
    late_keys = {"content"}
    for key, value in context.items():
        if key in late_keys:
            continue
        output = output.replace(f"{{{{{key}}}}}", value)
    for key in late_keys:
        if key in context:
            output = output.replace(f"{{{{{key}}}}}", context[key])
    return output


def read_template(name: str, templates_dir: Path = TEMPLATES_DIR) -> str:
    return (templates_dir / name).read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(static_dir: Path, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for item in static_dir.iterdir():
        dest = output_dir / item.name
        if item.is_dir():
            if dest.exists():
                shutil.rmtree(dest)
            shutil.copytree(item, dest)
        else:
            shutil.copy2(item, dest)
