import sys

import pytest

from conftest import make_post
from engblog.cli import build_site, main


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_build_site_writes_full_tree(project, site_args):
    posts_dir = project / "posts"
    make_post(posts_dir, "first", date="2024-01-01")
    make_post(posts_dir, "second", date="2024-02-01")
    (project / "static" / "images").mkdir(parents=True)
    (project / "static" / "images" / "cover.png").write_bytes(b"png")

    build_site(site_args)

    output = project / "dist"
    assert (output / "index.html").exists()
    assert (output / "posts" / "first" / "index.html").exists()
    assert (output / "posts" / "second" / "index.html").exists()
    assert (output / "images" / "cover.png").exists()
    assert ".codehilite" in (output / "css" / "codehilite.css").read_text(encoding="utf-8")
    sitemap = (output / "sitemap.xml").read_text(encoding="utf-8")
    assert sitemap.count("<url>") == 3
    assert sitemap.index("posts/second/") < sitemap.index("posts/first/")
    robots = (output / "robots.txt").read_text(encoding="utf-8")
    assert "Sitemap: https://example.com/blog/sitemap.xml" in robots


def test_build_site_cleans_previous_output(project, site_args):
    make_post(project / "posts", "only")
    stale = project / "dist" / "posts" / "removed" / "index.html"
    stale.parent.mkdir(parents=True)
    stale.write_text("old", encoding="utf-8")

    build_site(site_args)

    assert not stale.exists()


def test_build_site_skips_seo_files_without_site_url(project, site_args, capsys):
    make_post(project / "posts", "only")
    site_args.site_url = ""

    build_site(site_args)

    assert not (project / "dist" / "sitemap.xml").exists()
    assert not (project / "dist" / "robots.txt").exists()
    assert "skipping" in capsys.readouterr().err


def test_build_site_respects_disabled_outputs(project, site_args):
    make_post(project / "posts", "only")
    site_args.enable_sitemap = False

    build_site(site_args)

    assert not (project / "dist" / "sitemap.xml").exists()
    assert (project / "dist" / "robots.txt").exists()


def test_build_site_missing_posts_dir_exits(project, site_args):
    with pytest.raises(SystemExit) as excinfo:
        build_site(site_args)

    assert excinfo.value.code == 1


def test_main_uses_config_file(project, monkeypatch, capsys):
    make_post(project / "content", "hello", title="Hello")
    (project / "site.toml").write_text(
        'posts = "content"\noutput = "public"\nsite_name = "Ops Notes"\nenable_robots = false\n',
        encoding="utf-8",
    )
    monkeypatch.setattr(sys, "argv", ["engblog"])

    main()

    html = (project / "public" / "index.html").read_text(encoding="utf-8")
    assert "<h1>Ops Notes</h1>" in html
    assert not (project / "public" / "robots.txt").exists()
    assert (project / "public" / "sitemap.xml").exists()
    assert "Site generated in: public" in capsys.readouterr().out


def test_main_flags_override_config(project, monkeypatch):
    make_post(project / "posts", "hello")
    (project / "site.toml").write_text('site_name = "From config"\n', encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["engblog", "--site-name", "From flag", "--no-enable-sitemap"])

    main()

    html = (project / "dist" / "index.html").read_text(encoding="utf-8")
    assert "From flag" in html
    assert not (project / "dist" / "sitemap.xml").exists()


def test_main_reports_malformed_front_matter(project, monkeypatch, capsys):
    posts_dir = project / "posts"
    posts_dir.mkdir()
    (posts_dir / "broken.md").write_text("---\ntitle: [x\n---\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["engblog"])

    with pytest.raises(SystemExit) as excinfo:
        main()

    assert excinfo.value.code == 1
    assert "Build failed:" in capsys.readouterr().err
