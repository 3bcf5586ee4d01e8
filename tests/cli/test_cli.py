import json

from typer.testing import CliRunner

from polypost.cli.app import app

runner = CliRunner()


def _site(write_post):
    write_post("hello", "index.md", "---\ntitle: 你好\ndate: 2019-01-02\n---\nSee [x](/other/).\n")
    write_post("hello", "index.en.md", "---\ntitle: Hello\ndate: 2019-01-02\n---\nbody\n")
    write_post("other", "index.md", "---\ntitle: 其他\ndate: 2019-02-02\n---\nbody\n")


def test_build_writes_route_table(tmp_path, write_post):
    _site(write_post)

    result = runner.invoke(app, ["build", str(tmp_path)])

    assert result.exit_code == 0, result.output
    data = json.loads((tmp_path / ".polypost" / "routes.json").read_text(encoding="utf-8"))
    assert [route["path"] for route in data["routes"]] == ["/", "/en/", "/en/hello/", "/hello/", "/other/"]


def test_build_honours_out_option(tmp_path, write_post):
    _site(write_post)
    out = tmp_path / "public" / "routes.json"

    result = runner.invoke(app, ["build", str(tmp_path), "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert out.exists()


def test_build_fails_on_broken_content(tmp_path, write_post):
    write_post("bad", "index.md", "---\ntitle: [unclosed\n---\nbody\n")

    result = runner.invoke(app, ["build", str(tmp_path)])

    assert result.exit_code == 1
    assert "Content query failed" in result.output
    assert not (tmp_path / ".polypost" / "routes.json").exists()


def test_build_fails_on_bad_config(tmp_path):
    (tmp_path / ".polypost").mkdir()
    (tmp_path / ".polypost" / "config.yml").write_text("i18n:\n  canonical: de\n", encoding="utf-8")

    result = runner.invoke(app, ["build", str(tmp_path)])

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_languages_lists_index_paths(tmp_path):
    result = runner.invoke(app, ["languages", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "zh-hans" in result.output
    assert "/en/" in result.output


def test_groups_lists_translations(tmp_path, write_post):
    _site(write_post)

    result = runner.invoke(app, ["groups", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "hello" in result.output
    assert "en, zh-hans" in result.output


def test_build_fails_on_duplicate_slugs(tmp_path, write_post):
    write_post("2019/hello", "index.md", "---\ntitle: Old\n---\nbody\n")
    write_post("2020/hello", "index.md", "---\ntitle: New\n---\nbody\n")

    result = runner.invoke(app, ["build", str(tmp_path)])

    assert result.exit_code == 1
    assert "already used by" in result.output
    assert not (tmp_path / ".polypost" / "routes.json").exists()


def test_build_rejects_unknown_log_level(tmp_path):
    result = runner.invoke(app, ["build", str(tmp_path), "--log-level", "loud"])

    assert result.exit_code == 1
    assert "Unknown log level: LOUD" in result.output
