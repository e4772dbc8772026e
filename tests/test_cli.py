"""Tests for the wikinet CLI."""

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_BASE = "https://en.wikipedia.org/wiki/"


@pytest.fixture
def offline_wiki(monkeypatch, make_fetcher, waffle_html):
    """Route every page fetch to canned HTML instead of the network."""
    fetcher = make_fetcher(
        {
            _BASE + "Waffle": waffle_html,
            _BASE + "Flour": "<title>Flour - Wikipedia</title><a href='/wiki/Waffle'>w</a>",
        }
    )
    monkeypatch.setattr("wikinet.page.fetch_html", fetcher)
    return fetcher


def test_title(offline_wiki):
    result = runner.invoke(app, ["title", "/wiki/Waffle"])
    assert result.exit_code == 0
    assert "Waffle" in result.stdout


def test_title_accepts_full_url(offline_wiki):
    result = runner.invoke(app, ["title", "https://en.wikipedia.org/wiki/Waffle"])
    assert result.exit_code == 0
    assert "Waffle" in result.stdout


def test_title_invalid_path(offline_wiki):
    result = runner.invoke(app, ["title", "Waffle"])
    assert result.exit_code == 1
    assert "not a valid article path" in result.stdout
    assert offline_wiki.count == 0


def test_title_not_found(offline_wiki):
    result = runner.invoke(app, ["title", "/wiki/Nope"])
    assert result.exit_code == 1
    assert "HTTP 404" in result.stdout


def test_links(offline_wiki):
    result = runner.invoke(app, ["links", "/wiki/Waffle"])
    assert result.exit_code == 0
    assert "/wiki/Flour" in result.stdout
    assert "/wiki/Baking" in result.stdout
    assert "Category:Breads" not in result.stdout
    assert "4 of 4 links" in result.stdout


def test_links_limit(offline_wiki):
    result = runner.invoke(app, ["links", "/wiki/Waffle", "--limit", "1"])
    assert result.exit_code == 0
    assert "/wiki/Batter_(cooking)" in result.stdout
    assert "/wiki/Baking" not in result.stdout


def test_links_negative_limit_rejected(offline_wiki):
    result = runner.invoke(app, ["links", "/wiki/Waffle", "--limit", "-1"])
    assert result.exit_code != 0
    assert offline_wiki.count == 0


def test_crawl_tree(offline_wiki):
    result = runner.invoke(app, ["crawl", "/wiki/Waffle", "--depth", "1"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Waffle"
    assert "└── Baking" in result.stdout
    assert "5 pages, 4 links" in result.stdout


def test_crawl_tree_marks_back_links(offline_wiki):
    result = runner.invoke(app, ["crawl", "/wiki/Flour", "--depth", "2", "--max-pages", "2"])
    assert result.exit_code == 0
    assert "↺ Flour" in result.stdout


def test_crawl_list(offline_wiki):
    result = runner.invoke(app, ["crawl", "/wiki/Waffle", "--format", "list"])
    assert result.exit_code == 0
    assert "/wiki/Dough" in result.stdout


def test_crawl_unknown_format(offline_wiki):
    result = runner.invoke(app, ["crawl", "/wiki/Waffle", "--format", "dot"])
    assert result.exit_code == 1
    assert "Unknown format" in result.stdout
