import re

import pytest

from debug_tools import DEBUG
from definitions import GlossaryStore
from errors import MissingResourceError
from render_pages import CSS, render_glossary, render_index, render_term
from text_io import Directory


@pytest.fixture
def store():
    return GlossaryStore([
        ("word", "a string of characters"),
        ("book", "a printed work of many words"),
        ("Apple", "a fruit"),
        ("glossary", "a list of terms, with a word for each"),
    ]).freeze()


@pytest.fixture
def out_dir(tmp_path):
    directory = Directory(tmp_path / "site")
    directory.create()
    return directory


def test_index_lists_terms_in_codepoint_order(store, out_dir):
    path = render_index(store, out_dir)
    html = open(path, encoding="utf-8").read()
    hrefs = re.findall(r'<li><a href="([^"]+)\.html">([^<]+)</a></li>', html)
    assert hrefs == [("Apple", "Apple"), ("book", "book"), ("glossary", "glossary"), ("word", "word")]
    assert "<title>Glossary</title>" in html
    assert "<h1><b>Glossary Index</b></h1>" in html
    assert CSS in html


def test_index_has_no_duplicates_for_repeated_terms(out_dir):
    store = GlossaryStore([("b", "1"), ("a", "2"), ("b", "3")])
    html = open(render_index(store, out_dir), encoding="utf-8").read()
    assert html.count('href="b.html"') == 1
    assert html.index('href="a.html"') < html.index('href="b.html"')


def test_term_page_layout(store, out_dir):
    path = render_term("glossary", store["glossary"], store, out_dir)
    assert path.endswith("glossary.html")
    lines = open(path, encoding="utf-8").read().splitlines()
    assert lines[:3] == ["<html>", "<head>", "<title>glossary</title>"]
    assert '<a href="index.html" class="button">Return to Index</a>' in lines
    assert '<h1 style="color: red; font-weight: bold; font-style: italic;">glossary</h1>' in lines
    assert '<p>a list of terms, with a <a href="word.html">word</a> for each</p>' in lines
    assert lines[-2:] == ["</body>", "</html>"]


def test_term_page_without_links(store, out_dir):
    path = render_term("Apple", "a fruit", store, out_dir)
    assert "<p>a fruit</p>" in open(path, encoding="utf-8").read()


def test_render_glossary_writes_every_page(store, tmp_path):
    messages = []
    directory = Directory(tmp_path / "site")
    written = render_glossary(store, directory, progress=messages.append)

    assert len(written) == 5
    assert directory.listing() == ["Apple.html", "book.html", "glossary.html", "index.html", "word.html"]
    assert messages[0] == "Generating index.html...done."
    assert messages[1] == "Generating glossary files..."
    assert messages[2:6] == [f"Generating {t}.html...done." for t in store.terms()]
    assert messages[-1] == "All files written."


def test_rendering_overwrites_previous_output(store, out_dir):
    stale = out_dir.path_for("word.html")
    with open(stale, "w", encoding="utf-8") as f:
        f.write("stale content " * 100)
    render_term("word", store["word"], store, out_dir)
    assert "stale" not in open(stale, encoding="utf-8").read()


def test_unwritable_output_folder(store, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a folder")
    with pytest.raises(MissingResourceError):
        render_glossary(store, Directory(blocker / "site"), progress=lambda message: None)


def test_output_folder_with_missing_parent_is_fatal(store, tmp_path):
    target = tmp_path / "does" / "not" / "exist"
    with pytest.raises(MissingResourceError):
        render_glossary(store, Directory(target), progress=lambda message: None)
    assert not (tmp_path / "does").exists()


def test_links_are_not_collected_while_debug_is_off(store, out_dir, monkeypatch):
    monkeypatch.setattr(DEBUG, "enabled", False)
    calls = []
    monkeypatch.setattr("render_pages.linked_terms", lambda *args: calls.append(args) or [])
    render_glossary(store, out_dir, progress=lambda message: None)
    assert calls == []
