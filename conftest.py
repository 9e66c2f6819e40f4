"""Pytest fixtures: sample javadoc index pages and javadoc folders."""

import logging
from pathlib import Path

import pytest

# Javadoc 8 style index-all.html: entries are <dt> elements whose first
# child is the entry anchor, optionally wrapped in <span class="memberNameLink">.
INDEX_ALL_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta http-equiv="Content-Type" content="text/html; charset=UTF-8">
<title>Index</title>
</head>
<body>
<div class="topNav"><ul class="navList"><li><a href="overview-summary.html">Overview</a></li><li><a href="help-doc.html">Help</a></li></ul></div>
<div class="contentContainer"><a href="#I:A">A</a>&nbsp;<a href="#I:B">B</a>&nbsp;<a href="#I:C">C</a>
<h2 class="title">A</h2>
<dl>
<dt><span class="memberNameLink"><a href="com/example/Foo.html#add-int-">add(int)</a></span> - Method in class com.example.<a href="com/example/Foo.html" title="class in com.example">Foo</a></dt>
<dd>
<div class="block">Adds a value. See <a href="com/example/Bar.html">Bar</a>.</div>
</dd>
</dl>
<h2 class="title">B</h2>
<dl>
<dt><a href="com/example/BadError.html" title="class in com.example"><span class="typeNameLink">BadError</span></a> - Error in <a href="com/example/package-summary.html">com.example</a></dt>
<dd>&nbsp;</dd>
<dt><a href="com/example/BadThing.html" title="class in com.example"><span class="typeNameLink">BadThing</span></a> - Exception in <a href="com/example/package-summary.html">com.example</a></dt>
<dd>&nbsp;</dd>
</dl>
<h2 class="title">C</h2>
<dl>
<dt><a href="com/example/Color.html" title="enum in com.example"><span class="typeNameLink">Color</span></a> - Enum in <a href="com/example/package-summary.html">com.example</a></dt>
<dd>&nbsp;</dd>
<dt><a href="com/example/package-summary.html">com.example</a> - package com.example</dt>
<dd>&nbsp;</dd>
<dt><a href="com/example/Foo.html" title="class in com.example"><span class="typeNameLink">Foo</span></a> - Class in <a href="com/example/package-summary.html">com.example</a></dt>
<dd>&nbsp;</dd>
<dt><span class="memberNameLink"><a href="com/example/Foo.html#Foo--">Foo()</a></span> - Constructor for class com.example.<a href="com/example/Foo.html" title="class in com.example">Foo</a></dt>
<dd>&nbsp;</dd>
<dt><span class="memberNameLink"><a href="com/example/Foo.html#MAX">MAX</a></span> - Static variable in class com.example.<a href="com/example/Foo.html" title="class in com.example">Foo</a></dt>
<dd>&nbsp;</dd>
<dt><a href="com/example/Marker.html" title="annotation in com.example"><span class="typeNameLink">Marker</span></a> - Annotation Type in <a href="com/example/package-summary.html">com.example</a></dt>
<dd>&nbsp;</dd>
<dt><a href="com/example/Runner.html" title="interface in com.example"><span class="typeNameLink">Runner</span></a> - Interface in <a href="com/example/package-summary.html">com.example</a></dt>
<dd>&nbsp;</dd>
<dt><a href="misc/odd.html">Something odd</a></dt>
<dd>&nbsp;</dd>
</dl>
<a href="#I:A">A</a>&nbsp;<a href="#I:B">B</a>&nbsp;<a href="#I:C">C</a></div>
</body>
</html>
"""

# (name, type label, path) expected from INDEX_ALL_HTML, in document order
INDEX_ALL_ENTRIES = [
    ("add(int)", "Method", "com/example/Foo.html#add-int-"),
    ("BadError", "Error", "com/example/BadError.html"),
    ("BadThing", "Exception", "com/example/BadThing.html"),
    ("Color", "Enum", "com/example/Color.html"),
    ("com.example", "Package", "com/example/package-summary.html"),
    ("Foo", "Class", "com/example/Foo.html"),
    ("Foo()", "Constructor", "com/example/Foo.html#Foo--"),
    ("MAX", "Field", "com/example/Foo.html#MAX"),
    ("Marker", "Notation", "com/example/Marker.html"),
    ("Runner", "Interface", "com/example/Runner.html"),
]


def split_index_page(*dts: str) -> str:
    """A minimal index-files/index-N.html page with the given <dt> markup."""
    return (
        "<html><head><title>Index</title></head><body>"
        "<div class=\"contentContainer\"><dl>"
        + "".join(f"{dt}<dd>&nbsp;</dd>" for dt in dts)
        + "</dl></div></body></html>"
    )


@pytest.fixture
def index_all_html() -> str:
    return INDEX_ALL_HTML


@pytest.fixture
def javadoc_single_index(tmp_path: Path) -> Path:
    """
    A download folder with the javadoc root two levels down:
    download/docs/api/{overview-summary.html, index-all.html, com/example/Foo.html}
    """
    api = tmp_path / "download" / "docs" / "api"
    (api / "com" / "example").mkdir(parents=True)
    (api / "overview-summary.html").write_text("<html><body>Overview</body></html>")
    (api / "index-all.html").write_text(INDEX_ALL_HTML, encoding="utf-8")
    (api / "com" / "example" / "Foo.html").write_text("<html><body>Foo</body></html>")
    return tmp_path / "download"


@pytest.fixture
def javadoc_split_index(tmp_path: Path) -> Path:
    """A javadoc root with index-files/index-1.html and index-2.html and no overview."""
    api = tmp_path / "api"
    (api / "index-files").mkdir(parents=True)
    (api / "index-files" / "index-1.html").write_text(split_index_page(
        '<dt><a href="../com/example/Alpha.html">Alpha</a> - Class in com.example</dt>',
        '<dt><span class="memberNameLink"><a href="../com/example/Alpha.html#go--">go()</a></span>'
        ' - Static method in class com.example.Alpha</dt>',
    ))
    # Same class listed again on another letter page: stored once
    (api / "index-files" / "index-2.html").write_text(split_index_page(
        '<dt><a href="../com/example/Beta.html">Beta</a> - Interface in com.example</dt>',
        '<dt><a href="../com/example/Alpha.html">Alpha</a> - Class in com.example</dt>',
    ))
    return api


@pytest.fixture(autouse=True)
def _reset_javadocset_logger():
    """Drop handlers installed by setup_logger() so each test starts clean."""
    yield
    logger = logging.getLogger("javadocset")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
