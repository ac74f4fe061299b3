# File: tests/test_link_extractor.py
import pytest
from link_scout.crawler.link_extractor import (
    extract_references,
    parse_reference,
    remove_dot_segments,
    resolve_reference,
    strip_fragment,
)


@pytest.mark.parametrize(
    "body,expected",
    [
        ('<a href="/a">A</a>', ["/a"]),
        ("<img src='/i.png'>", ["/i.png"]),
        ("<Link to=/route>", ["/route"]),
        ('<a href = "/spaced">', ["/spaced"]),
        ('<a href="/x y">', ["/x"]),
        ('<a HREF="/upper">', []),
        ('<img data-src="/lazy.png">', ["/lazy.png"]),
        ('<script>location.href="/js"</script>', ["/js"]),
        ("<!-- <a href=/commented> -->", ["/commented"]),
        ('<a href="/1"><img src="/2"><a href="/3">', ["/1", "/2", "/3"]),
        ("<p>no links here</p>", []),
    ],
)
def test_extract_references(body, expected):
    assert extract_references(body) == expected


@pytest.mark.parametrize(
    "base,raw,expected",
    [
        ("http://h/a/b", "c", "http://h/a/c"),
        ("http://h/a/b", "../c", "http://h/c"),
        ("http://h/a/", "/root", "http://h/root"),
        ("https://h/a/", "//other/x", "https://other/x"),
        ("http://h/a", "?q=1", "http://h/a?q=1"),
        ("http://h/a", "https://else.org/p", "https://else.org/p"),
        ("http://h/a", "mailto:me@h", "mailto:me@h"),
        ("http://h/", "http://h/a/../b", "http://h/b"),
        ("http://h/", "/a/./b/../c", "http://h/a/c"),
        ("http://h/", "/q?x=100%", "http://h/q?x=100%"),
        ("http://h/", "http://h:99999/x", "http://h:99999/x"),
        ("http://h/", "/caf\u00e9", "http://h/caf%C3%A9"),
        ("http://h/", "/caf%C3%A9", "http://h/caf%C3%A9"),
    ],
)
def test_resolve_reference(base, raw, expected):
    assert resolve_reference(base, raw) == expected


@pytest.mark.parametrize("raw", ["%zz", "/a%2", "http://[::1", ":foo", "1a:b", "http://h:port/", "http://h:8o/", "http://[::1]x/", "/a#%zz", "/a\x00b"])
def test_malformed_references_raise(raw):
    with pytest.raises(ValueError):
        resolve_reference("http://h/", raw)


def test_parse_reference_accepts_escapes():
    parse_reference("/caf%C3%A9?x=%20")


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://h/page#a", "http://h/page"),
        ("http://h/page#", "http://h/page"),
        ("http://h/page?x=1#frag", "http://h/page?x=1"),
        ("http://h/page", "http://h/page"),
    ],
)
def test_strip_fragment(url, expected):
    assert strip_fragment(url) == expected


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/a/../b", "/b"),
        ("/a/b/..", "/a/"),
        ("/a/./b/.", "/a/b/"),
        ("/..", "/"),
        ("/a//b", "/a//b"),
        ("/", "/"),
    ],
)
def test_remove_dot_segments(path, expected):
    assert remove_dot_segments(path) == expected
