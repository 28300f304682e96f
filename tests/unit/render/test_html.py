"""Unit tests for render/html.py"""

import re

import pytest

from builders import image, paragraph, text
from markcard.core.cards import parse_markdown_to_cards, segment
from markcard.core.models import (
    CardDocument,
    CodeBlock,
    HeadingBlock,
    ImageToken,
    InlineCodeToken,
    LinkToken,
    ListBlock,
    ListItem,
    ParagraphBlock,
    StrongToken,
    TextToken,
)
from markcard.render.html import (
    escape_html,
    render_block,
    render_cards,
    render_document,
    render_inlines,
)


NASTY = "<script>&\"'"


def test_escape_html():
    assert escape_html(NASTY) == "&lt;script&gt;&amp;&quot;&#x27;"
    assert escape_html(None) == ""
    assert escape_html(3) == "3"


def test_escaped_text_leaves_no_raw_specials():
    html = render_block(ParagraphBlock(inlines=[TextToken(value=NASTY)], content=NASTY))
    assert html.startswith("<p>") and html.endswith("</p>")
    inner = html[len("<p>"):-len("</p>")]
    assert not re.search(r"[<>\"']", inner)
    assert "&amp;" in inner


def test_render_inlines_nesting():
    tokens = [
        TextToken(value="a "),
        StrongToken(children=[TextToken(value="b"), InlineCodeToken(value="<c>")]),
        LinkToken(url="http://x?a=1&b=2", children=[TextToken(value="go")]),
        ImageToken(url="i.png", alt='say "hi"'),
    ]
    assert render_inlines(tokens) == (
        'a <strong>b<code class="inline-code">&lt;c&gt;</code></strong>'
        '<a href="http://x?a=1&amp;b=2" target="_blank" rel="noopener noreferrer">go</a>'
        '<img class="inline-img" src="i.png" alt="say &quot;hi&quot;" />'
    )


def test_render_inlines_from_plain_dicts():
    tokens = [{"type": "emphasis", "children": [{"type": "text", "value": "e"}]}, {"type": "bogus"}, None]
    assert render_inlines(tokens) == "<em>e</em>"


@pytest.mark.parametrize("level,tag", [(1, "h1"), (6, "h6"), (0, "h1"), (9, "h6"), (None, "h1"), ("x", "h1")])
def test_heading_level_clamped(level, tag):
    html = render_block({"type": "heading", "level": level, "content": "T"})
    assert html == f"<{tag}>T</{tag}>"


def test_inlines_preferred_over_content():
    block = HeadingBlock(level=2, inlines=[StrongToken(children=[TextToken(value="B")])], content="B")
    assert render_block(block) == "<h2><strong>B</strong></h2>"


def test_content_used_without_inlines():
    assert render_block({"type": "paragraph", "content": "<x>"}) == "<p>&lt;x&gt;</p>"
    assert render_block({"type": "quote", "content": "q"}) == "<blockquote>q</blockquote>"


def test_list_rendering():
    block = {
        "type": "list",
        "ordered": True,
        "items": [
            {"content": "one", "inlines": [{"type": "text", "value": "one"}]},
            {"content": "<two>"},
            "three",
        ],
    }
    assert render_block(block) == "<ol>\n<li>one</li>\n<li>&lt;two&gt;</li>\n<li>three</li>\n</ol>"
    assert render_block({"type": "list", "items": []}).startswith("<ul>")


def test_code_rendering():
    assert render_block(CodeBlock(language="py", content="a < b")) == (
        '<pre><code class="language-py">a &lt; b</code></pre>'
    )
    assert render_block(CodeBlock(content="x")) == '<pre><code class="">x</code></pre>'


def test_image_block():
    html = render_block({"type": "image", "url": "a\".png", "alt": "<alt>"})
    assert html == '<div class="img-wrap"><img src="a&quot;.png" alt="&lt;alt&gt;"/></div>'


def test_link_block():
    html = render_block({"type": "link", "url": "http://a.b", "text": "t & u"})
    assert html == '<p><a href="http://a.b" target="_blank" rel="noopener noreferrer">t &amp; u</a></p>'


def test_table_block():
    html = render_block({"type": "table", "header": ["a", "<b>"], "rows": [["1", "2"], ["3", "4"]]})
    assert html.startswith('<table class="table"><thead><tr><th>a</th><th>&lt;b&gt;</th></tr></thead>')
    assert html.count("<tr>") == 3
    assert html.count("<td>") == 4


@pytest.mark.parametrize("block", [None, {}, ""])
def test_empty_block_renders_nothing(block):
    assert render_block(block) == ""


def test_unknown_block_falls_back_to_escaped_dump():
    html = render_block({"type": "mystery", "value": "<b>"})
    assert html.startswith("<pre>")
    assert "&quot;mystery&quot;" in html
    assert "<b>" not in html


def test_render_cards_sections_and_flattened_arrays():
    doc = {"cards": [{"id": "card-1", "blocks": [
        [{"type": "paragraph", "content": "a"}, {"type": "image", "url": "x.png", "alt": ""}],
        {"type": "paragraph", "content": "b"},
    ]}]}
    html = render_cards(doc)
    assert html.count("<section") == 1
    assert html.count("<p>") == 2
    assert "<p><div" not in html


def test_render_cards_from_model():
    doc = segment([paragraph(text("a"), image(), text("b"))])
    html = render_cards(doc)
    assert html == (
        '<section class="card"><div class="card-inner"><p>a</p>\n'
        '<div class="img-wrap"><img src="x.png" alt="pic"/></div>\n'
        '<p>b</p></div></section>'
    )


def test_render_document_page(sample_md):
    html = render_document(parse_markdown_to_cards(sample_md), title="Deck <1>")
    assert html.startswith("<!doctype html>")
    assert html.count('<section class="card">') == 3
    assert "<title>Deck &lt;1&gt;</title>" in html
    assert "copy-btn" in html
    assert '<code class="language-python">print(&quot;hi&quot;)</code>' in html


def test_render_document_empty():
    html = render_document({})
    assert "<section" not in html
    assert "MarkCard Preview" in html


def test_validated_document_without_inlines_renders_content():
    """Blocks restored from JSON that omits inlines fall back to content."""
    doc = CardDocument.model_validate({"cards": [{"id": "card-1", "blocks": [
        {"type": "paragraph", "content": "hello"},
        {"type": "heading", "level": 2, "content": "<T>"},
        {"type": "list", "items": [{"content": "one"}]},
        {"type": "link", "url": "u", "text": "go"},
    ]}]})
    html = render_cards(doc)
    assert "<p>hello</p>" in html
    assert "<h2>&lt;T&gt;</h2>" in html
    assert "<li>one</li>" in html
    assert ">go</a>" in html


def test_inlines_default_to_none():
    assert ParagraphBlock(content="x").inlines is None
    assert ListItem(content="x").inlines is None
    assert render_block(ListBlock(items=[ListItem(content="<i>")])) == "<ul>\n<li>&lt;i&gt;</li>\n</ul>"


def test_empty_inlines_still_win_over_content():
    assert render_block(ParagraphBlock(inlines=[], content="x")) == "<p></p>"


@pytest.mark.parametrize("block", [
    {"type": "table", "rows": [5]},
    {"type": "table", "rows": 5},
    {"type": "table", "header": 5, "rows": [["1"]]},
    {"type": "list", "items": 5},
    {"type": "paragraph", "inlines": 5},
    {"type": "paragraph", "inlines": [{"type": "strong", "children": 5}]},
    {"type": "heading", "inlines": [{"type": "link", "url": "u", "children": 5}]},
])
def test_malformed_fields_render_without_raising(block):
    assert isinstance(render_block(block), str)


def test_malformed_table_row_renders_empty():
    html = render_block({"type": "table", "header": ["a"], "rows": [5, ["1"]]})
    assert "<tr></tr>" in html
    assert "<td>1</td>" in html


@pytest.mark.parametrize("doc", [
    {"cards": 5},
    {"cards": [5, {"id": "card-1", "blocks": 5}]},
    {"cards": [{"id": "card-1", "blocks": [{"type": "list", "items": 5}]}]},
])
def test_render_cards_malformed_fields(doc):
    assert isinstance(render_cards(doc), str)
    assert render_document(doc).startswith("<!doctype html>")
