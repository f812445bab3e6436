from scraper.parsing.dom import DOCUMENT_TAG, Node, parse_document


def test_parse_document_builds_typed_tree():
    doc = parse_document('<html><body><div id="main" class="a b"><p>Hi <b>there</b></p></div></body></html>')

    assert doc.tag_name == DOCUMENT_TAG
    div = doc.find("div")
    assert div is not None
    assert div.get("id") == "main"
    assert div.get("class") == "a b"
    assert div.get("missing") == ""
    assert div.has_attr("ID")
    assert [child.tag_name for child in div.element_children] == ["p"]
    assert div.text_content == "Hi there"


def test_iter_is_document_order():
    doc = parse_document("<body><h1>a</h1><div><h2>b</h2></div><h3>c</h3></body>")

    assert [n.tag_name for n in doc.find_all("h1", "h2", "h3")] == ["h1", "h2", "h3"]


def test_comments_and_stripped_tags_are_dropped():
    doc = parse_document("<body><!-- note --><p>keep</p><script>drop()</script><noscript>ns</noscript></body>")

    assert doc.find("script") is None
    assert doc.find("body").text_content == "keepns"


def test_custom_strip_list():
    doc = parse_document("<body><p>keep</p><noscript>ns</noscript></body>", strip=("noscript",))

    assert doc.find("noscript") is None


def test_empty_and_whitespace_markup_give_empty_document():
    for html in ("", "   \n"):
        doc = parse_document(html)
        assert doc == Node(DOCUMENT_TAG)
        assert doc.find("body") is None
        assert doc.text_content == ""


def test_deeply_nested_markup_does_not_recurse():
    depth = 3000
    html = "<div>" * depth + "deep" + "</div>" * depth
    doc = parse_document(html)

    assert doc.find("div") is not None
    assert sum(1 for _ in doc.iter()) > 1
