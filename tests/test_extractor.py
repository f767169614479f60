"""Content extraction cascade tests."""

from bs4 import BeautifulSoup

from src.scraper.extractor import ExtractionConfig, extract, extract_content, parse_document
from src.scraper.models import ExtractionCandidate
from src.scraper.noise import strip_noise
from src.scraper.strategies import SelectorStrategy, clean_text, longest

ARTICLE_P1 = "The main finding of this research is that careful analysis pays off. " * 10
ARTICLE_P2 = "Engineers who measure before optimising ship faster and break less. " * 10
NOISE = "BUY NOW limited offer click here subscribe today " * 20


def _article_page() -> str:
    return f"""
<html>
<head><title>Example</title></head>
<body>
<nav>{NOISE}</nav>
<header><h1>Site name</h1></header>
<div class="content-wrapper">
<div class="ads">{NOISE}</div>
<article>
<p>{ARTICLE_P1}</p>
<p>{ARTICLE_P2}</p>
</article>
<script>var tracking = "{NOISE}";</script>
</div>
<div class="sidebar">{NOISE}</div>
<footer>{NOISE}</footer>
</body>
</html>
"""


# --- clean_text ---


def test_clean_text_collapses_whitespace():
    assert clean_text("  hello \n\n\t world  \n") == "hello world"


def test_clean_text_empty():
    assert clean_text("   \n ") == ""


# --- noise stripping ---


def test_strip_noise_removes_denylisted_subtrees():
    soup = BeautifulSoup(
        "<body><nav>menu</nav><div class='popup'>x</div><p>keep me</p>"
        "<div class='cookie-notice'>cookies</div><noscript>js</noscript></body>",
        "lxml",
    )
    removed = strip_noise(soup)
    assert removed == 4
    assert clean_text(soup.get_text()) == "keep me"


def test_strip_noise_skips_nested_matches():
    soup = BeautifulSoup("<body><div class='ads'><div class='ads'>x</div></div><p>y</p></body>", "lxml")
    assert strip_noise(soup) == 1
    assert clean_text(soup.get_text()) == "y"


# --- strategies ---


def test_longest_keeps_first_on_tie():
    first = ExtractionCandidate(text="abcd", source="first")
    second = ExtractionCandidate(text="wxyz", source="second")
    assert longest([first, second]) is first


def test_longest_of_nothing_is_empty():
    assert longest([]).text == ""


def test_selector_strategy_yields_every_match():
    soup = BeautifulSoup("<div class='post'>one</div><div class='post'>two two</div>", "lxml")
    strategy = SelectorStrategy(name="post", selector=".post")
    texts = [c.text for c in strategy.candidates(soup)]
    assert texts == ["one", "two two"]


# --- cascade ---


def test_container_over_threshold_wins_without_noise():
    content = extract(_article_page())
    expected = clean_text(f"{ARTICLE_P1} {ARTICLE_P2}")
    assert content == expected
    assert len(content) > 1000
    assert "BUY NOW" not in content
    assert "Site name" not in content


def test_longer_later_selector_beats_earlier_one():
    html = (
        "<body><div class='blog-content'>short site specific text</div>"
        f"<main>{ARTICLE_P1}</main></body>"
    )
    assert extract(html) == clean_text(ARTICLE_P1)


def test_paragraph_fallback_joins_with_blank_lines():
    paragraphs = [
        "The first paragraph has plenty of words in it.",
        "A second paragraph follows with its own sentence.",
        "Finally the third paragraph closes the story out.",
    ]
    html = (
        "<html><body><div>"
        + "".join(f"<p>{p}</p>" for p in paragraphs)
        + "<p>Too short</p></div></body></html>"
    )
    assert extract(html) == "\n\n".join(paragraphs)


def test_paragraphs_replace_shorter_selector_candidate():
    paragraphs = ["Paragraph number one is long enough.", "Paragraph number two is also long enough."]
    html = (
        "<body><div class='post'>A tiny post teaser here</div>"
        + "".join(f"<p>{p}</p>" for p in paragraphs)
        + "</body>"
    )
    assert extract(html) == "\n\n".join(paragraphs)


def test_body_fallback_when_little_text():
    html = "<html><body>\n<div>Just some words here</div>\n<span>tiny</span>\n</body></html>"
    assert extract(html) == "Just some words here tiny"


def test_body_fallback_ignores_noise():
    html = "<html><body><nav>Home About</nav><div>Visible text</div></body></html>"
    assert extract(html) == "Visible text"


def test_empty_document_returns_empty_string():
    assert extract("") == ""
    assert extract("<html><body><script>var a = 1;</script></body></html>") == ""


def test_extraction_is_idempotent():
    html = _article_page()
    assert extract(html) == extract(html)


def test_custom_strategies_are_data():
    html = f"<body><section id='story'>{ARTICLE_P1}</section><article>short</article></body>"
    config = ExtractionConfig(strategies=(SelectorStrategy(name="story", selector="#story"),))
    assert extract(html, config) == clean_text(ARTICLE_P1)


def test_extract_content_strips_the_given_document():
    soup = parse_document(_article_page())
    extract_content(soup)
    assert soup.find("nav") is None
    assert soup.find("article") is not None
