"""
Text tidying transforms applied to the decoded markup tree.

Each transform takes the BeautifulSoup tree, rewrites it in place and returns
it, so the pipeline can chain them:

    tree = normalize_spacing(tree)
    tree = apply_title_case(tree)
    tree = apply_smart_quotes(tree)

The order matters: quotes are converted on already trimmed text, and headings
are title-cased from their plain text.
"""

import re
from typing import AbstractSet, Iterable

from bs4 import BeautifulSoup, NavigableString
from bs4.element import PreformattedString

from ..config import SMALL_WORDS, TITLE_CASE_TAGS

_NBSP_ENTITY = re.compile(r'&nbsp;')
_WHITESPACE_RUN = re.compile(r'\s{2,}')
_SPACE_BEFORE_PUNCTUATION = re.compile(r'\s+([.,;:!?])')
_WORD_SPLIT = re.compile(r'\s+')

_OPENING_DOUBLE = re.compile(r'(^|[\s(\[{<])"')
_OPENING_SINGLE = re.compile(r"(^|[\s(\[{<])'")


# ===== SPACING =====

def _normalize_markup(markup: str) -> str:
    markup = _NBSP_ENTITY.sub(' ', markup).replace('\xa0', ' ')
    markup = _WHITESPACE_RUN.sub(' ', markup)
    markup = _SPACE_BEFORE_PUNCTUATION.sub(r'\1', markup)
    return markup.strip()


def _replace_contents(tag, markup: str) -> None:
    fragment = BeautifulSoup(markup, "html.parser")
    tag.clear()
    for child in list(fragment.contents):
        tag.append(child.extract())


def normalize_spacing(tree: BeautifulSoup) -> BeautifulSoup:
    """
    Collapse stray whitespace inside paragraphs and drop redundant empty ones.

    An empty paragraph that follows a paragraph with text is kept as a
    spacer until the final sweep; any other empty paragraph is removed
    immediately. Paragraphs without children are swept at the end.
    """
    for paragraph in tree.find_all("p"):
        if paragraph.decomposed:
            continue
        normalized = _normalize_markup(paragraph.decode_contents())

        if normalized:
            _replace_contents(paragraph, normalized)
            continue

        previous = paragraph.find_previous_sibling()
        if previous is None or previous.name != "p" or not previous.get_text().strip():
            paragraph.decompose()
        else:
            paragraph.clear()

    for paragraph in tree.find_all("p"):
        if not paragraph.contents:
            paragraph.decompose()

    return tree


# ===== TITLE CASE =====

def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_title_case(text: str, small_words: AbstractSet[str] = SMALL_WORDS) -> str:
    """
    Title-case a heading.

    Connector words stay lowercase unless they open or close the heading;
    each segment of a hyphenated word is capitalized.

    >>> to_title_case("the quick BROWN fox jumps over a lazy-dog")
    'The Quick Brown Fox Jumps Over a Lazy-Dog'
    """
    words = _WORD_SPLIT.split(text.lower())
    filled = [index for index, word in enumerate(words) if word]
    edges = (filled[0], filled[-1]) if filled else ()

    titled = []
    for index, word in enumerate(words):
        if not word:
            titled.append("")
        elif "-" in word:
            titled.append("-".join(_capitalize(part) for part in word.split("-")))
        elif index not in edges and word in small_words:
            titled.append(word)
        else:
            titled.append(_capitalize(word))

    return " ".join(titled)


def apply_title_case(
    tree: BeautifulSoup,
    tags: Iterable[str] = TITLE_CASE_TAGS,
    small_words: AbstractSet[str] = SMALL_WORDS,
) -> BeautifulSoup:
    """Replace the content of each h1-h3 with its title-cased text."""
    for heading in tree.find_all(list(tags)):
        heading.string = to_title_case(heading.get_text(), small_words)
    return tree


# ===== SMART QUOTES =====

def convert_smart_quotes(value: str) -> str:
    """
    Swap straight quotes for curly ones.

    A quote at the start, after whitespace or after an opening bracket opens;
    every other quote closes.
    """
    value = _OPENING_DOUBLE.sub('\\1\u201c', value)
    value = value.replace('"', '\u201d')
    value = _OPENING_SINGLE.sub('\\1\u2018', value)
    value = value.replace("'", '\u2019')
    return value


def apply_smart_quotes(tree: BeautifulSoup) -> BeautifulSoup:
    """Convert quotes in every text node. Attributes and comments are untouched."""
    for node in tree.find_all(string=True):
        if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
            continue
        converted = convert_smart_quotes(str(node))
        if converted != node:
            node.replace_with(converted)
    return tree
