"""Tests for the CSS rule generator."""

from __future__ import annotations

import pytest
from tagicons.generator import MalformedTagError, generate_css, split_tag
from tagicons.settings import TagIconPair

SUPPRESS_BODY = " {\n  font-size: 0px;\n  padding: 0;\n}\n\n"
SIZE_BODY = " {\n  font-size: var(--font-text-size);\n}\n\n"


def _icon_rule(tag: str, clean: str, icon: str) -> str:
    return (
        f'.tag[href="#{tag}"]:after,\n'
        f".cm-hashtag-begin.cm-tag-{clean}:after {{\n"
        "  background-color: rgba(162, 93, 53, 0.1);\n"
        "  border: solid 1px rgba(209, 209, 209, 0.1);\n"
        "  border-radius: 3px;\n"
        f'  content: "{icon}";\n'
        "}\n\n"
    )


def test_empty_pair_list_renders_nothing() -> None:
    assert generate_css([]) == ""


def test_two_pairs_render_exact_stylesheet() -> None:
    pairs = [TagIconPair("a/b", "X"), TagIconPair("c/d", "Y")]

    expected = (
        '.tag[href="#a/b"],\n.cm-tag-ab,\n.tag[href="#c/d"],\n.cm-tag-cd'
        + SUPPRESS_BODY
        + '.tag[href="#a/b"]:after,\n.cm-tag-ab:after,\n'
        '.tag[href="#c/d"]:after,\n.cm-tag-cd:after'
        + SIZE_BODY
        + '.cm-active .tag[href="#a/b"],\n.cm-active .cm-tag-ab,\n'
        '.cm-active .tag[href="#c/d"],\n.cm-active .cm-tag-cd'
        + SIZE_BODY
        + _icon_rule("a/b", "ab", "X")
        + _icon_rule("c/d", "cd", "Y")
    )

    assert generate_css(pairs) == expected


def test_single_pair_contains_selectors_and_icon() -> None:
    css = generate_css([TagIconPair("task/inbox", "📥")])

    suppress_block = css.split("\n\n", 1)[0]
    assert '.tag[href="#task/inbox"]' in suppress_block
    assert ".cm-tag-taskinbox" in suppress_block
    assert 'content: "📥";' in css
    assert "hashtag + .cm-hashtag" not in css


def test_underscore_name_adds_continuation_selectors_to_each_block() -> None:
    css = generate_css([TagIconPair("status/in_progress", "🔄")])
    blocks = css.split("\n\n")

    token = ".cm-tag-statusin_progress"
    assert f"{token} + span.cm-hashtag,\n" in blocks[0]
    assert blocks[0].startswith('.tag[href="#status/in_progress"],\n')
    assert f"{token} + span.cm-hashtag + .cm-hashtag {{" in blocks[0]
    assert f"{token} + span.cm-hashtag:after,\n" in blocks[1]
    assert f"{token} + span.cm-hashtag + .cm-hashtag:after {{" in blocks[1]
    assert f".cm-active {token} + span.cm-hashtag,\n" in blocks[2]
    assert f".cm-active {token} + span.cm-hashtag + .cm-hashtag {{" in blocks[2]
    # the icon rule only targets the first span
    assert "span.cm-hashtag" not in blocks[3]


def test_generation_is_deterministic() -> None:
    pairs = [TagIconPair("task/inbox", "📥"), TagIconPair("status/in_progress", "🔄")]
    assert generate_css(pairs) == generate_css(pairs)


def test_reordering_pairs_reorders_rules() -> None:
    first = TagIconPair("a/b", "X")
    second = TagIconPair("c/d", "Y")

    css = generate_css([second, first])

    suppress_block = css.split("\n\n", 1)[0]
    assert suppress_block.index("cm-tag-cd") < suppress_block.index("cm-tag-ab")
    assert css.index('content: "Y"') < css.index('content: "X"')


def test_icon_is_inserted_verbatim() -> None:
    css = generate_css([TagIconPair("a/b", "<b>&</b>")])
    assert 'content: "<b>&</b>";' in css


@pytest.mark.parametrize(
    "tag",
    [
        "nocategory",
        "a/b/c",
        "/name",
        "category/",
        "task/in box",
        "task\tlist/inbox",
        "#task/inbox",
        "task/in#box",
        'task/"inbox"',
        "task/in\\box",
    ],
)
def test_malformed_tags_raise(tag: str) -> None:
    with pytest.raises(MalformedTagError) as excinfo:
        generate_css([TagIconPair("ok/tag", "X"), TagIconPair(tag, "Y")])

    assert excinfo.value.tag == tag
    assert excinfo.value.position == 1


def test_malformed_tags_can_be_skipped(caplog) -> None:
    pairs = [TagIconPair("broken", "Y"), TagIconPair("a/b", "X")]

    with caplog.at_level("WARNING", logger="tagicons.generator"):
        css = generate_css(pairs, skip_malformed=True)

    assert css == generate_css([TagIconPair("a/b", "X")])
    assert "broken" in caplog.text


def test_blank_rows_are_ignored() -> None:
    pairs = [TagIconPair("", ""), TagIconPair("a/b", "X"), TagIconPair("  ", "Z")]
    assert generate_css(pairs) == generate_css([TagIconPair("a/b", "X")])


def test_only_blank_rows_render_nothing() -> None:
    assert generate_css([TagIconPair("", "")]) == ""


def test_split_tag_returns_category_and_name() -> None:
    assert split_tag("task/inbox") == ("task", "inbox")


def test_whitespace_in_tag_never_reaches_output() -> None:
    css = generate_css(
        [TagIconPair("task/in box", "X"), TagIconPair("a/b", "Y")], skip_malformed=True
    )

    assert "in box" not in css
    assert ".cm-tag-ab" in css
