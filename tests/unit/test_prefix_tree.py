"""Tests for the prefix tree."""

import itertools

import pytest

from sildish.tree.prefix_tree import (
    EMPTY,
    Interior,
    Leaf,
    PositionedPayload,
    PrefixTree,
    PrefixTreeConflictError,
)


def test_build_empty_path_is_leaf():
    """An empty path builds a leaf directly."""
    assert PrefixTree.build("", "nothing") == Leaf("nothing")


def test_build_path():
    """A path builds a chain of one-child interiors ending in a leaf."""
    assert PrefixTree.build([1, 9], 10) == Interior({1: Interior({9: Leaf(10)})})

    greeting = PrefixTree.build("hello", "world")
    assert greeting == Interior(
        {"h": Interior({"e": Interior({"l": Interior({"l": Interior({"o": Leaf("world")})})})})}
    )


def test_lookup():
    """Lookup only answers payloads at the exact end of a path."""
    assert PrefixTree.build("", "nothing").lookup("") == "nothing"

    sum_tree = PrefixTree.build([1, 9], 10)
    assert sum_tree.lookup([1]) is None
    assert sum_tree.lookup([1, 9]) == 10
    assert sum_tree.lookup([1, 9, 0]) is None

    greeting = PrefixTree.build("hello", "world")
    for prefix in ["h", "he", "hel", "hell"]:
        assert greeting[prefix] is None
    assert greeting["hello"] == "world"
    assert greeting["help"] is None
    assert "hello" in greeting
    assert "hell" not in greeting


def test_lookup_empty_tree():
    assert EMPTY.lookup("") is None
    assert EMPTY.lookup("a") is None


def test_merge_empty():
    """Empty merged with anything yields that thing."""
    default_tree = PrefixTree.build("", "default")
    article = PrefixTree.build("an", "indefinite")

    assert EMPTY.merge(EMPTY) == EMPTY
    assert EMPTY.merge(default_tree) == default_tree
    assert default_tree.merge(EMPTY) == default_tree
    assert EMPTY.merge(article) == article
    assert article.merge(EMPTY) == article


def test_merge_leaves():
    """Conflicting leaves resolve to the new payload by default."""
    article = PrefixTree.build("an", "indefinite")
    abbreviated = PrefixTree.build("an", "indef. a.")

    assert article.merge(article) == article
    assert article.merge(abbreviated) == abbreviated
    assert abbreviated.merge(article) == article


def test_merge_custom_conflict_resolver():
    left = PrefixTree.build("an", "left")
    right = PrefixTree.build("an", "right")

    merged = left.merge(right, lambda old, new: f"{old}+{new}")
    assert merged["an"] == "left+right"

    def refuse(old, new):
        raise PrefixTreeConflictError(old, new)

    with pytest.raises(PrefixTreeConflictError):
        left.merge(right, refuse)


def test_merge_leaf_into_interior():
    """A leaf merged with an interior becomes the interior's payload."""
    short = PrefixTree.build("a", "article")
    longer = PrefixTree.build("an", "article")

    merged = short.merge(longer)
    assert merged == Interior({"a": Interior({"n": Leaf("article")}, "article")})
    assert longer.merge(short) == merged


def test_merge_overlaps():
    short = PrefixTree.build("an", "indefinite article")
    medium = PrefixTree.build("ant", "insect")
    long = PrefixTree.build("anteater", "mammal")

    short_medium = short.merge(medium)
    medium_short = medium.merge(short)
    assert short_medium == medium_short
    assert short_medium["an"] == "indefinite article"
    assert short_medium["ant"] == "insect"

    long_short_medium = long.merge(short_medium)
    long_medium_short = long.merge(medium_short)
    assert long_short_medium == long_medium_short
    assert long_short_medium["an"] == "indefinite article"
    assert long_short_medium["ant"] == "insect"
    assert long_short_medium["anteater"] == "mammal"


def test_merge_order_does_not_matter():
    trees = [
        PrefixTree.build("a", "a"),
        PrefixTree.build("an", "an"),
        PrefixTree.build("the", "the"),
    ]
    expected = trees[0].merge(trees[1]).merge(trees[2])

    for t1, t2, t3 in itertools.permutations(trees):
        assert t1.merge(t2).merge(t3) == expected


def test_merge_does_not_modify_operands():
    left = PrefixTree.build("ab", 1)
    right = PrefixTree.build("ac", 2)
    left.merge(right)

    assert left == PrefixTree.build("ab", 1)
    assert right == PrefixTree.build("ac", 2)


def test_with_path():
    a_tree = PrefixTree.build("a", "a")
    an_tree = a_tree.merge(PrefixTree.build("an", "an"))
    the_tree = an_tree.merge(PrefixTree.build("the", "the"))

    tree = EMPTY.with_path("a", "a")
    assert tree == a_tree

    tree = tree.with_path("an", "an")
    assert tree == an_tree
    assert tree != PrefixTree.build("an", "an")

    tree = tree.with_path("the", "the")
    assert tree == the_tree

    assert tree.with_path("a", "replaced")["a"] == "replaced"


def test_build_all(article_tree):
    assert article_tree["a"] == "indefinite article"
    assert article_tree["an"] == "indefinite article"
    assert article_tree["the"] == "definite article"
    assert article_tree["th"] is None


def test_build_all_empty_mapping():
    assert PrefixTree.build_all({}) == EMPTY


def test_all_payloads_along():
    tree = PrefixTree.build_all(
        {
            "": "nothing",
            "a": "article",
            "an": "article",
            "ant": "noun",
            "ante": "noun",
            "anteater": "noun",
        }
    )
    prefix = [
        PositionedPayload("nothing", 0),
        PositionedPayload("article", 1),
        PositionedPayload("article", 2),
        PositionedPayload("noun", 3),
        PositionedPayload("noun", 4),
    ]

    assert tree.all_payloads_along("") == prefix[:1]
    assert tree.all_payloads_along("a") == prefix[:2]
    assert tree.all_payloads_along("an") == prefix[:3]
    assert tree.all_payloads_along("ant") == prefix[:4]
    assert tree.all_payloads_along("ante") == prefix
    assert tree.all_payloads_along("antea") == prefix
    assert tree.all_payloads_along("anteat") == prefix
    assert tree.all_payloads_along("anteate") == prefix
    assert tree.all_payloads_along("anteater") == prefix + [PositionedPayload("noun", 8)]
    assert tree.all_payloads_along("anteaters") == prefix + [PositionedPayload("noun", 8)]


def test_all_payloads_along_divergent_path(article_tree):
    assert article_tree.all_payloads_along("x") == []
    assert article_tree.all_payloads_along("ax") == [PositionedPayload("indefinite article", 1)]
    assert article_tree.all_payloads_along("tha") == []


def test_describe_empty():
    assert EMPTY.describe() == "- «empty tree»\n"


def test_describe_leaf():
    assert PrefixTree.build("", "nothing").describe() == "* nothing\n"


def test_describe(article_tree):
    expected = (
        "* «nil»\n"
        "- a:\n"
        "\t* indefinite article\n"
        "\t- n:\n"
        "\t\t* indefinite article\n"
        "- t:\n"
        "\t* «nil»\n"
        "\t- h:\n"
        "\t\t* «nil»\n"
        "\t\t- e:\n"
        "\t\t\t* definite article\n"
    )
    assert article_tree.describe() == expected
    assert str(article_tree) == expected
