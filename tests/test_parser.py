import copy
import dataclasses
import pickle
import time

import pytest

from MarkTree import markdown_parser
from MarkTree.errors import DocumentParseError, FailureKind, ParseError
from MarkTree.model import (
    Bold,
    CodeBlock,
    Document,
    Heading,
    InlineCode,
    Italic,
    Link,
    OrderedList,
    Plain,
    Quote,
    Text,
    UnorderedList,
    as_data,
)


def test_parse_blocks_and_inline():
    md_text = "# Title\n\nSome *italic* and **bold** text.\n"
    document = markdown_parser.parse_document(md_text)
    assert document.blocks == (
        Heading(1, (Plain("Title"),)),
        Text(()),
        Text((Plain("Some "), Italic("italic"), Plain(" and "), Bold("bold"), Plain(" text."))),
    )


@pytest.mark.parametrize("level", range(1, 7))
def test_heading_levels(level):
    document = markdown_parser.parse_document("#" * level + " title\n")
    assert document.blocks == (Heading(level, (Plain("title"),)),)


def test_list_stops_at_first_unprefixed_line():
    document = markdown_parser.parse_document("- a\n- b\nPlain line\n")
    assert document.blocks == (
        UnorderedList(((Plain("a"),), (Plain("b"),))),
        Text((Plain("Plain line"),)),
    )


def test_lists_never_mix_markers():
    document = markdown_parser.parse_document("1. one\n2. two\n- dash\n")
    assert document.blocks == (
        OrderedList(((Plain("one"),), (Plain("two"),))),
        UnorderedList(((Plain("dash"),),)),
    )


def test_quote_followed_by_text():
    document = markdown_parser.parse_document("> a\n> *b*\nafter\n")
    assert document.blocks == (
        Quote(((Plain("a"),), (Italic("b"),))),
        Text((Plain("after"),)),
    )


def test_code_block_preserved_verbatim():
    document = markdown_parser.parse_document("```py\nx = 1\n```")
    assert document.blocks == (CodeBlock("x = 1\n", "py"),)

    document = markdown_parser.parse_document("```\ncode\n```")
    assert document.blocks == (CodeBlock("code\n", None),)


def test_newline_after_closing_fence_is_an_empty_line():
    document = markdown_parser.parse_document("```\n- a\n  b\n```\n")
    assert document.blocks == (CodeBlock("- a\n  b\n", None), Text(()))


def test_parse_readme():
    md_text = (
        "# Foobar\n\nFoobar is a Python library for dealing with word pluralization.\n\n"
        "```bash\n#!/bin/bash\npip install foobar\n```\n## Installation\n\n"
        "Use the package manager [pip](https://pip.pypa.io/en/stable/) to install foobar.\n"
        "```python\nimport foobar\n\nfoobar.pluralize('word') # returns 'words'\n"
        "foobar.pluralize('goose') # returns 'geese'\n"
        "foobar.singularize('phenomena') # returns 'phenomenon'\n```"
    )
    document = markdown_parser.parse_document(md_text)
    assert document.blocks == (
        Heading(1, (Plain("Foobar"),)),
        Text(()),
        Text((Plain("Foobar is a Python library for dealing with word pluralization."),)),
        Text(()),
        CodeBlock("#!/bin/bash\npip install foobar\n", "bash"),
        Text(()),
        Heading(2, (Plain("Installation"),)),
        Text(()),
        Text(
            (
                Plain("Use the package manager "),
                Link("pip", "https://pip.pypa.io/en/stable/"),
                Plain(" to install foobar."),
            )
        ),
        CodeBlock(
            "import foobar\n\nfoobar.pluralize('word') # returns 'words'\n"
            "foobar.pluralize('goose') # returns 'geese'\n"
            "foobar.singularize('phenomena') # returns 'phenomenon'\n",
            "python",
        ),
    )


def test_inline_code_in_paragraph():
    document = markdown_parser.parse_document("Run `pip`bash now\n")
    assert document.blocks == (Text((Plain("Run "), InlineCode("pip", "bash"), Plain(" now"))),)


def test_empty_input_is_rejected():
    with pytest.raises(DocumentParseError) as excinfo:
        markdown_parser.parse_document("")
    error = excinfo.value
    assert error.kind is FailureKind.EXHAUSTED
    assert (error.offset, error.line, error.column) == (0, 1, 1)
    assert error.remainder == ""


def test_failure_points_at_first_unparseable_block():
    with pytest.raises(DocumentParseError) as excinfo:
        markdown_parser.parse_document("ok\n- a\n- *b\nlater\n")
    error = excinfo.value
    assert (error.offset, error.line, error.column) == (7, 3, 1)
    assert error.remainder == "- *b\nlater\n"
    assert isinstance(error.__cause__, ParseError)
    assert error.__cause__.kind is FailureKind.UNTERMINATED
    assert "line 3, column 1" in str(error)


def test_missing_final_newline_is_rejected():
    with pytest.raises(DocumentParseError) as excinfo:
        markdown_parser.parse_document("# Title\nlast line")
    assert excinfo.value.line == 2


def test_document_is_immutable():
    document = markdown_parser.parse_document("# Title\n")
    assert isinstance(document, Document)
    assert len(document) == 1
    assert list(document) == list(document.blocks)
    with pytest.raises(dataclasses.FrozenInstanceError):
        document.blocks[0].level = 2


def test_as_data():
    document = markdown_parser.parse_document("# Title\n- [a](b)\n")
    assert as_data(document) == [
        {"type": "Heading", "level": 1, "content": [{"type": "Plain", "text": "Title"}]},
        {"type": "UnorderedList", "items": [[{"type": "Link", "label": "a", "url": "b"}]]},
    ]


def test_large_document_parses_in_linear_time():
    line = "some plain text line with *it* and **b** ok\n"
    start = time.perf_counter()
    document = markdown_parser.parse_document(line * 100_000)
    elapsed = time.perf_counter() - start
    assert len(document) == 100_000
    assert document.blocks[-1] == Text(
        (Plain("some plain text line with "), Italic("it"), Plain(" and "), Bold("b"), Plain(" ok"))
    )
    # a copy of the remaining input per step took minutes at this size
    assert elapsed < 60


def test_parse_errors_survive_copy_and_pickle():
    with pytest.raises(DocumentParseError) as excinfo:
        markdown_parser.parse_document("ok\n*broken\n")
    error = excinfo.value
    for clone in (copy.copy(error), pickle.loads(pickle.dumps(error))):
        assert isinstance(clone, DocumentParseError)
        assert (clone.offset, clone.line, clone.column) == (3, 2, 1)
        assert clone.remainder == "*broken\n"
        assert str(clone) == str(error)

    inner = error.__cause__
    clone = pickle.loads(pickle.dumps(inner))
    assert (clone.kind, clone.position, clone.expected) == (inner.kind, inner.position, inner.expected)
