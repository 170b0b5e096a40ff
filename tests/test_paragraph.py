"""Test-suite for `docx_model.models.paragraph` module."""

import pytest

from docx_model.models import (
    AlignmentType,
    Break,
    BreakType,
    DeleteText,
    Paragraph,
    Run,
    Tab,
    Text,
)


def test_a_new_run_is_empty():
    run = Run()

    assert run.children == []
    assert run.property.toDict() == {}


def test_run_children_keep_insertion_order():
    run = Run().addTab().addText("Hello").addBreak(BreakType.PAGE).addDeleteText("gone")

    assert run.children == [Tab(), Text("Hello"), Break(BreakType.PAGE), DeleteText("gone")]


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("addText", ("a",)),
        ("addDeleteText", ("b",)),
        ("addTab", ()),
        ("addBreak", ("column",)),
        ("size", (30,)),
        ("color", ("C9211E",)),
        ("highlight", ("yellow",)),
        ("bold", ()),
        ("italic", ()),
        ("underline", ("single",)),
        ("vanish", ()),
    ],
)
def test_every_run_mutator_returns_the_same_run(method, args):
    run = Run()

    assert getattr(run, method)(*args) is run


def test_run_properties_are_recorded():
    run = Run().size(30).color("C9211E").highlight("yellow").underline("single").bold().italic().vanish()

    assert run.property.toDict() == {
        "size": 30,
        "color": "C9211E",
        "highlight": "yellow",
        "underline": "single",
        "bold": True,
        "italic": True,
        "vanish": True,
    }


def test_run_text_skips_deleted_text():
    run = Run().addText("a").addTab().addDeleteText("x").addText("b").addBreak("textWrapping")

    assert run.getText() == "a\tb\n"


def test_paragraph_collects_runs_in_order():
    r1, r2 = Run().addText("Hello, "), Run().addText("world").bold()

    paragraph = Paragraph().addRun(r1).addRun(r2)

    assert paragraph.children == [r1, r2]
    assert paragraph.getText() == "Hello, world"


def test_paragraph_properties_last_write_wins():
    paragraph = Paragraph().align("left").align(AlignmentType.CENTER).style("Heading1")

    assert paragraph.property.toDict() == {"alignment": AlignmentType.CENTER, "styleId": "Heading1"}


def test_a_new_paragraph_has_no_properties():
    assert Paragraph().property.toDict() == {}
