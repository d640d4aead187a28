"""
Tests for rendering sections as text.
"""

import io

from dtdemo.report import print_sections, render_sections
from dtdemo.sections import FOOTER, TITLE, Section


def test_render_frames_sections():
    text = render_sections([Section("[One]", ("a", "b")), Section("[Two]", ("c",))])
    lines = text.split("\n")

    assert lines[0] == TITLE
    assert lines[2:5] == ["[One]", "a", "b"]
    assert lines[6:8] == ["[Two]", "c"]
    assert FOOTER in lines


def test_render_empty():
    text = render_sections([])
    assert text.startswith(TITLE)
    assert FOOTER in text


def test_print_to_stream():
    stream = io.StringIO()
    print_sections([Section("[One]", ("a",))], stream=stream)
    assert "[One]\na\n" in stream.getvalue()


def test_print_defaults_to_stdout(capsys):
    print_sections([Section("[One]", ("a",))])
    assert "[One]" in capsys.readouterr().out
