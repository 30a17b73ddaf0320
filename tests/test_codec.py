from __future__ import annotations

import pendulum
import pytest

from macnotes import codec
from macnotes.model.note_file import NoteFileFormat

from conftest import make_note

T0 = pendulum.datetime(2025, 3, 1, 9, 0, tz="UTC")


@pytest.mark.parametrize(
    "body,rich_text",
    [
        ("", None),
        ("single line", None),
        ("Title\nsecond line\n\nlast", "e1xydGYxIHRlc3R9"),
        ("trailing newline\n", None),
        ("has a --- dash line\n---\nin the middle", None),
        ("\n---\nstarts with the separator", "cGF5bG9hZA=="),
    ],
)
def test_encode_then_decode_keeps_body_and_rich_text(
    body: str, rich_text: str | None
) -> None:
    note = make_note(body, T0, folder="Work", rich_text=rich_text)

    decoded = codec.decode(codec.encode(note))

    assert decoded["format"] is NoteFileFormat.CURRENT
    assert decoded["body"] == body
    assert decoded["rich_text"] == rich_text
    assert decoded["folder"] == "Work"


def test_encode_writes_marker_folder_and_rtf_header() -> None:
    note = make_note("hello", T0, folder="Ideas", rich_text="YWJj")

    assert codec.encode(note) == "MACNOTES_V2\nfolder:Ideas\nrtf:YWJj\n---\nhello"


def test_encode_leaves_rtf_line_empty_without_payload() -> None:
    note = make_note("hello", T0)

    assert codec.encode(note).split("\n")[2] == "rtf:"


def test_decode_empty_rtf_and_blank_folder_fall_back_to_defaults() -> None:
    decoded = codec.decode("MACNOTES_V2\nfolder:   \nrtf:\n---\nbody")

    assert decoded["rich_text"] is None
    assert decoded["folder"] == "General"
    assert decoded["body"] == "body"


def test_decode_current_header_without_folder_line() -> None:
    decoded = codec.decode("MACNOTES_V2\nrtf:abc\n---\nbody")

    assert decoded["folder"] == "General"
    assert decoded["rich_text"] == "abc"


def test_decode_legacy_header_keeps_only_body() -> None:
    text = (
        "title:Shopping\n"
        "createdAt:2023-01-01T10:00:00Z\n"
        "updatedAt:2023-01-02T10:00:00Z\n"
        "---\n"
        "Shopping\nmilk"
    )

    decoded = codec.decode(text)

    assert decoded["format"] is NoteFileFormat.LEGACY
    assert decoded["body"] == "Shopping\nmilk"
    assert decoded["rich_text"] is None
    assert decoded["folder"] == "General"


@pytest.mark.parametrize("prefix", ["title:", "createdAt:", "updatedAt:"])
def test_any_single_legacy_line_marks_legacy_header(prefix: str) -> None:
    decoded = codec.decode(f"{prefix}x\n---\nbody\n---\nmore")

    assert decoded["format"] is NoteFileFormat.LEGACY
    assert decoded["body"] == "body\n---\nmore"


def test_decode_without_separator_is_whole_text() -> None:
    text = "just some\nplain text\n"

    decoded = codec.decode(text)

    assert decoded["format"] is NoteFileFormat.RAW
    assert decoded["body"] == text
    assert decoded["rich_text"] is None


def test_decode_unrecognised_header_keeps_original_text() -> None:
    text = "meeting notes\n---\nagenda"

    decoded = codec.decode(text)

    assert decoded["format"] is NoteFileFormat.RAW
    assert decoded["body"] == text


def test_plain_text_that_looks_like_a_header_is_misread() -> None:
    # documented limitation of the unescaped format
    text = "title: my essay\n---\nbody"

    assert codec.decode(text)["body"] == "body"


def test_decode_empty_string() -> None:
    decoded = codec.decode("")

    assert decoded["format"] is NoteFileFormat.RAW
    assert decoded["body"] == ""
