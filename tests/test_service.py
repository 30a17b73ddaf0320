from __future__ import annotations

import pendulum
import pytest

from macnotes.model.entity_id import generate_entity_id, parse_entity_id
from macnotes.model.note import title_line
from macnotes.service.folder import (
    normalize_folder_name,
    parse_folder_lines,
    sort_folders,
)
from macnotes.service.search import filter_notes, most_recently_updated, note_matches

from conftest import make_note

T1 = pendulum.datetime(2025, 3, 1, 9, 0, tz="UTC")
T2 = pendulum.datetime(2025, 3, 2, 9, 0, tz="UTC")


@pytest.mark.parametrize(
    "folder,expected",
    [
        (None, "General"),
        ("", "General"),
        ("  \n ", "General"),
        (" Work ", "Work"),
        ("a\r\nb", "a b"),
    ],
)
def test_normalize_folder_name(folder: str | None, expected: str) -> None:
    assert normalize_folder_name(folder) == expected


def test_sort_folders_pins_default_and_dedupes() -> None:
    assert sort_folders(["work", "General", "Archive", "work", "Work"]) == [
        "General",
        "Archive",
        "Work",
        "work",
    ]


def test_sort_folders_always_includes_default() -> None:
    assert sort_folders([]) == ["General"]


def test_parse_folder_lines_skips_blank_lines() -> None:
    assert parse_folder_lines("a\n\n  b \n") == ["a", "b"]


def test_title_line_is_first_line_trimmed() -> None:
    assert title_line(make_note("  Groceries  \nmilk", T1)) == "Groceries"
    assert title_line(make_note("", T1)) == ""


def test_blank_query_matches_everything() -> None:
    assert note_matches(make_note("anything", T1), "   ")


def test_query_matches_body_case_insensitively() -> None:
    note = make_note("Trip\nPack the PASSPORT", T1)

    assert note_matches(note, "passport")
    assert note_matches(note, "trip")
    assert not note_matches(note, "visa")


def test_filter_notes_keeps_collection_order_for_ties() -> None:
    first = make_note("first", T1)
    second = make_note("second", T1)
    newer = make_note("newer", T2)

    result = filter_notes([first, second, newer])

    assert [note["id"] for note in result] == [newer["id"], first["id"], second["id"]]


def test_filter_notes_blank_folder_means_every_folder() -> None:
    home = make_note("home", T1, folder="Home")
    work = make_note("work", T2, folder="Work")

    assert len(filter_notes([home, work], folder="")) == 2
    assert filter_notes([home, work], folder="Home") == [home]


def test_most_recently_updated() -> None:
    older = make_note("older", T1)
    newer = make_note("newer", T2)

    assert most_recently_updated([older, newer]) == newer
    assert most_recently_updated([]) is None


def test_entity_ids_parse_only_hyphenated_uuids() -> None:
    generated = generate_entity_id()

    assert parse_entity_id(generated) == generated
    assert parse_entity_id(generated.upper()) == generated.upper()
    assert parse_entity_id("not-a-uuid") is None
    assert parse_entity_id(generated.replace("-", "")) is None
