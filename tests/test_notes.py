import pytest
from hypothesis import given, strategies as st

from trackercore.notes import NOTE_COUNT, note_name, note_names


def test_first_note_is_c_of_octave_zero():
    assert note_name(0) == "c-0"


def test_sharp_note_name():
    assert note_name(1) == "c#-0"


def test_highest_menu_note():
    assert note_names()[-1] == "g-10"


def test_default_list_covers_menu_range():
    names = note_names()
    assert len(names) == NOTE_COUNT
    assert len(set(names)) == NOTE_COUNT


def test_list_matches_single_names():
    assert note_names(30) == [note_name(i) for i in range(30)]


def test_zero_count_is_empty():
    assert note_names(0) == []


def test_twelve_pitch_classes_per_octave():
    names = note_names(24)
    first = [name.rsplit("-", 1)[0] for name in names[:12]]
    second = [name.rsplit("-", 1)[0] for name in names[12:]]
    assert first == second
    assert len(set(first)) == 12


@given(st.integers(min_value=0, max_value=10_000))
def test_octave_advances_every_twelve_notes(index):
    pitch, octave = note_name(index).rsplit("-", 1)
    next_pitch, next_octave = note_name(index + 12).rsplit("-", 1)
    assert pitch == next_pitch
    assert int(next_octave) == int(octave) + 1


@given(st.integers(min_value=0, max_value=10_000))
def test_name_has_no_spaces(index):
    name = note_name(index)
    assert " " not in name
    assert name.count("-") == 1


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        note_name(-1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        note_names(-5)