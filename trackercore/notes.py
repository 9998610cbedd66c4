"""Names of MIDI note numbers, as shown in note selection menus."""

from __future__ import annotations

NOTE_COUNT = 128

_PITCH_NAMES = ("c", "c#", "d", "d#", "e", "f", "f#", "g", "g#", "a", "a#", "b")


def note_name(index: int) -> str:
    """Name of note ``index``: pitch class and octave, e.g. ``c#-4``.

    Octaves start at zero with note 0. Raises ValueError for negative indices.
    """
    if index < 0:
        raise ValueError(f"note index {index} is negative")
    octave, pitch = divmod(index, len(_PITCH_NAMES))
    return f"{_PITCH_NAMES[pitch]}-{octave}"


def note_names(count: int = NOTE_COUNT) -> list[str]:
    """Names of the notes ``0 .. count-1``, in order."""
    if count < 0:
        raise ValueError(f"note count {count} is negative")
    return [note_name(index) for index in range(count)]