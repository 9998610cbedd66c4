"""Music tracker building blocks: red-black tree, IDs, lock hierarchy, text layout, waveforms, note names."""

__version__ = "0.1.0"
__all__ = ["rbtree", "numparse", "locking", "ids", "printer", "waveform", "notes"]