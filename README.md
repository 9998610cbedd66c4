# trackercore

Building blocks for a music tracker, each usable on its own. The package has
no runtime dependencies.

## Modules

### `trackercore.rbtree`

`RedBlackTree` is a self-balancing search tree of `RedBlackNode` objects, each
holding an integer `value` (the key) and an arbitrary `data` payload.

- `insert(node)` links a node in; a duplicate key raises `ValueError`.
- `find(value)` returns the node with that key, or `None`.
- `remove(node)` removes the key held by `node` and returns the node that was
  actually unlinked (it carries the removed key and payload, and may be a
  different object from the one passed in), so it can be inserted elsewhere.
- `len(tree)` and iteration in ascending key order.
- `count_black_height(node)` and `double_red_node(node)` help check the
  tree's invariants.

### `trackercore.ids`

`IDIssuer(amount, lock=None)` is a pool of the identifiers `0 .. amount-1`.
`issue()` hands one out with a reference count of one (raising
`IssuerExhausted` when the pool is empty), `increase_count(value)` adds a
reference, `return_id(value)` drops one and puts the identifier back in the
pool at zero. `reference_count(value)`, `available` and `issued` report the
state. Operations are guarded by `lock` (a `threading.RLock` by default).

`ID(issuer)` is a handle on one identifier: `acquire()`, `release()`,
`copy()` (a new handle sharing the identifier), `assign(other)`, `close()`,
`is_empty()`, `is_valid()`, `value`, equality by identifier, and use as a
context manager that closes on exit.

### `trackercore.locking`

`LockHierarchy(level_amount)` registers locks (anything with
`acquire(blocking=...)` and `release()`, such as `threading.Lock`) in numbered
levels with `add_lock(lock, level)`. Locks may only be taken at a level below
the one currently held; requests out of order, or for locks not registered at
that level, raise `HierarchyError`.

- `acquire(locks, level)` blocks; `try_acquire(locks, level)` returns `False`
  without holding anything if a lock is busy.
- `release()` frees the current level and returns to the previous one.
- `guard(locks, level)` is a context manager around acquire/release.
- `set_ready()` completes registration; `LockHierarchy.derived(original)`
  builds a per-thread copy of a ready hierarchy.
- `is_lock_acquired`, `is_level_acquired`, `current_level` and
  `format_locks()` inspect the state.

### `trackercore.numparse`

`parse_int(text)` and `parse_double(text)` accept an optional leading `-`,
digits and (for doubles) one `.`; anything else raises `ValueError`. An
empty string parses as zero.

### `trackercore.printer`

`Printer(glyphs, first_symbol, last_symbol, blit)` lays out text with a bitmap
font: `glyphs` holds one `Rect` (or `(x, y, width, height)`) per symbol in the
range, and `blit(dest, source, clip)` is called for every glyph drawn by
`draw_text(text, x, y, clip=None)`. Measurement: `text_width`, `text_height`,
`text_x(text, index)`, `text_index(text, x)` and `max_height()`. Characters
outside the range take no space, `\n` starts a new line 20 pixels lower, and a
NUL character ends the text.

### `trackercore.waveform`

`Canvas(width, height)` is an RGBA pixel grid with `pixel(x, y)` and
`clear()`. `render_waveform(canvas, samples)` clears it and draws signed
16-bit samples as red bars with a white diagonal guide line.

### `trackercore.notes`

`note_name(index)` gives names such as `c-0` or `c#-4`; `note_names(count=128)`
lists them in order.

## Example

```python
import threading

from trackercore.ids import ID, IDIssuer
from trackercore.locking import LockHierarchy
from trackercore.notes import note_names
from trackercore.numparse import parse_int

issuer = IDIssuer(16)
ident = ID(issuer)
ident.acquire()
shared = ident.copy()          # both handles hold the same identifier
ident.release()
shared.close()                 # the identifier returns to the pool

io_lock = threading.Lock()
hierarchy = LockHierarchy(2)
hierarchy.add_lock(io_lock, 0)
hierarchy.set_ready()
with hierarchy.guard([io_lock], 0):
    pass

names = note_names()           # ['c-0', 'c#-0', 'd-0', ...]
value = parse_int("-42")
```

## What it does not do

This is a library of parts only. It has no windows or screens, no audio
playback or sample loading, no song or instrument storage, and no command to
run; a program using it supplies those, for example the `blit` function for
`Printer` and the display of a rendered `Canvas`.

## Tests

```
pip install ".[test]"
pytest
```