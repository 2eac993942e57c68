"""Heuristic constants of the min/max subsampler.

These values were tuned by eye against real charts. Changing any of them
changes the observable output, so they are pinned by tests.
"""

from __future__ import annotations

# Bucket ids further apart than this start a fresh singleton pair. Anything
# above 1.0 works; the margin absorbs floating-point jitter at bucket edges.
BUCKET_JUMP_THRESHOLD = 1.25

# Count-based subsampling is skipped when the requested point count times this
# ratio reaches the input size.
FULL_RESOLUTION_RATIO = 1.5

# Bucket id used for every point when bucketing is disabled (bucket size <= 0).
NO_BUCKET = -1.0

# "Previous bucket" before the first point has been seen.
INITIAL_BUCKET = -1.0

DEFAULT_TARGET_POINTS = 2000
