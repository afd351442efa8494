"""Sleep module - target-time sampling and synthetic sleep patterns.

This module provides:
- SleepStage enumeration and display labels
- Uniform target-time sampling inside a soft/hard window
- Biased-then-shuffled sleep-stage sequence generation with a light-sleep tail

No I/O and no shared state. All randomness comes from an injected source.
"""
