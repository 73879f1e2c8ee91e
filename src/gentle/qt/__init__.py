"""PyQt6 presentation adapter.

`bindings` needs PyQt6 at import time; `qss` is plain text generation.
"""
