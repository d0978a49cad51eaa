"""Infrastructure Layer — logging setup and the audio feedback adapter.

Invariants:
    - Infrastructure never imports calculator state logic from core/
"""
