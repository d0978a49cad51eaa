"""Calculator Application Package — key-driven four-function calculator engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
