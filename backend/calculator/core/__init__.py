"""Core Layer — pure calculator logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Apart from logging, side effects leave the core only through the FeedbackPort callable
"""
