"""Services Layer — session registry and key dispatch around the pure engine."""
