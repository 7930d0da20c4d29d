"""
Chat rooms service.

In-memory chat rooms with a global user directory, per-room membership and
edit-tracked messages.
"""
