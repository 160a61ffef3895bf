"""mediahub: media outlets, posts, and the publications that schedule them.

Invariants:
    - Package root contains no executable code (no import side effects)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
