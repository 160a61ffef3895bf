"""Infrastructure Layer: database session management and logging setup.

Invariants:
    - Everything here does IO; nothing here holds business rules
"""
