"""Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository per entity, bound to the request's AsyncSession
    - Every mutating call commits; the call is the unit of atomicity
"""
