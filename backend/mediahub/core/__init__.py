"""Core Layer: pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here are pure and deterministic (time is always passed in)

Design Decisions:
    - Functional core separated from the imperative shell: services do the
      awaiting, core decides
"""
