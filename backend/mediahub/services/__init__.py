"""Services Layer: the integrity and lifecycle rules for each entity.

Invariants:
    - One service per entity, repository injected at construction
    - PublicationService depends on the Media and Post services through
      the MediaLookup / PostLookup protocols, never on a global

Design Decisions:
    - Services raise MediaHubError subclasses; the API layer maps them to HTTP
"""
