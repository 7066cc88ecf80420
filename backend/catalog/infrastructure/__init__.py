"""Infrastructure Layer: cross-cutting concerns (logging, startup seeding).

Invariants:
    - Infrastructure never contains catalog query/mutation rules
"""
