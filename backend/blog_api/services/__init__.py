"""Services Layer — query building and blog post operations.

Invariants:
    - Services own all IO against the AsyncSession
    - Pure decisions (pagination, ownership) delegated to core/

Design Decisions:
    - Routes stay thin: parse, call service, wrap in envelope
"""
