"""Infrastructure layer: catalog loading, memory stores, SQLite stores.

This layer depends on stdlib, the domain layer, and SQLAlchemy.
It must never import from services, commands, output, or web.
The service layer bridges between domain rules and these stores.
"""
