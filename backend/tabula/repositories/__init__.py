"""
Repositories package — data-access layer.

Each repository file handles all DB operations for one domain entity.
Repositories do NOT handle HTTP concerns or business logic beyond
basic data integrity.

Convention:
    - One file per aggregate root (users.py, tables.py, records.py)
    - All functions accept `AsyncSession` as the first argument
    - Every lookup of a user-owned row filters by owner as well as id
    - Use `flush()` internally; the session commit/rollback is handled
      by the `get_db` dependency in the API layer
"""
