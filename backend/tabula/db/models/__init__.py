"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `tabula/db/models/<table_name>.py`
    2. Import it here
"""

from tabula.db.models.base import Base
from tabula.db.models.record import Record
from tabula.db.models.table import Table
from tabula.db.models.user import User

__all__ = [
    "Base",
    "Record",
    "Table",
    "User",
]
