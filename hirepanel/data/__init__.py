"""
Data layer for HirePanel.

Provides the row client the screens talk to, its MongoDB backend, data
models, and repository classes.

Submodules:
- client: Row client interface and BackendError
- query: Select query builder
- schema: Relations between tables
- database: MongoDB connection management
- mongo: MongoDB row client
- models: Pydantic data models
- repositories: Typed reads per table
"""

from .client import BackendError, RowClient
from .database import DatabaseManager, get_database_manager
from .mongo import MongoRowClient, get_row_client
from .query import SelectQuery, SelectResult, select

__all__ = [
    "BackendError",
    "RowClient",
    "DatabaseManager",
    "get_database_manager",
    "MongoRowClient",
    "get_row_client",
    "SelectQuery",
    "SelectResult",
    "select",
]
