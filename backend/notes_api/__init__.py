"""
Notes API — Application Package
=================================

A small CRUD service for note records (create, read, update, delete,
paginated list) on top of an async SQL database.

Layers:

    ┌─────────────────────────────────────┐
    │   Routes (HTTP + input validation)  │  ← routes/, validators.py
    ├─────────────────────────────────────┤
    │   Services (outcome orchestration)  │  ← services/note_service.py
    ├─────────────────────────────────────┤
    │   Store client (persistence API)    │  ← services/note_store.py
    ├─────────────────────────────────────┤
    │   Models & Database                 │  ← models/, database.py
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
