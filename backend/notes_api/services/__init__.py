# Services package init
"""
Notes API — Services Layer
============================

What:  Business logic between routes (HTTP) and the database (persistence).
How:   Routes validate raw input, then call NoteService with the request's
       NoteStore. NoteService owns lookup, merge and outcome mapping; the
       store owns SQL.

Service Inventory:
    - NoteStore (abstract): persistence interface for notes
    - SQLAlchemyNoteStore: NoteStore on an async SQLAlchemy session
    - NoteService: create / get / update / delete / list orchestration
"""
