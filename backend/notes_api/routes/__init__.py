# Routes package init
"""
Notes API — Routes Package
============================

Route Inventory:
    - notes.py:   POST / , GET / , GET|PUT|DELETE /{id}
    - health.py:  GET /health

Routes stay thin: read raw input, validate it, call the note service,
wrap the result in a response envelope. health.router must be included
before notes.router so /health is not captured by /{note_id}.
"""
