"""Business logic layer for files app.

This package contains all business logic for file operations:
- File upload: validation, tag resolution, disk write, metadata record
- Lookups by id, by tag and by page
- Tag resolution and creation

All business logic should be implemented here, separate from
models (data layer), infrastructure (external systems) and views.
Expected outcomes (invalid input, not found, failed disk write) are
returned as values, see ``results``; only unexpected faults raise.
"""
