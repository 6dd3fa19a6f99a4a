"""Infrastructure layer for files app.

This package contains integrations with external systems:
- Local disk storage for uploaded files
- Repositories over the relational store (files and tags)
- Metadata helpers (MIME type, extension)

Keep infrastructure concerns separate from business logic.
"""
