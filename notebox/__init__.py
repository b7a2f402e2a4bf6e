"""
NoteBox.

- backend/: REST API, database models, services and configuration
"""
