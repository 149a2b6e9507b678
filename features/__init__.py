"""Feature packages: sentiment, journal, analytics and profile.

Each feature exposes ``routes.router`` for ``main.create_app`` and keeps its
schemas, storage access and business logic in sibling modules.
"""
