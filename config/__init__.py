"""Settings read from the environment, grouped by concern.

- ``config.environment``: runtime environment and CORS origins
- ``config.api_keys``: provider credentials
- ``config.text``: model and generation defaults
- ``config.storage``: storage backend and canonical keys
"""
