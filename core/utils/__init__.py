"""Small helpers shared by the core modules."""

from .env import get_bool_env, get_env, get_node_env, is_production

__all__ = ["get_bool_env", "get_env", "get_node_env", "is_production"]
