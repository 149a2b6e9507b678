"""Provider implementations for external AI services."""
