"""HTTP API for schema-render."""
