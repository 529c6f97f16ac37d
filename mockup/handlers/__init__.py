"""Lambda-style HTTP handlers."""
