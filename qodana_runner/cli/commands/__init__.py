"""CLI commands, one module per task."""
