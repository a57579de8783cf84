"""Command line interface for Qodana Runner."""
