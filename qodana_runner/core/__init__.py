"""Core functionality for Qodana Runner: settings resolution, tasks and execution."""
