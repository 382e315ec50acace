"""Command-line entry points for ``model-test-gen``."""
