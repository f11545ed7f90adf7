"""KADDEM command-line interface."""
