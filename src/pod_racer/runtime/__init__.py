"""Turn loop and command-line entry point."""
