"""Command implementations for the symscan CLI."""
