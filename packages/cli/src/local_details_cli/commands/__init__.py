"""Sub-commands for the local-details CLI."""
