"""Command-line entrypoint for CONTACTBOOK."""
