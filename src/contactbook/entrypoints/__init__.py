"""Entrypoints (inbound adapters) for CONTACTBOOK.

Expose the application to the outside world through the CLI. Parse and validate
inputs, call the domain and adapters, and present results.
"""
