"""CONTACTBOOK

A small in-memory contact list. Contacts are validated on entry and kept
in insertion order for the lifetime of their owning manager.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
