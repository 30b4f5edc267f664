"""Domain layer for CONTACTBOOK.

Contains the contact record, the manager that owns a collection of contacts,
and the domain errors raised when a contact is rejected. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `contactbook.adapters` or `contactbook.entrypoints`.
"""
