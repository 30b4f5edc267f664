"""Adapters (infrastructure) for CONTACTBOOK.

Provide concrete readers that feed external data (CSV files) into the domain.

Dependency rule: may import `contactbook.domain`; the domain must not import this
package.
"""
