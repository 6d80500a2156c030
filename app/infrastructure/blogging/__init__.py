"""
Infrastructure adapters for the blogging bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems: the MongoDB document store and bcrypt.
"""
