"""
Blogging bounded context: domain layer.

This module contains all domain logic for the blogging context:
- Users and password hashing
- Blogs and their authors
- Comments attached to blogs
"""
