"""
Blogging API: users, blogs and comments over a document store.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - blogging: User registration, blog posts, comments.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Use cases, DTOs, presence checks.
    - infrastructure: MongoDB and bcrypt adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
