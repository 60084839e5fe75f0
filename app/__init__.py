"""
QA Service: question/answer CRUD over HTTP.

Application package root. A small service using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - qa: Questions and their answers.

Layers:
    - domain: Entities, store ports (ABCs), storage errors.
    - application: Request handlers and handler errors.
    - infrastructure: PostgreSQL and in-memory store adapters.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
