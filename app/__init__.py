"""
BenJerry Products API — CRUD over the ice-cream product catalog.

Application package root, laid out as ports & adapters.

Bounded contexts:
    - products: Product catalog CRUD.

Layers:
    - domain: Entities, error classifications, ports (ABCs).
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, decoding, mappers.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
