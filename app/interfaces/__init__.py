"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
body decoding and validation, and wire/domain mappers.
Routes call the service port and return responses.
"""
