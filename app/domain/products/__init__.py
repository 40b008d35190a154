"""
Products bounded context — domain layer.

Holds the product entity, the closed set of error classifications
the product service may raise, and the service port itself.
"""
