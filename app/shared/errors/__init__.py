"""
Shared error handling package.

Holds the single place where payload errors and product domain
errors are turned into HTTP status codes and MessageError bodies.
"""
