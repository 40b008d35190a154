"""
Infrastructure adapters for the products bounded context.

Each adapter implements the ProductService port defined in the domain layer.
"""
