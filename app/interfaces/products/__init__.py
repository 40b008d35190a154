"""
HTTP interface for the products bounded context.
"""
