"""
Infrastructure layer package for the Principal Service.
Provides document repositories, the SQL document store and the microservice HTTP client.
"""

__all__ = [
    "database",
    "external_apis",
]
