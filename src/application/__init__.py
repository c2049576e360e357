"""
Application Layer - Use cases and business workflows.

This layer orchestrates domain entities and coordinates application logic.
It depends on the domain layer and reaches storage only through the
domain repository interfaces.
"""
