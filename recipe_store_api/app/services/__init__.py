"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  The
recipe store keeps its data in memory; swapping it for a database
backed implementation would not touch the API handlers.
"""
