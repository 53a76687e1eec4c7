"""Domain layer for user accounts.

Business rules for registration and login, decoupled from the GraphQL
presentation layer and from the persistence infrastructure.
"""
