"""User domain module.

This domain manages user identity (email + hashed password), opaque
profile fields and the one-to-one AccountDetails companion record.
"""
