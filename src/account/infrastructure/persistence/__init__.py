"""
Account Persistence
ORM models, repositories and bootstrap
"""
