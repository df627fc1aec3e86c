"""
Account Infrastructure Layer
SQLAlchemy persistence and the Argon2id credential hasher
"""
