"""
Account bounded context.

Authentication verdicts, onboarding, profile and role maintenance, weight
history and password changes for end users.
"""
