"""
API server package — HTTP access to the password strength scorer.
"""
