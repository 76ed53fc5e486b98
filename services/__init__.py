"""
services/ - Business Logic Layer
================================
Services sit between route handlers and repositories: they parse request
data, and turn absent rows and rejected input into typed errors.
"""
