"""
Per-domain repository modules for database access.

Route handlers and services call these functions instead of querying the
session directly.
"""
