"""
Back-office API.

Every endpoint in this package requires a signed-in admin.
"""
