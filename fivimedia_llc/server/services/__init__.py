"""
Service layer of the ordering backend.

Services hold the business rules; API handlers translate HTTP to service
calls and service errors back to HTTP.
"""
