"""Core models and schemas for the ordering service."""
