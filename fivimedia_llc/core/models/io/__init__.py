"""
I/O schemas for the HTTP API.

Request models validate client input and response models shape what the
endpoints return. Entities are converted with ``model_validate`` thanks to
``from_attributes``.
"""
