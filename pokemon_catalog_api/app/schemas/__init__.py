"""
Pydantic schema definitions for API payloads.

``pokemon`` holds the entity model returned by every route plus the
create/update request models and their explicit validator;
``pagination`` holds the listing query parameters.
"""
