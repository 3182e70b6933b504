"""
API package containing versioned routes.

``deps`` exposes the FastAPI dependencies shared by all versions;
``v1`` holds the first public version of the catalog routes.
"""
