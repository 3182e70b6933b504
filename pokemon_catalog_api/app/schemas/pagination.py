"""
Query parameters for paginated listings.

Pages are 1‑indexed: page ``n`` of size ``limit`` covers ids
``(n - 1) * limit + 1`` to ``n * limit``.
"""

from pydantic import BaseModel, Field


class PaginationParams(BaseModel):
    limit: int = Field(10, ge=1, examples=[10])
    page: int = Field(1, ge=1, examples=[1])

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
