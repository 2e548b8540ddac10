import math
from pydantic import BaseModel


class Pagination(BaseModel):
    total: int
    limit: int
    page: int
    totalPages: int
    hasNextPage: bool
    hasPrevPage: bool


def build_pagination(total: int, page: int, limit: int) -> Pagination:
    total_pages = math.ceil(total / limit)
    return Pagination(
        total=total,
        limit=limit,
        page=page,
        totalPages=total_pages,
        hasNextPage=page < total_pages,
        hasPrevPage=page > 1,
    )
