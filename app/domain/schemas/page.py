"""Pagination request and result helpers."""

import math
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from app.domain.schemas.validation import FieldViolation


class PageRequest(BaseModel):
    # 0-based page index
    page: int = Field(0, ge=0)
    size: int = Field(20, ge=1)

    @property
    def offset(self) -> int:
        return self.page * self.size


def validate_page(page: int, size: int) -> List[FieldViolation]:
    violations = []
    if page < 0:
        violations.append(FieldViolation("page", "Page must be 0 or greater."))
    if size < 1:
        violations.append(FieldViolation("size", "Page size must be at least 1."))
    return violations


def build_page(items: List[Any], total: int, page_request: PageRequest) -> Dict[str, Any]:
    return {
        "items": items,
        "total": total,
        "page": page_request.page,
        "page_size": page_request.size,
        "total_pages": math.ceil(total / page_request.size),
    }
