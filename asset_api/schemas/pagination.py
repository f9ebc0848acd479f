import math
from typing import Any

from asset_api.schemas.common import BaseResponse

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 50
DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"


class MetaPagination(BaseResponse):
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    order: str | None = None
    sort_by: str | None = None
    offset: int = 0
    total: int | None = None
    total_page: int | None = None
    data: list[Any] | None = None

    def parse_pagination(self) -> "MetaPagination":
        """Normalize page/limit/order/sort_by in place and compute the offset."""
        if self.page <= 0:
            self.page = DEFAULT_PAGE

        if self.limit <= 0 or self.limit > MAX_LIMIT:
            self.limit = DEFAULT_LIMIT

        if not self.sort_by:
            self.sort_by = DEFAULT_SORT_BY

        order = (self.order or "").lower()
        self.order = order if order in ("asc", "desc") else DEFAULT_ORDER

        self.offset = (self.page - 1) * self.limit
        return self

    def set_total(self, total: int) -> None:
        self.total = total
        self.total_page = math.ceil(total / self.limit)
