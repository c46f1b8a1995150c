# This file handles limit/offset paging for list endpoints.
# Both resources share the same bounds; news additionally caps how far a client may skip.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PagingSpec:
    limit: int
    offset: int

    def as_params(self) -> dict[str, int]:
        return {"limit": self.limit, "offset": self.offset}


def build_paging_metadata(*, paging: PagingSpec, total: int) -> dict[str, Any]:
    """Paging block returned next to `data` in list responses."""

    return {"limit": paging.limit, "offset": paging.offset, "total": total}
