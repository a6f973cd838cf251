"""Search configuration resolved from arguments and environment variables."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STRATEGY = "brute"
DEFAULT_WORKERS = 1

Strategy = Literal["brute", "reverse"]


class SearchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    strategy: Strategy = DEFAULT_STRATEGY
    max_expansions: int | None = Field(default=None, gt=0)
    # brute-force sources are searched in separate processes when above 1
    workers: int = Field(default=DEFAULT_WORKERS, ge=1)


def resolve_search_config(
    *,
    strategy: str | None = None,
    max_expansions: int | None = None,
    workers: int | None = None,
) -> SearchConfig:
    resolved_strategy = (
        strategy or os.getenv("HILLCLIMB_STRATEGY") or DEFAULT_STRATEGY
    ).lower()
    resolved_budget = (
        max_expansions
        if max_expansions is not None
        else os.getenv("HILLCLIMB_MAX_EXPANSIONS") or None
    )
    resolved_workers = (
        workers
        if workers is not None
        else os.getenv("HILLCLIMB_WORKERS") or DEFAULT_WORKERS
    )
    return SearchConfig.model_validate(
        {
            "strategy": resolved_strategy,
            "max_expansions": resolved_budget,
            "workers": resolved_workers,
        }
    )
