#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Executor Module

Provides block flow pagination.
"""

from .block_flow import (
    BlockFlowExecutor,
    FlowState,
    PaginationResult,
    paginate_content,
    split_item,
    split_list,
    split_paragraph,
)

__all__ = [
    "BlockFlowExecutor",
    "FlowState",
    "PaginationResult",
    "paginate_content",
    "split_item",
    "split_list",
    "split_paragraph",
]
