"""Lazy page iteration over AWS list/describe operations."""

import logging
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)


def iter_pages(client: Any, operation: str, paginate: bool = True, **kwargs: Any) -> Iterator[Dict[str, Any]]:
    """
    Yield response pages of an AWS operation.

    With paginate=True the boto3 paginator for the operation is used, so
    every page is consulted. With paginate=False a single call is issued and
    only its first page is yielded.

    Pages are requested lazily: a consumer that stops iterating issues no
    further calls. Each call to iter_pages starts over from the first page.
    Botocore errors propagate to the consumer.
    """
    if paginate:
        paginator = client.get_paginator(operation)
        for page in paginator.paginate(**kwargs):
            yield page
    else:
        logger.debug(f"Issuing {operation} without pagination")
        yield getattr(client, operation)(**kwargs)


def iter_items(
    client: Any, operation: str, result_key: str, paginate: bool = True, **kwargs: Any
) -> Iterator[Dict[str, Any]]:
    """Yield the entries under result_key across the pages of an operation."""
    for page in iter_pages(client, operation, paginate=paginate, **kwargs):
        for item in page.get(result_key, []):
            yield item
