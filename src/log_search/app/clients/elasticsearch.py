from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
import asyncio
import logging

import httpx
from pydantic_core import to_json

from ..models import EsResponse, QueryOptions

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 3.0

HIGHLIGHT_BEGIN = "@BEGIN-LOGSEARCH-HIGHLIGHT@"
HIGHLIGHT_END = "@END-LOGSEARCH-HIGHLIGHT@"
FRAGMENT_SIZE = 32000
NUMBER_OF_FRAGMENTS = 100


def build_query(opts: QueryOptions) -> Dict[str, Any]:
    """Build the filtered-query body for the _search endpoint.

    Free text goes through query_string, the time window is a non-scoring
    range filter on @timestamp, and every field is highlighted with the
    LOGSEARCH markers.
    """
    sort = {
        "@timestamp": {
            "order": "asc",
            "unmapped_type": "long",
        }
    }

    query = {
        "filtered": {
            "query": {
                "query_string": {
                    "query": opts.query,
                    "analyze_wildcard": "true",
                }
            },
            "filter": {
                "range": {
                    "@timestamp": {
                        "gte": opts.start_time,
                        "lte": opts.end_time,
                    }
                }
            },
        }
    }

    highlight = {
        "pre_tags": [HIGHLIGHT_BEGIN],
        "post_tags": [HIGHLIGHT_END],
        "fields": {
            "*": {
                "force_source": "true",
                "fragment_size": FRAGMENT_SIZE,
                "number_of_fragments": NUMBER_OF_FRAGMENTS,
            }
        },
    }

    return {
        "size": opts.num_results,
        "sort": sort,
        "query": query,
        "highlight": highlight,
    }


@dataclass
class EsClient:
    es_url: str
    connect_timeout: Optional[float] = None
    # Bounds read/write/pool in search(); asearch() also enforces it end to end.
    deadline: Optional[float] = None
    # search() needs an httpx.BaseTransport, asearch() an httpx.AsyncBaseTransport.
    transport: Optional[Union[httpx.BaseTransport, httpx.AsyncBaseTransport]] = None

    HEADERS = {"Content-Type": "application/json"}

    @property
    def search_url(self) -> str:
        return f"{self.es_url.rstrip('/')}/_search?pretty=true"

    def timeout(self) -> httpx.Timeout:
        connect = self.connect_timeout or DEFAULT_CONNECT_TIMEOUT
        return httpx.Timeout(self.deadline, connect=connect)

    def _encode(self, opts: QueryOptions) -> bytes:
        body = build_query(opts)
        content = to_json(body)
        if opts.show:
            print(f"ES Query: {to_json(body, indent=2).decode()}")
            print("--------------------------\n")
        return content

    def search(self, opts: QueryOptions) -> EsResponse:
        """Run a single search and decode the response.

        Errors from encoding, transport and decoding are raised as-is.
        """
        content = self._encode(opts)
        logger.debug("POST %s size=%d", self.search_url, opts.num_results)
        with httpx.Client(timeout=self.timeout(), transport=self.transport) as client:
            response = client.post(self.search_url, content=content, headers=self.HEADERS)
        return self._decode(response)

    async def asearch(self, opts: QueryOptions) -> EsResponse:
        if self.deadline is None:
            return await self._asearch(opts)
        return await asyncio.wait_for(self._asearch(opts), timeout=self.deadline)

    async def _asearch(self, opts: QueryOptions) -> EsResponse:
        content = self._encode(opts)
        logger.debug("POST %s size=%d", self.search_url, opts.num_results)
        async with httpx.AsyncClient(timeout=self.timeout(), transport=self.transport) as client:
            response = await client.post(self.search_url, content=content, headers=self.HEADERS)
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> EsResponse:
        es_resp = EsResponse.model_validate_json(response.content)
        logger.debug(
            "status=%d took=%dms hits=%d timed_out=%s",
            response.status_code,
            es_resp.took,
            len(es_resp.hits.hits),
            es_resp.timed_out,
        )
        return es_resp
