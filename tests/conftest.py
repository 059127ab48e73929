import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import httpx
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from log_search.app.models import QueryOptions

T0 = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 1, 1, 0, 0, tzinfo=timezone.utc)

SAMPLE_BODY = {
    "hits": {
        "hits": [
            {"_id": "1", "_score": 1.0, "_source": {"msg": "error here"}, "highlight": {}}
        ],
        "total": 1,
        "max_score": 1.0,
    },
    "took": 5,
    "timed_out": False,
}


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def opts():
    return QueryOptions(query="error", num_results=10, start_time=T0, end_time=T1)


@pytest.fixture()
def mock_es():
    """MockTransport that records requests and answers with a canned body."""
    state = {"requests": [], "body": json.dumps(SAMPLE_BODY).encode(), "status": 200}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return httpx.Response(state["status"], content=state["body"])

    state["transport"] = httpx.MockTransport(handler)
    return state
