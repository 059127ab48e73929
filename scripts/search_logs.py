import json
import sys
from datetime import datetime, timedelta, timezone

from log_search.app.clients.elasticsearch import EsClient
from log_search.app.config import ES_URL, ES_CONNECT_TIMEOUT, ES_DEADLINE
from log_search.app.models import QueryOptions

if __name__ == "__main__":
    query = sys.argv[1] if len(sys.argv) > 1 else "*"
    num_results = int(sys.argv[2]) if len(sys.argv) > 2 else 10
    end = datetime.now(timezone.utc)
    opts = QueryOptions(
        query=query,
        num_results=num_results,
        start_time=end - timedelta(hours=1),
        end_time=end,
        show=True,
    )
    client = EsClient(es_url=ES_URL, connect_timeout=ES_CONNECT_TIMEOUT, deadline=ES_DEADLINE)
    result = client.search(opts)
    print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
