import logging

import httpx
from fastapi import FastAPI, HTTPException, status
from pydantic import ValidationError

from log_search.app.config import ES_URL, ES_CONNECT_TIMEOUT, ES_DEADLINE, LOG_LEVEL, HOST, PORT
from log_search.app.clients.elasticsearch import EsClient
from log_search.app.models import QueryOptions

logger = logging.getLogger(__name__)

app = FastAPI(title="Log Search")

def get_client() -> EsClient:
    return EsClient(es_url=ES_URL, connect_timeout=ES_CONNECT_TIMEOUT, deadline=ES_DEADLINE)

@app.on_event("startup")
async def startup():
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Searching %s", ES_URL)

@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.post("/search")
async def search(opts: QueryOptions):
    """Run one search against the configured cluster and return the raw hit shape."""
    try:
        resp = await get_client().asearch(opts)
    except (httpx.TimeoutException, TimeoutError) as exc:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(exc) or "search timed out") from exc
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except ValidationError as exc:
        # body came back but did not match the _search response shape
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return resp.model_dump(by_alias=True)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
