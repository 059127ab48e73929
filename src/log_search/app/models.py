from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any

class QueryOptions(BaseModel):
    query: str
    num_results: int = 10
    start_time: datetime
    end_time: datetime
    show: bool = False  # echo the built query to stdout

# Response shape of the _search endpoint. Fields keep their wire names as aliases.

class EsResponseHit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    score: Optional[float] = Field(default=None, alias="_score")  # null when sorted
    source: Dict[str, Any] = Field(default_factory=dict, alias="_source")
    highlight: Dict[str, List[str]] = Field(default_factory=dict)

class EsResponseHits(BaseModel):
    hits: List[EsResponseHit]
    total: int
    max_score: Optional[float] = None

class EsResponse(BaseModel):
    hits: EsResponseHits
    took: int
    timed_out: bool
