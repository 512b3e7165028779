from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from shellbox.core.errors import ParseError
from shellbox.web.url_parts import parse_url

router = APIRouter(
    prefix="/url",
    tags=["URL"],
)


class UrlPartsResponse(BaseModel):
    original: str
    scheme: str
    host: str
    port: Optional[int] = None
    path: str
    query_parameters: Dict[str, Optional[str]]
    fragment: str
    user_info: str
    is_default_port: bool
    path_segments: List[str]


@router.get("/parse", response_model=UrlPartsResponse, summary="Break a URL into its components")
async def parse(url: str = Query(..., description="The URL to decompose")):
    """
    Parses the URL and returns every component. Malformed input yields 422.
    """
    try:
        parts = parse_url(url)
    except ParseError as e:
        raise HTTPException(status_code=422, detail={"input": e.input, "cause": str(e.cause)})
    return UrlPartsResponse(**parts.to_dict())
