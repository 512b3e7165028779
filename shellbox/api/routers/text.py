from typing import List

from fastapi import APIRouter, Query
from pydantic import BaseModel

from shellbox.text.phonetic import spell

router = APIRouter(
    prefix="/text",
    tags=["Text"],
)


class PhoneticResponse(BaseModel):
    text: str
    words: List[str]


@router.get("/phonetic", response_model=PhoneticResponse, summary="Spell text with the NATO alphabet")
async def phonetic(text: str = Query(..., min_length=1)):
    return PhoneticResponse(text=text, words=spell(text))
