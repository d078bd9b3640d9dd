"""
Caption Generation Endpoint
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from reelboard.api.deps import get_caption_generator
from reelboard.services import CaptionGenerationError, CaptionGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])


class GenerateRequest(BaseModel):
    summary: str = ""


class GenerateResponse(BaseModel):
    header: str
    caption: str
    hashtags: List[str]


@router.post("/generate", response_model=GenerateResponse)
def generate_caption(
    request: GenerateRequest,
    generator: CaptionGenerator = Depends(get_caption_generator),
):
    """Generate a header, caption and hashtags from a content summary."""
    try:
        result = generator.generate(request.summary)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CaptionGenerationError as e:
        logger.error(f"AI generation error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return GenerateResponse(
        header=result.header,
        caption=result.caption,
        hashtags=result.hashtags,
    )
