import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from webanalyzer.exceptions import InvalidTargetUrlError, WebAnalyzerError
from webanalyzer.services.page_analyzer import PageAnalyzer
from webanalyzer.utils.url_utils import normalize_target_url

logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    url: str = ""


def create_analyze_router(page_analyzer: PageAnalyzer):
    router = APIRouter(tags=["Analyze"])

    @router.post("/analyze")
    def analyze(req: AnalyzeRequest):
        try:
            url = normalize_target_url(req.url)
        except InvalidTargetUrlError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            result = page_analyzer.analyze(url)
        except WebAnalyzerError as e:
            logger.warning("Analysis failed for %s: %s", url, e)
            raise HTTPException(status_code=500, detail=str(e))
        return result.to_dict()

    return router
