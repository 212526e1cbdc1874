import logging
import time

from fastapi import FastAPI, File, HTTPException, UploadFile

from insightflow import __version__
from insightflow.config import settings
from insightflow.engine import analyze_source
from insightflow.errors import AnalysisError
from insightflow.models import AnalyzeResponse, RenderedInsight

logging.basicConfig(
    level=settings.server.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="insightflow", version=__version__)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_upload(file: UploadFile = File(...)):
    """Analyze one uploaded CSV file and return summary, charts and insights."""
    limit = settings.server.max_upload_bytes
    content = await file.read(limit + 1)
    if len(content) > limit:
        raise HTTPException(status_code=413, detail=f"File exceeds {limit} bytes")

    t0 = time.monotonic()
    try:
        result = await analyze_source(content)
    except AnalysisError as exc:
        log.warning("Analysis of %s failed: %s", file.filename, exc.message)
        raise HTTPException(status_code=422, detail=exc.message)

    return AnalyzeResponse(
        filename=file.filename or "",
        summary=result.summary,
        charts=result.charts,
        insights=[
            RenderedInsight(
                kind=i.kind,
                text=i.text,
                spans=i.spans,
                markdown=i.to_markdown(),
            )
            for i in result.insights
        ],
        elapsed_s=round(time.monotonic() - t0, 3),
    )


def run() -> None:
    import uvicorn

    uvicorn.run(
        "insightflow.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )
