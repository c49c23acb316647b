import logging

from fastapi import FastAPI, File, HTTPException, UploadFile

from tabstats.analysis import available_analyses, run_analysis
from tabstats.analysis.errors import InvalidInputError
from tabstats.analysis.models import AnalysisResult
from tabstats.config import settings
from tabstats.dataset import is_csv_upload, parse_csv
from tabstats.models import AnalysisRequest, UploadResponse

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="tabstats")


@app.get("/health")
async def health():
    return {"status": "ok", "analyses": available_analyses()}


@app.post("/upload", response_model=UploadResponse)
async def upload_csv(csv_file: UploadFile | None = File(None, alias="csvFile")):
    if csv_file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if not is_csv_upload(csv_file.filename, csv_file.content_type, settings.server.allowed_content_types):
        await csv_file.close()
        raise HTTPException(status_code=400, detail="Only CSV files are allowed")

    try:
        body = await csv_file.read(settings.server.max_upload_bytes + 1)
    finally:
        # drops the spooled temporary file behind the upload
        await csv_file.close()

    if len(body) > settings.server.max_upload_bytes:
        raise HTTPException(status_code=400, detail="Uploaded file is too large")

    try:
        text = body.decode(settings.server.csv_encoding)
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV file must be UTF-8 encoded")

    try:
        rows = parse_csv(text)
    except Exception as exc:
        log.exception("Error processing CSV %s", csv_file.filename)
        raise HTTPException(status_code=500, detail="Error processing CSV file") from exc

    log.info("Parsed upload %s (%d rows)", csv_file.filename, len(rows))
    return UploadResponse(
        message="File uploaded and parsed successfully",
        data=rows,
        row_count=len(rows),
    )


@app.post("/api/analysis/{analysis_type}", response_model=AnalysisResult)
def api_run_analysis(analysis_type: str, req: AnalysisRequest):
    try:
        return run_analysis(analysis_type, req.data, req.options)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        log.exception("Analysis %s failed", analysis_type)
        raise HTTPException(status_code=500, detail=f"Analysis failed: {exc}")
