from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src import config
from src.logging_config import configure_logging, get_logger
from src.model.PayloadModel import PointsResponse, ReceiptIdResponse, ReceiptPayload
from src.store.errors import ReceiptNotFoundError, ReceiptValidationError
from src.store.receipt_store import ReceiptStore

configure_logging(log_level=config.LOG_LEVEL, json_output=config.JSON_LOGS)
logger = get_logger(__name__)

app = FastAPI(title="Receipt Points Service")

receipt_store = ReceiptStore()


def get_store() -> ReceiptStore:
    return receipt_store


def format_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(problems) or "The receipt is invalid."


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_error(exc)
    logger.info("receipt_rejected", reason=message)
    return JSONResponse(status_code=400, content={"error": message})


@app.post("/receipts/process", response_model=ReceiptIdResponse)
def process_receipt(payload: ReceiptPayload, store: ReceiptStore = Depends(get_store)):
    try:
        receipt_id = store.insert(payload.to_receipt())
    except ReceiptValidationError as e:
        logger.info("receipt_rejected", reason=str(e), total=payload.total)
        raise HTTPException(status_code=400, detail=str(e))
    return ReceiptIdResponse(id=receipt_id)


@app.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    try:
        points = store.get_points(receipt_id)
    except ReceiptNotFoundError:
        logger.info("receipt_not_found", receipt_id=receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")
    return PointsResponse(points=points)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("src.app:app", host=config.HOST, port=config.PORT)
