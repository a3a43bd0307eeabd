import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.attempts import router as attempts_router
from routers.health import router as health_router
from routers.ocr import router as ocr_router

logger = logging.getLogger("flashcard-grading")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Flashcard OCR – Grading API")

# Allow calls from the Next.js dev server and the school portal
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(ocr_router)  # /ocr/extract, /ocr/mark
app.include_router(attempts_router)  # /attempts/...
app.include_router(health_router)  # /health/...

logger.info("routes registered: ocr, attempts, health")
