# catalog_admin/main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from catalog_admin.config import settings
from catalog_admin.core.errors import CatalogError
from catalog_admin.database import db
from catalog_admin.api.routes import products as product_routes
from catalog_admin.middleware.cors_config import configure_cors
from catalog_admin.middleware.security_headers import add_security_headers


logger = logging.getLogger("uvicorn.error")
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context: make sure the upload directory exists and the store indexes
    are in place before serving.
    """
    # --- startup logic ---
    upload_dir = Path(settings.UPLOAD_DIR)
    if not upload_dir.exists():
        upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Created upload directory %s", upload_dir)

    try:
        db.ensure_indexes()
        logger.info("Connected to MongoDB database %r", db.db_name)
    except Exception as e:
        logger.warning("Could not prepare MongoDB indexes at startup: %s", e)

    yield
    # --- shutdown logic ---
    db.close()
    logger.info("Shutting down Catalog Admin API")
app = FastAPI(title="Catalog Admin API", version="0.1.0", lifespan=lifespan)
configure_cors(app)
add_security_headers(app)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


# Uploaded product images; the directory may be created later by the first upload
app.mount(
    settings.UPLOAD_URL_PATH,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)

app.include_router(product_routes.router)


@app.get("/", tags=["root"])
async def root():
    return {"status": "ok", "service": "Catalog Admin API"}
