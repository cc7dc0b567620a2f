# product_api/main.py
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .core import is_json_decode_error, require_api_key, validation_message
from .errors import ProductAPIError, ValidationError
from .log import get_logger, setup_logging
from .logic import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, product_stats_logic, search_products_logic,
    update_product_logic,
)
from .models import (
    ErrorBody, Product, ProductEnvelope, ProductIn, ProductPage, ProductStats, SearchResult,
)

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

app = FastAPI(title="product-api (in-memory demo)", version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ENDPOINTS = {
    "GET /api/products": "Get all products",
    "GET /api/products/:id": "Get a specific product",
    "POST /api/products": "Create a new product",
    "PUT /api/products/:id": "Update a product",
    "DELETE /api/products/:id": "Delete a product",
    "GET /api/products/search": "Search products by name",
    "GET /api/products/stats": "Get product statistics",
}

# ---------------------------
# Request logging
# ---------------------------
def _original_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url += "?" + request.url.query
    return url

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, _original_url(request))
    return await call_next(request)

# ---------------------------
# Error responder
# ---------------------------
def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorBody(error=error, message=message, statusCode=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())

@app.exception_handler(ProductAPIError)
async def handle_product_error(request: Request, exc: ProductAPIError):
    logger.warning("%s: %s", exc.name, exc.message)
    return _error_response(exc.status_code, exc.name, exc.message)

def _invalid_json() -> JSONResponse:
    return _error_response(400, "Invalid JSON", "Request body contains invalid JSON")

@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if is_json_decode_error(errors):
        logger.warning("Invalid JSON body on %s %s", request.method, _original_url(request))
        return _invalid_json()
    return await handle_product_error(request, ValidationError(validation_message(errors)))

@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # unmatched path, or known path with an unsupported method
    if exc.status_code in (404, 405):
        return _error_response(
            404, "Not Found", f"Route {request.method} {_original_url(request)} not found"
        )
    # body that could not be read as JSON at all (e.g. not UTF-8)
    if exc.status_code == 400:
        return _invalid_json()
    return _error_response(exc.status_code, "HTTP Error", str(exc.detail))

@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logger.error("Error: %s", exc, exc_info=exc)
    return _error_response(500, "Internal Server Error", "Something went wrong on the server")

# ---------------------------
# Root
# ---------------------------
@app.get("/")
async def root():
    return {"message": "Welcome to the Product API!", "endpoints": ENDPOINTS}

# ---------------------------
# Product endpoints (literal paths before /{product_id})
# ---------------------------
@app.get("/api/products", response_model=ProductPage)
async def list_products(
    category: Optional[str] = None,
    in_stock: Optional[str] = Query(None, alias="inStock"),
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    return await list_products_logic(category, in_stock, page, limit)

@app.get("/api/products/search", response_model=SearchResult)
async def search_products(q: Optional[str] = None):
    return await search_products_logic(q)

@app.get("/api/products/stats", response_model=ProductStats)
async def product_stats():
    return await product_stats_logic()

@app.get("/api/products/{product_id}", response_model=Product)
async def get_product(product_id: str):
    return await get_product_logic(product_id)

@app.post(
    "/api/products",
    status_code=201,
    response_model=ProductEnvelope,
    dependencies=[Depends(require_api_key)],
)
async def create_product(payload: ProductIn):
    product = await create_product_logic(payload)
    logger.info("Created product %s", product["id"])
    return {"message": "Product created successfully", "product": product}

@app.put(
    "/api/products/{product_id}",
    response_model=ProductEnvelope,
    dependencies=[Depends(require_api_key)],
)
async def update_product(product_id: str, payload: ProductIn):
    product = await update_product_logic(product_id, payload)
    return {"message": "Product updated successfully", "product": product}

@app.delete(
    "/api/products/{product_id}",
    response_model=ProductEnvelope,
    dependencies=[Depends(require_api_key)],
)
async def delete_product(product_id: str):
    product = await delete_product_logic(product_id)
    return {"message": "Product deleted successfully", "product": product}
