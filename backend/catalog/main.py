from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException

from catalog.core.config import settings
from catalog.core.db import Store, get_store
from catalog.core.errors import CatalogError, error_detail
from catalog.schemas.product import ProductCreate
from catalog.services.installer import SchemaInstaller
from catalog.services.products import add_product

INDEX_HTML = """
    <h1>MySQL Database Server</h1>
    <p>Endpoints:</p>
    <ul>
    <li><a href="/install">/install</a> - Create tables</li>
    <li>/add-product - POST endpoint for adding products</li>
    </ul>
"""


async def read_body(request: Request) -> dict:
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type == "application/json":
        return await request.json()
    try:
        return dict(await request.form())
    except HTTPException as exc:
        # starlette rejects malformed multipart bodies this way
        raise ValueError(exc.detail) from exc


def get_installer(store: Store = Depends(get_store)) -> SchemaInstaller:
    return SchemaInstaller(store)


def create_app(database_url: str | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = Store(database_url or settings.DATABASE_URL, echo=settings.SQL_ECHO)
        try:
            store.connect()
        except SQLAlchemyError as exc:
            # refuse to serve without a database
            logger.error("Error connecting to database: {}", exc)
            raise
        app.state.store = store
        try:
            yield
        finally:
            store.close()

    app = FastAPI(title="iPhone Catalog Backend", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=HTMLResponse)
    def index():
        return INDEX_HTML

    @app.get("/install", response_class=PlainTextResponse)
    def install(installer: SchemaInstaller = Depends(get_installer)):
        try:
            installer.install()
        except CatalogError as exc:
            return PlainTextResponse(str(exc), status_code=500)
        return "All tables created successfully!"

    @app.post("/add-product", response_class=PlainTextResponse)
    async def add_product_route(request: Request, store: Store = Depends(get_store)):
        try:
            body = await read_body(request)
            payload = ProductCreate.model_validate(body)
            await run_in_threadpool(add_product, store, payload)
        except (ValueError, SQLAlchemyError) as exc:
            # ValueError covers bad JSON and pydantic's ValidationError
            logger.error("Error inserting product: {}", exc)
            return PlainTextResponse(f"Error adding product: {error_detail(exc)}", status_code=500)
        return "Product added successfully!"

    return app


app = create_app()
