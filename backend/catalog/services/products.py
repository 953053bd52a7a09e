from loguru import logger
from sqlalchemy import func, insert, select

from catalog.core.db import Store
from catalog.models import Product
from catalog.schemas.product import ProductCreate


def add_product(store: Store, payload: ProductCreate) -> int:
    # values are bound parameters, never spliced into the SQL
    stmt = insert(Product).values(
        name=payload.name,
        price=payload.price,
        description=payload.description,
        release_date=payload.release_date,
        image_url=payload.image_url,
    )
    result = store.execute(stmt)
    product_id = result.inserted_primary_key[0]
    logger.info("Product added successfully with ID: {}", product_id)
    return product_id


def count_products(store: Store) -> int:
    return store.scalar(select(func.count()).select_from(Product))
