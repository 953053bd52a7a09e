from datetime import date
from decimal import Decimal

from loguru import logger
from sqlalchemy import insert

from catalog.core.config import settings
from catalog.core.db import Store
from catalog.models import Color, Feature, Product, Specification, StorageOption
from catalog.services.installer import SchemaInstaller


def seed_product(store: Store) -> int:
    result = store.execute(
        insert(Product).values(
            name="iPhone 15 Pro",
            price=Decimal("999.00"),
            description="6.1-inch Super Retina XDR ProMotion, A17 Pro, titanium design.",
            release_date=date(2023, 9, 22),
            image_url="https://example.com/images/iphone-15-pro.png",
        )
    )
    return result.inserted_primary_key[0]


def seed_variants(store: Store, product_id: int) -> None:
    store.execute(insert(Color), [
        {"product_id": product_id, "color_name": "Natural Titanium", "color_code": "#BAB4A9"},
        {"product_id": product_id, "color_name": "Blue Titanium", "color_code": "#2F4452"},
        {"product_id": product_id, "color_name": "Black Titanium", "color_code": "#1F2020"},
    ])
    store.execute(insert(StorageOption), [
        {"product_id": product_id, "capacity": "128GB", "price_diff": Decimal("0")},
        {"product_id": product_id, "capacity": "256GB", "price_diff": Decimal("100.00")},
        {"product_id": product_id, "capacity": "512GB", "price_diff": Decimal("300.00")},
    ])
    store.execute(insert(Feature), [
        {"product_id": product_id, "feature_name": "Action button",
         "feature_description": "Customizable shortcut replacing the ring/silent switch."},
        {"product_id": product_id, "feature_name": "USB-C",
         "feature_description": "USB 3 speeds up to 10Gb/s."},
    ])
    store.execute(insert(Specification), [
        {"product_id": product_id, "spec_name": "Weight", "spec_value": "187g"},
        {"product_id": product_id, "spec_name": "Chip", "spec_value": "A17 Pro"},
    ])


def seed_catalog(store: Store) -> int:
    product_id = seed_product(store)
    seed_variants(store, product_id)
    logger.info("Seeded product {} with variants", product_id)
    return product_id


if __name__ == "__main__":
    store = Store(settings.DATABASE_URL).connect()
    try:
        SchemaInstaller(store).install()
        seed_catalog(store)
    finally:
        store.close()
