from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from sqlalchemy import select, text

from catalog.main import get_installer
from catalog.models import Product
from catalog.schemas.product import ProductCreate
from catalog.services.installer import SchemaInstaller, install_statements
from catalog.services.products import add_product, count_products

IPHONE = {
    "name": "iPhone 15",
    "price": "799.00",
    "description": "6.1-inch Super Retina XDR, A16 Bionic, USB-C.",
    "release_date": "2023-09-22",
    "image_url": "https://example.com/images/iphone-15.png",
}


def test_index_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "/install" in r.text
    assert "/add-product" in r.text


def test_install_route(client):
    r = client.get("/install")
    assert r.status_code == 200
    assert r.text == "All tables created successfully!"

    # second call hits existing tables
    r = client.get("/install")
    assert r.status_code == 200
    assert r.text == "All tables created successfully!"


def test_install_route_reports_failed_step(client, app_store):
    statements = install_statements()
    statements[1] = text("CREATE TABLE colors (color_id INT,)")
    client.app.dependency_overrides[get_installer] = lambda: SchemaInstaller(app_store, statements=statements)

    r = client.get("/install")
    assert r.status_code == 500
    assert r.text.startswith("Error creating table 2: ")


def test_add_product_form(client, app_store):
    client.get("/install")
    before = count_products(app_store)

    r = client.post("/add-product", data=IPHONE)
    assert r.status_code == 200
    assert r.text == "Product added successfully!"
    assert count_products(app_store) == before + 1

    row = app_store.fetch(select(Product))[0]
    assert row.name == "iPhone 15"
    assert row.price == Decimal("799.00")
    assert str(row.release_date) == "2023-09-22"


def test_add_product_json(client, app_store):
    client.get("/install")
    r = client.post("/add-product", json={**IPHONE, "name": "iPhone 15 Plus"})
    assert r.status_code == 200
    assert count_products(app_store) == 1


def test_add_product_missing_name_is_rejected_by_store(client, app_store):
    client.get("/install")
    payload = {k: v for k, v in IPHONE.items() if k != "name"}

    r = client.post("/add-product", data=payload)
    assert r.status_code == 500
    assert r.text.startswith("Error adding product: ")
    assert "NOT NULL" in r.text
    assert count_products(app_store) == 0


def test_add_product_blank_price_is_rejected(client, app_store):
    client.get("/install")
    r = client.post("/add-product", data={**IPHONE, "price": ""})
    assert r.status_code == 500
    assert count_products(app_store) == 0


def test_add_product_bad_date_is_rejected(client, app_store):
    client.get("/install")
    r = client.post("/add-product", data={**IPHONE, "release_date": "next tuesday"})
    assert r.status_code == 500
    assert r.text.startswith("Error adding product: ")
    assert count_products(app_store) == 0


def test_add_product_before_install_surfaces_store_error(client):
    r = client.post("/add-product", data=IPHONE)
    assert r.status_code == 500
    assert "no such table" in r.text


def test_value_is_bound_not_interpolated(client, app_store):
    client.get("/install")
    name = "x'); DROP TABLE products; --"
    r = client.post("/add-product", data={**IPHONE, "name": name})
    assert r.status_code == 200
    assert app_store.scalar(select(Product.name)) == name


def test_concurrent_ingest_creates_distinct_rows(store):
    SchemaInstaller(store).install()
    payloads = [ProductCreate(**{**IPHONE, "name": f"iPhone {i}"}) for i in range(20)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda p: add_product(store, p), payloads))

    assert len(set(ids)) == 20
    assert count_products(store) == 20


def test_cors_allows_any_origin(client):
    r = client.get("/install", headers={"Origin": "http://localhost:3000"})
    assert r.headers["access-control-allow-origin"] == "*"

    r = client.options(
        "/add-product",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_add_product_json_number_as_name(client, app_store):
    client.get("/install")
    r = client.post("/add-product", json={"name": 15, "price": 799})
    assert r.status_code == 200
    assert app_store.scalar(select(Product.name)) == "15"


def test_add_product_json_media_type_is_case_insensitive(client, app_store):
    client.get("/install")
    r = client.post(
        "/add-product",
        content=b'{"name": "iPhone 15", "price": "1"}',
        headers={"Content-Type": "Application/JSON; charset=utf-8"},
    )
    assert r.status_code == 200
    assert count_products(app_store) == 1


def test_add_product_malformed_multipart_is_500(client, app_store):
    client.get("/install")
    r = client.post(
        "/add-product",
        content=b"garbage",
        headers={"Content-Type": "multipart/form-data"},
    )
    assert r.status_code == 500
    assert r.text.startswith("Error adding product: ")
    assert "boundary" in r.text
    assert count_products(app_store) == 0
