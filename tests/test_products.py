from pos_backend.models import Product


def test_create_product(client, category):
    payload = {"name": "Coffee", "price": 3500, "stock": 10, "category_id": category.id}

    response = client.post("/api/products", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Coffee"
    assert body["price"] == 3500
    assert body["stock"] == 10
    assert body["category_id"] == category.id
    assert body["category_name"] == "Drinks"


def test_create_product_with_unknown_category_creates_nothing(client, db_session):
    payload = {"name": "Coffee", "price": 3500, "stock": 10, "category_id": 999}

    response = client.post("/api/products", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == "Category not found"
    assert db_session.query(Product).count() == 0


def test_create_product_requires_name_and_category(client, category):
    assert client.post("/api/products", json={"price": 100, "category_id": category.id}).status_code == 400
    assert client.post("/api/products", json={"name": "Tea", "price": 100}).status_code == 400


def test_create_product_rejects_unknown_fields(client, category):
    payload = {"name": "Tea", "price": 100, "category_id": category.id, "sku": "T-1"}

    response = client.post("/api/products", json=payload)

    assert response.status_code == 400


def test_create_product_rejects_negative_stock(client, category):
    payload = {"name": "Tea", "price": 100, "stock": -1, "category_id": category.id}

    assert client.post("/api/products", json=payload).status_code == 400


def test_list_products_filters_by_name(client, make_product):
    make_product(name="Iced Coffee")
    make_product(name="Green Tea")
    make_product(name="coffee beans")

    response = client.get("/api/products", params={"name": "coffee"})

    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert names == ["Iced Coffee", "coffee beans"]

    assert len(client.get("/api/products").json()) == 3


def test_get_product(client, make_product):
    product = make_product()

    response = client.get(f"/api/products/{product.id}")

    assert response.status_code == 200
    assert response.json()["id"] == product.id


def test_get_missing_product_returns_404(client):
    assert client.get("/api/products/123").status_code == 404


def test_update_product_is_partial(client, make_product):
    product = make_product(price=3500, stock=10)

    response = client.put(f"/api/products/{product.id}", json={"price": 4000})

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 4000
    assert body["stock"] == 10
    assert body["name"] == "Coffee"


def test_update_product_with_unknown_category_is_rejected(client, make_product, db_session):
    product = make_product()

    response = client.put(f"/api/products/{product.id}", json={"category_id": 999})

    assert response.status_code == 400
    db_session.refresh(product)
    assert product.category_id != 999


def test_delete_product(client, make_product, db_session):
    product = make_product()

    response = client.delete(f"/api/products/{product.id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Product deleted successfully"}
    assert db_session.query(Product).count() == 0


def test_delete_sold_product_is_rejected(client, make_product):
    product = make_product()
    client.post("/api/checkout", json={"items": [{"product_id": product.id, "quantity": 1}]})

    response = client.delete(f"/api/products/{product.id}")

    assert response.status_code == 400
    assert client.get(f"/api/products/{product.id}").status_code == 200


def test_list_products_treats_wildcards_literally(client, make_product):
    make_product(name="Coffee")
    make_product(name="100% Arabica")
    make_product(name="Cold_Brew")

    percent = client.get("/api/products", params={"name": "%"}).json()
    underscore = client.get("/api/products", params={"name": "_"}).json()

    assert [p["name"] for p in percent] == ["100% Arabica"]
    assert [p["name"] for p in underscore] == ["Cold_Brew"]


def test_create_product_rejects_oversized_numbers(client, category, db_session):
    base = {"name": "Tea", "price": 100, "stock": 1, "category_id": category.id}

    for field, value in [
        ("price", 10**20),
        ("price", 100_000_000),
        ("stock", 2**31),
        ("category_id", 10**20),
    ]:
        response = client.post("/api/products", json={**base, field: value})
        assert response.status_code == 400, field

    assert db_session.query(Product).count() == 0


def test_update_product_rejects_oversized_price(client, make_product):
    product = make_product()

    response = client.put(f"/api/products/{product.id}", json={"price": 10**20})

    assert response.status_code == 400


def test_oversized_or_zero_path_id_returns_400(client):
    assert client.get(f"/api/products/{10**20}").status_code == 400
    assert client.get(f"/api/categories/{2**31}").status_code == 400
    assert client.delete("/api/products/0").status_code == 400
