# tests/test_favorites.py


def _favorites(client, auth_header, login):
    r = client.get("/api/products/favorite-products", headers=auth_header(login))
    assert r.status_code == 200, r.text
    return [p["id"] for p in r.json()]


def test_new_user_has_no_favorites(client, create_user, auth_header):
    create_user("alice")
    assert _favorites(client, auth_header, "alice") == []


def test_toggle_favorite_adds_then_removes(client, create_user, create_product, auth_header):
    create_user("alice")
    lamp = create_product(name="Lamp")
    vase = create_product(name="Vase")

    r = client.post(f"/api/products/favorite-products/{lamp['id']}", headers=auth_header("alice"))
    assert r.status_code == 200, r.text
    assert [p["id"] for p in r.json()] == [lamp["id"]]

    r = client.post(f"/api/products/favorite-products/{vase['id']}", headers=auth_header("alice"))
    assert [p["id"] for p in r.json()] == [lamp["id"], vase["id"]]

    r = client.post(f"/api/products/favorite-products/{lamp['id']}", headers=auth_header("alice"))
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [vase["id"]]

    assert _favorites(client, auth_header, "alice") == [vase["id"]]


def test_toggle_twice_restores_original_set(client, create_user, create_product, auth_header):
    create_user("alice")
    kept = create_product(name="Chair")
    toggled = create_product(name="Lamp")
    client.post(f"/api/products/favorite-products/{kept['id']}", headers=auth_header("alice"))
    before = _favorites(client, auth_header, "alice")

    client.post(f"/api/products/favorite-products/{toggled['id']}", headers=auth_header("alice"))
    client.post(f"/api/products/favorite-products/{toggled['id']}", headers=auth_header("alice"))

    assert _favorites(client, auth_header, "alice") == before


def test_favorites_are_per_user(client, create_user, create_product, auth_header):
    create_user("alice")
    create_user("bob")
    lamp = create_product()
    client.post(f"/api/products/favorite-products/{lamp['id']}", headers=auth_header("alice"))

    assert _favorites(client, auth_header, "alice") == [lamp["id"]]
    assert _favorites(client, auth_header, "bob") == []


def test_toggle_unknown_product_returns_404(client, create_user, auth_header):
    create_user("alice")
    r = client.post("/api/products/favorite-products/404", headers=auth_header("alice"))
    assert r.status_code == 404
    assert r.json()["entityName"] == "product"


def test_favorites_require_known_login(client, create_product, auth_header):
    lamp = create_product()
    assert client.get("/api/products/favorite-products").status_code == 401
    r = client.post(f"/api/products/favorite-products/{lamp['id']}", headers=auth_header("ghost"))
    assert r.status_code == 401


def test_deleted_product_leaves_favorites(client, create_user, create_product, auth_header):
    create_user("alice")
    lamp = create_product()
    client.post(f"/api/products/favorite-products/{lamp['id']}", headers=auth_header("alice"))

    assert client.delete(f"/api/products/{lamp['id']}").status_code == 204
    assert _favorites(client, auth_header, "alice") == []
