# tests/test_carts.py


def test_create_and_get_cart(client):
    r = client.post("/api/carts", json={})
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["lines"] == []
    assert created["user"] is None
    assert r.headers["location"] == f"/api/carts/{created['id']}"

    r = client.get(f"/api/carts/{created['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]


def test_create_cart_with_id_is_rejected(client):
    r = client.post("/api/carts", json={"id": 1})
    assert r.status_code == 400
    body = r.json()
    assert body["errorKey"] == "idexists"
    assert body["entityName"] == "cart"
    assert body["message"] == "error.idexists"
    assert body["status"] == 400


def test_update_cart_id_checks(client):
    cart_id = client.post("/api/carts", json={}).json()["id"]

    r = client.put(f"/api/carts/{cart_id}", json={})
    assert r.status_code == 400
    assert r.json()["errorKey"] == "idnull"

    r = client.put(f"/api/carts/{cart_id}", json={"id": cart_id + 1})
    assert r.status_code == 400
    assert r.json()["errorKey"] == "idinvalid"

    r = client.put("/api/carts/999", json={"id": 999})
    assert r.status_code == 400
    assert r.json()["errorKey"] == "idnotfound"

    r = client.put(f"/api/carts/{cart_id}", json={"id": cart_id})
    assert r.status_code == 200, r.text
    assert r.json()["id"] == cart_id


def test_partial_update_cart(client):
    cart_id = client.post("/api/carts", json={}).json()["id"]

    r = client.patch(
        f"/api/carts/{cart_id}",
        content=f'{{"id": {cart_id}}}',
        headers={"Content-Type": "application/merge-patch+json"},
    )
    assert r.status_code == 200, r.text
    assert r.json()["id"] == cart_id

    r = client.patch(f"/api/carts/{cart_id}", json={"id": 999})
    assert r.status_code == 400
    assert r.json()["errorKey"] == "idinvalid"

    r = client.patch("/api/carts/999", json={"id": 999})
    assert r.status_code == 400
    assert r.json()["errorKey"] == "idnotfound"


def test_get_unknown_cart_returns_404(client):
    r = client.get("/api/carts/42")
    assert r.status_code == 404
    assert r.json()["entityName"] == "cart"
    assert r.json()["message"] == "error.idnotfound"


def test_list_carts_and_user_is_null_filter(client, create_user, create_product, auth_header):
    orphan = client.post("/api/carts", json={}).json()
    create_user("alice")
    line = client.post(f"/api/cart/products/{create_product()['id']}", headers=auth_header("alice")).json()

    all_ids = [c["id"] for c in client.get("/api/carts").json()]
    assert sorted(all_ids) == sorted([orphan["id"], line["cart_id"]])

    r = client.get("/api/carts", params={"filter": "user-is-null"})
    assert r.status_code == 200
    assert [c["id"] for c in r.json()] == [orphan["id"]]


def test_delete_cart(client):
    cart_id = client.post("/api/carts", json={}).json()["id"]

    r = client.delete(f"/api/carts/{cart_id}")
    assert r.status_code == 204
    assert client.get(f"/api/carts/{cart_id}").status_code == 404

    r = client.delete(f"/api/carts/{cart_id}")
    assert r.status_code == 404
    assert r.json()["errorKey"] == "idnotfound"


def test_delete_user_cart_cascades_lines_and_frees_owner(client, create_user, create_product, auth_header):
    create_user("alice")
    product = create_product()
    line = client.post(f"/api/cart/products/{product['id']}", headers=auth_header("alice")).json()

    r = client.delete(f"/api/carts/{line['cart_id']}")
    assert r.status_code == 204

    assert client.get("/api/cart", headers=auth_header("alice")).status_code == 404
    r = client.patch(f"/api/cart/products/{line['id']}", params={"quantity": 2}, headers=auth_header("alice"))
    assert r.status_code == 404

    # next add gets a brand new cart
    r = client.post(f"/api/cart/products/{product['id']}", headers=auth_header("alice"))
    assert r.status_code == 201, r.text
    cart = client.get("/api/cart", headers=auth_header("alice")).json()
    assert [l["id"] for l in cart["lines"]] == [r.json()["id"]]
