# tests/test_categories.py


def test_create_get_and_list_categories(client, create_category):
    lights = create_category("Lights")
    chairs = create_category("Chairs")

    r = client.get(f"/api/categories/{lights['id']}")
    assert r.status_code == 200
    assert r.json() == {"id": lights["id"], "name": "Lights"}

    r = client.get("/api/categories")
    assert [c["id"] for c in r.json()] == [chairs["id"], lights["id"]]


def test_category_id_checks(client, create_category):
    r = client.post("/api/categories", json={"id": 1, "name": "Lights"})
    assert r.status_code == 400
    assert r.json()["errorKey"] == "idexists"

    category = create_category("Lights")
    r = client.put(f"/api/categories/{category['id']}", json={"name": "Lamps"})
    assert r.json()["errorKey"] == "idnull"

    r = client.put(f"/api/categories/{category['id']}", json={"id": category["id"] + 1, "name": "Lamps"})
    assert r.json()["errorKey"] == "idinvalid"

    r = client.put("/api/categories/77", json={"id": 77, "name": "Lamps"})
    assert r.json()["errorKey"] == "idnotfound"

    r = client.put(f"/api/categories/{category['id']}", json={"id": category["id"], "name": "Lamps"})
    assert r.status_code == 200
    assert r.json()["name"] == "Lamps"


def test_delete_category_detaches_products(client, create_category, create_product):
    lights = create_category("Lights")
    lamp = create_product(name="Lamp", category_id=lights["id"])
    assert lamp["category"]["id"] == lights["id"]

    assert client.delete(f"/api/categories/{lights['id']}").status_code == 204
    assert client.get(f"/api/categories/{lights['id']}").status_code == 404

    r = client.get(f"/api/products/{lamp['id']}")
    assert r.status_code == 200
    assert r.json()["category"] is None


def test_delete_unknown_category_returns_404(client):
    r = client.delete("/api/categories/5")
    assert r.status_code == 404
    assert r.json()["entityName"] == "category"
