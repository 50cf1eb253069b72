import os

from sqlmodel import Session, select

from imageupload.db.models import CustomerImage


def test_create_customer_returns_envelope(client):
    response = client.post(
        "/customers",
        json={"firstName": "Grace", "lastName": "Hopper", "email": "grace@example.com"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Customer created successfully"
    assert body["errors"] == []
    assert body["data"]["firstName"] == "Grace"
    assert body["data"]["images"] == []
    assert "createdAt" in body["data"]


def test_missing_name_is_rejected_with_400(client):
    response = client.post("/customers", json={"firstName": "Grace"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Invalid request data"
    assert any("lastName" in e for e in body["errors"])


def test_list_is_sorted_by_last_then_first_name(client, make_customer):
    make_customer("Zed", "Brown")
    make_customer("Amy", "Brown")
    make_customer("Bob", "Adams")

    body = client.get("/customers").json()
    names = [(c["lastName"], c["firstName"]) for c in body["data"]]
    assert names == [("Adams", "Bob"), ("Brown", "Amy"), ("Brown", "Zed")]


def test_get_unknown_customer_is_404_envelope(client):
    response = client.get("/customers/999")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Customer with ID 999 not found",
        "data": None,
        "errors": [],
    }


def test_update_customer(client, make_customer):
    cid = make_customer()
    response = client.put(
        f"/customers/{cid}",
        json={"id": cid, "firstName": "Augusta", "lastName": "King", "phone": "555-0100"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["firstName"] == "Augusta"
    assert data["phone"] == "555-0100"


def test_update_with_mismatched_id_is_400(client, make_customer):
    cid = make_customer()
    response = client.put(f"/customers/{cid}", json={"id": cid + 1, "firstName": "A", "lastName": "B"})

    assert response.status_code == 400
    assert response.json()["message"] == "Customer ID mismatch"


def test_delete_customer_cascades_to_images(client, engine, make_customer):
    cid = make_customer()
    other = make_customer("Charles", "Babbage")
    for i in range(3):
        client.post(
            "/images/upload-base64",
            json={"customerId": cid, "base64Data": "aGVsbG8=", "fileName": f"{i}.png", "contentType": "image/png"},
        )
    client.post(
        "/images/upload-base64",
        json={"customerId": other, "base64Data": "aGVsbG8=", "fileName": "x.png", "contentType": "image/png"},
    )

    response = client.delete(f"/customers/{cid}")
    assert response.status_code == 200
    assert response.json()["data"] is None

    with Session(engine) as session:
        remaining = session.exec(select(CustomerImage)).all()
    assert [img.customer_id for img in remaining] == [other]
    assert client.get(f"/customers/{cid}").status_code == 404


def test_delete_customer_removes_image_files(filesystem_client, app_settings, make_customer):
    client = filesystem_client
    cid = make_customer()
    response = client.post(
        f"/images/upload/{cid}",
        files=[("files", ("a.jpg", b"jpeg", "image/jpeg")), ("files", ("b.png", b"png", "image/png"))],
    )
    assert response.status_code == 200
    customer_dir = os.path.join(app_settings.UPLOAD_DIR, str(cid))
    assert len(os.listdir(customer_dir)) == 2

    assert client.delete(f"/customers/{cid}").status_code == 200
    assert os.listdir(customer_dir) == []


def test_delete_unknown_customer_is_404(client):
    assert client.delete("/customers/42").status_code == 404


def test_health_is_wrapped_in_envelope(client):
    body = client.get("/health").json()

    assert body["success"] is True
    assert body["errors"] == []
    assert body["data"]["status"] == "healthy"
    assert body["data"]["service"] == "Image Upload API"
    assert body["data"]["maxImagesPerCustomer"] == 10
    assert body["data"]["databaseError"] is None
