import base64
from contextlib import asynccontextmanager

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from imageupload_web.models import Base64ImageUploadRequest, Customer
from imageupload_web.services import ApiClient, CustomerService, ImageService

IMAGE = {
    "id": 5,
    "customerId": 1,
    "fileName": "a.png",
    "contentType": "image/png",
    "fileSizeBytes": 3,
    "uploadedAt": "2024-01-01T10:00:00",
    "description": None,
    "storageEncoding": "inline",
    "fileUrl": None,
    "base64Data": "cG5n",
}

CUSTOMER = {
    "id": 1,
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "phone": None,
    "createdAt": "2024-01-01T09:00:00",
    "updatedAt": "2024-01-01T09:00:00",
    "images": [IMAGE],
}


def envelope(data=None, message="OK", success=True, errors=None):
    return {"success": success, "message": message, "data": data, "errors": errors or []}


@asynccontextmanager
async def stub_api(routes):
    app = web.Application()
    app.add_routes(routes)
    async with TestServer(app) as server:
        async with ApiClient(base_url=str(server.make_url("/"))) as client:
            yield client


@pytest.mark.asyncio
async def test_get_customers_parses_envelope():
    routes = web.RouteTableDef()

    @routes.get("/customers")
    async def list_customers(request):
        return web.json_response(envelope([CUSTOMER], "Customers retrieved successfully"))

    async with stub_api(routes) as client:
        result = await CustomerService(client).get_customers()

    assert result.success
    assert result.data[0].full_name == "Ada Lovelace"
    assert result.data[0].images[0].display_src == "data:image/png;base64,cG5n"


@pytest.mark.asyncio
async def test_error_envelope_message_is_kept():
    routes = web.RouteTableDef()

    @routes.get("/customers/{customer_id}")
    async def get_customer(request):
        message = f"Customer with ID {request.match_info['customer_id']} not found"
        return web.json_response(envelope(None, message, success=False), status=404)

    async with stub_api(routes) as client:
        result = await CustomerService(client).get_customer(99)

    assert not result.success
    assert result.message == "Customer with ID 99 not found"
    assert result.data is None


@pytest.mark.asyncio
async def test_non_json_error_reports_status():
    routes = web.RouteTableDef()

    @routes.delete("/images/{image_id}")
    async def delete_image(request):
        return web.Response(status=500, text="boom")

    async with stub_api(routes) as client:
        result = await ImageService(client).delete_image(5)

    assert not result.success
    assert result.message == "Delete failed: 500"


@pytest.mark.asyncio
async def test_create_and_update_send_camel_case_payloads():
    received = []
    routes = web.RouteTableDef()

    @routes.post("/customers")
    async def create(request):
        received.append(await request.json())
        return web.json_response(envelope(CUSTOMER, "Customer created successfully"), status=201)

    @routes.put("/customers/{customer_id}")
    async def update(request):
        received.append(await request.json())
        return web.json_response(envelope(CUSTOMER, "Customer updated successfully"))

    async with stub_api(routes) as client:
        service = CustomerService(client)
        created = await service.create_customer(Customer(first_name="Ada", last_name="Lovelace"))
        updated = await service.update_customer(Customer(id=1, first_name="Ada", last_name="King"))

    assert created.success and updated.success
    assert received[0] == {"firstName": "Ada", "lastName": "Lovelace", "email": None, "phone": None}
    assert received[1]["id"] == 1
    assert received[1]["lastName"] == "King"


@pytest.mark.asyncio
async def test_upload_image_sends_base64_payload():
    received = {}
    routes = web.RouteTableDef()

    @routes.post("/images/upload-base64")
    async def upload(request):
        received.update(await request.json())
        return web.json_response(envelope(IMAGE, "Image uploaded successfully"))

    async with stub_api(routes) as client:
        result = await ImageService(client).upload_image(1, "a.png", "image/png", b"png", "front")

    assert result.success
    assert result.data.id == 5
    assert received["customerId"] == 1
    assert base64.b64decode(received["base64Data"]) == b"png"
    assert received["description"] == "front"


@pytest.mark.asyncio
async def test_upload_image_rejected_locally_without_request():
    calls = []
    routes = web.RouteTableDef()

    @routes.post("/images/upload-base64")
    async def upload(request):
        calls.append(request)
        return web.json_response(envelope(IMAGE))

    async with stub_api(routes) as client:
        service = ImageService(client)
        bad_type = await service.upload_image(1, "doc.pdf", "application/pdf", b"%PDF")
        too_big = await service.upload_image(1, "big.jpg", "image/jpeg", b"\x00" * (6 * 1024 * 1024))

    assert calls == []
    assert bad_type.message.startswith("Invalid file type: application/pdf")
    assert too_big.message == "File too large: 6 MB. Maximum size: 5 MB"


@pytest.mark.asyncio
async def test_upload_base64_limit_error_passes_through():
    routes = web.RouteTableDef()

    @routes.post("/images/upload-base64")
    async def upload(request):
        message = "Customer 1 has reached the maximum limit of 10 images"
        return web.json_response(envelope(None, message, success=False, errors=[message]), status=400)

    request = Base64ImageUploadRequest(customer_id=1, base64_data="cG5n", file_name="a.png", content_type="image/png")
    async with stub_api(routes) as client:
        result = await ImageService(client).upload_base64_image(request)

    assert not result.success
    assert result.errors == ["Customer 1 has reached the maximum limit of 10 images"]


@pytest.mark.asyncio
async def test_upload_files_sends_multipart():
    seen = {}
    routes = web.RouteTableDef()

    @routes.post("/images/upload/{customer_id}")
    async def upload(request):
        form = await request.post()
        files = form.getall("files")
        seen["names"] = [f.filename for f in files]
        seen["description"] = form.get("description")
        return web.json_response(envelope([IMAGE, dict(IMAGE, id=6)], "Successfully uploaded 2 image(s)"))

    async with stub_api(routes) as client:
        result = await ImageService(client).upload_files(
            1,
            [("a.png", b"png", "image/png"), ("b.jpg", b"jpg", "image/jpeg")],
            description="batch",
        )

    assert result.success
    assert [img.id for img in result.data] == [5, 6]
    assert seen == {"names": ["a.png", "b.jpg"], "description": "batch"}


@pytest.mark.asyncio
async def test_count_and_base64_lookups():
    routes = web.RouteTableDef()

    @routes.get("/images/count/{customer_id}")
    async def count(request):
        return web.json_response(envelope({
            "customerId": 1, "currentCount": 10, "maxAllowed": 10, "canAddMore": False, "remainingSlots": 0,
        }))

    @routes.get("/images/base64/{image_id}")
    async def b64(request):
        return web.json_response(envelope({
            "imageId": 5, "fileName": "a.png", "contentType": "image/png",
            "base64Data": "cG5n", "dataUrl": "data:image/png;base64,cG5n",
        }))

    async with stub_api(routes) as client:
        service = ImageService(client)
        count_result = await service.get_image_count(1)
        b64_result = await service.get_image_base64(5)

    assert count_result.data.can_add_more is False
    assert count_result.data.remaining_slots == 0
    assert b64_result.data.data_url == "data:image/png;base64,cG5n"


@pytest.mark.asyncio
async def test_unreachable_api_yields_error_envelope():
    async with ApiClient(base_url="http://127.0.0.1:1", timeout=5) as client:
        result = await CustomerService(client).get_customers()

    assert not result.success
    assert result.message == "An error occurred while retrieving customers"
