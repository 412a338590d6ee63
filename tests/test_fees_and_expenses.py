from bson import ObjectId
from pymongo.errors import PyMongoError

FEE = {"classId": "C1", "batchId": "B1", "sectionId": "S1", "sessionId": "SS1", "monthlyFee": "500"}


# -----------------------------
# Advance fees
# -----------------------------
def test_advance_fee_create_then_duplicate(client, db):
    resp = client.post("/api/advance-fees", json=FEE)

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["monthlyFee"] == 500
    assert data["generateFeesTo"] == "january"
    assert data["status"] == "active"
    assert isinstance(db["advance-fees"].find_one()["monthlyFee"], float)

    duplicate = client.post("/api/advance-fees", json=FEE)
    assert duplicate.status_code == 400
    assert duplicate.get_json()["success"] is False
    assert db["advance-fees"].count_documents({}) == 1


def test_advance_fee_other_scope_is_allowed(client):
    client.post("/api/advance-fees", json=FEE)

    resp = client.post("/api/advance-fees", json=dict(FEE, sectionId="S2"))

    assert resp.status_code == 201


def test_advance_fee_requires_scope(client):
    resp = client.post("/api/advance-fees", json=dict(FEE, sessionId=""))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "All required fields must be provided"


def test_advance_fee_list_filters(client):
    client.post("/api/advance-fees", json=FEE)
    client.post("/api/advance-fees", json=dict(FEE, classId="C2", status="inactive"))

    by_class = client.get("/api/advance-fees?classId=C2").get_json()["data"]
    by_status = client.get("/api/advance-fees?status=active").get_json()["data"]

    assert [f["classId"] for f in by_class] == ["C2"]
    assert [f["classId"] for f in by_status] == ["C1"]


def test_advance_fee_partial_update_checks_merged_scope(client):
    client.post("/api/advance-fees", json=FEE)
    other = client.post("/api/advance-fees", json=dict(FEE, sectionId="S2")).get_json()["data"]

    clash = client.put(f"/api/advance-fees/{other['_id']}", json={"sectionId": "S1"})
    assert clash.status_code == 400

    resp = client.put(f"/api/advance-fees/{other['_id']}", json={"monthlyFee": 650})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["monthlyFee"] == 650
    assert data["sectionId"] == "S2"


# -----------------------------
# Expense categories
# -----------------------------
def test_expense_category_list_has_total(client):
    client.post("/api/expense-category", json={"name": "Utilities"})
    client.post("/api/expense-category", json={"name": "Salary"})

    body = client.get("/api/expense-category").get_json()

    assert body["total"] == 2
    assert len(body["data"]) == 2


def test_expense_category_toggle_status(client):
    created = client.post("/api/expense-category", json={"name": "Utilities"}).get_json()["data"]
    assert created["isActive"] is True
    url = f"/api/expense-category/{created['_id']}/toggle-status"

    assert client.patch(url).get_json()["data"]["isActive"] is False
    assert client.patch(url).get_json()["data"]["isActive"] is True


def test_expense_category_partial_update_and_duplicate(client):
    client.post("/api/expense-category", json={"name": "Utilities"})
    created = client.post("/api/expense-category", json={"name": "Salary"}).get_json()["data"]

    assert client.put(f"/api/expense-category/{created['_id']}", json={"name": "UTILITIES"}).status_code == 400

    resp = client.put(f"/api/expense-category/{created['_id']}", json={"isActive": False})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "Salary"
    assert resp.get_json()["data"]["isActive"] is False


# -----------------------------
# Expense items
# -----------------------------
def test_expense_items_bulk_insert(client, db):
    category = client.post("/api/expense-category", json={"name": "Utilities"}).get_json()["data"]

    resp = client.post("/api/expense-items", json={"items": [
        {"name": "Electricity", "category": category["_id"]},
        {"name": "Water", "category": category["_id"]},
    ]})

    assert resp.status_code == 201
    assert len(resp.get_json()["data"]) == 2
    assert db["expense-items"].count_documents({}) == 2
    assert db["expense-items"].find_one({"name": "Water"})["category"] == ObjectId(category["_id"])


def test_expense_items_one_bad_item_writes_nothing(client, db):
    category = client.post("/api/expense-category", json={"name": "Utilities"}).get_json()["data"]

    resp = client.post("/api/expense-items", json={"items": [
        {"name": "Electricity", "category": category["_id"]},
        {"name": "", "category": category["_id"]},
    ]})

    assert resp.status_code == 400
    assert db["expense-items"].count_documents({}) == 0


def test_expense_items_need_items_array(client):
    for body in ({}, {"items": []}, {"items": "Electricity"}):
        resp = client.post("/api/expense-items", json=body)
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Items array is required"


def test_expense_items_join_keeps_missing_category(client, db):
    category = client.post("/api/expense-category", json={"name": "Utilities"}).get_json()["data"]
    client.post("/api/expense-items", json={"items": [{"name": "Electricity", "category": category["_id"]}]})
    orphan_category = "64b7f0c2a1b2c3d4e5f60999"
    client.post("/api/expense-items", json={"items": [{"name": "Gas", "category": orphan_category}]})

    items = {i["name"]: i for i in client.get("/api/expense-items").get_json()["data"]}

    assert items["Electricity"]["category"]["name"] == "Utilities"
    assert items["Gas"]["category"] is None


def test_expense_item_update_and_fetch(client, missing_id):
    category = client.post("/api/expense-category", json={"name": "Utilities"}).get_json()["data"]
    item = client.post(
        "/api/expense-items", json={"items": [{"name": "Electricity", "category": category["_id"]}]}
    ).get_json()["data"][0]

    resp = client.put(f"/api/expense-items/{item['_id']}", json={"name": "Power", "category": category["_id"]})
    assert resp.status_code == 200

    fetched = client.get(f"/api/expense-items/{item['_id']}").get_json()["data"]
    assert fetched["name"] == "Power"
    assert fetched["category"]["name"] == "Utilities"
    assert client.get(f"/api/expense-items/{missing_id}").status_code == 404
    assert client.put(f"/api/expense-items/{item['_id']}", json={"name": "Power"}).status_code == 400


def test_storage_failure_becomes_server_error(client, db, monkeypatch):
    def broken_insert_many(*args, **kwargs):
        raise PyMongoError("connection reset")

    collection_type = type(db["expense-items"])
    monkeypatch.setattr(collection_type, "insert_many", broken_insert_many)

    resp = client.post("/api/expense-items", json={"items": [
        {"name": "Electricity", "category": "64b7f0c2a1b2c3d4e5f60999"},
    ]})

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Error creating expense items"
    assert body["error"] == "connection reset"


def test_advance_fee_rejects_number_too_large_for_float(client, db):
    resp = client.post("/api/advance-fees", json=dict(FEE, monthlyFee=10 ** 400))

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Monthly fee must be a number"
    assert db["advance-fees"].count_documents({}) == 0
