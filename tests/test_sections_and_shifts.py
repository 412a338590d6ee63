from bson import ObjectId


def add_class(db, name):
    return db["classes"].insert_one({"name": name, "numericValue": 10}).inserted_id


# -----------------------------
# Sections
# -----------------------------
def test_section_name_unique_per_class(client, db):
    ten = str(add_class(db, "Ten"))
    nine = str(add_class(db, "Nine"))

    assert client.post("/api/sections", json={"name": "A", "classId": ten}).status_code == 201
    assert client.post("/api/sections", json={"name": "a", "classId": ten}).status_code == 400
    assert client.post("/api/sections", json={"name": "A", "classId": nine}).status_code == 201


def test_section_requires_valid_class_id(client):
    assert client.post("/api/sections", json={"name": "A"}).status_code == 400
    assert client.post("/api/sections", json={"name": "A", "classId": "ten"}).status_code == 400


def test_section_list_joins_class_name_only(client, db):
    ten = add_class(db, "Ten")
    client.post("/api/sections", json={"name": "A", "classId": str(ten)})
    client.post("/api/sections", json={"name": "B", "classId": "64b7f0c2a1b2c3d4e5f60999"})

    sections = {s["name"]: s for s in client.get("/api/sections").get_json()["data"]}

    assert sections["A"]["class"] == {"_id": str(ten), "name": "Ten"}
    assert sections["B"]["class"] is None


def test_sections_of_class_only_active(client, db):
    ten = str(add_class(db, "Ten"))
    client.post("/api/sections", json={"name": "A", "classId": ten})
    client.post("/api/sections", json={"name": "B", "classId": ten, "isActive": False})

    resp = client.get(f"/api/sections/class/{ten}")

    assert resp.status_code == 200
    assert [s["name"] for s in resp.get_json()["data"]] == ["A"]
    assert client.get("/api/sections/class/ten").status_code == 400


def test_section_update_and_delete(client, db, missing_id):
    ten = str(add_class(db, "Ten"))
    created = client.post("/api/sections", json={"name": "A", "classId": ten}).get_json()["data"]

    resp = client.put(f"/api/sections/{created['_id']}", json={"name": "Rose", "classId": ten})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "Rose"
    assert db["sections"].find_one()["classId"] == ObjectId(ten)

    assert client.put(f"/api/sections/{missing_id}", json={"name": "X", "classId": ten}).status_code == 404
    assert client.delete(f"/api/sections/{created['_id']}").status_code == 200


# -----------------------------
# Attendance shifts
# -----------------------------
def test_shift_needs_an_entry_time(client):
    resp = client.post("/api/smart-attendance-shift", json={"shiftName": "Morning"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Either student or teacher entry time is required"


def test_shift_defaults_and_unique_name(client):
    resp = client.post("/api/smart-attendance-shift", json={
        "shiftName": "Teachers", "teacherEntryTime": "07:45",
    })

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["sendSmsTo"] == "to_institute"
    assert data["studentEntryTime"] == ""
    assert data["class"] is None

    dup = client.post("/api/smart-attendance-shift", json={"shiftName": "teachers", "studentEntryTime": "08:00"})
    assert dup.status_code == 400


def test_shift_list_keeps_rows_without_class(client, db):
    ten = add_class(db, "Ten")
    client.post("/api/smart-attendance-shift", json={
        "shiftName": "Morning", "studentEntryTime": "08:00", "class": str(ten),
    })
    client.post("/api/smart-attendance-shift", json={"shiftName": "Teachers", "teacherEntryTime": "07:45"})

    shifts = {s["shiftName"]: s for s in client.get("/api/smart-attendance-shift").get_json()["data"]}

    assert shifts["Morning"]["class"]["name"] == "Ten"
    assert shifts["Morning"]["section"] is None
    assert shifts["Teachers"]["class"] is None


def test_shift_partial_update_rechecks_name(client):
    client.post("/api/smart-attendance-shift", json={"shiftName": "Morning", "studentEntryTime": "08:00"})
    day = client.post(
        "/api/smart-attendance-shift", json={"shiftName": "Day", "studentEntryTime": "12:00"}
    ).get_json()["data"]

    assert client.put(f"/api/smart-attendance-shift/{day['_id']}", json={"shiftName": "MORNING"}).status_code == 400

    resp = client.put(f"/api/smart-attendance-shift/{day['_id']}", json={"countLateAfter": 10})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["countLateAfter"] == 10
    assert resp.get_json()["data"]["shiftName"] == "Day"
