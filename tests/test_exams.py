import pytest

GRADING = {
    "name": "SSC",
    "totalMarks": 100,
    "passMarks": 33,
    "gradeRanges": [
        {"letterGrade": "A+", "minMarks": 80, "maxMarks": 100, "gradePoint": 5},
        {"letterGrade": "F", "minMarks": 0, "maxMarks": 32, "gradePoint": 0},
    ],
}

SEAT_PLAN = {
    "className": "Ten",
    "batch": "Morning",
    "section": "A",
    "activeSession": "2024",
    "hallRoom": "101",
    "exam": "Half Yearly",
    "examDuration": "3 hours",
    "columnNumber": 4,
    "rowNumber": 5,
    "studentsPerBench": 2,
}


# -----------------------------
# Exam categories
# -----------------------------
def test_exam_category_numbers_are_parsed(client):
    resp = client.post("/api/exam-categories", json={
        "name": "Half Yearly", "totalMarks": "100", "passMarks": "33", "weight": "50",
    })

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["totalMarks"] == 100
    assert data["weight"] == 50
    assert data["isMain"] is False


def test_exam_category_requires_all_fields(client):
    resp = client.post("/api/exam-categories", json={"name": "Final", "totalMarks": 100})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "All fields are required"


def test_exam_category_name_unique(client):
    body = {"name": "Final", "totalMarks": 100, "passMarks": 33, "weight": 100}
    client.post("/api/exam-categories", json=body)

    resp = client.post("/api/exam-categories", json=dict(body, name="final"))

    assert resp.status_code == 400


def test_exam_category_rejects_non_numeric_marks(client):
    resp = client.post("/api/exam-categories", json={
        "name": "Final", "totalMarks": "lots", "passMarks": 33, "weight": 100,
    })

    assert resp.status_code == 400


# -----------------------------
# Grading
# -----------------------------
def test_grading_create_and_fetch(client):
    created = client.post("/api/grading", json=GRADING).get_json()["data"]

    fetched = client.get(f"/api/grading/{created['_id']}").get_json()["data"]

    assert fetched["optionalSubjectDeduction"] == 0
    assert fetched["isSpecialGrading"] is False
    assert [r["letterGrade"] for r in fetched["gradeRanges"]] == ["A+", "F"]


@pytest.mark.parametrize("ranges", [[], None])
def test_grading_needs_grade_ranges(client, db, ranges):
    body = dict(GRADING)
    if ranges is None:
        del body["gradeRanges"]
    else:
        body["gradeRanges"] = ranges

    resp = client.post("/api/grading", json=body)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "At least one grade range is required"
    assert db["grading"].count_documents({}) == 0


def test_grading_update_with_empty_ranges_leaves_document_unchanged(client, db):
    created = client.post("/api/grading", json=GRADING).get_json()["data"]

    resp = client.put(f"/api/grading/{created['_id']}", json=dict(GRADING, gradeRanges=[]))

    assert resp.status_code == 400
    assert len(db["grading"].find_one()["gradeRanges"]) == 2


def test_grading_rejects_inverted_range(client):
    body = dict(GRADING, gradeRanges=[{"letterGrade": "A", "minMarks": 90, "maxMarks": 80, "gradePoint": 4}])

    assert client.post("/api/grading", json=body).status_code == 400


# -----------------------------
# Seat plans
# -----------------------------
def test_seat_plan_total_seats(client):
    resp = client.post("/api/seat-arrangement", json=SEAT_PLAN)

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["totalSeats"] == 40
    assert data["monthlyFee"] == 0
    assert data["sendAttendanceSMS"] is False


def test_seat_plan_update_recomputes_total(client):
    created = client.post("/api/seat-arrangement", json=SEAT_PLAN).get_json()["data"]

    resp = client.put(f"/api/seat-arrangement/{created['_id']}", json=dict(SEAT_PLAN, rowNumber=10))

    assert resp.get_json()["data"]["totalSeats"] == 80


@pytest.mark.parametrize("field,value", [("columnNumber", 0), ("rowNumber", "two"), ("studentsPerBench", 1.5)])
def test_seat_plan_rejects_bad_counts(client, field, value):
    resp = client.post("/api/seat-arrangement", json=dict(SEAT_PLAN, **{field: value}))

    assert resp.status_code == 400


def test_seat_plan_requires_hall_room(client):
    body = dict(SEAT_PLAN)
    del body["hallRoom"]

    resp = client.post("/api/seat-arrangement", json=body)

    assert resp.status_code == 400
    assert "hallRoom" in resp.get_json()["message"]


# -----------------------------
# Exam timetables
# -----------------------------
def test_timetable_status_must_be_known(client):
    resp = client.post("/api/exam-timetable", json={"duration": "3 hours", "status": "paused"})

    assert resp.status_code == 400


def test_timetable_toggle_twice_restores_status(client, missing_id):
    created = client.post("/api/exam-timetable", json={"duration": "3 hours", "status": "active"}).get_json()["data"]
    url = f"/api/exam-timetable/{created['_id']}/toggle-status"

    first = client.patch(url)
    assert first.status_code == 200
    assert first.get_json()["data"]["status"] == "inactive"

    second = client.patch(url)
    assert second.get_json()["data"]["status"] == "active"
    assert client.get(f"/api/exam-timetable/{created['_id']}").get_json()["data"]["status"] == "active"

    assert client.patch(f"/api/exam-timetable/{missing_id}/toggle-status").status_code == 404
    assert client.patch("/api/exam-timetable/nope/toggle-status").status_code == 400


def test_seat_plan_rejects_seat_total_beyond_int64(client, db):
    huge = 10 ** 7
    body = dict(SEAT_PLAN, columnNumber=huge, rowNumber=huge, studentsPerBench=huge)

    resp = client.post("/api/seat-arrangement", json=body)

    assert resp.status_code == 400
    assert db["exam-arrangement"].count_documents({}) == 0


def test_seat_plan_rejects_count_beyond_int64(client):
    resp = client.post("/api/seat-arrangement", json=dict(SEAT_PLAN, rowNumber=10 ** 19))

    assert resp.status_code == 400
