import io
import os

import pytest
from bson import ObjectId


@pytest.fixture
def refs(db):
    teacher = db["teachers"].insert_one({"name": "Rahim"}).inserted_id
    klass = db["classes"].insert_one({"name": "Ten"}).inserted_id
    return {"teacherId": str(teacher), "classId": str(klass)}


def lesson_dir(app):
    return os.path.join(app.config["UPLOAD_ROOT"], "teacher-lessons")


def stored_files(app):
    folder = lesson_dir(app)
    return sorted(os.listdir(folder)) if os.path.isdir(folder) else []


def upload(client, refs, filename="plan.pdf", content=b"%PDF-1.4 lesson", url="/api/teacher-lessons",
           method="post", **fields):
    data = dict(refs, title="Algebra", **fields)
    if filename is not None:
        data["lessonFile"] = (io.BytesIO(content), filename)
    return getattr(client, method)(url, data=data, content_type="multipart/form-data")


def test_upload_stores_file_and_metadata(client, app, refs):
    resp = upload(client, refs)

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["fileName"] == "plan.pdf"
    assert data["fileSize"] == len(b"%PDF-1.4 lesson")
    assert data["downloads"] == 0
    assert data["isActive"] is True
    assert data["description"] == ""
    assert data["filePath"].startswith("/uploads/teacher-lessons/lessonFile-")

    stored_name = data["filePath"].rsplit("/", 1)[1]
    assert stored_files(app) == [stored_name]

    served = client.get(data["filePath"])
    assert served.status_code == 200
    assert served.data == b"%PDF-1.4 lesson"


def test_upload_rejects_disallowed_extension(client, app, db, refs):
    resp = upload(client, refs, filename="virus.exe")

    assert resp.status_code == 400
    assert resp.get_json()["message"].startswith("Invalid file type")
    assert db["teacher-lesson"].count_documents({}) == 0
    assert stored_files(app) == []


def test_upload_rejects_oversized_file(client, app, db, refs):
    app.config["LESSON_MAX_BYTES"] = 1024

    resp = upload(client, refs, content=b"x" * 2048)

    assert resp.status_code == 400
    assert db["teacher-lesson"].count_documents({}) == 0
    assert stored_files(app) == []


def test_upload_requires_file_and_fields(client, refs):
    assert upload(client, refs, filename=None).status_code == 400
    assert upload(client, dict(refs, teacherId="")).status_code == 400
    assert upload(client, dict(refs, classId="class-ten")).status_code == 400


def test_file_removed_when_database_write_fails(client, app, db, refs, monkeypatch):
    from pymongo.errors import PyMongoError

    def broken_insert_one(*args, **kwargs):
        raise PyMongoError("write failed")

    monkeypatch.setattr(type(db["teacher-lesson"]), "insert_one", broken_insert_one)

    resp = upload(client, refs)

    assert resp.status_code == 500
    assert stored_files(app) == []


def test_list_joins_and_filters(client, db, refs):
    upload(client, refs)
    other_teacher = str(db["teachers"].insert_one({"name": "Karim"}).inserted_id)
    upload(client, dict(refs, teacherId=other_teacher), filename="notes.txt")
    upload(client, dict(refs, teacherId="64b7f0c2a1b2c3d4e5f60999"), filename="notes.docx")

    lessons = client.get("/api/teacher-lessons").get_json()["data"]
    assert len(lessons) == 3
    by_file = {lesson["fileName"]: lesson for lesson in lessons}
    assert by_file["plan.pdf"]["teacher"] == {"_id": refs["teacherId"], "name": "Rahim"}
    assert by_file["plan.pdf"]["class"]["name"] == "Ten"
    assert by_file["notes.docx"]["teacher"] is None

    filtered = client.get(f"/api/teacher-lessons?teacherId={other_teacher}").get_json()["data"]
    assert [lesson["fileName"] for lesson in filtered] == ["notes.txt"]

    assert client.get("/api/teacher-lessons?teacherId=bad").status_code == 400


def test_list_filters_by_day(client, db, refs):
    upload(client, refs)
    lesson = db["teacher-lesson"].find_one()
    day = lesson["createdAt"].strftime("%Y-%m-%d")

    assert len(client.get(f"/api/teacher-lessons?date={day}").get_json()["data"]) == 1
    assert client.get("/api/teacher-lessons?date=2000-01-01").get_json()["data"] == []
    assert client.get("/api/teacher-lessons?date=yesterday").status_code == 400


def test_download_counter(client, refs, missing_id):
    created = upload(client, refs).get_json()["data"]
    url = f"/api/teacher-lessons/{created['_id']}/download"

    client.patch(url)
    client.patch(url)

    assert client.get(f"/api/teacher-lessons/{created['_id']}").get_json()["data"]["downloads"] == 2
    assert client.patch(f"/api/teacher-lessons/{missing_id}/download").status_code == 404


def test_update_replaces_file(client, app, db, refs):
    created = upload(client, refs).get_json()["data"]
    url = f"/api/teacher-lessons/{created['_id']}"

    resp = upload(client, refs, filename="plan-v2.pptx", content=b"slides", url=url, method="put",
                  description="Second draft")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["fileName"] == "plan-v2.pptx"
    assert data["description"] == "Second draft"
    assert stored_files(app) == [data["filePath"].rsplit("/", 1)[1]]
    assert db["teacher-lesson"].find_one()["teacherId"] == ObjectId(refs["teacherId"])


def test_update_without_file_keeps_it(client, app, refs):
    created = upload(client, refs).get_json()["data"]

    resp = upload(client, refs, filename=None, url=f"/api/teacher-lessons/{created['_id']}", method="put")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["filePath"] == created["filePath"]
    assert len(stored_files(app)) == 1


def test_delete_removes_file(client, app, refs):
    created = upload(client, refs).get_json()["data"]

    assert client.delete(f"/api/teacher-lessons/{created['_id']}").status_code == 200
    assert stored_files(app) == []
    assert client.delete(f"/api/teacher-lessons/{created['_id']}").status_code == 404


def test_request_over_body_limit_is_json_413(client, app, db, refs):
    app.config["MAX_CONTENT_LENGTH"] = 2048

    resp = upload(client, refs, content=b"x" * 4096)

    assert resp.status_code == 413
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "File too large. Maximum size is 10MB."
    assert db["teacher-lesson"].count_documents({}) == 0
    assert stored_files(app) == []
