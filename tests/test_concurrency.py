import threading

from utils import locks

THREADS = 8


def run_together(app, send):
    """Fire `send(client)` from several threads released at the same moment."""
    barrier = threading.Barrier(THREADS)
    statuses = []
    status_lock = threading.Lock()

    def worker():
        client = app.test_client()
        barrier.wait()
        resp = send(client)
        with status_lock:
            statuses.append(resp.status_code)

    threads = [threading.Thread(target=worker) for _ in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return statuses


def test_concurrent_duplicate_names_create_one_menu(app, db):
    names = ["Science Club", "science club", "SCIENCE CLUB", "Science club"]

    def send(client):
        name = names[threading.get_ident() % len(names)]
        return client.post("/api/menus", json={"name": name})

    statuses = run_together(app, send)

    assert statuses.count(201) == 1
    assert statuses.count(400) == THREADS - 1
    assert db["menu"].count_documents({}) == 1


def test_concurrent_singleton_saves_keep_one_document(app, db):
    statuses = run_together(app, lambda client: client.post("/api/admission-info", json={"content": "Open"}))

    assert statuses.count(201) == 1
    assert statuses.count(200) == THREADS - 1
    assert db["admission-info"].count_documents({}) == 1


def test_lock_pool_does_not_grow(client, db):
    pool = list(locks._locks)

    for i in range(200):
        created = client.post("/api/menus", json={"name": f"Menu {i}"}).get_json()["data"]
        client.delete(f"/api/menus/{created['_id']}")

    assert locks._locks == pool
    assert len(locks._locks) == locks.STRIPES
    assert db["menu"].count_documents({}) == 0


def test_same_scope_maps_to_same_lock():
    assert locks.lock_for("menu", "home") is locks.lock_for("menu", "home")
