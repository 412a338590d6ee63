import threading
from contextlib import contextmanager

# Fixed pool: unrelated scopes may share a stripe, the pool never grows.
STRIPES = 64
_locks = [threading.Lock() for _ in range(STRIPES)]


def lock_for(*scope):
    return _locks[hash(scope) % STRIPES]


@contextmanager
def scoped_lock(*scope):
    """
    Serialize check-then-write sequences that share the same scope,
    e.g. ("menu", "science club") or ("admission-info",).
    Only guards requests served by this process. Never nest two of these.
    """
    with lock_for(*scope):
        yield
