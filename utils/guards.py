import logging
from functools import wraps

from pymongo.errors import PyMongoError

from utils.responses import failure

logger = logging.getLogger(__name__)


# Wraps a route so that storage failures become a 500 JSON body
# carrying the module's own message instead of an HTML error page.
def handle_storage_errors(message):
    def decorator(view_function):
        @wraps(view_function)
        def decorated_function(*args, **kwargs):
            try:
                return view_function(*args, **kwargs)
            except PyMongoError as e:
                logger.exception("%s: %s", view_function.__name__, message)
                return failure(message, 500, error=str(e))
        return decorated_function
    return decorator
