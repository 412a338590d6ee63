"""
utils/db.py
-----------------
This module initializes and manages the MongoDB connection
for the entire Flask application and hands out the collection
handles each resource blueprint is built with.
"""

from flask_pymongo import PyMongo

# Create a global MongoDB instance
mongo = PyMongo()


def init_db_connection(app):
    """
    Initialize MongoDB connection with Flask app.
    Loads settings from the app config (like MONGO_URI).
    """
    mongo.init_app(app)

    app.logger.info("MongoDB connection initialized successfully.")
    return mongo.db


def get_collections(db, collection_names):
    """Resolve every configured resource name to its collection handle."""
    return {key: db[name] for key, name in collection_names.items()}
