# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import os

# ✅ Only load .env in local/dev
if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

# 🗄️ Where records live: "sql" (SQLAlchemy documents table) or "firestore"
SYNC_BACKEND = os.getenv("SYNC_BACKEND", "sql")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lifedash.db")

# 🖼️ Where uploaded images live: "local" or "firebase"
BLOB_BACKEND = os.getenv("BLOB_BACKEND", "local")
BLOB_ROOT = os.getenv("BLOB_ROOT", "./data/blobs")
BLOB_URL_PREFIX = os.getenv("BLOB_URL_PREFIX", "/blobs")

# 🔥 Firebase Admin credentials (stringified JSON or path to JSON)
FIREBASE_ADMIN_JSON = os.getenv("FIREBASE_ADMIN_JSON")
FIREBASE_STORAGE_BUCKET = os.getenv("FIREBASE_STORAGE_BUCKET")

# 🕒 Used for default deadlines and to-do group titles
DASHBOARD_TIMEZONE = os.getenv("DASHBOARD_TIMEZONE", "UTC")

# 🔐 Optional: encrypt stored documents at rest
FERNET_SECRET = os.getenv("FERNET_SECRET")

RATE_LIMIT = os.getenv("RATE_LIMIT", "120/minute")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
