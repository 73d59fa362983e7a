# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import json
import firebase_admin
from firebase_admin import credentials, firestore, storage

from lifedash import config


def init_firebase():
    """
    ✅ Initialize Firebase only once.
    FIREBASE_ADMIN_JSON holds either stringified JSON or a path to the key file.
    """
    if firebase_admin._apps:
        return firebase_admin.get_app()

    raw_json = config.FIREBASE_ADMIN_JSON
    if not raw_json:
        raise ValueError("FIREBASE_ADMIN_JSON is not set in environment variables")

    options = {}
    if config.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = config.FIREBASE_STORAGE_BUCKET

    try:
        if raw_json.strip().startswith("{"):
            # 🧠 Stringified JSON (e.g., hosted secrets)
            cred = credentials.Certificate(json.loads(raw_json))
        else:
            # 🧪 Local path to JSON (for dev)
            cred = credentials.Certificate(raw_json)

        return firebase_admin.initialize_app(cred, options)

    except Exception as e:
        raise RuntimeError("❌ Failed to initialize Firebase Admin SDK") from e


def get_firestore_client():
    init_firebase()
    return firestore.client()


def get_storage_bucket():
    init_firebase()
    return storage.bucket()
