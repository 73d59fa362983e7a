# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from abc import ABC, abstractmethod
from datetime import timedelta
from pathlib import Path
from typing import Optional

from google.api_core.exceptions import GoogleAPICallError


class BlobStoreError(Exception):
    pass


class BlobStore(ABC):
    @abstractmethod
    def put_object(self, path: str, data: bytes, content_type: Optional[str] = None) -> None:
        pass

    @abstractmethod
    def get_object_url(self, path: str) -> str:
        pass

    @abstractmethod
    def delete_object(self, path: str) -> None:
        pass


class LocalBlobStore(BlobStore):
    """Files under `root`, served by the app's StaticFiles mount at `url_prefix`."""

    def __init__(self, root: str, url_prefix: str = "/blobs"):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        os.makedirs(self.root, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if self.root.resolve() not in target.parents:
            raise BlobStoreError(f"Path escapes blob root: {path}")
        return target

    def put_object(self, path: str, data: bytes, content_type: Optional[str] = None) -> None:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            raise BlobStoreError(f"Failed to store {path}") from e

    def get_object_url(self, path: str) -> str:
        return f"{self.url_prefix}/{path}"

    def delete_object(self, path: str) -> None:
        target = self._resolve(path)
        try:
            target.unlink(missing_ok=True)
        except OSError as e:
            raise BlobStoreError(f"Failed to delete {path}") from e


class FirebaseBlobStore(BlobStore):
    """Objects in the Firebase Storage bucket; URLs are short-lived signed links."""

    def __init__(self, bucket, url_ttl: timedelta = timedelta(hours=1)):
        self.bucket = bucket
        self.url_ttl = url_ttl

    def put_object(self, path: str, data: bytes, content_type: Optional[str] = None) -> None:
        try:
            self.bucket.blob(path).upload_from_string(data, content_type=content_type)
        except GoogleAPICallError as e:
            raise BlobStoreError(f"Failed to upload {path}") from e

    def get_object_url(self, path: str) -> str:
        return self.bucket.blob(path).generate_signed_url(expiration=self.url_ttl)

    def delete_object(self, path: str) -> None:
        try:
            self.bucket.blob(path).delete()
        except GoogleAPICallError as e:
            raise BlobStoreError(f"Failed to delete {path}") from e
