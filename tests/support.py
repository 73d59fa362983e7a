"""Shared fixtures: an in-memory SQL gateway and controllable doubles."""

from lifedash.models.database import make_engine, make_session_factory
from lifedash.utils.blob_store import BlobStore, BlobStoreError
from lifedash.utils.sql_gateway import SqlDocumentGateway
from lifedash.utils.sync_gateway import GatewayError, SyncGateway


def make_sql_gateway() -> SqlDocumentGateway:
    engine = make_engine("sqlite://")
    gateway = SqlDocumentGateway(make_session_factory(engine))
    gateway.create_tables()
    return gateway


class FlakyGateway(SyncGateway):
    """Delegates to a real gateway; writes fail while `failing` is set."""

    def __init__(self, inner: SyncGateway):
        self.inner = inner
        self.failing = False
        self.writes = []

    def _check(self, op):
        if self.failing:
            raise GatewayError(f"{op} rejected")

    def subscribe(self, collection, order_field, callback, descending=False):
        return self.inner.subscribe(collection, order_field, callback, descending=descending)

    def add_record(self, collection, fields):
        self._check("add")
        self.writes.append(("add", collection, fields))
        return self.inner.add_record(collection, fields)

    def update_record(self, collection, record_id, fields):
        self._check("update")
        self.writes.append(("update", collection, record_id, fields))
        self.inner.update_record(collection, record_id, fields)

    def delete_record(self, collection, record_id):
        self._check("delete")
        self.writes.append(("delete", collection, record_id))
        self.inner.delete_record(collection, record_id)


class MemoryBlobStore(BlobStore):
    def __init__(self):
        self.objects = {}
        self.fail_put = False

    def put_object(self, path, data, content_type=None):
        if self.fail_put:
            raise BlobStoreError("bucket unavailable")
        self.objects[path] = (data, content_type)

    def get_object_url(self, path):
        return f"memory://{path}"

    def delete_object(self, path):
        self.objects.pop(path, None)
