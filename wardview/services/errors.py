"""
Service error types
"""


class WardViewError(Exception):
    """Base class for WardView service errors"""


class DataSourceError(WardViewError):
    """The raw data source could not be reached or answered unexpectedly"""

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status


class DuplicateDisplayNameError(WardViewError):
    """Two records share a display name used as a join key"""

    def __init__(self, collection: str, names):
        self.collection = collection
        self.names = sorted(names)
        super().__init__(f"Duplicate display names in {collection}: {', '.join(self.names)}")


class DuplicateRecordError(WardViewError):
    """A record with the same id already exists"""

    def __init__(self, collection: str, record_id):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} {record_id} already exists")
