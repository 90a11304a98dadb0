"""
Data shapes for the bucketlist client.

No imports from services, client, or cli.
"""

from bucketlist.models.bucket import BoardContext, BucketId, BucketRecord
from bucketlist.models.dialog import Confirmable, DialogRequest, Informational
from bucketlist.models.edit import EditBuffer, TaskListProps
from bucketlist.models.image import ImageFile

__all__ = [
    # Bucket models
    "BucketId",
    "BucketRecord",
    "BoardContext",
    # Edit state
    "EditBuffer",
    "ImageFile",
    "TaskListProps",
    # Dialog requests
    "Confirmable",
    "DialogRequest",
    "Informational",
]
