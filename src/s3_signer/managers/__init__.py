from .base_manager import BaseManager
from .bucket_manager import BucketManager
from .object_manager import ObjectManager

__all__ = ["BaseManager", "BucketManager", "ObjectManager"]
