from enum import Enum

STORAGE_CLASS_HEADER = "x-amz-storage-class"


class StorageClass(Enum):
    STANDARD = "STANDARD"
    STANDARD_IA = "STANDARD_IA"
    REDUCED_REDUNDANCY = "REDUCED_REDUNDANCY"
    GLACIER = "GLACIER"

    def storage_class_headers(self):
        return {STORAGE_CLASS_HEADER: self.value}
