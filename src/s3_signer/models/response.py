import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from s3_signer.exceptions import SerializationError
from s3_signer.models.storage_class import StorageClass

METADATA_HEADER_PREFIX = "x-amz-meta-"


# S3 answers in the http://s3.amazonaws.com/doc/2006-03-01/ namespace,
# compatible services sometimes do not: match on the local tag name only.
def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def find_children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if local_name(child.tag) == name)


def find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    return next(find_children(element, name), None)


def find_text(element: ET.Element, *path: str) -> Optional[str]:
    for name in path:
        element = find_child(element, name)
        if element is None:
            return None
    return element.text or ""


def parse_s3_date(raw: str) -> Optional[datetime]:
    for pattern in ("%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ"):
        try:
            return datetime.strptime(raw, pattern).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


@dataclass
class S3File:
    path: str
    last_modified: datetime
    size: int
    entity_tag: Optional[str] = None
    storage_class: Optional[StorageClass] = None
    # (id, display name)
    owner: Optional[Tuple[str, str]] = None

    @staticmethod
    def from_element(element: ET.Element) -> Optional["S3File"]:
        """Build a file from a <Contents> element, None when incomplete."""
        path = find_text(element, "Key")
        raw_date = find_text(element, "LastModified")
        raw_size = find_text(element, "Size")
        if path is None or raw_date is None or raw_size is None:
            return None
        last_modified = parse_s3_date(raw_date)
        if last_modified is None:
            return None
        try:
            size = int(raw_size)
        except ValueError:
            return None

        storage_class = None
        raw_storage_class = find_text(element, "StorageClass")
        if raw_storage_class:
            try:
                storage_class = StorageClass(raw_storage_class)
            except ValueError:
                storage_class = None

        owner = None
        owner_id = find_text(element, "Owner", "ID")
        owner_name = find_text(element, "Owner", "DisplayName")
        if owner_id is not None and owner_name is not None:
            owner = (owner_id, owner_name)

        return S3File(
            path=path,
            last_modified=last_modified,
            size=size,
            entity_tag=find_text(element, "ETag"),
            storage_class=storage_class,
            owner=owner,
        )


@dataclass
class S3BucketObjectList:
    bucket: Optional[str] = None
    truncated: Optional[bool] = None
    max_keys: Optional[int] = None
    key_count: Optional[int] = None
    prefix: Optional[str] = None
    continuation_token: Optional[str] = None
    next_continuation_token: Optional[str] = None
    files: List[S3File] = field(default_factory=list)
    common_prefixes: List[str] = field(default_factory=list)

    @staticmethod
    def from_xml(xml_data: bytes) -> "S3BucketObjectList":
        root = ET.fromstring(xml_data)
        if local_name(root.tag) != "ListBucketResult":
            raise SerializationError(
                f"Expected a ListBucketResult document, got {local_name(root.tag)}."
            )

        def get_int(name: str) -> Optional[int]:
            text = find_text(root, name)
            return int(text) if text else None

        truncated = find_text(root, "IsTruncated")
        files = [S3File.from_element(contents) for contents in find_children(root, "Contents")]
        return S3BucketObjectList(
            bucket=find_text(root, "Name"),
            truncated=None if truncated is None else truncated.lower() == "true",
            max_keys=get_int("MaxKeys"),
            key_count=get_int("KeyCount"),
            prefix=find_text(root, "Prefix"),
            continuation_token=find_text(root, "ContinuationToken"),
            next_continuation_token=find_text(root, "NextContinuationToken"),
            files=[file for file in files if file is not None],
            common_prefixes=[
                find_text(common, "Prefix") or ""
                for common in find_children(root, "CommonPrefixes")
            ],
        )


@dataclass
class S3ObjectMetaData:
    metadata: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_headers(headers: Mapping[str, str]) -> "S3ObjectMetaData":
        return S3ObjectMetaData(
            metadata={
                name[len(METADATA_HEADER_PREFIX):]: value
                for name, value in headers.items()
                if name.lower().startswith(METADATA_HEADER_PREFIX)
            }
        )
