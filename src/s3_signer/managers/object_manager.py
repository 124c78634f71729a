from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from s3_signer import logger
from s3_signer.hashing import content_md5
from s3_signer.managers.base_manager import BaseManager
from s3_signer.models.acl import ACL
from s3_signer.models.response import S3ObjectMetaData
from s3_signer.models.storage_class import StorageClass
from s3_signer.response import object_metadata

COPY_SOURCE_HEADER = "x-amz-copy-source"


class ObjectManager(BaseManager):
    """
    Objects of the serializer's bucket: read, write, copy, delete and ACLs.
    """

    def get(self, path: str) -> bytes:
        request = self.serializer.amazon_request("GET", path)
        return self._send(request).body

    def download(self, path: str, destination: Union[str, Path]) -> Path:
        destination = Path(destination)
        data = self.get(path)
        destination.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {destination}")
        return destination

    def upload(
        self,
        data: Union[bytes, str],
        to: str,
        acl: Optional[ACL] = None,
        metadata: Optional[Dict[str, str]] = None,
        storage_class: StorageClass = StorageClass.STANDARD,
    ) -> None:
        request = self.serializer.amazon_request(
            "PUT",
            to,
            acl=acl,
            metadata=metadata,
            storage_class=storage_class,
            custom_headers={"Content-MD5": content_md5(data)},
            body=data,
        )
        self._send(request)

    def upload_file(
        self,
        file_path: Union[str, Path],
        to: str,
        acl: Optional[ACL] = None,
        metadata: Optional[Dict[str, str]] = None,
        storage_class: StorageClass = StorageClass.STANDARD,
    ) -> None:
        """Upload a local file, streamed from disk."""
        with open(file_path, "rb") as body:
            request = self.serializer.amazon_request(
                "PUT",
                to,
                acl=acl,
                metadata=metadata,
                storage_class=storage_class,
                body=body,
            )
            self._send(request)

    def head(self, path: str) -> S3ObjectMetaData:
        request = self.serializer.amazon_request("HEAD", path)
        return object_metadata(self.transport.send(request))

    def copy(self, source: str, destination: str) -> None:
        """Server side copy of `source` to `destination`, in the same bucket."""
        separator = "" if source.startswith("/") else "/"
        copy_source = f"/{self.serializer.bucket}{separator}{source}"
        request = self.serializer.amazon_request(
            "PUT", destination, custom_headers={COPY_SOURCE_HEADER: copy_source}
        )
        self._send(request)

    def delete(self, path: str) -> None:
        request = self.serializer.amazon_request("DELETE", path)
        self._send(request)

    def delete_all(self, paths: Iterable[str]) -> List[str]:
        """Delete every path, returns the errors met on the way."""
        errors: List[str] = []
        for path in paths:
            with self.s3_error_handler(f"delete {path}", errors):
                self.delete(path)
        return errors

    def get_acl(self, path: str) -> bytes:
        request = self.serializer.amazon_request("GET", path, subresource="acl")
        return self._send(request).body

    def set_acl(self, acl: ACL, path: str) -> None:
        request = self.serializer.amazon_request(
            "PUT", path, subresource="acl", acl=acl
        )
        self._send(request)
