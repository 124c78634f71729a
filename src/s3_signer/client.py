from contextlib import contextmanager
from typing import Dict, List, Optional, Union

from s3_signer import ConfigS3, ConfigS3SignerClient, logger
from s3_signer.managers import BucketManager, ObjectManager
from s3_signer.models.acl import ACL, PredefinedACL
from s3_signer.models.region import KNOWN_REGIONS, Region
from s3_signer.models.request import Credentials, S3Request
from s3_signer.models.storage_class import StorageClass
from s3_signer.request import S3RequestSerializer
from s3_signer.transport import RequestsTransport, Transport


def region_for(config: ConfigS3) -> Region:
    """Well-known AWS region, or a custom one when an endpoint is set."""
    if config.endpoint:
        endpoint = config.endpoint.split("://")[-1].rstrip("/")
        return Region.custom(config.region, endpoint)
    if config.region in KNOWN_REGIONS:
        return Region.from_name(config.region)
    return Region.custom(config.region, f"s3.{config.region}.amazonaws.com")


def _acl(acl: Union[ACL, str, None]) -> Optional[ACL]:
    # Canned ACL names ('public-read'...) from the command line
    if isinstance(acl, str):
        return PredefinedACL(acl)
    return acl


class S3Client:
    """
    Entry point for one S3 profile: signs requests, sends them through the
    transport and returns the serialized responses.
    """

    def __init__(
        self,
        config: ConfigS3,
        transport: Transport,
        bucket: Optional[str] = None,
    ):
        self.config = config
        self.transport = transport
        self.serializer = S3RequestSerializer(
            Credentials(
                access_key=config.access_key,
                secret_key=config.secret_key,
                session_token=config.session_token,
            ),
            region=region_for(config),
            bucket=bucket or config.bucket,
            use_ssl=config.use_ssl,
            signature_version=config.signature_version,
        )
        self.objects = ObjectManager(self.serializer, transport)
        self.bucket = BucketManager(self.serializer, transport)

    # -------------- Signing only --------------
    def url(
        self,
        path: Optional[str] = None,
        subresource: Optional[str] = None,
        **parameters: str,
    ) -> str:
        return self.serializer.url(path, subresource, parameters)

    def sign(
        self,
        method: str = "GET",
        path: Optional[str] = None,
        subresource: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Dict[str, str]:
        """Signed headers of a request, nothing is sent."""
        logger.info(f"Signing {method} request for {path or '/'}...")
        request: S3Request = self.serializer.amazon_request(
            method, path, subresource=subresource, body=body
        )
        return {"url": request.url, **request.headers}

    # -------------- Objects --------------
    def get(self, path: str, destination: Optional[str] = None) -> Optional[bytes]:
        logger.info(f"Getting object {path}...")
        if destination:
            self.objects.download(path, destination)
            logger.info(f"Object {path} downloaded to {destination}.")
            return None
        return self.objects.get(path)

    def head(self, path: str) -> Dict[str, str]:
        logger.info(f"Getting metadata of object {path}...")
        return self.objects.head(path).metadata

    def upload(
        self,
        file_path: str,
        to: str,
        acl: Union[ACL, str, None] = None,
        metadata: Optional[Dict[str, str]] = None,
        storage_class: str = StorageClass.STANDARD.value,
    ) -> None:
        logger.info(f"Uploading {file_path} to {to}...")
        self.objects.upload_file(
            file_path,
            to,
            acl=_acl(acl),
            metadata=metadata,
            storage_class=StorageClass(storage_class),
        )
        logger.info(f"Object {to} uploaded.")

    def copy(self, source: str, destination: str) -> None:
        logger.info(f"Copying object {source} to {destination}...")
        self.objects.copy(source, destination)
        logger.info(f"Object {source} copied.")

    def delete(self, *paths: str) -> List[str]:
        logger.info(f"Deleting objects {', '.join(paths)}...")
        errors = self.objects.delete_all(paths)
        logger.info(f"Objects deleted with {len(errors)} error(s).")
        return errors

    def get_acl(self, path: str) -> str:
        logger.info(f"Getting ACL of object {path}...")
        return self.objects.get_acl(path).decode("utf-8")

    def set_acl(self, path: str, acl: Union[ACL, str]) -> None:
        logger.info(f"Setting ACL of object {path}...")
        self.objects.set_acl(_acl(acl), path)

    # -------------- Bucket --------------
    def list_objects(
        self,
        prefix: Optional[str] = None,
        delimiter: Optional[str] = None,
        max_keys: Optional[int] = None,
        continuation_token: Optional[str] = None,
        start_after: Optional[str] = None,
        fetch_owner: Optional[bool] = None,
    ) -> List[str]:
        logger.info(f"Listing objects of bucket {self.serializer.bucket}...")
        listing = self.bucket.list_objects(
            delimiter=delimiter,
            max_keys=max_keys,
            prefix=prefix,
            continuation_token=continuation_token,
            fetch_owner=fetch_owner,
            start_after=start_after,
        )
        logger.info(f"{len(listing.files)} object(s) listed.")
        return [file.path for file in listing.files] + listing.common_prefixes

    def get_bucket_acl(self) -> str:
        logger.info(f"Getting ACL of bucket {self.serializer.bucket}...")
        return self.bucket.get_acl().decode("utf-8")

    def set_bucket_acl(self, acl: Union[ACL, str]) -> None:
        logger.info(f"Setting ACL of bucket {self.serializer.bucket}...")
        self.bucket.set_acl(_acl(acl))

    @classmethod
    @contextmanager
    def session(
        cls,
        client_config: ConfigS3SignerClient,
        profile: Optional[str] = None,
        bucket: Optional[str] = None,
    ):
        transport = RequestsTransport()
        try:
            yield cls(client_config.profile(profile), transport, bucket)
        finally:
            transport.close()
