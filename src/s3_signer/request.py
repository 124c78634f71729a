import mimetypes
from datetime import datetime
from typing import Callable, Dict, Mapping, Optional
from urllib.parse import quote, urlsplit

from s3_signer.models.acl import ACL
from s3_signer.models.region import Region
from s3_signer.models.request import Credentials, S3Request, merge_headers
from s3_signer.models.storage_class import StorageClass
from s3_signer.models.response import METADATA_HEADER_PREFIX
from s3_signer.s3_request import Authenticator
from s3_signer.timestamps import utc_now

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# RFC 3986 path characters left unescaped in object keys
PATH_SAFE = "!$&'()*+,-./:=@_~"


def content_type_for(path: Optional[str]) -> str:
    """MIME type guessed from the file extension, octet-stream otherwise."""
    if path:
        content_type, _ = mimetypes.guess_type(path, strict=False)
        if content_type:
            return content_type
    return DEFAULT_CONTENT_TYPE


def metadata_headers(metadata: Optional[Mapping[str, str]]) -> Dict[str, str]:
    if not metadata:
        return {}
    return {METADATA_HEADER_PREFIX + key: value for key, value in metadata.items()}


class S3RequestSerializer:
    """
    Builds and signs requests for the Amazon S3 service, path-style:
    https://<endpoint>/<bucket>/<path>.

    Nothing is sent: the returned S3Request can be handed to any transport.
    """

    def __init__(
        self,
        credentials: Credentials,
        region: Region = Region.US_STANDARD,
        bucket: Optional[str] = None,
        use_ssl: bool = True,
        signature_version: str = "v4",
        clock: Callable[[], datetime] = utc_now,
    ):
        # Fails fast on empty credentials, before any request is built
        self.authenticator = Authenticator(credentials, region, signature_version)
        self.credentials = credentials
        self.region = region
        self.bucket = bucket
        self.use_ssl = use_ssl
        self.signature_version = signature_version.lower()
        self.clock = clock

    @property
    def endpoint_url(self) -> str:
        scheme = "https" if self.use_ssl else "http"
        url = f"{scheme}://{self.region.endpoint}"
        if self.bucket:
            url += f"/{self.bucket}"
        return url

    def url(
        self,
        path: Optional[str] = None,
        subresource: Optional[str] = None,
        custom_parameters: Optional[Mapping[str, str]] = None,
    ) -> str:
        """
        :param path: Object path in the bucket, escaped here.
        :param subresource: Appended verbatim as '?<subresource>' (e.g. 'acl').
        :param custom_parameters: Query parameters, values fully escaped.
            Parameters with an empty key or value are skipped.
        """
        url = self.endpoint_url
        if path:
            url += "/" + quote(path.lstrip("/"), safe=PATH_SAFE)

        if subresource:
            url += f"?{subresource}"

        for key, value in (custom_parameters or {}).items():
            if not key or value is None or value == "":
                continue
            separator = "&" if "?" in url else "?"
            url += (
                f"{separator}{quote(str(key), safe='')}"
                f"={quote(str(value), safe='')}"
            )

        return url

    def amazon_request(
        self,
        method: str,
        path: Optional[str] = None,
        subresource: Optional[str] = None,
        acl: Optional[ACL] = None,
        metadata: Optional[Mapping[str, str]] = None,
        storage_class: Optional[StorageClass] = None,
        custom_parameters: Optional[Mapping[str, str]] = None,
        custom_headers: Optional[Mapping[str, str]] = None,
        body=None,
        timestamp: Optional[datetime] = None,
    ) -> S3Request:
        """
        Build a signed request. Headers are layered in order: Content-Type,
        ACL, storage class, metadata, custom headers, then authentication.
        """
        url = self.url(path, subresource, custom_parameters)

        headers = {"Content-Type": content_type_for(urlsplit(url).path)}
        if acl is not None:
            headers = merge_headers(headers, acl.acl_headers())
        if storage_class is not None:
            headers = merge_headers(headers, storage_class.storage_class_headers())
        headers = merge_headers(headers, metadata_headers(metadata))
        headers = merge_headers(headers, dict(custom_headers or {}))

        request = S3Request(method=method, url=url, headers=headers, body=body)
        return self.authenticator.sign(request, timestamp or self.clock())
