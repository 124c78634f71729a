from typing import Dict, Optional

from s3_signer.managers.base_manager import BaseManager
from s3_signer.models.acl import ACL
from s3_signer.models.response import S3BucketObjectList
from s3_signer.response import bucket_object_list


class BucketManager(BaseManager):
    """
    Listing and ACLs of the serializer's bucket.
    """

    def list_objects(
        self,
        delimiter: Optional[str] = None,
        url_encode_keys: Optional[bool] = None,
        max_keys: Optional[int] = None,
        prefix: Optional[str] = None,
        continuation_token: Optional[str] = None,
        fetch_owner: Optional[bool] = None,
        start_after: Optional[str] = None,
    ) -> S3BucketObjectList:
        """
        List objects with the ListObjectsV2 API.

        :param url_encode_keys: Ask S3 to url-encode the keys of the response.
        :param continuation_token: Token of a previous truncated listing.
        """
        # Insertion order is the query order
        parameters: Dict[str, str] = {"list-type": "2"}
        if delimiter is not None:
            parameters["delimiter"] = delimiter
        if url_encode_keys is not None:
            parameters["encoding-type"] = "url" if url_encode_keys else ""
        if max_keys is not None:
            parameters["max-keys"] = str(max_keys)
        if prefix is not None:
            parameters["prefix"] = prefix
        if continuation_token is not None:
            parameters["continuation-token"] = continuation_token
        if fetch_owner is not None:
            parameters["fetch-owner"] = "true" if fetch_owner else "false"
        if start_after is not None:
            parameters["start-after"] = start_after

        request = self.serializer.amazon_request(
            "GET", custom_parameters=parameters
        )
        return bucket_object_list(self.transport.send(request))

    def get_acl(self) -> bytes:
        request = self.serializer.amazon_request("GET", subresource="acl")
        return self._send(request).body

    def set_acl(self, acl: ACL) -> None:
        request = self.serializer.amazon_request("PUT", subresource="acl", acl=acl)
        self._send(request)
