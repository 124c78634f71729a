"""
Serialization of S3 responses: service errors and response objects.
"""
import xml.etree.ElementTree as ET
from typing import Optional

from s3_signer import logger
from s3_signer.exceptions import SerializationError, ServiceError
from s3_signer.models.error import S3ErrorCode
from s3_signer.models.response import (
    S3BucketObjectList,
    S3ObjectMetaData,
    find_text,
    local_name,
)
from s3_signer.transport import TransportResponse


def service_error_from_xml(
    xml_data: Optional[bytes], status_code: Optional[int] = None
) -> Optional[ServiceError]:
    """
    Map an <Error><Code/><Message/></Error> body to a ServiceError.

    Returns None when the body is not an S3 error document. Unknown codes
    give a ServiceError whose kind is None and which keeps the raw code.
    """
    if not xml_data:
        return None
    try:
        root = ET.fromstring(xml_data)
    except ET.ParseError:
        return None
    if local_name(root.tag) != "Error":
        return None
    code = find_text(root, "Code")
    if not code:
        return None
    return ServiceError(
        kind=S3ErrorCode.from_code(code),
        code=code,
        message=find_text(root, "Message"),
        status_code=status_code,
    )


def check_response(response: TransportResponse) -> TransportResponse:
    """
    :raises ServiceError: If the body is an S3 error document, or the
        status code is >= 400.
    """
    error = service_error_from_xml(response.body, response.status_code)
    if error is None and response.status_code >= 400:
        error = ServiceError(
            kind=None,
            code=f"HTTP{response.status_code}",
            message=response.text or None,
            status_code=response.status_code,
        )
    if error is not None:
        logger.error(f"S3 responded with error {error}")
        raise error
    return response


def bucket_object_list(response: TransportResponse) -> S3BucketObjectList:
    check_response(response)
    if not response.body:
        raise SerializationError("Empty body where a bucket list was expected.")
    try:
        return S3BucketObjectList.from_xml(response.body)
    except (ET.ParseError, ValueError) as e:
        raise SerializationError(
            f"XML could not be serialized into a bucket list: {e}"
        ) from e


def object_metadata(response: TransportResponse) -> S3ObjectMetaData:
    check_response(response)
    return S3ObjectMetaData.from_headers(response.headers)
