from s3_signer.models.acl import (
    ACL,
    ACLPermission,
    AllUsers,
    AuthenticatedUsers,
    CustomACL,
    EmailAddress,
    Grantee,
    LogDeliveryGroup,
    PermissionGrant,
    PredefinedACL,
    UserId,
)
from s3_signer.models.error import S3ErrorCode
from s3_signer.models.region import Region
from s3_signer.models.request import Credentials, S3Request, SigningResult
from s3_signer.models.response import S3BucketObjectList, S3File, S3ObjectMetaData
from s3_signer.models.storage_class import StorageClass

__all__ = [
    "ACL",
    "ACLPermission",
    "AllUsers",
    "AuthenticatedUsers",
    "CustomACL",
    "EmailAddress",
    "Grantee",
    "LogDeliveryGroup",
    "PermissionGrant",
    "PredefinedACL",
    "UserId",
    "S3ErrorCode",
    "Region",
    "Credentials",
    "S3Request",
    "SigningResult",
    "S3BucketObjectList",
    "S3File",
    "S3ObjectMetaData",
    "StorageClass",
]
