"""
Access control lists for buckets and objects.

An ACL is pure data: acl_headers() returns the x-amz-acl / x-amz-grant-*
headers to add to a request and never touches the request itself.

See http://docs.aws.amazon.com/AmazonS3/latest/dev/acl-overview.html
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Tuple, Union

PREDEFINED_ACL_HEADER = "x-amz-acl"


class PredefinedACL(Enum):
    """Canned ACLs recognized by Amazon S3."""

    PRIVATE = "private"
    PUBLIC_READ_WRITE = "public-read-write"
    PUBLIC_READ = "public-read"
    AUTHENTICATED_READ = "authenticated-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"
    LOG_DELIVERY_WRITE = "log-delivery-write"

    def acl_headers(self) -> Dict[str, str]:
        return {PREDEFINED_ACL_HEADER: self.value}


class ACLPermission(Enum):
    READ = "READ"
    WRITE = "WRITE"
    READ_ACP = "READ_ACP"
    WRITE_ACP = "WRITE_ACP"
    FULL_CONTROL = "FULL_CONTROL"

    @property
    def header_key(self) -> str:
        return "x-amz-grant-" + self.value.lower().replace("_", "-")


@dataclass(frozen=True)
class AuthenticatedUsers:
    """Every AWS account; requests must be signed."""

    def header_value(self) -> str:
        return 'uri="http://acs.amazonaws.com/groups/global/AuthenticatedUsers"'


@dataclass(frozen=True)
class AllUsers:
    """Anyone, signed or anonymous."""

    def header_value(self) -> str:
        return 'uri="http://acs.amazonaws.com/groups/global/AllUsers"'


@dataclass(frozen=True)
class LogDeliveryGroup:
    def header_value(self) -> str:
        return 'uri="http://acs.amazonaws.com/groups/s3/LogDelivery"'


@dataclass(frozen=True)
class EmailAddress:
    email: str

    def header_value(self) -> str:
        return f'emailAddress="{self.email}"'


@dataclass(frozen=True)
class UserId:
    """AWS account identified by its canonical user ID."""

    id: str

    def header_value(self) -> str:
        return f'id="{self.id}"'


Grantee = Union[AuthenticatedUsers, AllUsers, LogDeliveryGroup, EmailAddress, UserId]


@dataclass(frozen=True)
class PermissionGrant:
    """A single permission granted to one or more grantees."""

    permission: ACLPermission
    grantees: Tuple[Grantee, ...]

    def __init__(
        self, permission: ACLPermission, grantees: Union[Grantee, Iterable[Grantee]]
    ):
        if not isinstance(grantees, (list, tuple, set, frozenset)):
            grantees = (grantees,)
        # Keep the first occurrence of each grantee, in order
        object.__setattr__(self, "permission", permission)
        object.__setattr__(self, "grantees", tuple(dict.fromkeys(grantees)))

    def acl_headers(self) -> Dict[str, str]:
        return {
            self.permission.header_key: ", ".join(
                grantee.header_value() for grantee in self.grantees
            )
        }


@dataclass(frozen=True)
class CustomACL:
    """
    A list of permission grants.

    S3 accepts one header per permission, so grants sharing a permission
    are merged into a single grant. S3 accepts at most 100 grants per
    bucket or object.
    """

    grants: Tuple[PermissionGrant, ...]

    def __init__(self, grants: Iterable[PermissionGrant]):
        merged: Dict[ACLPermission, Tuple[Grantee, ...]] = {}
        for grant in grants:
            merged[grant.permission] = merged.get(grant.permission, ()) + grant.grantees
        object.__setattr__(
            self,
            "grants",
            tuple(
                PermissionGrant(permission, grantees)
                for permission, grantees in merged.items()
            ),
        )

    def acl_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        for grant in self.grants:
            headers = {**headers, **grant.acl_headers()}
        return headers


ACL = Union[PredefinedACL, PermissionGrant, CustomACL]
