import pytest

from s3_signer.exceptions import ConfigurationError
from s3_signer.models import (
    ACLPermission,
    AllUsers,
    AuthenticatedUsers,
    Credentials,
    CustomACL,
    EmailAddress,
    LogDeliveryGroup,
    PermissionGrant,
    PredefinedACL,
    Region,
    S3ErrorCode,
    S3Request,
    StorageClass,
    UserId,
)


class TestACL:
    def test_predefined(self):
        assert PredefinedACL.PUBLIC_READ.acl_headers() == {"x-amz-acl": "public-read"}
        assert PredefinedACL.BUCKET_OWNER_FULL_CONTROL.acl_headers() == {
            "x-amz-acl": "bucket-owner-full-control"
        }

    @pytest.mark.parametrize(
        "permission,header",
        [
            (ACLPermission.READ, "x-amz-grant-read"),
            (ACLPermission.WRITE, "x-amz-grant-write"),
            (ACLPermission.READ_ACP, "x-amz-grant-read-acp"),
            (ACLPermission.WRITE_ACP, "x-amz-grant-write-acp"),
            (ACLPermission.FULL_CONTROL, "x-amz-grant-full-control"),
        ],
    )
    def test_permission_header_keys(self, permission, header):
        assert permission.header_key == header

    def test_grantee_values(self):
        assert AuthenticatedUsers().header_value() == (
            'uri="http://acs.amazonaws.com/groups/global/AuthenticatedUsers"'
        )
        assert AllUsers().header_value() == (
            'uri="http://acs.amazonaws.com/groups/global/AllUsers"'
        )
        assert LogDeliveryGroup().header_value() == (
            'uri="http://acs.amazonaws.com/groups/s3/LogDelivery"'
        )
        assert EmailAddress("xyz@amazon.com").header_value() == (
            'emailAddress="xyz@amazon.com"'
        )
        assert UserId("1234").header_value() == 'id="1234"'

    def test_permission_grant(self):
        grant = PermissionGrant(
            ACLPermission.READ, [EmailAddress("xyz@amazon.com"), UserId("1234")]
        )
        assert grant.acl_headers() == {
            "x-amz-grant-read": 'emailAddress="xyz@amazon.com", id="1234"'
        }

    def test_single_grantee(self):
        grant = PermissionGrant(ACLPermission.WRITE, AllUsers())
        assert grant.grantees == (AllUsers(),)

    def test_duplicate_grantees(self):
        grant = PermissionGrant(ACLPermission.READ, [UserId("1"), UserId("1")])
        assert grant.acl_headers() == {"x-amz-grant-read": 'id="1"'}

    def test_custom_acl(self):
        acl = CustomACL(
            [
                PermissionGrant(ACLPermission.READ, AllUsers()),
                PermissionGrant(ACLPermission.FULL_CONTROL, UserId("1234")),
                PermissionGrant(ACLPermission.READ, UserId("1234")),
            ]
        )
        assert acl.acl_headers() == {
            "x-amz-grant-read": (
                'uri="http://acs.amazonaws.com/groups/global/AllUsers", id="1234"'
            ),
            "x-amz-grant-full-control": 'id="1234"',
        }

    def test_acl_headers_are_new_mappings(self):
        acl = PredefinedACL.PRIVATE
        headers = acl.acl_headers()
        headers["x-amz-acl"] = "changed"
        assert acl.acl_headers() == {"x-amz-acl": "private"}


class TestRegion:
    def test_well_known(self):
        assert Region.US_STANDARD.scope_name == "us-east-1"
        assert Region.US_STANDARD.endpoint == "s3.amazonaws.com"
        assert Region.EU_WEST_1.endpoint == "s3-eu-west-1.amazonaws.com"
        assert Region.from_name("ap-northeast-2") == Region.AP_NORTHEAST_2

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            Region.from_name("mars-north-1")

    def test_custom_equality(self):
        region = Region.custom("us-east-1", "object.example.com")
        assert region == Region.custom("us-east-1", "object.example.com")
        assert region != Region.US_STANDARD
        assert region.is_custom
        assert not Region.SA_EAST_1.is_custom


class TestStorageClass:
    def test_headers(self):
        assert StorageClass.STANDARD_IA.storage_class_headers() == {
            "x-amz-storage-class": "STANDARD_IA"
        }


class TestErrorCode:
    def test_known_code(self):
        assert S3ErrorCode.from_code("NoSuchKey") is S3ErrorCode.NO_SUCH_KEY
        assert S3ErrorCode.from_code("MalformedACLError") is not None

    def test_unknown_code(self):
        assert S3ErrorCode.from_code("SomethingNew") is None
        assert S3ErrorCode.from_code(None) is None


class TestRequest:
    def test_method_is_uppercase(self):
        assert S3Request("get", "https://h/").method == "GET"

    def test_with_headers_replaces_case_insensitively(self):
        request = S3Request("GET", "https://h/", headers={"Content-Type": "a"})
        updated = request.with_headers({"content-type": "b", "X-Amz-Date": "now"})

        assert request.headers == {"Content-Type": "a"}
        assert updated.headers == {"content-type": "b", "X-Amz-Date": "now"}
        assert updated.header("CONTENT-TYPE") == "b"

    def test_headers_are_copied(self):
        headers = {"A": "1"}
        request = S3Request("GET", "https://h/", headers=headers)
        headers["B"] = "2"
        assert request.headers == {"A": "1"}

    def test_credentials(self):
        credentials = Credentials("key", "wJalrXUtnFEMI")
        assert credentials.validate() is credentials
        assert "wJalrXUtnFEMI" not in repr(credentials)
        with pytest.raises(ConfigurationError):
            Credentials("key", "").validate()
