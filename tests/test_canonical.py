import pytest

from s3_signer import canonical
from s3_signer.exceptions import SigningError
from s3_signer.hashing import EMPTY_SHA256
from s3_signer.models.request import S3Request


class TestHeaders:
    def test_merged_headers_lowercase_and_collapse(self):
        headers = {"X-Amz-Meta-Note": "  a   b\tc  ", "Content-Type": "text/plain"}
        assert canonical.merged_headers(headers) == {
            "x-amz-meta-note": "a b c",
            "content-type": "text/plain",
        }

    def test_repeated_headers_are_joined_in_order(self):
        headers = [("X-Amz-Meta-A", "one"), ("x-amz-meta-a", "two")]
        assert canonical.merged_headers(headers) == {"x-amz-meta-a": "one,two"}

    def test_blank_header_value_is_kept(self):
        request = S3Request(
            "GET",
            "https://s3.amazonaws.com/b/k",
            headers={"x-amz-meta-blank": "   "},
        )
        assert "x-amz-meta-blank:\n" in canonical.canonical_headers(request)
        assert canonical.signed_headers(request) == "host;x-amz-meta-blank"
        assert canonical.canonicalized_amz_headers(request.headers) == (
            "x-amz-meta-blank:\n"
        )

    def test_multi_valued_header(self):
        assert canonical.merged_headers({"x-amz-meta-a": ["1", "2"]}) == {
            "x-amz-meta-a": "1,2"
        }

    def test_host_header(self):
        assert canonical.host_header("https://s3.amazonaws.com/bucket") == (
            "s3.amazonaws.com"
        )
        assert canonical.host_header("https://s3.amazonaws.com:443/") == (
            "s3.amazonaws.com"
        )
        assert canonical.host_header("http://localhost:9000/bucket") == (
            "localhost:9000"
        )

    @pytest.mark.parametrize("url", ["", "/bucket/key", "bucket/key"])
    def test_url_without_host(self, url):
        with pytest.raises(SigningError):
            canonical.split_url(url)


class TestLegacyCanonicalization:
    def test_amz_headers(self):
        headers = {
            "X-Amz-Meta-ReviewedBy": "joe@example.com",
            "x-amz-meta-reviewedby": "jane@example.com",
            "X-Amz-Meta-FileChecksum": "0x02661779",
            "Content-Type": "image/jpeg",
            "x-emc-ignored": "yes",
        }
        assert canonical.canonicalized_amz_headers(headers) == (
            "x-amz-meta-filechecksum:0x02661779\n"
            "x-amz-meta-reviewedby:joe@example.com,jane@example.com\n"
        )

    def test_no_amz_headers(self):
        assert canonical.canonicalized_amz_headers({"Date": "now"}) == ""

    def test_resource_is_escaped(self):
        assert canonical.canonicalized_resource(
            "https://s3.amazonaws.com/testbucket/demo%20file.txt"
        ) == "/testbucket/demo%20file.txt"

    def test_resource_keeps_only_subresources(self):
        resource = canonical.canonicalized_resource(
            "https://s3.amazonaws.com/b/k?versionId=3&prefix=x&acl"
        )
        assert resource == "/b/k?acl&versionId=3"

    def test_resource_of_service(self):
        assert canonical.canonicalized_resource("https://s3.amazonaws.com") == "/"

    def test_string_to_sign(self):
        request = S3Request(
            "GET", "https://s3.amazonaws.com/johnsmith/photos/puppy.jpg"
        )
        assert canonical.legacy_string_to_sign(
            request, "Tue, 27 Mar 2007 19:36:42 +0000"
        ) == (
            "GET\n\n\nTue, 27 Mar 2007 19:36:42 +0000\n/johnsmith/photos/puppy.jpg"
        )

    def test_string_to_sign_with_headers(self):
        request = S3Request(
            "put",
            "https://s3.amazonaws.com/static.johnsmith.net/db-backup.dat.gz",
            headers={
                "Content-Type": "application/x-download",
                "Content-MD5": "4gJE4saaMU4BqNR0kLY+lw==",
                "x-amz-acl": "public-read",
                "X-Amz-Meta-ReviewedBy": ["joe@johnsmith.net", "jane@johnsmith.net"],
            },
        )
        assert canonical.legacy_string_to_sign(
            request, "Tue, 27 Mar 2007 21:06:08 +0000"
        ) == (
            "PUT\n"
            "4gJE4saaMU4BqNR0kLY+lw==\n"
            "application/x-download\n"
            "Tue, 27 Mar 2007 21:06:08 +0000\n"
            "x-amz-acl:public-read\n"
            "x-amz-meta-reviewedby:joe@johnsmith.net,jane@johnsmith.net\n"
            "/static.johnsmith.net/db-backup.dat.gz"
        )


class TestV4Canonicalization:
    def test_canonical_request_get_vanilla(self):
        request = S3Request(
            "GET",
            "https://example.amazonaws.com/",
            headers={
                "Host": "example.amazonaws.com",
                "X-Amz-Date": "20150830T123600Z",
            },
        )
        assert canonical.canonical_request(request) == (
            "GET\n"
            "/\n"
            "\n"
            "host:example.amazonaws.com\n"
            "x-amz-date:20150830T123600Z\n"
            "\n"
            "host;x-amz-date\n"
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_host_is_added_from_url(self):
        request = S3Request("GET", "https://example.amazonaws.com/")
        assert canonical.v4_headers(request) == {"host": "example.amazonaws.com"}
        assert canonical.canonical_headers(request) == "host:example.amazonaws.com\n"

    def test_authorization_is_not_signed(self):
        request = S3Request(
            "GET",
            "https://example.amazonaws.com/",
            headers={"Authorization": "AWS4-HMAC-SHA256 ..."},
        )
        assert canonical.signed_headers(request) == "host"

    def test_query_string_sorted_and_encoded(self):
        assert canonical.canonical_query_string(
            "https://h/?b=2&a=1&a=0&key=a%2Fb+c"
        ) == "a=0&a=1&b=2&key=a%2Fb%2Bc"

    def test_query_string_without_value(self):
        assert canonical.canonical_query_string("https://h/k?acl") == "acl="
        assert canonical.canonical_query_string("https://h/k") == ""

    def test_canonical_uri(self):
        assert canonical.canonical_uri("https://h") == "/"
        assert canonical.canonical_uri("https://h/my%20bucket/a~b") == (
            "/my%20bucket/a~b"
        )
        assert canonical.canonical_uri("https://h/photos/a+b.jpg") == (
            "/photos/a%2Bb.jpg"
        )

    def test_declared_payload_hash_is_kept(self):
        request = S3Request(
            "PUT",
            "https://h/k",
            headers={"X-Amz-Content-Sha256": "UNSIGNED-PAYLOAD"},
            body=b"data",
        )
        assert canonical.hashed_payload(request) == "UNSIGNED-PAYLOAD"

    def test_missing_body_hashes_empty(self):
        assert canonical.hashed_payload(S3Request("GET", "https://h/k")) == (
            EMPTY_SHA256
        )

    def test_string_to_sign(self):
        scope = canonical.credential_scope("20150830", "us-east-1", "service")
        assert scope == "20150830/us-east-1/service/aws4_request"
        assert canonical.v4_string_to_sign("creq", "20150830T123600Z", scope) == (
            "AWS4-HMAC-SHA256\n"
            "20150830T123600Z\n"
            "20150830/us-east-1/service/aws4_request\n"
            + canonical.sha256_hex("creq")
        )
