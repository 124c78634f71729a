from datetime import datetime
from typing import Optional, Union

from s3_signer import logger
from s3_signer import canonical
from s3_signer.exceptions import ConfigurationError, SigningError
from s3_signer.hashing import base64_encode, hex_encode, hmac_sha1, hmac_sha256
from s3_signer.models.region import Region
from s3_signer.models.request import Credentials, S3Request, SigningResult
from s3_signer.timestamps import amz_date, rfc1123_date, utc_now

DEFAULT_SERVICE = "s3"


def _scope_name(region: Union[Region, str]) -> str:
    scope_name = region.scope_name if isinstance(region, Region) else region
    if not scope_name:
        raise ConfigurationError("Signature V4 requires a region name.")
    return scope_name


def _amz_date(timestamp: Union[datetime, str]) -> str:
    if isinstance(timestamp, datetime):
        return amz_date(timestamp)
    return timestamp


class S3Signer:
    """
    Stateless signature calculators. Every method is deterministic: the same
    request, credentials and timestamp always give the same headers.
    """

    # -------------- Legacy scheme (signature V2) --------------
    @staticmethod
    def compute_legacy_signature(string_to_sign: str, secret_key: str) -> str:
        """Base64 of HMAC-SHA1(secret, string to sign)."""
        return base64_encode(hmac_sha1(secret_key, string_to_sign))

    @staticmethod
    def sign_request_v2(
        request: S3Request, credentials: Credentials, timestamp: datetime
    ) -> SigningResult:
        """
        AWS Signature V2 (legacy) for S3.

        The Date header value and the date in the string to sign both come
        from `timestamp`.
        """
        credentials.validate()
        date = rfc1123_date(timestamp)
        if credentials.session_token:
            # x-amz-* header: signed like any other
            request = request.with_headers(
                {"x-amz-security-token": credentials.session_token}
            )
        string_to_sign = canonical.legacy_string_to_sign(request, date)
        logger.debug(f"V2 string to sign:\n{string_to_sign}")
        signature = S3Signer.compute_legacy_signature(
            string_to_sign, credentials.secret_key
        )
        return SigningResult(
            scheme="v2",
            authorization=f"AWS {credentials.access_key}:{signature}",
            date=date,
            security_token=credentials.session_token,
        )

    # -------------- Signature V4 --------------
    @staticmethod
    def signing_key(
        secret_key: str,
        date_stamp: str,
        region: Union[Region, str],
        service: str = DEFAULT_SERVICE,
    ) -> bytes:
        """
        Chained HMAC-SHA256 key derivation:
        date -> region -> service -> aws4_request.
        """
        k_date = hmac_sha256("AWS4" + secret_key, date_stamp)
        k_region = hmac_sha256(k_date, _scope_name(region))
        k_service = hmac_sha256(k_region, service)
        return hmac_sha256(k_service, canonical.V4_TERMINATOR)

    @staticmethod
    def compute_v4_signature(
        canonical_request: str,
        secret_key: str,
        timestamp: Union[datetime, str],
        region: Union[Region, str],
        service: str = DEFAULT_SERVICE,
    ) -> str:
        """
        Hex signature of a canonical request.

        :param timestamp: Request time, as a datetime or an x-amz-date value.
        """
        request_date = _amz_date(timestamp)
        date_stamp = request_date.split("T")[0]
        scope = canonical.credential_scope(date_stamp, _scope_name(region), service)
        string_to_sign = canonical.v4_string_to_sign(
            canonical_request, request_date, scope
        )
        logger.debug(f"V4 string to sign:\n{string_to_sign}")
        key = S3Signer.signing_key(secret_key, date_stamp, region, service)
        return hex_encode(hmac_sha256(key, string_to_sign))

    @staticmethod
    def v4_authorization_header(
        request: S3Request,
        credentials: Credentials,
        region: Union[Region, str],
        service: str = DEFAULT_SERVICE,
    ) -> str:
        """
        Authorization header for a request signed as is: the request must
        already carry its x-amz-date header.
        """
        credentials.validate()
        request_date = request.header("x-amz-date")
        if not request_date:
            raise SigningError("Signature V4 requires an x-amz-date header.")

        canonical_request = canonical.canonical_request(request)
        logger.debug(f"V4 canonical request:\n{canonical_request}")
        date_stamp = request_date.split("T")[0]
        scope = canonical.credential_scope(date_stamp, _scope_name(region), service)
        signature = S3Signer.compute_v4_signature(
            canonical_request, credentials.secret_key, request_date, region, service
        )
        return (
            f"{canonical.V4_ALGORITHM} "
            f"Credential={credentials.access_key}/{scope}, "
            f"SignedHeaders={canonical.signed_headers(request)}, "
            f"Signature={signature}"
        )

    @staticmethod
    def sign_request_v4(
        request: S3Request,
        credentials: Credentials,
        timestamp: datetime,
        region: Union[Region, str],
        service: str = DEFAULT_SERVICE,
    ) -> SigningResult:
        """
        AWS Signature V4 for S3.

        Adds x-amz-date, x-amz-content-sha256 and, with a session token,
        x-amz-security-token to the signed headers. An x-amz-content-sha256
        header already on the request is kept as the payload hash.
        """
        credentials.validate()
        request_date = amz_date(timestamp)
        content_sha256 = canonical.hashed_payload(request)
        added = {
            "x-amz-date": request_date,
            canonical.CONTENT_SHA256_HEADER: content_sha256,
        }
        if credentials.session_token:
            added["x-amz-security-token"] = credentials.session_token
        authorization = S3Signer.v4_authorization_header(
            request.with_headers(added), credentials, region, service
        )
        return SigningResult(
            scheme="v4",
            authorization=authorization,
            date=request_date,
            content_sha256=content_sha256,
            security_token=credentials.session_token,
        )


class Authenticator:
    """
    Signs requests with one set of credentials, for one region, with the
    configured signature version ('v2' or 'v4').
    """

    def __init__(
        self,
        credentials: Credentials,
        region: Region = Region.US_STANDARD,
        method: str = "v4",
        service: str = DEFAULT_SERVICE,
    ):
        self.credentials = credentials.validate()
        self.region = region
        self.auth_method = method.lower()
        self.service = service

        if self.auth_method not in ("v2", "v4"):
            raise ConfigurationError(
                f"Unknown signature version: {method}, expected 'v2' or 'v4'."
            )
        if self.auth_method == "v4":
            _scope_name(region)

    def signing_result(
        self, request: S3Request, timestamp: Optional[datetime] = None
    ) -> SigningResult:
        timestamp = timestamp or utc_now()
        if self.auth_method == "v2":
            return S3Signer.sign_request_v2(request, self.credentials, timestamp)
        return S3Signer.sign_request_v4(
            request, self.credentials, timestamp, self.region, self.service
        )

    def sign(
        self, request: S3Request, timestamp: Optional[datetime] = None
    ) -> S3Request:
        """Return a copy of `request` carrying the authentication headers."""
        result = self.signing_result(request, timestamp)
        logger.debug(
            f"Signed {request.method} {request.url} with {self.auth_method}."
        )
        return request.with_headers(result.headers())
