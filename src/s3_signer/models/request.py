from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from s3_signer.exceptions import ConfigurationError

HeaderValue = Union[str, Sequence[str]]


@dataclass(frozen=True)
class Credentials:
    access_key: str
    secret_key: str
    session_token: Optional[str] = None

    def validate(self) -> "Credentials":
        """
        :raises ConfigurationError: If the access key or the secret is empty.
        """
        if not self.access_key:
            raise ConfigurationError("Missing S3 access key.")
        if not self.secret_key:
            raise ConfigurationError("Missing S3 secret key.")
        return self

    def __repr__(self) -> str:
        return f"Credentials(access_key={self.access_key!r}, secret_key='***')"


def merge_headers(
    base: Mapping[str, HeaderValue], extra: Mapping[str, HeaderValue]
) -> Dict[str, HeaderValue]:
    """
    Return a new header mapping where `extra` replaces any header of `base`
    having the same name, compared case-insensitively.
    """
    replaced = {name.lower() for name in extra}
    merged = {
        name: value for name, value in base.items() if name.lower() not in replaced
    }
    merged.update(extra)
    return merged


@dataclass(frozen=True)
class S3Request:
    """
    Fully described HTTP request. Building and signing never mutate a
    request, they return a new one.

    A header value may be a list when the same header is sent several times.
    The body is None, bytes, str or a binary file object.
    """

    method: str
    url: str
    headers: Dict[str, HeaderValue] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self):
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", dict(self.headers))

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive lookup, multiple values joined with ','."""
        values: List[str] = []
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                values.extend([value] if isinstance(value, str) else value)
        return ",".join(values) if values else None

    def with_headers(self, headers: Mapping[str, HeaderValue]) -> "S3Request":
        return S3Request(
            method=self.method,
            url=self.url,
            headers=merge_headers(self.headers, headers),
            body=self.body,
        )


@dataclass(frozen=True)
class SigningResult:
    """Headers produced by one signing pass."""

    scheme: str
    authorization: str
    date: str
    content_sha256: Optional[str] = None
    security_token: Optional[str] = None

    def headers(self) -> Dict[str, str]:
        if self.scheme == "v2":
            headers = {"Date": self.date}
        else:
            headers = {
                "x-amz-date": self.date,
                "x-amz-content-sha256": self.content_sha256,
            }
        if self.security_token:
            headers["x-amz-security-token"] = self.security_token
        headers["Authorization"] = self.authorization
        return headers
