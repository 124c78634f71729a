"""
Canonical forms of an HTTP request for the two S3 signature schemes.

Legacy (signature V2): a fixed six part string
    HTTPMethod, Content-MD5, Content-Type, Date, CanonicalizedAmzHeaders,
    CanonicalizedResource
where only x-amz* headers take part and the resource keeps S3 subresources.

Signature V4: the canonical request
    HTTPMethod, CanonicalURI, CanonicalQueryString, CanonicalHeaders,
    SignedHeaders, HashedPayload
where every header is signed, host included.

Both are bit-exact: any difference with the server side computation ends in
a SignatureDoesNotMatch error.
"""
from typing import Dict, Iterable, List, Mapping, Tuple, Union
from urllib.parse import quote, unquote, urlsplit

from s3_signer.exceptions import SigningError
from s3_signer.hashing import payload_sha256, sha256_hex
from s3_signer.models.request import S3Request

V4_ALGORITHM = "AWS4-HMAC-SHA256"
V4_TERMINATOR = "aws4_request"
CONTENT_SHA256_HEADER = "x-amz-content-sha256"

Headers = Union[Mapping[str, Union[str, Iterable[str]]], Iterable[Tuple[str, str]]]

# Query parameters that select a subresource and are part of the legacy
# canonicalized resource. Any other parameter is left out.
SUBRESOURCES = frozenset(
    {
        "acl",
        "cors",
        "delete",
        "lifecycle",
        "location",
        "logging",
        "notification",
        "partNumber",
        "policy",
        "requestPayment",
        "response-cache-control",
        "response-content-disposition",
        "response-content-encoding",
        "response-content-language",
        "response-content-type",
        "response-expires",
        "restore",
        "tagging",
        "torrent",
        "uploadId",
        "uploads",
        "versionId",
        "versioning",
        "versions",
        "website",
    }
)

# Characters the legacy resource keeps unescaped: RFC 3986 query characters
LEGACY_RESOURCE_SAFE = "!$&'()*+,-./:;=?@_~"


def header_items(headers: Headers) -> List[Tuple[str, str]]:
    """Flatten headers to (name, value) pairs, expanding multi-valued ones."""
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    items: List[Tuple[str, str]] = []
    for name, value in pairs:
        if isinstance(value, (str, bytes)):
            values = [value]
        else:
            values = list(value)
        for single in values:
            if isinstance(single, bytes):
                single = single.decode("utf-8")
            items.append((name, str(single)))
    return items


def collapse_whitespace(value: str) -> str:
    """Trim a header value and reduce inner whitespace runs to one space."""
    return " ".join(value.split())


def merged_headers(headers: Headers, prefix: str = "") -> Dict[str, str]:
    """
    Lowercase header names and merge repeated headers with ','.

    :param prefix: Keep only the headers whose lowercase name starts with it.
    """
    merged: Dict[str, List[str]] = {}
    for name, value in header_items(headers):
        name = name.strip().lower()
        if not name.startswith(prefix):
            continue
        merged.setdefault(name, []).append(collapse_whitespace(value))
    return {name: ",".join(values) for name, values in merged.items()}


def format_header_lines(headers: Mapping[str, str]) -> str:
    """Sorted 'name:value\\n' lines, trailing newline included."""
    return "".join(f"{name}:{headers[name]}\n" for name in sorted(headers))


def split_url(url: str):
    if not url:
        raise SigningError("Cannot sign a request without URL.")
    parts = urlsplit(url)
    if not parts.hostname:
        raise SigningError(f"Cannot sign a request without host: {url}")
    return parts


def host_header(url: str) -> str:
    """Host header value for a URL, port kept only when not the default one."""
    parts = split_url(url)
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    default_port = {"http": 80, "https": 443}.get(parts.scheme)
    if parts.port is not None and parts.port != default_port:
        return f"{host}:{parts.port}"
    return host


def parse_query(query: str) -> List[Tuple[str, str]]:
    """
    Split a raw query string in (key, value) pairs, still percent-encoded.
    A parameter without '=' gets an empty value.
    """
    pairs = []
    for item in query.split("&"):
        if not item:
            continue
        key, _, value = item.partition("=")
        pairs.append((key, value))
    return pairs


# ---------------------------------------------------------------------------
# Legacy scheme
# ---------------------------------------------------------------------------


def canonicalized_amz_headers(headers: Headers) -> str:
    return format_header_lines(merged_headers(headers, prefix="x-amz"))


def canonicalized_resource(url: str) -> str:
    """
    Path of the URL (bucket included for path-style URLs), decoded and
    escaped again with the query safe characters only, followed by the S3
    subresources of the query string. No trailing newline.
    """
    parts = split_url(url)
    path = parts.path or "/"
    resource = quote(unquote(path), safe=LEGACY_RESOURCE_SAFE)

    subresources = sorted(
        (key, value)
        for key, value in parse_query(parts.query)
        if unquote(key) in SUBRESOURCES
    )
    if subresources:
        resource += "?" + "&".join(
            f"{key}={value}" if value else key for key, value in subresources
        )
    return resource


def legacy_string_to_sign(request: S3Request, date: str) -> str:
    """
    String to sign of the legacy scheme.

    Missing Content-MD5 or Content-Type serialize as empty lines, the string
    always has the same number of parts.
    """
    return (
        f"{request.method}\n"
        f"{request.header('Content-MD5') or ''}\n"
        f"{request.header('Content-Type') or ''}\n"
        f"{date}\n"
        f"{canonicalized_amz_headers(request.headers)}"
        f"{canonicalized_resource(request.url)}"
    )


# ---------------------------------------------------------------------------
# Signature V4
# ---------------------------------------------------------------------------


def uri_encode(value: str, safe: str = "") -> str:
    """Percent-encode everything but the RFC 3986 unreserved characters."""
    return quote(value, safe=safe)


def canonical_uri(url: str) -> str:
    path = split_url(url).path or "/"
    return uri_encode(unquote(path), safe="/")


def canonical_query_string(url: str) -> str:
    """
    Every query parameter, key and value encoded separately, sorted by key
    then value and joined with '&'. Empty query gives an empty string.
    """
    encoded = sorted(
        (uri_encode(unquote(key)), uri_encode(unquote(value)))
        for key, value in parse_query(split_url(url).query)
    )
    return "&".join(f"{key}={value}" for key, value in encoded)


def v4_headers(request: S3Request) -> Dict[str, str]:
    """Lowercased, merged headers taking part in a V4 signature."""
    headers = merged_headers(request.headers)
    headers.pop("authorization", None)
    if "host" not in headers:
        headers["host"] = host_header(request.url)
    return headers


def canonical_headers(request: S3Request) -> str:
    return format_header_lines(v4_headers(request))


def signed_headers(request: S3Request) -> str:
    return ";".join(sorted(v4_headers(request)))


def hashed_payload(request: S3Request) -> str:
    """x-amz-content-sha256 when the request carries it, else hash of the body."""
    declared = request.header(CONTENT_SHA256_HEADER)
    if declared is not None:
        return declared
    return payload_sha256(request.body)


def canonical_request(request: S3Request) -> str:
    headers = v4_headers(request)
    return "\n".join(
        [
            request.method,
            canonical_uri(request.url),
            canonical_query_string(request.url),
            format_header_lines(headers),
            ";".join(sorted(headers)),
            hashed_payload(request),
        ]
    )


def credential_scope(date_stamp: str, region: str, service: str) -> str:
    return f"{date_stamp}/{region}/{service}/{V4_TERMINATOR}"


def v4_string_to_sign(canonical: str, amz_date: str, scope: str) -> str:
    return "\n".join([V4_ALGORITHM, amz_date, scope, sha256_hex(canonical)])
