"""
Hashing and HMAC primitives used by both signature schemes.

Every function is pure. Text arguments are encoded as UTF-8.
"""
import base64
import hashlib
import hmac
from typing import BinaryIO, Callable, Union

from s3_signer.exceptions import SigningError

BytesLike = Union[bytes, bytearray, str]
Body = Union[None, bytes, bytearray, str, BinaryIO]

EMPTY_SHA256 = hashlib.sha256(b"").hexdigest()

# Read size used when hashing file bodies
CHUNK_SIZE = 1024 * 1024

_ALGORITHMS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
}


def to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def sha1(data: BytesLike) -> bytes:
    return hashlib.sha1(to_bytes(data)).digest()


def sha256(data: BytesLike) -> bytes:
    return hashlib.sha256(to_bytes(data)).digest()


def hmac_digest(
    algorithm: Union[str, Callable], key: BytesLike, message: BytesLike
) -> bytes:
    """
    Standard HMAC construction.

    :param algorithm: "sha1", "sha256" or a hashlib constructor.
    :param key: Key of any length; no minimum is enforced.
    :param message: Message to authenticate.
    """
    digestmod = _ALGORITHMS.get(algorithm) if isinstance(algorithm, str) else algorithm
    if digestmod is None:
        raise ValueError(f"Unsupported HMAC algorithm: {algorithm}")
    return hmac.new(to_bytes(key), to_bytes(message), digestmod).digest()


def hmac_sha1(key: BytesLike, message: BytesLike) -> bytes:
    return hmac_digest("sha1", key, message)


def hmac_sha256(key: BytesLike, message: BytesLike) -> bytes:
    return hmac_digest("sha256", key, message)


def hex_encode(data: bytes) -> str:
    return data.hex()


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def sha256_hex(data: BytesLike) -> str:
    return hex_encode(sha256(data))


def payload_sha256(body: Body) -> str:
    """
    Hex SHA-256 of a request body.

    None hashes like an empty body. File objects are hashed in chunks and
    rewound afterwards when seekable, so they can still be sent.

    :raises SigningError: For any other body type, e.g. a generator that
        would be empty once hashed.
    """
    if body is None:
        return EMPTY_SHA256
    if isinstance(body, (bytes, bytearray, str)):
        return sha256_hex(body)

    if not hasattr(body, "read"):
        raise SigningError(
            f"Unsupported body type {type(body).__name__}, expected bytes, str "
            "or a file object."
        )

    digest = hashlib.sha256()
    start = body.tell() if _seekable(body) else None
    chunk = body.read(CHUNK_SIZE)
    while chunk:
        digest.update(to_bytes(chunk))
        chunk = body.read(CHUNK_SIZE)
    if start is not None:
        body.seek(start)
    return digest.hexdigest()


def content_md5(data: BytesLike) -> str:
    """Base64 MD5 digest, as expected by the Content-MD5 header."""
    return base64_encode(hashlib.md5(to_bytes(data)).digest())


def _seekable(stream) -> bool:
    seekable = getattr(stream, "seekable", None)
    return bool(seekable and seekable())
