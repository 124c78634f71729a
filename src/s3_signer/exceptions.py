from typing import Optional


class S3SignerError(Exception):
    """Base class of every error raised by s3_signer."""


class ConfigurationError(S3SignerError):
    """
    Invalid client configuration, e.g. an empty access key or secret.

    Raised before any signing attempt; retrying will not help.
    """


class SigningError(S3SignerError, ValueError):
    """
    The request handed to the signer violates its contract
    (no URL, no host, unknown scheme...).
    """


class SerializationError(S3SignerError):
    """A response body was absent or malformed where an object was expected."""


class ServiceError(S3SignerError):
    """
    Error returned by the S3 service in its XML error body.

    :param kind: The matching S3ErrorCode member, or None for an unknown code.
    :param code: The raw <Code> value sent by the service.
    :param message: The <Message> value, if any.
    :param status_code: HTTP status of the response, if known.
    """

    def __init__(
        self,
        kind,
        code: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.kind = kind
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{code}: {message}" if message else code)

    @property
    def is_known(self) -> bool:
        return self.kind is not None
