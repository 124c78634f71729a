from enum import Enum
from typing import Optional


class S3ErrorCode(Enum):
    """
    Error codes documented for the Amazon S3 REST API.

    See http://docs.aws.amazon.com/AmazonS3/latest/API/ErrorResponses.html
    """

    ACCESS_DENIED = "AccessDenied"
    ACCOUNT_PROBLEM = "AccountProblem"
    AMBIGUOUS_GRANT_BY_EMAIL_ADDRESS = "AmbiguousGrantByEmailAddress"
    BAD_DIGEST = "BadDigest"
    BUCKET_ALREADY_EXISTS = "BucketAlreadyExists"
    BUCKET_ALREADY_OWNED_BY_YOU = "BucketAlreadyOwnedByYou"
    BUCKET_NOT_EMPTY = "BucketNotEmpty"
    CREDENTIALS_NOT_SUPPORTED = "CredentialsNotSupported"
    CROSS_LOCATION_LOGGING_PROHIBITED = "CrossLocationLoggingProhibited"
    ENTITY_TOO_SMALL = "EntityTooSmall"
    ENTITY_TOO_LARGE = "EntityTooLarge"
    EXPIRED_TOKEN = "ExpiredToken"
    ILLEGAL_VERSIONING_CONFIGURATION_EXCEPTION = "IllegalVersioningConfigurationException"
    INCOMPLETE_BODY = "IncompleteBody"
    INCORRECT_NUMBER_OF_FILES_IN_POST_REQUEST = "IncorrectNumberOfFilesInPostRequest"
    INLINE_DATA_TOO_LARGE = "InlineDataTooLarge"
    INTERNAL_ERROR = "InternalError"
    INVALID_ACCESS_KEY_ID = "InvalidAccessKeyId"
    INVALID_ADDRESSING_HEADER = "InvalidAddressingHeader"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_BUCKET_NAME = "InvalidBucketName"
    INVALID_BUCKET_STATE = "InvalidBucketState"
    INVALID_DIGEST = "InvalidDigest"
    INVALID_ENCRYPTION_ALGORITHM_ERROR = "InvalidEncryptionAlgorithmError"
    INVALID_LOCATION_CONSTRAINT = "InvalidLocationConstraint"
    INVALID_OBJECT_STATE = "InvalidObjectState"
    INVALID_PART = "InvalidPart"
    INVALID_PART_ORDER = "InvalidPartOrder"
    INVALID_PAYER = "InvalidPayer"
    INVALID_POLICY_DOCUMENT = "InvalidPolicyDocument"
    INVALID_RANGE = "InvalidRange"
    INVALID_REQUEST = "InvalidRequest"
    INVALID_SECURITY = "InvalidSecurity"
    INVALID_SOAP_REQUEST = "InvalidSOAPRequest"
    INVALID_STORAGE_CLASS = "InvalidStorageClass"
    INVALID_TARGET_BUCKET_FOR_LOGGING = "InvalidTargetBucketForLogging"
    INVALID_TOKEN = "InvalidToken"
    INVALID_URI = "InvalidURI"
    KEY_TOO_LONG = "KeyTooLong"
    MALFORMED_ACL = "MalformedACLError"
    MALFORMED_POST_REQUEST = "MalformedPOSTRequest"
    MALFORMED_XML = "MalformedXML"
    MAX_MESSAGE_LENGTH_EXCEEDED = "MaxMessageLengthExceeded"
    MAX_POST_PRE_DATA_LENGTH_EXCEEDED = "MaxPostPreDataLengthExceededError"
    METADATA_TOO_LARGE = "MetadataTooLarge"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    MISSING_ATTACHMENT = "MissingAttachment"
    MISSING_CONTENT_LENGTH = "MissingContentLength"
    MISSING_REQUEST_BODY = "MissingRequestBodyError"
    MISSING_SECURITY_ELEMENT = "MissingSecurityElement"
    MISSING_SECURITY_HEADER = "MissingSecurityHeader"
    NO_LOGGING_STATUS_FOR_KEY = "NoLoggingStatusForKey"
    NO_SUCH_BUCKET = "NoSuchBucket"
    NO_SUCH_KEY = "NoSuchKey"
    NO_SUCH_LIFECYCLE_CONFIGURATION = "NoSuchLifecycleConfiguration"
    NO_SUCH_UPLOAD = "NoSuchUpload"
    NO_SUCH_VERSION = "NoSuchVersion"
    NOT_IMPLEMENTED = "NotImplemented"
    NOT_SIGNED_UP = "NotSignedUp"
    NO_SUCH_BUCKET_POLICY = "NoSuchBucketPolicy"
    OPERATION_ABORTED = "OperationAborted"
    PERMANENT_REDIRECT = "PermanentRedirect"
    PRECONDITION_FAILED = "PreconditionFailed"
    REDIRECT = "Redirect"
    RESTORE_ALREADY_IN_PROGRESS = "RestoreAlreadyInProgress"
    REQUEST_IS_NOT_MULTI_PART_CONTENT = "RequestIsNotMultiPartContent"
    REQUEST_TIMEOUT = "RequestTimeout"
    REQUEST_TIME_TOO_SKEWED = "RequestTimeTooSkewed"
    REQUEST_TORRENT_OF_BUCKET = "RequestTorrentOfBucket"
    SIGNATURE_DOES_NOT_MATCH = "SignatureDoesNotMatch"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    SLOW_DOWN = "SlowDown"
    TEMPORARY_REDIRECT = "TemporaryRedirect"
    TOKEN_REFRESH_REQUIRED = "TokenRefreshRequired"
    TOO_MANY_BUCKETS = "TooManyBuckets"
    UNEXPECTED_CONTENT = "UnexpectedContent"
    UNRESOLVABLE_GRANT_BY_EMAIL_ADDRESS = "UnresolvableGrantByEmailAddress"
    USER_KEY_MUST_BE_SPECIFIED = "UserKeyMustBeSpecified"

    @staticmethod
    def from_code(code: Optional[str]) -> Optional["S3ErrorCode"]:
        try:
            return S3ErrorCode(code)
        except ValueError:
            return None
