import traceback
from contextlib import contextmanager
from typing import List

from s3_signer import logger
from s3_signer.models.request import S3Request
from s3_signer.request import S3RequestSerializer
from s3_signer.response import check_response
from s3_signer.transport import Transport, TransportResponse


class BaseManager:
    serializer: S3RequestSerializer
    transport: Transport

    def __init__(self, serializer: S3RequestSerializer, transport: Transport):
        self.serializer = serializer
        self.transport = transport

    def _send(self, request: S3Request) -> TransportResponse:
        """Send a signed request, ServiceError on any failed response."""
        response = self.transport.send(request)
        return check_response(response)

    @staticmethod
    @contextmanager
    def s3_error_handler(operation: str, errors: List[str]):
        """Collect the error of one operation instead of stopping a batch."""
        try:
            yield errors
        except Exception as e:
            errors.append(f"On {operation}: {e}")
            logger.error(f"On {operation}: {e}")
            logger.debug(traceback.format_exc())
