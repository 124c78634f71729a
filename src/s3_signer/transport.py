from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional

import requests
from requests import Response
from requests.structures import CaseInsensitiveDict

from s3_signer import logger
from s3_signer.models.request import S3Request


@dataclass
class TransportResponse:
    status_code: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class Transport(ABC):
    """Sends an already signed request. Retries, if any, belong here."""

    @abstractmethod
    def send(self, request: S3Request) -> TransportResponse:
        raise NotImplementedError

    def close(self) -> None:
        pass


def _wire_headers(request: S3Request) -> Mapping[str, str]:
    return {
        name: value if isinstance(value, str) else ",".join(value)
        for name, value in request.headers.items()
    }


class RequestsTransport(Transport):
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        verify: bool = True,
        timeout: Optional[float] = 60,
    ):
        self.owns_session = session is None
        self.session = session or requests.Session()
        self.verify = verify
        self.timeout = timeout

    def send(self, request: S3Request) -> TransportResponse:
        if request.method in ("GET", "HEAD"):
            logger.debug(f"Sending {request.method} request at {request.url}...")
        else:
            logger.info(f"Sending {request.method} request at {request.url}...")

        response: Response = self.session.request(
            request.method,
            request.url,
            headers=_wire_headers(request),
            data=request.body,
            verify=self.verify,
            timeout=self.timeout,
        )
        logger.debug(f"Responded with status code {response.status_code}")
        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )

    def close(self) -> None:
        if self.owns_session:
            self.session.close()
