"""Adapter: let a client talk to a service whose interface it does not share."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Data:
    """A request as the client phrases it."""

    data: int
    time: int


@dataclass(frozen=True)
class SpecificData:
    """A request as the service expects it."""

    data: str
    time: int


class Client(ABC):
    """The interface the client code works against."""

    @abstractmethod
    def request(self, data: Data) -> int:
        """Send a request and return its status code."""


class Service:
    """A service with an interface of its own."""

    def specific_request(self, data: SpecificData) -> int:
        """Print the request and return its status code."""
        print(f"Request: {data.data} {data.time}")
        return 0


class Adapter(Client):
    """Presents a Service through the Client interface."""

    def __init__(self, service: Service) -> None:
        self._service = service

    def request(self, data: Data) -> int:
        specific = SpecificData(str(data.data), data.time)
        return self._service.specific_request(specific)


def main(argv: list[str] | None = None) -> int:
    """Send one request through the adapter and report success."""
    client: Client = Adapter(Service())
    code = client.request(Data(12345, 0))
    if code == 0:
        print("Success.")
    return 0