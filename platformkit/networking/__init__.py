from platformkit.networking.client import HttpResourceClient
from platformkit.networking.exceptions import Cancelled
from platformkit.networking.exceptions import DecodeFailure
from platformkit.networking.exceptions import InvalidLocation
from platformkit.networking.exceptions import ResourceClientError
from platformkit.networking.exceptions import TransportFailure
from platformkit.networking.exceptions import UnexpectedStatus

__all__ = [
    "HttpResourceClient",
    "ResourceClientError",
    "InvalidLocation",
    "TransportFailure",
    "UnexpectedStatus",
    "DecodeFailure",
    "Cancelled",
]
