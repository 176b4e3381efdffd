"""Fixtures shared by the `eth_rpc` tests."""

from typing import Any, List

import pytest

from ..request_manager import RPCRequest


class RecordingRequestManager:
    """Request manager double that records every request and returns a fixed result."""

    def __init__(self, result: Any):
        """Initialize the double with the result returned by every `send` call."""
        self.result = result
        self.requests: List[RPCRequest] = []

    def send(self, request: RPCRequest) -> Any:
        """Record the request and return the configured result."""
        self.requests.append(request)
        return self.result


@pytest.fixture
def send_result() -> object:
    """Return a unique object standing for the pending result of a request."""
    return object()


@pytest.fixture
def request_manager(send_result: object) -> RecordingRequestManager:
    """Return a recording request manager."""
    return RecordingRequestManager(send_result)
