"""Status codes and the exception that carries them."""

from __future__ import annotations

import enum

__all__ = ["StatusCode", "StatusError"]


class StatusCode(enum.IntEnum):
    """Status codes reported by drivers and protocol code."""

    STATUS_OK = 0
    ERR_IO_ERROR = -1
    ERR_FLUSHED = -2
    ERR_TIMEOUT = -3
    ERR_BAD_DATA = -4
    ERR_PROTOCOL = -5
    ERR_UNSUPPORTED_DEV = -6
    ERR_NO_MEMORY = -7
    ERR_INVALID_ARG = -8
    ERR_BAD_ADDRESS = -9
    ERR_BUSY = -10
    ERR_BAD_FORMAT = -11
    ERR_NO_TIMER = -12
    ERR_TIMER_ALREADY_RUNNING = -13
    ERR_TIMER_NOT_RUNNING = -14
    OPERATION_IN_PROGRESS = -128

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    StatusCode.STATUS_OK: "Success",
    StatusCode.ERR_IO_ERROR: "I/O error",
    StatusCode.ERR_FLUSHED: "Request flushed from queue",
    StatusCode.ERR_TIMEOUT: "Operation timed out",
    StatusCode.ERR_BAD_DATA: "Data integrity check failed",
    StatusCode.ERR_PROTOCOL: "Protocol error",
    StatusCode.ERR_UNSUPPORTED_DEV: "Unsupported device",
    StatusCode.ERR_NO_MEMORY: "Insufficient memory",
    StatusCode.ERR_INVALID_ARG: "Invalid argument",
    StatusCode.ERR_BAD_ADDRESS: "Bad address",
    StatusCode.ERR_BUSY: "Resource is busy",
    StatusCode.ERR_BAD_FORMAT: "Data format not recognized",
    StatusCode.ERR_NO_TIMER: "No timer available",
    StatusCode.ERR_TIMER_ALREADY_RUNNING: "Timer already running",
    StatusCode.ERR_TIMER_NOT_RUNNING: "Timer not running",
    StatusCode.OPERATION_IN_PROGRESS: "Operation in progress",
}


class StatusError(Exception):
    """An operation failed with a non-success :class:`StatusCode`."""

    def __init__(self, code: int) -> None:
        status = StatusCode(code)
        if status is StatusCode.STATUS_OK:
            raise ValueError("STATUS_OK does not describe a failure")
        self.code = status
        super().__init__(f"{status.description} ({status.name}, {int(status)})")