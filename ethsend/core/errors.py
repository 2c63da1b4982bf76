"""Domain-specific errors for ethsend."""


class EthsendError(Exception):
    """Base error for ethsend."""


class UsageError(EthsendError):
    """Raised when the invocation does not carry enough arguments."""


class InvalidPortError(EthsendError):
    """Raised when the port is not a nonzero unsigned 16-bit integer."""


class UnknownProtocolError(EthsendError):
    """Raised when the protocol token is not one of the supported transports."""


class InvalidAddressError(EthsendError):
    """Raised when the target address is malformed or has no broadcast address."""


class InvalidAddressLengthError(EthsendError):
    """Raised when a hardware address is not exactly 6 bytes."""


class MalformedEscapeError(EthsendError):
    """Raised when a \\x escape is not followed by two hex digits."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class ConfigLoadError(EthsendError):
    """Raised when reading the config file fails."""


class ConfigValidationError(EthsendError):
    """Raised when the config file does not conform to schema."""


class TransportError(EthsendError):
    """Base transport error."""


class TransportCreateError(TransportError):
    """Raised when a socket cannot be created, bound, connected or configured."""


class TransportSendError(TransportError):
    """Raised when payload sending fails."""


class TransportReceiveError(TransportError):
    """Raised when receiving a response fails."""


class TransportTimeoutError(TransportReceiveError):
    """Raised when the receive deadline elapses before any data arrives."""
