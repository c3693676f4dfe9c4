import json
import logging
import socket
from typing import Tuple, Union

from ssl_autoref.config.settings import TIMESTEP

logger = logging.getLogger(__name__)


def setup_socket(sock: socket.socket, timeout: float = TIMESTEP) -> socket.socket:
    """
    Configures a UDP socket used for sending commands.

    Args:
        sock (socket.socket): The socket to configure.
        timeout (float): Socket timeout in seconds. Non-positive values make the socket blocking.

    Returns:
        socket.socket: The configured socket.

    Raises:
        socket.error: If socket configuration fails.
    """
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if timeout is not None and timeout > 0:
            sock.settimeout(timeout * 1.1)  # To account for network jitter
        else:
            logger.warning(f"Timeout value ({timeout}) is not positive. Setting to None (blocking).")
            sock.settimeout(None)
        return sock
    except socket.error as e:
        logger.error(f"Socket setup failed: {e}")
        sock.close()
        raise


def serialize(message: Union[bytes, dict]) -> bytes:
    """
    Encode a message for the wire.

    Raw bytes pass through untouched, dictionaries are JSON encoded.

    Raises:
        TypeError: If the message is neither bytes nor a dict.
    """
    if isinstance(message, bytes):
        return message
    if isinstance(message, dict):
        return json.dumps(message).encode("utf-8")
    raise TypeError(f"Message must be bytes or dict, got {type(message)}")


def send_message(send_sock: socket.socket, address: Tuple[str, int], message: Union[bytes, dict]) -> None:
    """
    Sends a message to the specified address over a UDP socket.

    Args:
        send_sock (socket.socket): Socket to send with.
        address (Tuple[str, int]): The destination IP address and port.
        message (Union[bytes, dict]): The message, see ``serialize``.

    Serialization and socket errors are logged and re-raised so the caller
    decides whether a failed send matters.
    """
    try:
        send_sock.sendto(serialize(message), address)
    except TypeError:
        logger.error("Message of type %s cannot be serialized", type(message))
        raise
    except socket.error as e:
        logger.error("Socket error when sending message to %s: %s", address, e)
        raise
