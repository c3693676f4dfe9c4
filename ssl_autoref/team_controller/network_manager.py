import logging
import socket
from typing import Tuple, Union

from ssl_autoref.team_controller import network_utils

logger = logging.getLogger(__name__)


class NetworkManager:
    """
    Manages network communication via a UDP socket for sending data.

    Args:
        address (Tuple[str, int]): The IP address and port to send to.
    """

    def __init__(self, address: Tuple[str, int]):
        self.address = address
        self.sock = network_utils.setup_socket(socket.socket(socket.AF_INET, socket.SOCK_DGRAM))

    def send_message(self, message: Union[bytes, dict]) -> None:
        """
        Sends a message to the server at the configured address.

        Args:
            message (Union[bytes, dict]): Raw bytes or a JSON-serializable dict.
        """
        network_utils.send_message(self.sock, self.address, message)

    def close(self) -> None:
        """
        Closes the socket connection safely.
        """
        try:
            self.sock.close()
        except Exception as e:
            logger.error(f"Error closing socket: {e}")
