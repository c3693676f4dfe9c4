import logging
import socket
from typing import Optional

from ssl_autoref.config.settings import GAME_CONTROLLER_PORT, LOCAL_HOST
from ssl_autoref.team_controller.controllers.game_controller_abstract import (
    AbstractGameControllerClient,
)
from ssl_autoref.team_controller.network_manager import NetworkManager

logger = logging.getLogger(__name__)


class UDPGameControllerClient(AbstractGameControllerClient):
    """
    Sends AutoRef messages to the game controller as JSON datagrams.

    Args:
        ip (str): IP address of the game controller. Defaults to LOCAL_HOST.
        port (int): AutoRef port of the game controller. Defaults to GAME_CONTROLLER_PORT.
    """

    def __init__(self, ip: str = LOCAL_HOST, port: int = GAME_CONTROLLER_PORT):
        self.address = (ip, port)
        self.net: Optional[NetworkManager] = None

    def connect(self) -> bool:
        if self.net is not None:
            return True
        try:
            self.net = NetworkManager(address=self.address)
        except socket.error as e:
            logger.error("Could not open socket to game controller at %s: %s", self.address, e)
            return False
        return True

    def send_message(self, message_type: str, payload: dict) -> None:
        if self.net is None:
            raise ConnectionError(f"Not connected to game controller at {self.address}")
        self.net.send_message({"type": message_type, "payload": payload})

    def close(self) -> None:
        if self.net is not None:
            self.net.close()
            self.net = None
