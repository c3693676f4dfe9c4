from typing import Optional

from ssl_autoref.config.settings import LOCAL_HOST, SIM_CONTROL_PORT
from ssl_autoref.team_controller.controllers.sim_controller_abstract import (
    AbstractSimController,
)
from ssl_autoref.team_controller.network_manager import NetworkManager


class UDPSimController(AbstractSimController):
    """
    Sends simulator control commands as JSON datagrams.

    The socket is opened on the first command.

    Args:
        ip (str): IP address of the simulator. Defaults to LOCAL_HOST.
        port (int): Port of the simulator. Defaults to SIM_CONTROL_PORT.
    """

    def __init__(self, ip: str = LOCAL_HOST, port: int = SIM_CONTROL_PORT):
        self.address = (ip, port)
        self.net: Optional[NetworkManager] = None

    def teleport_ball(self, x: float, y: float, z: float = 0.0, vx: float = 0, vy: float = 0, vz: float = 0) -> None:
        if self.net is None:
            self.net = NetworkManager(address=self.address)
        command = {
            "simulator": {
                "ssl_control": {
                    "teleport_ball": {"x": x, "y": y, "z": z, "vx": vx, "vy": vy, "vz": vz},
                }
            }
        }
        self.net.send_message(command)

    def close(self) -> None:
        if self.net is not None:
            self.net.close()
            self.net = None
