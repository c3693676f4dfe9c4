from ssl_autoref.team_controller.controllers.game_controller_abstract import (
    AbstractGameControllerClient,
)
from ssl_autoref.team_controller.controllers.sim_controller_abstract import (
    AbstractSimController,
)
from ssl_autoref.team_controller.controllers.udp_game_controller import (
    UDPGameControllerClient,
)
from ssl_autoref.team_controller.controllers.udp_sim_controller import UDPSimController

__all__ = [
    "AbstractGameControllerClient",
    "AbstractSimController",
    "UDPGameControllerClient",
    "UDPSimController",
]
