import abc


class AbstractSimController(abc.ABC):
    """
    Template for a simulator controller that can move the ball around.
    """

    @abc.abstractmethod
    def teleport_ball(self, x: float, y: float, z: float = 0.0, vx: float = 0, vy: float = 0, vz: float = 0) -> None:
        """
        Teleports the ball to a specific location on the field.

        Args:
            x (float): The x-coordinate to place the ball at, in the simulator's frame and units.
            y (float): The y-coordinate to place the ball at, in the simulator's frame and units.
            z (float): Height above the field.
            vx, vy, vz (float): Ball velocity after the teleport.
        """
        ...

    @abc.abstractmethod
    def close(self) -> None:
        """
        Releases the connection to the simulator. Safe to call more than once.
        """
        ...
