import abc


class AbstractGameControllerClient(abc.ABC):
    """
    Template for a connection from the AutoRef to the game controller.
    """

    @abc.abstractmethod
    def connect(self) -> bool:
        """
        Opens the connection.

        Returns:
            bool: True if the game controller can be reached.
        """
        ...

    @abc.abstractmethod
    def send_message(self, message_type: str, payload: dict) -> None:
        """
        Sends a single message, e.g. ``"AutoRefRegistration"`` or ``"AutoRefToController"``.

        Raises whatever the underlying transport raises; callers are expected
        to handle failures.
        """
        ...

    @abc.abstractmethod
    def close(self) -> None:
        """
        Releases the connection. Safe to call more than once.
        """
        ...
