"""Interface de persistance des flux."""

from abc import ABC, abstractmethod
from typing import List

from wp_climate.flows.models import Flow


class FlowRepository(ABC):
    """Interface pour le stockage des flux nommés."""

    @abstractmethod
    def names(self) -> List[str]:
        """Retourne les noms des flux enregistrés, triés."""
        pass

    @abstractmethod
    def load(self, name: str) -> Flow:
        """Charge un flux.

        Args:
            name: Nom du flux.

        Returns:
            Le flux validé.

        Raises:
            FlowNotFoundError: Aucun flux sous ce nom.
            InvalidFlowError: Flux illisible ou mal formé.
        """
        pass

    @abstractmethod
    def save(self, flow: Flow) -> None:
        """Enregistre un flux, en remplaçant celui de même nom."""
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Supprime un flux.

        Raises:
            FlowNotFoundError: Aucun flux sous ce nom.
        """
        pass
