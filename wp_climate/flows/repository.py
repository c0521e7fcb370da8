"""Persistance des flux en JSON, un fichier par flux.

    <directory>/deploiement.json
    <directory>/maintenance.json

Le nom du flux est le nom du fichier sans l'extension.
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from wp_climate.errors.exceptions import FlowNotFoundError, InvalidFlowError
from wp_climate.flows.base import FlowRepository
from wp_climate.flows.models import FLOW_NAME_PATTERN, Flow
from wp_climate.logging.base import Logger

FLOW_SUFFIX = ".json"


def read_flow_file(path: Union[str, Path]) -> Flow:
    """Lit et valide un flux depuis un fichier JSON quelconque.

    Raises:
        InvalidFlowError: Fichier illisible ou flux mal formé.
    """
    try:
        return Flow.from_json(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise InvalidFlowError(f"Flux illisible ({path}) : {e}") from e


class JsonFlowRepository(FlowRepository):
    """Repository de flux au format JSON.

    Le répertoire est créé au premier enregistrement ; absent, il
    est considéré comme vide.

    Attributes:
        directory: Répertoire des fichiers de flux.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        logger: Optional[Logger] = None,
    ) -> None:
        self.directory = Path(directory).expanduser()
        self._logger = logger

    def names(self) -> List[str]:
        if not self.directory.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.directory.glob(f"*{FLOW_SUFFIX}")
            if path.is_file()
        )

    def load(self, name: str) -> Flow:
        path = self._path_for(name)
        if not path.is_file():
            raise FlowNotFoundError(f"Flux introuvable : {name}")
        flow = read_flow_file(path)
        if flow.name != name:
            raise InvalidFlowError(
                f"Le fichier {path} contient le flux « {flow.name} »."
            )
        if self._logger:
            self._logger.log_debug(
                f"Flux « {name} » chargé ({len(flow.steps)} étape(s))"
            )
        return flow

    def save(self, flow: Flow) -> None:
        path = self._path_for(flow.name)
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_text(flow.to_json(), encoding="utf-8")
        if self._logger:
            self._logger.log_info(
                f"Flux « {flow.name} » enregistré dans {path}"
            )

    def delete(self, name: str) -> None:
        path = self._path_for(name)
        if not path.is_file():
            raise FlowNotFoundError(f"Flux introuvable : {name}")
        path.unlink()
        if self._logger:
            self._logger.log_info(f"Flux « {name} » supprimé")

    def _path_for(self, name: str) -> Path:
        if not FLOW_NAME_PATTERN.match(name):
            raise FlowNotFoundError(f"Nom de flux invalide : {name!r}")
        return self.directory / f"{name}{FLOW_SUFFIX}"
