"""Exécution séquentielle des flux.

Les étapes passent par WpClimateApp.run, donc par le registre et la
fabrique : une étape se comporte exactement comme « wp-climate run ».
L'exécution s'arrête à la première étape dont le résultat n'est pas
réussi (sortie d'erreur non vide).
"""

from dataclasses import dataclass, field
from typing import List, Optional

from wp_climate.app import WpClimateApp
from wp_climate.errors.exceptions import InvalidFlowError
from wp_climate.flows.models import Flow, FlowStep
from wp_climate.logging.base import Logger
from wp_climate.shell.result import ExecutionResult


@dataclass
class StepOutcome:
    """Résultat d'une étape exécutée."""

    index: int
    step: FlowStep
    result: ExecutionResult


@dataclass
class FlowReport:
    """Bilan d'un flux.

    Attributes:
        flow: Flux exécuté.
        outcomes: Étapes exécutées, dans l'ordre.
        failed_index: Index de l'étape en échec, None si aucune.
    """

    flow: Flow
    outcomes: List[StepOutcome] = field(default_factory=list)
    failed_index: Optional[int] = None

    @property
    def successful(self) -> bool:
        return self.failed_index is None

    @property
    def skipped(self) -> List[FlowStep]:
        """Étapes non exécutées après un échec."""
        return self.flow.steps[len(self.outcomes):]


class FlowRunner:
    """Exécute les étapes d'un flux via l'application."""

    def __init__(
        self, app: WpClimateApp, logger: Optional[Logger] = None
    ) -> None:
        self._app = app
        self._logger = logger

    def validate(self, flow: Flow) -> None:
        """Vérifie chaque étape avant toute exécution.

        Raises:
            InvalidFlowError: Flux vide ou commande enregistrée dans
                un autre groupe que celui de l'étape.
            UnknownCommandError: Commande absente du registre.
        """
        if not flow.steps:
            raise InvalidFlowError(f"Le flux « {flow.name} » est vide.")
        for index, step in enumerate(flow.steps, start=1):
            entry = self._app.registry.resolve(step.command)
            if entry.group != step.group:
                raise InvalidFlowError(
                    f"Étape {index} : « {step.command} » appartient au "
                    f"groupe « {entry.group} », pas « {step.group} »."
                )

    def run(self, flow: Flow) -> FlowReport:
        """Valide puis exécute le flux jusqu'au premier échec.

        Les erreurs de construction ou de dépendance d'une étape
        (DispatchError, DependencyError, LaunchError) sont propagées :
        les étapes précédentes restent exécutées.

        Returns:
            Bilan des étapes exécutées.
        """
        self.validate(flow)
        report = FlowReport(flow)
        total = len(flow.steps)
        self._log_info(f"Flux « {flow.name} » : {total} étape(s)")
        for index, step in enumerate(flow.steps):
            self._log_info(f"Étape {index + 1}/{total} : {step}")
            result = self._app.run(step.command, step.params)
            report.outcomes.append(StepOutcome(index, step, result))
            if not result.successful:
                report.failed_index = index
                if self._logger:
                    self._logger.log_warning(
                        f"Flux « {flow.name} » arrêté à l'étape "
                        f"{index + 1}/{total} : {step}"
                    )
                break
        else:
            self._log_info(f"Flux « {flow.name} » terminé")
        return report

    def _log_info(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)
