"""Tests pour les flux : modèles, persistance JSON et exécution."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from wp_climate.app import WpClimateApp
from wp_climate.commands.registry import CommandGroup
from wp_climate.config.models import AppSettings, GitSettings
from wp_climate.errors.exceptions import (FlowNotFoundError,
                                          InvalidFlowError,
                                          UnknownCommandError)
from wp_climate.flows import (Flow, FlowRunner, FlowStep, JsonFlowRepository,
                              read_flow_file)
from wp_climate.logging.base import Logger
from wp_climate.shell.facade import Shell
from wp_climate.shell.result import ExecutionResult


def _flow(*steps, name="deploiement"):
    return Flow(name=name, steps=[FlowStep(**s) for s in steps])


def _shell(failures=()):
    """Shell simulé : stderr non vide pour les lignes contenant un motif."""
    shell = MagicMock(spec=Shell)

    def execute(command_line, environment=None):
        text = str(command_line)
        if any(pattern in text for pattern in failures):
            return ExecutionResult(error_output="fatal\n", command_line=text)
        return ExecutionResult(standard_output="ok\n", command_line=text)

    shell.execute_command.side_effect = execute
    return shell


def _executed(shell):
    return [str(c.args[0]) for c in shell.execute_command.call_args_list]


@pytest.fixture
def git_steps():
    return (
        {"group": "git", "command": "git-status"},
        {"group": "git", "command": "git-add", "params": {"files": "a.txt"}},
        {"group": "git", "command": "git-commit",
         "params": {"message": "maj"}},
    )


class TestFlowModels:
    """Tests pour Flow et FlowStep."""

    def test_groupe_insensible_a_la_casse(self):
        """Vérifie « WP » → CommandGroup.WP."""
        step = FlowStep(group="WP", command=" flush-caches ")
        assert step.group is CommandGroup.WP
        assert step.command == "flush-caches"
        assert str(step) == "wp:flush-caches"

    def test_groupe_inconnu_refuse(self):
        """Vérifie le rejet d'un groupe hors wp/git."""
        with pytest.raises(ValidationError):
            FlowStep(group="svn", command="update")

    def test_commande_vide_refusee(self):
        """Vérifie le rejet d'un nom de commande vide."""
        with pytest.raises(ValidationError):
            FlowStep(group="wp", command="  ")

    @pytest.mark.parametrize("name", ["../etc", "a b", "", "x.json"])
    def test_nom_de_flux_invalide(self, name):
        """Vérifie que le nom reste utilisable comme nom de fichier."""
        with pytest.raises(ValidationError):
            Flow(name=name)

    def test_reorganisation_des_etapes(self, git_steps):
        """Vérifie monter, descendre et retirer une étape."""
        flow = _flow(*git_steps)
        flow.move_step_up(2)
        assert [s.command for s in flow.steps] == [
            "git-status", "git-commit", "git-add",
        ]
        flow.move_step_down(0)
        assert flow.steps[1].command == "git-status"
        flow.move_step_up(0)
        flow.move_step_down(2)
        flow.remove_step(5)
        assert len(flow.steps) == 3
        flow.remove_step(0)
        assert [s.command for s in flow.steps] == ["git-status", "git-add"]

    def test_json(self, git_steps):
        """Vérifie le format JSON écrit puis relu."""
        flow = _flow(*git_steps)
        data = json.loads(flow.to_json())
        assert data["steps"][0] == {
            "group": "git", "command": "git-status", "params": {},
        }
        assert Flow.from_json(flow.to_json()) == flow


class TestJsonFlowRepository:
    """Tests pour JsonFlowRepository."""

    def test_repertoire_absent_vide(self, tmp_path):
        """Vérifie qu'un répertoire absent ne contient aucun flux."""
        assert JsonFlowRepository(tmp_path / "flows").names() == []

    def test_enregistrement_et_chargement(self, tmp_path, git_steps):
        """Vérifie save, names et load."""
        logger = MagicMock(spec=Logger)
        repository = JsonFlowRepository(tmp_path / "flows", logger)
        repository.save(_flow(*git_steps))
        repository.save(_flow(name="maintenance"))
        assert (tmp_path / "flows" / "deploiement.json").is_file()
        assert repository.names() == ["deploiement", "maintenance"]
        assert repository.load("deploiement") == _flow(*git_steps)
        logger.log_info.assert_called()

    def test_flux_introuvable(self, tmp_path):
        """Vérifie FlowNotFoundError, aussi LookupError."""
        repository = JsonFlowRepository(tmp_path)
        with pytest.raises(FlowNotFoundError):
            repository.load("absent")
        with pytest.raises(LookupError):
            repository.delete("absent")

    def test_nom_dangereux_refuse(self, tmp_path):
        """Vérifie qu'un nom ne peut sortir du répertoire."""
        with pytest.raises(FlowNotFoundError):
            JsonFlowRepository(tmp_path / "flows").load("../secret")

    def test_fichier_corrompu(self, tmp_path):
        """Vérifie InvalidFlowError pour un JSON illisible."""
        (tmp_path / "casse.json").write_text("{ pas du json")
        with pytest.raises(InvalidFlowError):
            JsonFlowRepository(tmp_path).load("casse")

    def test_nom_incoherent(self, tmp_path):
        """Vérifie le rejet d'un fichier contenant un autre flux."""
        (tmp_path / "a.json").write_text(_flow(name="b").to_json())
        with pytest.raises(InvalidFlowError, match="« b »"):
            JsonFlowRepository(tmp_path).load("a")

    def test_suppression(self, tmp_path):
        """Vérifie delete."""
        repository = JsonFlowRepository(tmp_path)
        repository.save(_flow(name="ancien"))
        repository.delete("ancien")
        assert repository.names() == []

    def test_groupe_inconnu_dans_le_fichier(self, tmp_path):
        """Vérifie InvalidFlowError pour un groupe inconnu."""
        path = tmp_path / "import.json"
        path.write_text(json.dumps({
            "name": "import",
            "steps": [{"group": "svn", "command": "update"}],
        }))
        with pytest.raises(InvalidFlowError):
            read_flow_file(path)


class TestFlowRunner:
    """Tests pour FlowRunner (shell simulé, registre réel)."""

    def _app(self, shell, tmp_path):
        settings = AppSettings(git=GitSettings(git="git"))
        return WpClimateApp(tmp_path, settings, shell=shell)

    def test_toutes_les_etapes(self, tmp_path, git_steps):
        """Vérifie l'exécution dans l'ordre et le bilan réussi."""
        shell = _shell()
        report = FlowRunner(self._app(shell, tmp_path)).run(_flow(*git_steps))
        assert report.successful
        assert report.skipped == []
        assert [o.index for o in report.outcomes] == [0, 1, 2]
        assert _executed(shell) == [
            "git status",
            "git add -- a.txt",
            "git commit -m maj",
        ]

    def test_arret_au_premier_echec(self, tmp_path, git_steps):
        """Vérifie l'arrêt après l'étape dont stderr n'est pas vide."""
        shell = _shell(failures=("git add",))
        logger = MagicMock(spec=Logger)
        report = FlowRunner(self._app(shell, tmp_path), logger).run(
            _flow(*git_steps)
        )
        assert report.successful is False
        assert report.failed_index == 1
        assert len(report.outcomes) == 2
        assert [s.command for s in report.skipped] == ["git-commit"]
        assert not any("commit" in line for line in _executed(shell))
        logger.log_warning.assert_called_once()

    def test_commande_inconnue_avant_execution(self, tmp_path, git_steps):
        """Vérifie qu'aucune étape ne s'exécute si une commande est inconnue."""
        shell = _shell()
        flow = _flow(*git_steps, {"group": "git", "command": "git-rebase"})
        with pytest.raises(UnknownCommandError):
            FlowRunner(self._app(shell, tmp_path)).run(flow)
        shell.execute_command.assert_not_called()

    def test_groupe_incoherent(self, tmp_path):
        """Vérifie le rejet d'une commande WP-CLI déclarée dans git."""
        shell = _shell()
        flow = _flow({"group": "git", "command": "export-db"})
        with pytest.raises(InvalidFlowError, match="groupe « wp »"):
            FlowRunner(self._app(shell, tmp_path)).run(flow)
        shell.execute_command.assert_not_called()

    def test_flux_vide(self, tmp_path):
        """Vérifie le rejet d'un flux sans étape."""
        with pytest.raises(InvalidFlowError):
            FlowRunner(self._app(_shell(), tmp_path)).run(_flow())
