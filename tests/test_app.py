"""Tests pour WpClimateApp (shell simulé)."""

from unittest.mock import MagicMock

import pytest

from wp_climate.app import WpClimateApp
from wp_climate.commands.context import GitContext, WpCliContext
from wp_climate.commands.git import GitStatusCommand
from wp_climate.commands.wp import FlushCachesCommand
from wp_climate.config.models import AppSettings, WpCliSettings
from wp_climate.dependency.base import DependencyStatus
from wp_climate.errors.exceptions import UnknownCommandError
from wp_climate.shell.facade import LocalShell, Shell
from wp_climate.shell.result import ExecutionResult


@pytest.fixture
def shell():
    """Shell simulé réussissant toutes les commandes."""
    mock = MagicMock(spec=Shell)
    mock.execute_command.return_value = ExecutionResult(
        standard_output="ok\n"
    )
    return mock


@pytest.fixture
def settings():
    return AppSettings(wpcli=WpCliSettings(php="php", wp="/opt/wp-cli.phar"))


class TestWpClimateApp:
    """Tests pour l'assemblage de l'application."""

    def test_shell_local_par_defaut(self, tmp_path):
        """Vérifie la création d'un LocalShell dans le répertoire donné."""
        app = WpClimateApp(tmp_path)
        assert isinstance(app.shell, LocalShell)
        assert app.shell.working_directory == tmp_path

    def test_contexte_selon_le_groupe(self, tmp_path, shell, settings):
        """Vérifie le choix du contexte WP-CLI ou git."""
        app = WpClimateApp(tmp_path, settings, shell=shell)
        wp_command = app.create("flush-caches")
        git_command = app.create("git-status")
        assert isinstance(wp_command, FlushCachesCommand)
        assert isinstance(wp_command.context, WpCliContext)
        assert isinstance(git_command, GitStatusCommand)
        assert isinstance(git_command.context, GitContext)
        assert wp_command.context.shell is git_command.context.shell

    def test_run_verifie_puis_execute(self, tmp_path, shell, settings):
        """Contrôle les dépendances puis la commande."""
        app = WpClimateApp(tmp_path, settings, shell=shell)
        result = app.run("flush-caches")
        assert result.successful
        executed = [
            str(c.args[0]) for c in shell.execute_command.call_args_list
        ]
        assert executed == [
            "php --version",
            "php /opt/wp-cli.phar --version",
            "php /opt/wp-cli.phar core version",
            f"php /opt/wp-cli.phar --path={tmp_path} cache flush",
        ]

    def test_run_commande_inconnue(self, tmp_path, shell):
        """Vérifie UnknownCommandError."""
        app = WpClimateApp(tmp_path, shell=shell)
        with pytest.raises(UnknownCommandError):
            app.run("nope")

    def test_check(self, tmp_path, shell):
        """Vérifie les statuts par groupe."""
        app = WpClimateApp(tmp_path, AppSettings(), shell=shell)
        assert app.check() == {
            "wp": DependencyStatus.NOT_CONFIGURED,
            "git": DependencyStatus.VERIFIED,
        }

    def test_stop_transmis_au_shell(self, tmp_path, shell):
        """Vérifie que stop() est délégué au shell."""
        WpClimateApp(tmp_path, shell=shell).stop()
        shell.stop.assert_called_once()
