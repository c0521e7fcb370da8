"""Tests pour l'interface en ligne de commande."""

import argparse
import json
from unittest.mock import MagicMock

import pytest

from wp_climate.app import WpClimateApp
from wp_climate.cli import (EXIT_INTERRUPTED, create_argument_parser,
                            dispatch_command, main, parse_param)


@pytest.fixture
def config_file(tmp_path):
    """Configuration isolée : journal dans tmp_path, git remplacé par echo."""
    path = tmp_path / "wp-climate.json"
    path.write_text(json.dumps({
        "git": {"git": "echo"},
        "logging": {"file": str(tmp_path / "logs" / "wp-climate.log")},
        "flows": {"directory": str(tmp_path / "flows")},
    }))
    return path


def _run(config_file, tmp_path, *args):
    return main(["--config", str(config_file), "--cwd", str(tmp_path), *args])


class TestArgumentParser:
    """Tests pour le parseur d'arguments."""

    def test_parse_param(self):
        """Vérifie le découpage au premier « = »."""
        assert parse_param("message=a=b") == ("message", "a=b")

    def test_parse_param_sans_egal(self):
        """Vérifie le rejet d'un paramètre mal formé."""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["run", "x", "-p", "novalue"])

    def test_run_params_multiples(self):
        """Vérifie l'accumulation des -p."""
        args = create_argument_parser().parse_args(
            ["run", "git-commit", "-p", "message=fix", "-p", "amend=true"]
        )
        assert args.name == "git-commit"
        assert dict(args.params) == {"message": "fix", "amend": "true"}

    def test_sous_commande_requise(self):
        """Vérifie l'erreur sans sous-commande."""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args([])


class TestMain:
    """Tests de bout en bout de main()."""

    def test_list(self, config_file, tmp_path, capsys):
        """Vérifie l'affichage des commandes et de leurs paramètres."""
        assert _run(config_file, tmp_path, "list") == 0
        out = capsys.readouterr().out
        assert "[wp]" in out
        assert "search-replace" in out
        assert "old_value (requis)" in out
        assert "git-ls-files" in out

    def test_check_non_configure(self, config_file, tmp_path, capsys):
        """Vérifie le code 1 quand WP-CLI n'est pas configuré."""
        assert _run(config_file, tmp_path, "check") == 1
        out = capsys.readouterr().out
        assert "❌ wp: not_configured" in out
        assert "✅ git: verified" in out

    def test_run_commande_reussie(self, config_file, tmp_path, capsys):
        """Vérifie le flux temps réel et le code 0."""
        assert _run(config_file, tmp_path, "run", "git-status") == 0
        out = capsys.readouterr().out
        assert "status\n" in out
        assert "✅ git-status" in out

    def test_run_commande_inconnue(self, config_file, tmp_path, capsys):
        """Vérifie l'affichage de l'erreur et le code 1."""
        with pytest.raises(SystemExit) as exc_info:
            _run(config_file, tmp_path, "run", "nope")
        assert exc_info.value.code == 1
        assert "🛑 UnknownCommandError" in capsys.readouterr().out

    def test_run_parametre_manquant(self, config_file, tmp_path, capsys):
        """Vérifie CommandParameterError pour un paramètre requis."""
        with pytest.raises(SystemExit) as exc_info:
            _run(config_file, tmp_path, "run", "git-commit")
        assert exc_info.value.code == 1
        assert "message" in capsys.readouterr().out

    def test_configuration_invalide(self, tmp_path, capsys):
        """Vérifie FileConfigurationError pour un fichier absent."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "absent.toml"), "list"])
        assert exc_info.value.code == 1
        assert "FileConfigurationError" in capsys.readouterr().out

    def test_journal_ecrit(self, config_file, tmp_path):
        """Vérifie l'écriture du journal dans le fichier configuré."""
        _run(config_file, tmp_path, "run", "git-status")
        log = (tmp_path / "logs" / "wp-climate.log").read_text()
        assert "Commande « git-status »" in log



class TestFlowCommands:
    """Tests des actions « flow » de bout en bout."""

    @pytest.fixture
    def flow_file(self, tmp_path):
        path = tmp_path / "deploiement.json"
        path.write_text(json.dumps({
            "name": "deploiement",
            "description": "Etat puis diff",
            "steps": [
                {"group": "GIT", "command": "git-status"},
                {"group": "git", "command": "git-diff",
                 "params": {"staged": "true"}},
            ],
        }))
        return path

    def test_import_list_show(self, config_file, tmp_path, flow_file, capsys):
        """Vérifie l'enregistrement puis l'affichage d'un flux."""
        assert _run(config_file, tmp_path, "flow", "import",
                    str(flow_file)) == 0
        assert (tmp_path / "flows" / "deploiement.json").is_file()
        assert _run(config_file, tmp_path, "flow", "list") == 0
        assert _run(config_file, tmp_path, "flow", "show", "deploiement") == 0
        out = capsys.readouterr().out
        assert "deploiement\n" in out
        assert "  1. git:git-status" in out
        assert "  2. git:git-diff staged=true" in out

    def test_run(self, config_file, tmp_path, flow_file, capsys):
        """Vérifie l'exécution des étapes et le bilan."""
        _run(config_file, tmp_path, "flow", "import", str(flow_file))
        assert _run(config_file, tmp_path, "flow", "run", "deploiement") == 0
        out = capsys.readouterr().out
        assert "✅ [1/2] git:git-status" in out
        assert "✅ [2/2] git:git-diff" in out

    def test_import_commande_inconnue(self, config_file, tmp_path, capsys):
        """Vérifie le refus d'un flux référençant une commande absente."""
        path = tmp_path / "faux.json"
        path.write_text(json.dumps({
            "name": "faux",
            "steps": [{"group": "git", "command": "git-rebase"}],
        }))
        with pytest.raises(SystemExit) as exc_info:
            _run(config_file, tmp_path, "flow", "import", str(path))
        assert exc_info.value.code == 1
        assert "UnknownCommandError" in capsys.readouterr().out
        assert not (tmp_path / "flows" / "faux.json").exists()

    def test_flux_introuvable(self, config_file, tmp_path, capsys):
        """Vérifie FlowNotFoundError et sa solution."""
        with pytest.raises(SystemExit):
            _run(config_file, tmp_path, "flow", "run", "absent")
        assert "wp-climate flow list" in capsys.readouterr().out


class TestInterruption:
    """Tests du Ctrl-C pendant une sous-commande."""

    @pytest.mark.parametrize(
        "args, method",
        [
            (argparse.Namespace(target="check"), "check"),
            (argparse.Namespace(target="run", name="git-status", params=[]),
             "run"),
        ],
    )
    def test_ctrl_c_arrete_et_retourne_130(self, args, method, capsys):
        """Vérifie l'arrêt des processus et le code 130."""
        app = MagicMock(spec=WpClimateApp)
        getattr(app, method).side_effect = KeyboardInterrupt
        assert dispatch_command(app, args) == EXIT_INTERRUPTED
        app.stop.assert_called_once()
        assert "interrompue" in capsys.readouterr().err
