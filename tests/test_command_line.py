"""Tests pour le modèle de ligne de commande et le constructeur."""

import pytest

from wp_climate.errors.exceptions import CommandLineError
from wp_climate.shell.builder import CommandBuilder, sanitize_token
from wp_climate.shell.command_line import CommandLine, sanitize, tokenize


class TestSanitize:
    """Tests pour la liste blanche de caractères."""

    def test_retire_metacaracteres_shell(self):
        """Vérifie le retrait de ; $ ` & ( ) et des redirections."""
        cleaned = sanitize("ls; rm -rf $(HOME) `id` & > /tmp/x")
        assert cleaned.startswith("ls rm -rf HOME id")
        assert cleaned.endswith("/tmp/x")
        for forbidden in ";$()`&>":
            assert forbidden not in cleaned

    def test_conserve_caracteres_autorises(self):
        """Vérifie la conservation de / _ - | = \" ' . : @."""
        raw = "git clone git@host:org/repo.git --depth=1 | wc -l"
        assert sanitize(raw) == raw

    def test_idempotent(self):
        """Vérifie sanitize(sanitize(x)) == sanitize(x)."""
        for raw in ("a;b|c", "  'x' \"y\" ", "é$à", "php wp --path=/var/www"):
            once = sanitize(raw)
            assert sanitize(once) == once

    def test_retire_blancs_de_bord(self):
        """Vérifie le retrait des espaces initiaux et finaux."""
        assert sanitize("   echo hello   ") == "echo hello"


class TestTokenize:
    """Tests pour le découpage d'une étape."""

    def test_decoupe_sur_les_blancs(self):
        """Vérifie le découpage sur espaces et tabulations multiples."""
        assert tokenize("php   wp\t--version") == ("php", "wp", "--version")

    def test_retire_guillemets_de_bord(self):
        """Vérifie le retrait des guillemets aux extrémités des jetons."""
        assert tokenize("echo 'hello' \"world\"") == ("echo", "hello", "world")

    def test_ignore_jetons_vides(self):
        """Vérifie qu'un jeton réduit à des guillemets est ignoré."""
        assert tokenize("echo '' x") == ("echo", "x")


class TestCommandLineParse:
    """Tests pour CommandLine.parse."""

    def test_commande_simple(self):
        """Vérifie une ligne sans pipeline."""
        line = CommandLine.parse("php wp --version")
        assert line.stages == (("php", "wp", "--version"),)
        assert line.is_pipeline is False
        assert line.program == "php"

    def test_nombre_etapes_egal_segments(self):
        """Vérifie une étape par segment séparé par « | »."""
        line = CommandLine.parse("cat file | grep x | wc -l")
        assert len(line.stages) == 3
        assert line.stages[2] == ("wc", "-l")
        assert line.is_pipeline is True

    def test_pipe_sans_espaces(self):
        """Vérifie le découpage de « a|b »."""
        line = CommandLine.parse("echo hello|tr a-z A-Z")
        assert line.stages == (("echo", "hello"), ("tr", "a-z", "A-Z"))

    def test_ligne_vide_leve_erreur(self):
        """Vérifie le rejet d'une ligne vide."""
        with pytest.raises(CommandLineError):
            CommandLine.parse("")

    def test_ligne_vide_apres_nettoyage_leve_erreur(self):
        """Vérifie le rejet d'une ligne réduite à des caractères interdits."""
        with pytest.raises(CommandLineError, match="vide"):
            CommandLine.parse(";;&&$$")

    def test_etape_vide_leve_erreur(self):
        """Vérifie le rejet de « ls | | wc »."""
        with pytest.raises(CommandLineError, match="étape 2"):
            CommandLine.parse("ls | | wc")

    def test_erreur_est_une_value_error(self):
        """Vérifie la compatibilité avec ValueError."""
        with pytest.raises(ValueError):
            CommandLine.parse("   ")

    def test_str_reconstruit_la_ligne(self):
        """Vérifie que str() reparse vers les mêmes étapes."""
        line = CommandLine.parse("  echo   'a'  |  wc  -c ")
        assert str(line) == "echo a | wc -c"
        assert CommandLine.parse(str(line)) == line


class TestCommandLineFromStages:
    """Tests pour CommandLine.from_stages."""

    def test_conserve_jetons_exacts(self):
        """Vérifie qu'aucun assainissement n'est appliqué."""
        line = CommandLine.from_stages([["git", "commit", "-m", "a; b"]])
        assert line.stages == (("git", "commit", "-m", "a; b"),)

    def test_convertit_en_chaines(self):
        """Vérifie la conversion des jetons non textuels."""
        line = CommandLine.from_stages([["sleep", 1]])
        assert line.stages == (("sleep", "1"),)

    def test_aucune_etape_leve_erreur(self):
        """Vérifie le rejet d'une liste d'étapes vide."""
        with pytest.raises(CommandLineError):
            CommandLine.from_stages([])

    def test_immuable(self):
        """Vérifie que la dataclass est gelée."""
        line = CommandLine.parse("ls")
        with pytest.raises(AttributeError):
            line.stages = ()


class TestCommandBuilder:
    """Tests pour le constructeur fluent."""

    def test_option_cle_valeur(self):
        """Vérifie le format « clé=valeur »."""
        line = (
            CommandBuilder("php", "wp")
            .with_option("--path", "/var/www/site")
            .with_args(["db", "check"])
            .build()
        )
        assert line.stages == (
            ("php", "wp", "--path=/var/www/site", "db", "check"),
        )

    def test_flags_conditionnels(self):
        """Vérifie with_flag_if et with_option_if."""
        line = (
            CommandBuilder("git", "push")
            .with_flag_if("--force", False)
            .with_flag_if("--set-upstream", True)
            .with_option_if("--depth", None)
            .with_option_if("--jobs", 4, condition=True)
            .build()
        )
        assert line.stages == (("git", "push", "--set-upstream", "--jobs=4"),)

    def test_option_separee_conserve_espaces(self):
        """Vérifie qu'un message avec espaces reste un seul argument."""
        line = (
            CommandBuilder("git", "commit")
            .with_separate_option("-m", "corrige le thème; rm -rf /")
            .build()
        )
        assert line.stages == (
            ("git", "commit", "-m", "corrige le thme rm -rf /"),
        )

    def test_pipeline(self):
        """Vérifie pipe_to et la séparation des étapes."""
        line = (
            CommandBuilder("echo", "hello")
            .pipe_to("tr")
            .with_args(["a-z", "A-Z"])
            .build()
        )
        assert line.stages == (("echo", "hello"), ("tr", "a-z", "A-Z"))

    def test_programme_vide_leve_erreur(self):
        """Vérifie le rejet d'un programme vide après nettoyage."""
        with pytest.raises(CommandLineError, match="programme"):
            CommandBuilder("$$$")

    def test_sanitize_token_retire_pipe_et_guillemets(self):
        """Vérifie qu'une valeur interpolée ne peut ouvrir un pipeline."""
        assert sanitize_token("'a | b'") == "a  b"
