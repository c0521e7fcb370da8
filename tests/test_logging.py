"""Tests pour le module logging et les sinks."""

import io
from unittest.mock import MagicMock

from wp_climate.config.models import LoggingSettings
from wp_climate.logging import FileLogger, Logger
from wp_climate.shell.sink import ConsoleOutputSink, LoggerOutputSink


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        logger = FileLogger(str(tmp_path / "test.log"))
        assert isinstance(logger, Logger)

    def test_niveaux(self, tmp_path):
        """Vérifie info, warning et error dans le fichier."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Info message")
        logger.log_warning("Warning message")
        logger.log_error("Error message")

        content = log_file.read_text()
        assert "INFO - Info message" in content
        assert "WARNING - Warning message" in content
        assert "ERROR - Error message" in content

    def test_debug_filtre_par_defaut(self, tmp_path):
        """Vérifie que DEBUG est ignoré au niveau INFO."""
        log_file = tmp_path / "test.log"
        FileLogger(str(log_file)).log_debug("invisible")
        assert "invisible" not in log_file.read_text()

    def test_settings_niveau_et_format(self, tmp_path):
        """Vérifie l'application de LoggingSettings."""
        log_file = tmp_path / "debug.log"
        settings = LoggingSettings(level="debug", format="%(levelname)s|%(message)s")
        FileLogger(str(log_file), settings=settings).log_debug("visible")
        assert "DEBUG|visible" in log_file.read_text()

    def test_creates_log_directory(self, tmp_path):
        """Vérifie la création du répertoire de log."""
        log_file = tmp_path / "subdir" / "test.log"
        FileLogger(str(log_file)).log_info("Test")
        assert log_file.exists()

    def test_from_settings(self, tmp_path):
        """Vérifie la construction depuis la section [logging]."""
        log_file = tmp_path / "state" / "wp-climate.log"
        logger = FileLogger.from_settings(LoggingSettings(file=log_file))
        logger.log_info("depuis settings")
        assert "depuis settings" in log_file.read_text()

    def test_utf8_encoding(self, tmp_path):
        """Vérifie l'encodage UTF-8 des messages."""
        log_file = tmp_path / "test.log"
        FileLogger(str(log_file)).log_info("Exécution réussie ✅")
        assert "Exécution réussie ✅" in log_file.read_text(encoding="utf-8")


class TestOutputSinks:
    """Tests pour LoggerOutputSink et ConsoleOutputSink."""

    def test_logger_sink(self):
        """Vérifie le routage info/erreur avec préfixe."""
        logger = MagicMock(spec=Logger)
        sink = LoggerOutputSink(logger, prefix="[wp] ")
        sink.display_message("ok", is_error=False)
        sink.display_message("boom", is_error=True)
        logger.log_info.assert_called_once_with("[wp] ok")
        logger.log_error.assert_called_once_with("[wp] boom")

    def test_console_sink_separe_les_flux(self):
        """Vérifie stdout/stderr sans couleur hors terminal."""
        out, err = io.StringIO(), io.StringIO()
        sink = ConsoleOutputSink(out=out, err=err)
        sink.display_message("ligne", is_error=False)
        sink.display_message("erreur", is_error=True)
        assert out.getvalue() == "ligne\n"
        assert err.getvalue() == "erreur\n"

    def test_console_sink_couleur_sur_terminal(self):
        """Vérifie le rouge ANSI quand stderr est un TTY."""
        err = MagicMock()
        err.isatty.return_value = True
        ConsoleOutputSink(out=io.StringIO(), err=err).display_message(
            "erreur", is_error=True
        )
        err.write.assert_called_once_with("\033[0;31merreur\033[0m\n")
