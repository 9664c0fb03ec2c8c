# Main.py
""""" Entry point for the BEDMAS calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Load configuration, set up logging and start the console session

"""""
import sys
import logging
from pathlib import Path
from CalcModules import config_manager as config_manager, Console as Console


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


REQUIRED_MODULES = [
    "Console.py",
    "MathEngine.py",
    "ScientificEngine.py",
    "SymbolTable.py",
    "Tokenizer.py",
    "Result.py",
    "error.py",
    "config_manager.py",
]


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) files are embedded by the bundler, so this check is skipped.
    """

    modules_dir = PROJECT_ROOT / "CalcModules"

    REQUIRED = [modules_dir / name for name in REQUIRED_MODULES]
    REQUIRED += [modules_dir / "config.json", modules_dir / "ui_strings.json"]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def configure_logging(settings):
    """Set up root logging from the 'log_level' and 'debug' settings."""
    level = logging.DEBUG if settings.get("debug") else getattr(
        logging, str(settings.get("log_level", "WARNING")).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():

    """
    Load configuration and start the console session.
    - Keep this thin: no business logic here.
    """

    all_settings = config_manager.load_setting_value("all")
    configure_logging(all_settings)
    logging.getLogger(__name__).debug("Config loaded: %s", all_settings)

    # Delegate control to the console layer; it owns the read-eval-print loop.
    Console.main()


if __name__ == "__main__":
    # Two explicit modes aid debugging & packaging clarity.
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        check_files_exist()
    main()
