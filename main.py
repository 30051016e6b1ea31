# Main.py
""""" Entry point for the Scientific Calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Evaluate a single expression given on the command line, or
   - Load configuration and start the Qt GUI

"""""
import sys
from pathlib import Path
from Calculator import config_manager as config_manager, MathEngine as MathEngine
from Calculator.log import get_logger

logger = get_logger("calculator.main")

# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) the files are embedded by the bundler and this check is skipped.
    """

    modules_dir = PROJECT_ROOT / "Calculator"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "ScientificEngine.py",
        modules_dir / "DisplayState.py",
        modules_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        logger.error("The following files are missing or in the wrong location: %s", ", ".join(missing_files))
        sys.exit(1)


def run_once(expression):
    """Evaluate one expression, print the formatted result and return the exit status."""
    outcome = MathEngine.calculate(expression)
    if not outcome.ok:
        print(f"Error: {outcome.error.message}")
        return 1

    decimal_places = config_manager.load_setting_value("decimal_places")
    print(MathEngine.format_result(outcome.value, decimal_places))
    return 0


def main(argv=None):

    """
    Evaluate argv if given, otherwise start the GUI.
    Keep this thin: no business logic here.
    """

    argv = sys.argv[1:] if argv is None else argv
    if argv:
        return run_once(" ".join(argv))

    all_settings = config_manager.load_setting_value("all")
    logger.info("Config loaded: %s", all_settings)

    # Qt and pynput are only needed for the GUI
    from Calculator import UI as UI

    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main()
    return 0


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        logger.debug("Developer Mode: Checking file paths...")
        check_files_exist()
    else:
        logger.debug("Production mode (.exe) is starting...")
    sys.exit(main())
