# UI.py
"""""PySide6 user interface for the Scientific Calculator.

Structure
---------
- Calculator UI: main window with expression line, result line and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, displays, layout and buttons
- Translate button presses and key presses into DisplayState updates
- Dispatch the expression to MathEngine in a worker thread
- Render results; errors show "Error" and are logged with their details
- Clipboard integration and optional auto-evaluate after paste

Responsibilities (Settings)
---------------------------
- Load current settings and their descriptions via config_manager
- Validate user input (minimum decimal places)
- Save and apply theme changes immediately

Threading Note
--------------
Evaluation runs off the UI thread in Worker(QObject). The outcome is emitted
through a Qt signal and handled back on the UI thread.
"""""

from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QObject, Signal, QTimer
import sys
from pathlib import Path
import threading
from pynput.keyboard import Controller
import pyperclip

from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine
from . import DisplayState as DS
from .log import get_logger

logger = get_logger(__name__)

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

SETTINGS_BUTTON = '⚙'
CLIPBOARD_BUTTON = '📋'

# (text, row, column)
BUTTONS = [
    (SETTINGS_BUTTON, 0, 0), (CLIPBOARD_BUTTON, 0, 1),
    ('sin', 1, 0), ('cos', 1, 1), ('tan', 1, 2), ('C', 1, 3), ('DEL', 1, 4),
    ('sqrt', 2, 0), ('log', 2, 1), ('ln', 2, 2), ('(', 2, 3), (')', 2, 4),
    ('7', 3, 0), ('8', 3, 1), ('9', 3, 2), ('/', 3, 3), ('^', 3, 4),
    ('4', 4, 0), ('5', 4, 1), ('6', 4, 2), ('*', 4, 3), ('-', 4, 4),
    ('1', 5, 0), ('2', 5, 1), ('3', 5, 2), ('+', 5, 3), ('=', 5, 4),
    ('0', 6, 0), ('.', 6, 2),
]

# Buttons that repeat while held down
HOLD_BUTTONS = ['0', '1', '2', '3', '4', '5', '6', '7', '8', '9', 'DEL']

CLEAR_BUTTONS = ['C', 'DEL']
ACCENT_BUTTONS = ['=', '+', '-', '*', '/', '^', 'sin', 'cos', 'tan', 'sqrt', 'log', 'ln', '(', ')']

# Keyboard shortcuts on top of the printable characters
KEY_BUTTONS = {
    Qt.Key.Key_Return: '=',
    Qt.Key.Key_Enter: '=',
    Qt.Key.Key_Backspace: 'DEL',
    Qt.Key.Key_Escape: 'C',
}

# Theme colors: (background, surface, accent, clear)
DARK_THEME = ("#202020", "#303030", "#007AFF", "#CC0000")
LIGHT_THEME = ("#F0F0F0", "#E0E0E0", "#007AFF", "#FF3B30")


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used to switch the clipboard button from copy to paste.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class Worker(QObject):
    """""

    Runs in a separate thread, hands the expression to MathEngine.calculate
    and emits the CalculationResult back to the Calculator UI.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem):
        super().__init__()
        self.data = problem

    def run_Calc(self):
        # calculate() reports bad input through the result, so anything caught here is a bug
        try:
            outcome = MathEngine.calculate(self.data)

        except Exception as e:
            logger.exception("Unexpected crash while calculating %r", self.data)
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            outcome = MathEngine.CalculationResult(error=critical_error)

        self.job_finished.emit(outcome, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Booleans become checkboxes, integers become input fields.
    The new settings are only written if every field validates.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # setting key -> widget

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 160)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # --- 3a. Checkbox Builder (for Boolean settings) ---
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            # --- 3b. Input Field Builder (for Integer settings) ---
            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(f"{description} (min. {config_manager.MIN_DECIMAL_PLACES}):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            # --- Checkboxes ---
            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            # --- Input Fields (decimal_places) ---
            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # Blank keeps the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "decimal_places" and new_value_int < config_manager.MIN_DECIMAL_PLACES:
                        raise ValueError(
                            f"'{new_value_int}' is too small. Minimum is {config_manager.MIN_DECIMAL_PLACES}.")
                    setting_value_list[key_value] = new_value_int

                except ValueError as e:
                    logger.info("Invalid input for %s: %s", key_value, e)
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error", f"Error 4501: {E.ERROR_MESSAGES['4501']}config.json")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            background, surface, _, _ = DARK_THEME
            self.setStyleSheet(f"""
                        QDialog {{background-color: {background};}}
                        QLabel {{color: white;}}
                        QCheckBox {{color: white;}}
                        QLineEdit {{background-color: {surface};color: white;border: 1px solid #666666;}}
                        QDialogButtonBox QPushButton {{background-color: {surface};color: white;}}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    # --- Button hold timing (ms) ---
    initial_delay = 500
    repeat_interval = 100

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State ---
        self.state = DS.clear()
        self.thread_active = False
        self.shift_is_held = False
        self.was_held = False
        self.held_button_value = None
        self.hold_timer = QTimer(self)
        self.hold_timer.timeout.connect(self.handle_hold_tick)
        self.button_objects = {}

        # --- 3. Window Setup ---
        icon_path = PROJECT_ROOT / "icons" / "icon.png"
        if icon_path.exists():
            self.setWindowIcon(QtGui.QIcon(str(icon_path)))
        self.setWindowTitle("Scientific Calculator")
        self.resize(360, 560)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Displays: expression above, result below ---
        self.expression_display = QtWidgets.QLabel("")
        self.expression_display.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.expression_display.setWordWrap(True)
        font = self.expression_display.font()
        font.setPointSize(24)
        self.expression_display.setFont(font)
        main_v_layout.addWidget(self.expression_display, 1)

        self.result_display = QtWidgets.QLineEdit("0")
        self.result_display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.result_display.setReadOnly(True)
        font = self.result_display.font()
        font.setPointSize(36)
        font.setBold(True)
        self.result_display.setFont(font)
        main_v_layout.addWidget(self.result_display, 1)

        # --- 5. Button Grid ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(4)
        button_grid.setContentsMargins(0, 0, 0, 0)

        for i in range(7):
            button_grid.setRowStretch(i, 1)
        for j in range(5):
            button_grid.setColumnStretch(j, 1)

        for text, row, col in BUTTONS:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS_BUTTON:
                button.clicked.connect(self.open_settings)
            elif text == CLIPBOARD_BUTTON:
                button.clicked.connect(self.handle_clipboard)
            elif text in HOLD_BUTTONS:
                button.pressed.connect(lambda val=text: self.handle_button_pressed_hold(val))
                button.released.connect(self.handle_button_released_hold)
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_clicked_hold(val))
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            # '0' spans two columns
            column_span = 2 if text == '0' else 1
            button_grid.addWidget(button, row, col, 1, column_span)
            self.button_objects[text] = button

        self.update_darkmode()

    # --- Button Hold Logic ---
    def handle_button_pressed_hold(self, value):
        self.was_held = False
        self.held_button_value = value
        self.hold_timer.setInterval(self.initial_delay)
        self.hold_timer.start()

    def handle_button_released_hold(self):
        self.hold_timer.stop()
        self.held_button_value = None

    def handle_button_clicked_hold(self, value):
        # A click that ends a hold was already handled by the timer
        if not self.was_held:
            self.handle_button_press(value)

    def handle_hold_tick(self):
        self.was_held = True
        if self.hold_timer.interval() == self.initial_delay:
            self.hold_timer.setInterval(self.repeat_interval)
        if self.held_button_value:
            self.handle_button_press(self.held_button_value)

    # --- Key Event Handlers ---
    def keyPressEvent(self, event):
        shortcut = next((button for key, button in KEY_BUTTONS.items() if event.key() == key), None)
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
        elif shortcut:
            self.handle_button_press(shortcut)
            return
        elif event.text() and (event.text() in "0123456789.()" or event.text() in DS.OPERATORS):
            self.handle_button_press(event.text())
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    # --- Input ---
    def handle_button_press(self, value):
        if value == "=":
            self.start_calculation()
            return

        self.state = DS.press(self.state, value)
        self.refresh_display()

    def handle_clipboard(self):
        # Shift held: paste clipboard text into the expression. Otherwise copy the result.
        if self.shift_is_held or is_shift_pressed():
            clipboard_text = QtWidgets.QApplication.clipboard().text()
            if not clipboard_text.strip():
                return
            self.state = DS.paste(self.state, clipboard_text)
            self.refresh_display()

            if self.setting_value_list["after_paste_enter"]:
                self.start_calculation()
        else:
            pyperclip.copy(self.state.result)

    def start_calculation(self):
        if self.thread_active:
            logger.info("Error 4002: %s", E.ERROR_MESSAGES["4002"])
            return

        expression = self.state.expression
        if not expression.strip():
            self.state = DS.press(self.state, "=")
            self.refresh_display()
            return

        self.thread_active = True
        self.update_return_button()
        self.result_display.setText("...")
        QtWidgets.QApplication.processEvents()

        # Evaluate off the UI thread; the result arrives through Calc_result
        worker_instance = Worker(expression)
        worker_instance.job_finished.connect(self.Calc_result)
        self.worker = worker_instance
        my_thread = threading.Thread(target=worker_instance.run_Calc, daemon=True)
        my_thread.start()

    def Calc_result(self, outcome, equation):
        self.thread_active = False
        self.update_return_button()

        if not outcome.ok:
            error_obj = outcome.error
            logger.info("Error %s (%s) in %r: %s", error_obj.code, error_obj.kind, equation, error_obj.message)

        self.state = DS.apply_result(self.state, outcome, self.setting_value_list["decimal_places"])
        self.refresh_display()

    # --- Rendering ---
    def refresh_display(self):
        self.expression_display.setText(self.state.expression)
        self.result_display.setText(self.state.result)

    def update_return_button(self):
        return_button = self.button_objects.get('=')
        if not return_button:
            return
        _, _, accent, clear = DARK_THEME if self.setting_value_list["darkmode"] else LIGHT_THEME

        # Red while a calculation is running
        color = clear if self.thread_active else accent
        return_button.setStyleSheet(f"background-color: {color}; color: white; font-weight: bold;")
        return_button.update()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            background, surface, accent, clear = DARK_THEME
            text_color = "white"
        else:
            background, surface, accent, clear = LIGHT_THEME
            text_color = "black"

        for text, button in self.button_objects.items():
            if text in CLEAR_BUTTONS:
                button.setStyleSheet(f"background-color: {clear}; color: white; font-weight: bold;")
            elif text in ACCENT_BUTTONS:
                button.setStyleSheet(f"background-color: {accent}; color: white;")
            else:
                button.setStyleSheet(f"background-color: {surface}; color: {text_color};")
            button.update()
        self.update_return_button()

        self.setStyleSheet(f"background-color: {background};")
        self.expression_display.setStyleSheet(f"color: {text_color};")
        self.result_display.setStyleSheet(f"background-color: {background}; color: {accent}; border: none;")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after the dialog closes so the theme follows immediately
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
