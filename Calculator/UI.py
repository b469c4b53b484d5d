# UI.py
"""PySide6 user interface for the Expression Calculator.

Structure
---------
- Calculator UI: main window with expression/result display and keypad
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and rounded buttons with hover state
- Handle button and keyboard input (Enter evaluates, Backspace deletes)
- Dispatch the expression to MathEngine and render the result
- Collapse every MathEngine error to "Invalid expression" (details go to the log and tooltip)
- Clipboard integration and optional evaluation after paste

Responsibilities (Settings)
---------------------------
- Load current settings and descriptions via config_manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme / logging changes immediately
"""

# UI.py
from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, Signal
import sys
import logging
from pathlib import Path
from pynput.keyboard import Controller
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import MathEngine as MathEngine  # Imports MathEngine.py as a module

logger = logging.getLogger(__name__)

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    # We are running in a PyInstaller bundle (.exe)
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    # We are running in a normal Python environment (.py)
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

INVALID_MESSAGE = "Invalid expression"

SETTINGS_KEY = "\u2699"   # "⚙"
COPY_KEY = "\U0001F4CB"   # "📋"
PASTE_KEY = "\U0001F4D1"  # "📑"

LIGHT_THEME = {
    "background": "#f5f6f8",
    "card": "#ffffff",
    "border": "#d2d6dc",
    "button": "#f8f9fb",
    "button_hover": "#eceff3",
    "text": "#212529",
    "muted": "#6c757d",
}

DARK_THEME = {
    "background": "#121212",
    "card": "#1e1e1e",
    "border": "#444444",
    "button": "#2e2e2e",
    "button_hover": "#444444",
    "text": "#ffffff",
    "muted": "#b0b0b0",
}


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for the "shift to paste" behavior of the clipboard button.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


def build_stylesheet(theme):
    # Rounded cards and buttons, hover feedback on the keypad
    return f"""
        QWidget#calculator {{background-color: {theme["background"]};}}
        QFrame#display {{
            background-color: {theme["card"]};
            border: 1px solid {theme["border"]};
            border-radius: 12px;
        }}
        QLineEdit {{background-color: {theme["card"]}; color: {theme["text"]}; border: none;}}
        QLineEdit#result {{color: {theme["muted"]};}}
        QPushButton {{
            background-color: {theme["button"]};
            color: {theme["text"]};
            border: none;
            border-radius: 12px;
            padding: 8px;
        }}
        QPushButton:hover {{background-color: {theme["button_hover"]};}}
        QPushButton#equals {{background-color: #007bff; color: white; font-weight: bold;}}
        QPushButton#equals:hover {{background-color: #0069d9;}}
    """


class SettingsDialog(QtWidgets.QDialog):
    """""

    This class is responsible for managing the settings window, saving the new settings and opening an error
    message if something went wrong.

    All of the Settings can be separated into two categories:
    1. Checkboxes   (Managed with True or False)
    2. Input Fields (Managed as an Integer)

    """""

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # Dictionary, in which all of the Widgets (Setting options) are stored.

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.resize(320, 240)
        self.setMinimumSize(320, 240)

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
                label = QtWidgets.QLabel(description + " (min. 2):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

            else:
                logger.warning("Setting '%s' has an unsupported type and is not editable.", key_value)

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

            # --- Input Fields (like 'decimal_places') ---
            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if key_value == "decimal_places" and new_value_int < 2:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                except ValueError as e:
                    # Show an error box and STOP the save process
                    logger.info("Invalid input for %s: %s", key_value, e)
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return

                setting_value_list[key_value] = new_value_int

        # --- Write to File ---
        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 5002: {E.ERROR_MESSAGES['5002']}")

    def update_darkmode(self):
        # Applies the darkmode stylesheet if the setting is True
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    shift_is_held = False

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State ---
        self.last_result = ""  # Plain number of the last successful evaluation (for copying)
        self.button_objects = {}

        # --- 3. Window Setup ---
        self.setObjectName("calculator")
        icon_path = PROJECT_ROOT / "icons" / "icon.png"
        if icon_path.exists():
            self.setWindowIcon(QtGui.QIcon(str(icon_path)))
        self.setWindowTitle("Expression Evaluator")
        self.setMinimumSize(340, 560)
        main_v_layout = QtWidgets.QVBoxLayout(self)
        main_v_layout.setContentsMargins(12, 12, 12, 12)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup: expression on top, result below ---
        display = QtWidgets.QFrame()
        display.setObjectName("display")
        display.setFixedHeight(92)
        display_layout = QtWidgets.QVBoxLayout(display)
        display_layout.setContentsMargins(10, 8, 10, 8)

        self.expression = QtWidgets.QLineEdit()
        self.expression.setPlaceholderText("0")
        font = self.expression.font()
        font.setPointSizeF(12.5)
        self.expression.setFont(font)
        self.expression.returnPressed.connect(self.evaluate_expression)
        display_layout.addWidget(self.expression)

        self.result = QtWidgets.QLineEdit()
        self.result.setObjectName("result")
        self.result.setReadOnly(True)
        self.result.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        font = self.result.font()
        font.setPointSizeF(11)
        self.result.setFont(font)
        display_layout.addWidget(self.result)

        main_v_layout.addWidget(display)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 1)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(8)
        button_grid.setContentsMargins(0, 8, 0, 0)

        # (text, row, column, column span)
        self.buttons = [
            (SETTINGS_KEY, 0, 0, 2), (COPY_KEY, 0, 2, 2),
            ('7', 1, 0, 1), ('8', 1, 1, 1), ('9', 1, 2, 1), ('+', 1, 3, 1),
            ('4', 2, 0, 1), ('5', 2, 1, 1), ('6', 2, 2, 1), ('-', 2, 3, 1),
            ('1', 3, 0, 1), ('2', 3, 1, 1), ('3', 3, 2, 1), ('/', 3, 3, 1),
            ('0', 4, 0, 1), ('.', 4, 1, 1), ('(', 4, 2, 1), (')', 4, 3, 1),
            ('Del', 5, 0, 1), ('Clr', 5, 1, 1), ('*', 5, 2, 1), ('^', 5, 3, 1),
            ('=', 6, 0, 4)
        ]

        for i in range(7):
            button_grid.setRowStretch(i, 1)
        for j in range(4):
            button_grid.setColumnStretch(j, 1)

        # --- 6. Button Creation Loop ---
        for text, row, col, span in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)  # Keep keyboard focus in the expression box

            if text == '=':
                button.setObjectName("equals")

            button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_grid.addWidget(button, row, col, 1, span)
            self.button_objects[text] = button

        self.update_darkmode()
        self.expression.setFocus()

    # --- Window/Key Event Handlers ---
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
            self.update_button_labels()
        elif event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and not self.expression.hasFocus():
            self.evaluate_expression()
            return
        elif event.key() == Qt.Key.Key_Backspace and not self.expression.hasFocus():
            self.handle_button_press('Del')
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
            self.update_button_labels()
        super().keyReleaseEvent(event)

    def update_button_labels(self):
        """
        Toggle the clipboard button label depending on Shift state.
        - Shift held   → show 📑 (Paste)
        - Shift up     → show 📋 (Copy)
        """
        clipboard_button = self.button_objects.get(COPY_KEY)
        if clipboard_button:
            clipboard_button.setText(PASTE_KEY if self.shift_is_held else COPY_KEY)

    def handle_button_press(self, value):
        if value == 'Del':
            self.expression.setText(self.expression.text()[:-1])
            self.expression.end(False)

        elif value == 'Clr':
            self.expression.clear()
            self.result.clear()

        elif value == '=':
            self.evaluate_expression()

        elif value == SETTINGS_KEY:
            self.open_settings()

        elif value == COPY_KEY:
            self.handle_clipboard()

        else:
            self.expression.insert(value)

    def handle_clipboard(self):
        # Shift held: paste into the expression; otherwise copy the last result
        try:
            if self.shift_is_held or is_shift_pressed():
                clipboard_text = pyperclip.paste().strip()
                if not clipboard_text:
                    return
                self.expression.insert(clipboard_text)
                if self.setting_value_list["after_paste_enter"]:
                    self.evaluate_expression()
            elif self.last_result:
                pyperclip.copy(self.last_result)

        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard unavailable: %s", e)
            error_box = QtWidgets.QMessageBox(self)
            error_box.setIcon(QtWidgets.QMessageBox.Icon.Warning)
            error_box.setWindowTitle("Clipboard error")
            error_box.setText("The clipboard is not available on this system.")
            error_box.setInformativeText(str(e))
            error_box.setStyleSheet(self.get_message_box_stylesheet())
            error_box.exec()

    def evaluate_expression(self):
        equation = self.expression.text()
        try:
            math_engine_output = MathEngine.calculate(equation)

        except E.EvaluationError as e:
            # The user only sees the flat message; the error kind stays available for diagnostics
            logger.info(E.describe(e))
            self.last_result = ""
            self.result.setText(INVALID_MESSAGE)
            self.result.setToolTip(f"Error {e.code}: {E.ERROR_MESSAGES.get(e.code, 'Unknown error')}\n{e.message}")
            return

        # "= 20" / "≈ 0.3333333333" -> "20" / "0.3333333333"
        self.last_result = math_engine_output.split(" ", 1)[1]
        self.result.setToolTip("")

        if self.setting_value_list["show_equation"]:
            self.result.setText(f"{equation.strip()} {math_engine_output}")
        elif math_engine_output.startswith("="):
            self.result.setText(self.last_result)
        else:
            self.result.setText(math_engine_output)

    def update_darkmode(self):
        theme = DARK_THEME if self.setting_value_list["darkmode"] else LIGHT_THEME
        self.setStyleSheet(build_stylesheet(theme))

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.settings_saved.connect(self.apply_settings)
        settings_dialog.exec()  # "exec" makes the dialog modal (blocks main window)

    def apply_settings(self):
        # Reload settings after they were saved, so changes (like darkmode) are applied
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()
        logging.getLogger("Calculator").setLevel(
            logging.DEBUG if self.setting_value_list["debug"] else logging.WARNING)

    def get_message_box_stylesheet(self):
        # Provides a matching stylesheet for message boxes in dark mode
        if self.setting_value_list["darkmode"]:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
                QPushButton:hover {
                    background-color: #444444;
                }
            """
        else:
            return ""


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
