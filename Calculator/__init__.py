"""Scientific Calculator: expression engine and PySide6 front end."""
