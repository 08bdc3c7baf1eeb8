"""The VIEW layer: PySide6 widgets that draw the lab and forward user input."""
