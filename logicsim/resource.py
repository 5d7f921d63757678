import os
import sys


def path(relative_path):
    # PyInstaller unpacks bundled data under sys._MEIPASS
    base_path = getattr(
        sys,
        "_MEIPASS",
        os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    )
    return os.path.join(base_path, relative_path)
