# setup_core.py
import sys
from cx_Freeze import setup, Executable
from pathlib import Path

# Builds the GUI executable. Run with: python setup_core.py build

base = None
if sys.platform == "win32":
    base = "Win32GUI"

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
# settings.json and the log live in the per-user config dir, so no data files are bundled.

packages_to_include = [
    "asyncio",
    "qasync",
    "PySide6",
    "qtawesome",
    "linecounter",
]

packages_to_exclude = [
    "tkinter", "unittest", "pytest",
]

build_exe_options = {
    "packages": packages_to_include,
    "excludes": packages_to_exclude,
    "path": sys.path + [str(SRC_PATH)],
    "zip_include_packages": ["*"],
    "zip_exclude_packages": ["qtawesome"],
}

executables = [
    Executable(
        "src/linecounter/main.py",
        base=base,
        target_name="LineCounter.exe" if sys.platform == "win32" else "LineCounter",
    )
]

setup(
    name="LineCounter",
    version="1.0.0",
    description="Line Count Utility",
    options={"build_exe": build_exe_options},
    executables=executables,
)
