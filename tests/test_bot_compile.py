import py_compile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_bot_and_main_compile() -> None:
    """The Discord entry points should at least be syntactically valid.

    Compiling them here catches syntax errors even when the ``discord``
    package is not installed.
    """

    py_compile.compile(str(ROOT / "booba_bot/bot.py"), doraise=True)
    py_compile.compile(str(ROOT / "booba_bot/main.py"), doraise=True)
