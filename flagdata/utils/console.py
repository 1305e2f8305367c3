# flagdata/utils/console.py
from rich.console import Console

# progress/success on stdout, failures on stderr
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def info(msg: str):
    console.print(msg, markup=False, soft_wrap=True)


def done(msg: str = "DONE"):
    console.print(msg, style="blue", markup=False, soft_wrap=True)


def error(msg: str):
    err_console.print(msg, style="red", markup=False, soft_wrap=True)
