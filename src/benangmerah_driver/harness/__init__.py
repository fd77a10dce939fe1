from benangmerah_driver.harness.args import parse_cli_args
from benangmerah_driver.harness.cli import build_app, handle_cli
from benangmerah_driver.harness.listener import HarnessListener
from benangmerah_driver.harness.runner import import_driver, run_driver

__all__ = [
    "HarnessListener",
    "build_app",
    "handle_cli",
    "import_driver",
    "parse_cli_args",
    "run_driver",
]
