from benangmerah_driver.config.loader import load_options_file
from benangmerah_driver.config.schema import HarnessSettings

__all__ = ["HarnessSettings", "load_options_file"]
