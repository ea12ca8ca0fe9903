import configparser
import sys
from abc import ABC, abstractmethod

from m365check.utils.utils import error, fatal, load_config


class Action(ABC):
    def __init__(self, config: configparser.ConfigParser = None):
        self.config = config if config is not None else load_config()

    def safe_execute(self, **kwargs):
        try:
            return self.execute(**kwargs)
        except KeyboardInterrupt:
            error("Aborted by user")
            sys.exit(1)
        except OSError as e:
            fatal(f"{e.__class__.__name__}: {e}")

    @abstractmethod
    def execute(self, **kwargs):
        pass
