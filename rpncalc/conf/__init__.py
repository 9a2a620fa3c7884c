import os
import sys
from functools import cached_property
from types import ModuleType

import yaml

from . import loaders
from .loaders import CalcSettings, ImproperlyConfigured

DEFAULT_CONFIG = {"version": "1.0"}


def _load():
    path = os.getenv("RPNCALC_CONFIG")
    if path:
        if not os.path.isfile(path):
            raise ImproperlyConfigured(
                'Settings file %s not found. Check if RPNCALC_CONFIG '
                'environment variable is set correctly.' % path
            )
        return _load_file(path)
    home = os.getenv("RPNCALC_HOME", os.getcwd())
    files = ['rpncalc.yaml', 'rpncalc.yml']
    files = (os.path.join(home, fn) for fn in files)
    try:
        file = next(filter(os.path.isfile, files))
    except StopIteration:
        return _load_dict(DEFAULT_CONFIG)
    return _load_file(file)


def _load_file(fp):
    if isinstance(fp, (str, os.PathLike)):
        with open(fp) as stream:
            conf = _load_dict(yaml.safe_load(stream))
        conf.settings_file = os.path.abspath(fp)
        return conf
    return _load_dict(yaml.safe_load(fp))


def _load_dict(config):
    if not isinstance(config, dict):
        raise ImproperlyConfigured(
            "Settings must be a mapping, not %s" % type(config).__name__
        )
    return loaders.load_settings_1_0(config)


class _ConfModule(ModuleType):
    @cached_property
    def settings(self):
        return _load()

    def load_file(self, fp):
        self.settings = _load_file(fp)

    def load_dict(self, config):
        self.settings = _load_dict(config)


settings: loaders.CalcSettings

sys.modules[__name__].__class__ = _ConfModule
