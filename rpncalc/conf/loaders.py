import collections.abc
import json
import re
from importlib import resources
from typing import List

import attr
import jsonschema
from attr import attrs, attrib
from jsonschema import Draft7Validator
from packaging.version import parse as parse_version


class ImproperlyConfigured(Exception):
    pass


compatible_config_ver = [
    "1.0",
]

DEFAULT_PROMPT = "Solve ('quit' or 'exit' to exit):"


def _read_schema():
    return json.loads(
        resources.files("rpncalc.conf")
        .joinpath("settings-schema.json")
        .read_text(encoding="utf-8")
    )


def load_settings_1_0(config) -> 'CalcSettings':
    try:
        jsonschema.validate(config, _read_schema(), Draft7Validator)
    except jsonschema.ValidationError as e:
        raise ImproperlyConfigured(
            'Error in settings file at \'{path}\'. {reason}'.format(
                path='.'.join(map(str, e.path)), reason=e.message
            )
        )
    version = parse_version(str(config["version"]))
    if version.base_version not in compatible_config_ver:
        raise ImproperlyConfigured(
            "Expected config version %s" % ", ".join(compatible_config_ver)
        )
    return _deserialize(CalcSettings, config)


def _deserialize(cls, obj):
    if obj is None or not attr.has(cls):
        return obj
    if isinstance(obj, cls):
        return obj
    if not isinstance(obj, collections.abc.Mapping):
        raise TypeError(
            "Cannot deserialize type '%s' to '%s'" % (type(obj), cls)
        )
    kwargs = {
        re.sub(r'[- ]', '_', key): val for key, val in obj.items()
    }
    fields = attr.fields_dict(cls)
    for key, val in kwargs.items():
        attribute = fields.get(key)
        if attribute is not None and attribute.type is not None:
            kwargs[key] = _deserialize(attribute.type, val)
    return cls(**kwargs)


def _keywords_converter(keywords):
    return [keyword.lower() for keyword in keywords]


@attrs(kw_only=True)
class CalcSettings:
    @attrs(kw_only=True)
    class Repl:
        prompt = attrib(type=str, default=DEFAULT_PROMPT)
        exit_keywords = attrib(
            type=List[str], converter=_keywords_converter,
            factory=lambda: ["quit", "exit"])
        render = attrib(type=str, default="none")
        show_tokens = attrib(type=bool, default=False)

    @attrs(kw_only=True)
    class Logging:
        level = attrib(type=str, default="WARNING")
        file = attrib(type=str, default=None)

    settings_file = attrib(default=None, init=False)
    version = attrib(type=str)
    repl = attrib(type=Repl, factory=Repl)
    logging = attrib(type=Logging, factory=Logging)
