"""Configuration of the seqchanges entry points.

Each entry point has a traitlets configurable class. Its defaults are
the trait defaults of the class and its bases, overridden by sections
of `seqchanges_config.json` files named after those classes, e.g.

    {"SeqDiff": {"unit": "char"}, "Global": {"log_level": "DEBUG"}}
"""

import json
import os

from traitlets import Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.sequences import diff_units


CONFIG_FILENAME = 'seqchanges_config.json'

log_levels = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class SeqChangesConfigurable(HasTraits):
    pass


def config_path():
    """Return the directories searched for config files.

    The list is in descending priority order.
    """
    path = [os.getcwd(), os.path.join(os.path.expanduser('~'), '.seqchanges')]
    env_dir = os.environ.get('SEQCHANGES_CONFIG_DIR')
    if env_dir:
        path.append(env_dir)
    return path


def load_disk_config(path=None):
    """Merge the sections of all config files found in path.

    Files earlier in path take precedence.
    """
    if path is None:
        path = config_path()
    sections = {}
    for directory in reversed(path):
        try:
            config = JSONFileConfigLoader(CONFIG_FILENAME, path=directory).load_config()
        except ConfigFileNotFound:
            continue
        for name, values in config.items():
            if not isinstance(values, dict):
                continue
            sections.setdefault(name, {}).update(values)
    return sections


def _own_defaults(cls):
    instance = cls()
    return {name: getattr(instance, name) for name in cls.class_own_traits(config=True)}


def build_config(entrypoint):
    """Return the effective settings of an entry point as a flat dict."""
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config defined for entrypoint %r, expected one of %r.' % (
            entrypoint, sorted(entrypoint_configurables)))

    disk_config = load_disk_config()
    config = {}
    # Base classes first, so subclass settings win
    for cls in reversed(configurable.mro()):
        if issubclass(cls, SeqChangesConfigurable):
            config.update(_own_defaults(cls))
            config.update(disk_config.get(cls.__name__, {}))
    return config


def print_config(entrypoints, out):
    """Write the effective settings of each entry point to out."""
    from .prettyprint import pretty_print_dict, PrettyPrintConfig
    printconfig = PrettyPrintConfig(out=out, use_color=False)
    for entrypoint in entrypoints:
        values = {k: json.dumps(v) for k, v in build_config(entrypoint).items()}
        pretty_print_dict({entrypoint_configurables[entrypoint].__name__: values},
                          config=printconfig)


class Global(SeqChangesConfigurable):

    log_level = Enum(
        log_levels,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Printing(Global):

    use_color = Bool(
        True,
        help="whether to use ANSI color code escapes for text output.",
    ).tag(config=True)


class _Diffing(Global):

    reduced = Bool(
        True,
        help="whether to combine insertion and deletion pairs of equal value into moves.",
    ).tag(config=True)

    unit = Enum(
        diff_units,
        'line',
        help="diff text by 'line' or by 'char' (unicode code point).",
    ).tag(config=True)


class SeqDiff(_Diffing, _Printing):
    pass


class SeqShow(_Printing):
    pass


entrypoint_configurables = {
    'seqchanges-diff': SeqDiff,
    'seqchanges-show': SeqShow,
}
