import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits, List, Unicode, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'jsonreconcile_config'


class ReconcileConfigurable(HasTraits):

    def own_settings(self, cls):
        "Current values of the config traits declared by cls itself."
        return {name: getattr(self, name) for name in cls.class_own_traits(config=True)}


_instances = {}

def config_instance(cls):
    "Shared instance of a configurable class."
    if cls not in _instances:
        _instances[cls] = cls()
    return _instances[cls]


def config_search_path():
    "Directories searched for config files, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def merge_config(target, new, keep_none=False):
    """Merge the nested dict new into target.

    Unless keep_none is set, None values remove their key and
    sections left empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            section = target.setdefault(key, {})
            merge_config(section, value, keep_none)
            if not section and not keep_none:
                del target[key]
        elif value is None and not keep_none:
            target.pop(key, None)
        else:
            target[key] = value


def load_disk_config(keep_none=False):
    """Read every jsonreconcile_config.json on the search path into one dict.

    Files in higher priority directories override lower ones.
    """
    merged = {}
    for directory in reversed(config_search_path()):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            loaded = loader.load_config()
        except ConfigFileNotFound:
            continue
        merge_config(merged, loaded, keep_none)
    return merged


def build_config(entrypoint, include_none=False):
    """Effective settings of an entrypoint as a flat dict.

    Each configurable base class contributes its trait defaults,
    overridden by the section of the config files named after it.
    Subclasses override their bases.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config is defined for entrypoint %r, known entrypoints are %r.' % (
            entrypoint, sorted(entrypoint_configurables)))

    on_disk = load_disk_config(include_none)
    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, ReconcileConfigurable):
            continue
        merge_config(config, config_instance(cls).own_settings(cls), include_none)
        merge_config(config, on_disk.get(cls.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(ReconcileConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class PatternList(List):
    "List of path patterns, each a JSON pointer that may hold '*' segments."

    def validate_elements(self, obj, value):
        value = super(PatternList, self).validate_elements(obj, value)
        bad = [p for p in value if p and not p.startswith('/')]
        if bad:
            raise TraitError('path patterns must start with "/": %r' % bad)
        return value


class _Printing(ReconcileConfigurable):

    color = Bool(
        True,
        help="colorize the printed changes.",
    ).tag(config=True)


class _Reconciling(ReconcileConfigurable):

    sort_paths = Bool(
        True,
        help="report changes in sorted path order.",
    ).tag(config=True)

    ignore = PatternList(
        Unicode(),
        default_value=[],
        help="path patterns (wildcards allowed) of changes to leave out.",
    ).tag(config=True)


class JsonReconcile(Global, _Printing, _Reconciling):
    pass


entrypoint_configurables = {
    'jsonreconcile': JsonReconcile,
}
