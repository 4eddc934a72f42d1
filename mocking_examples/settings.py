import logging

from jsonschema import validate, ValidationError


logger = logging.getLogger(__name__)


ENV_PREFIX = 'MOCKING_EXAMPLES_'
LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']
DEFAULTS = {
    'debug': False,
}
SCHEMA = {
    'type': 'object',
    'properties': {
        'debug': {
            'oneOf': [
                {'type': 'boolean'},
                {'type': 'string', 'enum': LOG_LEVELS + [level.lower() for level in LOG_LEVELS]},
            ]
        },
    },
    'additionalProperties': False,
}
TRUTHY = {'1', 'true', 'yes', 'on'}
FALSY = {'0', 'false', 'no', 'off', ''}


class Settings:
    """Settings layered over `DEFAULTS`.

    Invalid user settings are reported and dropped, see `validate_settings`.

    """

    def __init__(self, overrides=None):
        self._current_state = dict(DEFAULTS)
        self._current_state.update(validate_settings(overrides or {}))

    @classmethod
    def from_environ(cls, environ):
        """Read ``MOCKING_EXAMPLES_*`` variables from the given mapping."""
        overrides = {}
        for name in DEFAULTS:
            try:
                raw = environ[ENV_PREFIX + name.upper()]
            except KeyError:
                continue
            overrides[name] = _parse_value(raw)
        return cls(overrides)

    def has(self, name):
        """Return whether the given setting exists."""
        return name in self._current_state

    def get(self, name, default=None):
        """Return a setting, defaulting to default if not found."""
        return self._current_state.get(name, default)

    def __repr__(self):
        return "<Settings {}>".format(self._current_state)


def _parse_value(raw):
    value = raw.strip()
    if value.lower() in TRUTHY:
        return True
    if value.lower() in FALSY:
        return False
    return value


def validate_settings(settings):
    """Return the valid part of `settings`, warn about the rest."""
    good = {}
    for name, value in settings.items():
        try:
            validate({name: value}, SCHEMA)
        except ValidationError as error:
            logger.warning(
                "Invalid setting '{}': {}".format(name, error.message))
        else:
            good[name] = value
    return good
