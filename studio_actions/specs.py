"""
Specs used to read an action back from a stored record.

Records come from project files that may have been written by older versions
or edited by hand, so reading a record never fails. A missing key gets the
default for that field and so does a value of the wrong type.
"""
from studio_actions.enums import TimerMode

from studio_app.errors import BadSpecValue
from studio_app import helpers as hp

from delfick_project.norms import Meta, sb
import logging

log = logging.getLogger("studio_actions.specs")


def safe_read(record, key, default):
    """Return record[key] if the record has that key, otherwise default"""
    if key in record:
        return record[key]
    return default


class text_spec(sb.Spec):
    """Only allow strings"""

    def normalise_filled(self, meta, val):
        if not isinstance(val, str):
            raise BadSpecValue("Expected a string", got=type(val), meta=meta)
        return val


class flag_spec(sb.Spec):
    """Only allow True or False"""

    def normalise_filled(self, meta, val):
        if not isinstance(val, bool):
            raise BadSpecValue("Expected a boolean", got=type(val), meta=meta)
        return val


class integral_spec(sb.Spec):
    """
    Allow integers and floats that are whole numbers

    Json from some writers gives us ``100.0`` instead of ``100``
    """

    def normalise_filled(self, meta, val):
        if isinstance(val, bool):
            raise BadSpecValue("Expected an integer", got=bool, meta=meta)

        if isinstance(val, int):
            return val

        if isinstance(val, float) and val.is_integer():
            return int(val)

        raise BadSpecValue("Expected an integer", got=type(val), meta=meta)


class timer_mode_spec(sb.Spec):
    """Turn a stored integer into a TimerMode"""

    def normalise_filled(self, meta, val):
        if isinstance(val, TimerMode):
            return val
        return TimerMode.from_value(integral_spec().normalise(meta, val))


class lenient(sb.Spec):
    """
    Normalise with spec, but use the default instead of complaining when the
    value doesn't fit
    """

    def setup(self, spec, default, name=None):
        self.spec = spec
        self.name = name
        self.default = default

    def normalise_empty(self, meta):
        return self.default

    def normalise_filled(self, meta, val):
        try:
            return self.spec.normalise(meta, val)
        except BadSpecValue as error:
            log.warning(
                hp.lc("Ignoring stored value", key=self.name, got=type(val).__name__, error=error)
            )
            return self.default


def read_field(record, key, spec, default):
    """Safely read key from record and normalise it with spec"""
    val = safe_read(record, key, default)
    return lenient(spec, default, name=key).normalise(Meta.empty().at(key), val)
