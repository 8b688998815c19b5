# deck.py
import json
import numpy as np

import config as cfg
from eps_config import JFunctionFlag


class Deck:
    """
    Read-only view of the deck keywords the endpoint scaling code looks at.

    input keys:
        endscale   -> ENDSCALE in RUNSPEC (bool)
        scalecrs   -> SCALECRS item ('YES' / 'NO')
        jfunc      -> JFUNC flag ('BOTH', 'WATER', 'GAS') or {'flag': ...}
        hysteresis -> SATOPTS HYSTER (bool)
        fields     -> list of field names, or {name: values}
    """
    def __init__(self, input):
        self.endscale = bool(input.get('endscale', cfg.ENDSCALE))
        self.scalecrs = input.get('scalecrs', cfg.SCALECRS)
        self.jfunc = input.get('jfunc')
        self.hysteresis = bool(input.get('hysteresis', False))

        fields = input.get('fields') or {}
        if isinstance(fields, str):
            fields = [fields]
        if isinstance(fields, dict):
            items = fields.items()
        else:
            items = ((name, None) for name in fields)

        # Only fields holding floating point data count as double fields
        self._double_fields = set()
        for name, values in items:
            if _is_double_data(values):
                self._double_fields.add(str(name).upper())

    @classmethod
    def from_json(cls, text):
        return cls(json.loads(text))

    def has_endpoint_scaling(self):
        return self.endscale

    def three_point_requested(self):
        if isinstance(self.scalecrs, bool):
            return self.scalecrs
        return str(self.scalecrs).strip().upper() in ('YES', 'Y')

    def has_jfunction(self):
        """JFunctionFlag, or None if JFUNC is absent or unreadable."""
        flag = self.jfunc
        if flag is None:
            return None
        if isinstance(flag, dict):
            # JFUNC without an explicit flag item applies to both phases
            flag = flag.get('flag', 'BOTH')
        try:
            return JFunctionFlag(str(flag).strip().upper())
        except ValueError:
            return None

    def has_hysteresis(self):
        return self.hysteresis

    def has_double_field(self, name):
        return name.upper() in self._double_fields

    def field_names(self):
        return sorted(self._double_fields)


def _is_double_data(values):
    if values is None:
        return True
    if isinstance(values, (str, bytes, bool)):
        return False
    try:
        np.asarray(values, dtype=float)
    except (TypeError, ValueError):
        return False
    return True
