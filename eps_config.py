# eps_config.py
from dataclasses import dataclass, asdict
from enum import Enum


class TwoPhaseSystemType(Enum):
    """Which fluids are involved in a twophase material law."""
    GAS_OIL = 'gas_oil'
    OIL_WATER = 'oil_water'
    GAS_WATER = 'gas_water'


class JFunctionFlag(Enum):
    """Phase(s) the JFUNC keyword applies to."""
    BOTH = 'BOTH'
    WATER = 'WATER'
    GAS = 'GAS'


class ConfigConflictError(ValueError):
    pass


@dataclass(frozen=True)
class ScalingConfig:
    """
    Which quantities are scaled by the endpoint scaling code and how.

    The default instance scales nothing.
    """
    # rescale the x-axis (input saturations)
    enable_sat_scaling: bool = False
    # two piecewise linear segments instead of one for kr saturation scaling
    enable_three_point_kr_sat_scaling: bool = False

    # rescale the y-axis (capillary pressure and relperm outputs)
    enable_pc_scaling: bool = False
    enable_leverett_scaling: bool = False
    enable_krw_scaling: bool = False
    enable_krn_scaling: bool = False

    # three point vertical scaling, e.g. KRWR + KRW / KRORW + KRO
    enable_three_point_krw_scaling: bool = False
    enable_three_point_krn_scaling: bool = False

    @property
    def pc_scaling_mode(self):
        """
        Pc scaling used by consumers. Leverett scaling replaces the normal
        Pc scaling, so enable_pc_scaling does not matter when it is on.
        """
        if self.enable_leverett_scaling:
            return 'leverett'
        if self.enable_pc_scaling:
            return 'standard'
        return 'none'

    def as_dict(self):
        return asdict(self)


def _leverett_applies(flag, system_type):
    if flag is JFunctionFlag.BOTH:
        return system_type is not TwoPhaseSystemType.GAS_WATER
    if flag is JFunctionFlag.WATER:
        return system_type is TwoPhaseSystemType.OIL_WATER
    if flag is JFunctionFlag.GAS:
        return system_type is TwoPhaseSystemType.GAS_OIL
    return False


def resolve_eps_config(deck, system_type, prefix="", suffix=""):
    """
    Derive the endpoint scaling configuration of one twophase system from a deck.

    Args:
        deck: object answering has_endpoint_scaling(), three_point_requested(),
              has_jfunction() and has_double_field(name).
        system_type: TwoPhaseSystemType.
        prefix: prepended to every field name (e.g. 'I' for imbibition).
        suffix: appended to the KR field names only.

    Raises:
        ConfigConflictError: Pc scaling and Leverett scaling both apply.
    """
    if not deck.has_endpoint_scaling():
        return ScalingConfig()

    flags = {
        'enable_sat_scaling': True,
        'enable_three_point_kr_sat_scaling': bool(deck.three_point_requested()),
    }

    jfunc = deck.has_jfunction()
    if jfunc is not None:
        flags['enable_leverett_scaling'] = _leverett_applies(jfunc, system_type)

    def has_kr(tag):
        return deck.has_double_field(prefix + "KR" + tag + suffix)

    def has_pc(tag):
        return deck.has_double_field(prefix + "PC" + tag)

    if system_type is TwoPhaseSystemType.OIL_WATER:
        three_point_krw = has_kr("WR")
        three_point_krn = has_kr("ORW")
        flags['enable_three_point_krw_scaling'] = three_point_krw
        flags['enable_three_point_krn_scaling'] = three_point_krn
        flags['enable_krn_scaling'] = has_kr("O") or three_point_krn
        flags['enable_krw_scaling'] = has_kr("W") or three_point_krw
        flags['enable_pc_scaling'] = has_pc("W") or deck.has_double_field("SWATINIT")
    elif system_type is TwoPhaseSystemType.GAS_OIL:
        three_point_krw = has_kr("ORG")
        three_point_krn = has_kr("GR")
        flags['enable_three_point_krw_scaling'] = three_point_krw
        flags['enable_three_point_krn_scaling'] = three_point_krn
        flags['enable_krn_scaling'] = has_kr("G") or three_point_krn
        flags['enable_krw_scaling'] = has_kr("O") or three_point_krw
        flags['enable_pc_scaling'] = has_pc("G")
    elif system_type is TwoPhaseSystemType.GAS_WATER:
        # No y-axis scaling derived for gas-water systems yet
        pass
    else:
        raise TypeError(f"Unknown twophase system type: {system_type!r}")

    if flags.get('enable_pc_scaling') and flags.get('enable_leverett_scaling'):
        raise ConfigConflictError(
            "Capillary pressure scaling and the Leverett scaling function "
            "are mutually exclusive. The deck contains the PCW/PCG property "
            "and the JFUNC keyword applies to the same phase "
            f"({system_type.value})."
        )

    return ScalingConfig(**flags)
