import pytest
from deck import Deck
from eps_config import (ScalingConfig, TwoPhaseSystemType, JFunctionFlag,
                        ConfigConflictError, resolve_eps_config)

OW = TwoPhaseSystemType.OIL_WATER
GO = TwoPhaseSystemType.GAS_OIL
GW = TwoPhaseSystemType.GAS_WATER


class RecordingDeck:
    """Deck stub that remembers which fields were looked up."""
    def __init__(self, endscale=True, threepoint=False, jfunc=None, fields=()):
        self.endscale = endscale
        self.threepoint = threepoint
        self.jfunc = jfunc
        self.fields = set(fields)
        self.lookups = []

    def has_endpoint_scaling(self):
        return self.endscale

    def three_point_requested(self):
        self.lookups.append('threepoint')
        return self.threepoint

    def has_jfunction(self):
        self.lookups.append('jfunc')
        return self.jfunc

    def has_double_field(self, name):
        self.lookups.append(name)
        return name in self.fields


def test_no_endscale_disables_everything():
    deck = RecordingDeck(endscale=False, threepoint=True, jfunc=JFunctionFlag.BOTH,
                         fields=['KRW', 'KRWR', 'PCW', 'SWATINIT'])
    for system in TwoPhaseSystemType:
        assert resolve_eps_config(deck, system) == ScalingConfig()
    assert deck.lookups == []


def test_single_krw_field_oil_water():
    deck = Deck({'endscale': True, 'scalecrs': 'NO', 'fields': ['KRW']})
    eps = resolve_eps_config(deck, OW)
    assert eps.enable_sat_scaling
    assert eps.enable_krw_scaling
    assert not eps.enable_krn_scaling
    assert not eps.enable_three_point_kr_sat_scaling
    assert not eps.enable_three_point_krw_scaling
    assert not eps.enable_three_point_krn_scaling
    assert not eps.enable_pc_scaling
    assert not eps.enable_leverett_scaling


def test_threepoint_requested():
    deck = RecordingDeck(threepoint=True)
    assert resolve_eps_config(deck, GO).enable_three_point_kr_sat_scaling


def test_swatinit_enables_pc_scaling_oil_water():
    deck = RecordingDeck(fields=['SWATINIT'])
    assert resolve_eps_config(deck, OW).enable_pc_scaling


def test_swatinit_ignored_for_gas_oil():
    assert not resolve_eps_config(RecordingDeck(fields=['SWATINIT']), GO).enable_pc_scaling
    assert resolve_eps_config(RecordingDeck(fields=['PCG']), GO).enable_pc_scaling


def test_three_point_krw_implies_krw_oil_water():
    eps = resolve_eps_config(RecordingDeck(fields=['KRWR']), OW)
    assert eps.enable_three_point_krw_scaling
    assert eps.enable_krw_scaling
    assert not eps.enable_krn_scaling


def test_three_point_krn_implies_krn_oil_water():
    eps = resolve_eps_config(RecordingDeck(fields=['KRORW']), OW)
    assert eps.enable_three_point_krn_scaling
    assert eps.enable_krn_scaling


def test_gas_oil_field_names():
    eps = resolve_eps_config(RecordingDeck(fields=['KRORG', 'KRGR']), GO)
    assert eps.enable_three_point_krw_scaling
    assert eps.enable_three_point_krn_scaling
    assert eps.enable_krw_scaling
    assert eps.enable_krn_scaling

    eps = resolve_eps_config(RecordingDeck(fields=['KRO', 'KRG']), GO)
    assert eps.enable_krw_scaling and eps.enable_krn_scaling
    assert not eps.enable_three_point_krw_scaling


def test_prefix_and_suffix_in_lookup_keys():
    deck = RecordingDeck(fields=['IKRWX', 'IPCW'])
    eps = resolve_eps_config(deck, OW, prefix='I', suffix='X')
    assert eps.enable_krw_scaling
    assert eps.enable_pc_scaling
    assert 'IKRWRX' in deck.lookups
    assert 'IKRORWX' in deck.lookups
    # PC keys never carry the suffix
    assert 'IPCW' in deck.lookups
    assert 'IPCWX' not in deck.lookups


def test_gas_water_sets_no_kr_or_pc_flags():
    deck = RecordingDeck(threepoint=True, jfunc=JFunctionFlag.BOTH,
                         fields=['KRW', 'KRG', 'PCW', 'PCG', 'SWATINIT'])
    eps = resolve_eps_config(deck, GW)
    assert eps == ScalingConfig(enable_sat_scaling=True,
                                enable_three_point_kr_sat_scaling=True)


@pytest.mark.parametrize("flag, system, expected", [
    (JFunctionFlag.BOTH, OW, True),
    (JFunctionFlag.BOTH, GO, True),
    (JFunctionFlag.BOTH, GW, False),
    (JFunctionFlag.WATER, OW, True),
    (JFunctionFlag.WATER, GO, False),
    (JFunctionFlag.WATER, GW, False),
    (JFunctionFlag.GAS, OW, False),
    (JFunctionFlag.GAS, GO, True),
    (JFunctionFlag.GAS, GW, False),
])
def test_leverett_scaling_by_jfunc_flag(flag, system, expected):
    eps = resolve_eps_config(RecordingDeck(jfunc=flag), system)
    assert eps.enable_leverett_scaling is expected


def test_pc_and_leverett_conflict():
    deck = RecordingDeck(jfunc=JFunctionFlag.WATER, fields=['PCW'])
    with pytest.raises(ConfigConflictError, match="mutually exclusive"):
        resolve_eps_config(deck, OW)


def test_pcg_and_jfunc_gas_conflict_gas_oil():
    deck = RecordingDeck(jfunc=JFunctionFlag.GAS, fields=['PCG'])
    with pytest.raises(ConfigConflictError, match="gas_oil"):
        resolve_eps_config(deck, GO)


def test_swatinit_and_jfunc_water_conflict():
    deck = RecordingDeck(jfunc=JFunctionFlag.BOTH, fields=['SWATINIT'])
    with pytest.raises(ConfigConflictError):
        resolve_eps_config(deck, OW)


def test_jfunc_on_other_phase_is_not_a_conflict():
    deck = RecordingDeck(jfunc=JFunctionFlag.GAS, fields=['PCW'])
    eps = resolve_eps_config(deck, OW)
    assert eps.enable_pc_scaling
    assert not eps.enable_leverett_scaling
    assert eps.pc_scaling_mode == 'standard'


def test_pc_scaling_mode():
    assert ScalingConfig().pc_scaling_mode == 'none'
    assert ScalingConfig(enable_leverett_scaling=True).pc_scaling_mode == 'leverett'
    assert ScalingConfig(enable_pc_scaling=True, enable_leverett_scaling=True).pc_scaling_mode == 'leverett'


def test_resolve_is_repeatable():
    deck = Deck({'endscale': True, 'scalecrs': 'YES', 'jfunc': 'GAS',
                 'fields': ['KRW', 'KRORW', 'PCW']})
    assert resolve_eps_config(deck, OW) == resolve_eps_config(deck, OW)
    assert resolve_eps_config(deck, GO).as_dict() == resolve_eps_config(deck, GO).as_dict()


def test_scaling_config_is_frozen():
    eps = ScalingConfig()
    with pytest.raises(AttributeError):
        eps.enable_pc_scaling = True
