# run_eps.py
import json

import config as cfg
from deck import Deck
from eps_config import TwoPhaseSystemType, resolve_eps_config
from brooks_corey import BrooksCoreyParams, RegularizationThresholds, RegularizedBrooksCorey
from exporter import write_config_report


def map_db_to_case(db_case):
    deck_json = getattr(db_case, 'deck_json', None)
    case = {
        'deck': json.loads(deck_json) if deck_json else {},
        'material': {
            'pe': getattr(db_case, 'bc_pe', cfg.BC_PE),
            'alpha': getattr(db_case, 'bc_alpha', cfg.BC_ALPHA),
            'pc_low_sw': getattr(db_case, 'pc_low_sw', cfg.PC_LOW_SW),
            'krn_low_sw': getattr(db_case, 'krn_low_sw', cfg.KRN_LOW_SW),
            'krw_high_sw': getattr(db_case, 'krw_high_sw', cfg.KRW_HIGH_SW),
        }
    }
    return case


def run_resolution(case):
    """
    Resolve the endpoint scaling configuration of every twophase system.

    The imbibition configuration (prefix 'I') is only resolved when the deck
    enables hysteresis. ConfigConflictError is not caught here.
    """
    deck = Deck(case.get('deck', {}))
    material_p = case.get('material', {})

    results = {}
    for system in TwoPhaseSystemType:
        drainage = resolve_eps_config(deck, system)
        imbibition = None
        if deck.has_hysteresis():
            imbibition = resolve_eps_config(deck, system, prefix=cfg.IMBIBITION_PREFIX)
        results[system.value] = {'drainage': drainage, 'imbibition': imbibition}
        print(f"{system.value:10s} | sat: {drainage.enable_sat_scaling} | "
              f"krw: {drainage.enable_krw_scaling} | krn: {drainage.enable_krn_scaling} | "
              f"pc: {drainage.pc_scaling_mode}")

    results['material'] = RegularizedBrooksCorey(
        BrooksCoreyParams.from_input(material_p),
        RegularizationThresholds.from_input(material_p))
    return results


def main():
    mock_case = {
        'deck': {
            'endscale': True,
            'scalecrs': 'YES',
            'hysteresis': True,
            'fields': {
                'SWL': [0.1] * 4,
                'KRW': [0.4] * 4,
                'KRWR': [0.3] * 4,
                'KRO': [0.9] * 4,
                'PCW': [3.0] * 4,
                'KRG': [0.8] * 4,
                'IKRW': [0.35] * 4,
            }
        },
        'material': {'pe': 1000.0, 'alpha': 2.0}
    }
    results = run_resolution(mock_case)
    write_config_report(results, cfg.OUTPUT_DIR)
    print("Resolution Finished.")


if __name__ == "__main__":
    print("--- Running in Test Mode with Mock Data ---")
    main()
