# brooks_corey.py
from dataclasses import dataclass
import numpy as np

import config as cfg


class BrooksCoreyParams:
    """Parameters of the Brooks-Corey Sw-pC relation."""
    def __init__(self, pe=cfg.BC_PE, alpha=cfg.BC_ALPHA):
        self.pe = pe        # entry pressure
        self.alpha = alpha  # shape parameter (lambda)

    @classmethod
    def from_input(cls, input):
        return cls(pe=input.get('pe', cfg.BC_PE),
                   alpha=input.get('alpha', cfg.BC_ALPHA))

    def __repr__(self):
        return f"<BrooksCoreyParams pe={self.pe} alpha={self.alpha}>"


@dataclass(frozen=True)
class RegularizationThresholds:
    # Sw below which the capillary pressure is regularized
    pc_low_sw: float = cfg.PC_LOW_SW
    # Sw below which the non-wetting relperm is regularized
    krn_low_sw: float = cfg.KRN_LOW_SW
    # Sw above which the wetting relperm is regularized
    krw_high_sw: float = cfg.KRW_HIGH_SW

    @classmethod
    def from_input(cls, input):
        return cls(pc_low_sw=input.get('pc_low_sw', cfg.PC_LOW_SW),
                   krn_low_sw=input.get('krn_low_sw', cfg.KRN_LOW_SW),
                   krw_high_sw=input.get('krw_high_sw', cfg.KRW_HIGH_SW))


class RegularizedBrooksCorey:
    """
    Brooks-Corey parameters combined with the thresholds policy picked by
    the caller. Without a policy the default thresholds are used.
    """
    def __init__(self, params, thresholds=None):
        self.params = params
        self.thresholds = thresholds if thresholds is not None else RegularizationThresholds()

    @property
    def pe(self):
        return self.params.pe

    @property
    def alpha(self):
        return self.params.alpha

    @property
    def pc_low_sw(self):
        return self.thresholds.pc_low_sw

    @property
    def krn_low_sw(self):
        return self.thresholds.krn_low_sw

    @property
    def krw_high_sw(self):
        return self.thresholds.krw_high_sw

    def regularized_regions(self, sw):
        """
        Boolean masks telling where each quantity falls into its
        regularized region.

        Args:
            sw: scalar or array of wetting phase saturations.
        """
        sw = np.asarray(sw, dtype=float)
        return {
            'pc': sw < self.pc_low_sw,
            'krn': sw < self.krn_low_sw,
            'krw': sw > self.krw_high_sw,
        }
