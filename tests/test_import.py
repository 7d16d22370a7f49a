import numpy as np

import am
from am import halfint


def test_package_exposes_limits():
    assert am.LIMITS is halfint.LIMITS is am.HalfInt.limits
    assert am.LIMITS.min.twice_value == np.iinfo(np.int32).min
    assert am.LIMITS.max.twice_value == np.iinfo(np.int32).max
    assert am.LIMITS.is_bounded
