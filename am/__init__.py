from .version import __version__, version, version_info

from .halfint import (
    HalfInt,
    LIMITS,
    hi,
    parse,
    twice_value,
    is_integer,
    ceil,
    floor,
    hat,
    hat2,
    parity_sign,
    parity_sign2,
    phase,
)
from .coupling import (
    AngularMomentumRange,
    dim,
    allowed_triangle,
    product_angular_momenta,
    product_angular_momentum_range,
    angular_momentum_range_intersection,
)
from .wigner import (
    wigner3j,
    clebsch_gordan,
    wigner6j,
    unitary6j,
    unitary6jz,
    racah_reduction_factor_first_system,
    wigner9j,
    unitary9j,
    wigner3j2,
    clebsch_gordan2,
    wigner6j2,
    unitary6j2,
    unitary6jz2,
    wigner9j2,
    unitary9j2,
)

from . import config, exceptions, fmt, racah, rme
