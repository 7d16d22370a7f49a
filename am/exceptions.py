class AngularMomentumException(Exception):
    pass


class InvalidDenominator(AngularMomentumException, ValueError):
    pass


class ComplexPhaseError(AngularMomentumException, ValueError):
    pass


class TriangleDisallowedError(AngularMomentumException, ValueError):
    pass
