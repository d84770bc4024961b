"""Long pricing, solvency and the max long solver."""

from .max_long import DEFAULT_MAX_ITERATIONS, get_max_long, max_long_estimate
from .pricing import (
    calculate_long_amount,
    get_long_amount,
    long_amount_derivative,
    long_curve_fee,
    long_governance_fee,
    spot_price_after_long,
)
from .solvency import checkpoint_exposure_credit, get_solvency, solvency_after_long, solvency_after_long_derivative
