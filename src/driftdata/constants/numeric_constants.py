ONE_MILLION = 1_000_000
ONE_BILLION = 1_000_000_000
TEN_THOUSAND = 10_000

PRICE_PRECISION = ONE_MILLION
QUOTE_PRECISION = ONE_MILLION
BASE_PRECISION = ONE_BILLION
SPOT_BALANCE_PRECISION = ONE_BILLION
SPOT_CUMULATIVE_INTEREST_PRECISION = 10_000_000_000
SPOT_WEIGHT_PRECISION = TEN_THOUSAND
SPOT_RATE_PRECISION = ONE_MILLION
SPOT_UTILIZATION_PRECISION = ONE_MILLION
MARGIN_PRECISION = TEN_THOUSAND
PEG_PRECISION = ONE_MILLION
AMM_RESERVE_PRECISION = ONE_BILLION
LIQUIDATION_FEE_PRECISION = ONE_MILLION
