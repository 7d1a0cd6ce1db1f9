from dataclasses import dataclass
from typing import Annotated, Literal, Optional

from borsh_construct.enum import _rust_enum
from solders.pubkey import Pubkey
from sumtypes import constructor

from driftdata.errors import InvalidContextError
from driftdata.name import MAX_LENGTH, decode_name

DriftEnv = Literal["devnet", "mainnet"]

# fixed size, space padded
NameBuffer = Annotated[list[int], MAX_LENGTH]


def is_variant(enum, type: str) -> bool:
    return type == enum.__class__.__name__


@_rust_enum
class Context:
    DevNet = constructor()
    MainNet = constructor()


def context_from_env(env: str) -> Context:
    if env == "devnet":
        return Context.DevNet()  # type: ignore
    if env == "mainnet":
        return Context.MainNet()  # type: ignore
    raise InvalidContextError(f"unknown drift env: {env}")


def context_to_env(context: Context) -> DriftEnv:
    if is_variant(context, "DevNet"):
        return "devnet"
    if is_variant(context, "MainNet"):
        return "mainnet"
    raise InvalidContextError(f"unknown context: {context}")


@_rust_enum
class OracleSource:
    Pyth = constructor()
    Switchboard = constructor()
    QuoteAsset = constructor()
    Pyth1K = constructor()
    Pyth1M = constructor()
    PythStableCoin = constructor()
    Prelaunch = constructor()
    PythPull = constructor()
    Pyth1KPull = constructor()
    Pyth1MPull = constructor()
    PythStableCoinPull = constructor()
    SwitchboardOnDemand = constructor()
    PythLazer = constructor()
    PythLazer1K = constructor()
    PythLazer1M = constructor()
    PythLazerStableCoin = constructor()


@_rust_enum
class MarketStatus:
    Initialized = constructor()
    Active = constructor()
    FundingPaused = constructor()
    AmmPaused = constructor()
    FillPaused = constructor()
    WithdrawPaused = constructor()
    ReduceOnly = constructor()
    Settlement = constructor()
    Delisted = constructor()


@_rust_enum
class ContractType:
    Perpetual = constructor()
    Future = constructor()
    Prediction = constructor()


@_rust_enum
class ContractTier:
    A = constructor()
    B = constructor()
    C = constructor()
    Speculative = constructor()
    HighlySpeculative = constructor()
    Isolated = constructor()


@_rust_enum
class AssetTier:
    Collateral = constructor()
    Protected = constructor()
    Cross = constructor()
    Isolated = constructor()
    Unlisted = constructor()


ENUM_TYPES = (
    OracleSource,
    MarketStatus,
    ContractType,
    ContractTier,
    AssetTier,
)


@dataclass
class HistoricalOracleData:
    last_oracle_price: int
    last_oracle_conf: int
    last_oracle_delay: int
    last_oracle_price_twap: int
    last_oracle_price_twap5min: int
    last_oracle_price_twap_ts: int


@dataclass
class AMM:
    oracle: Pubkey
    historical_oracle_data: HistoricalOracleData
    base_asset_reserve: int
    quote_asset_reserve: int
    sqrt_k: int
    peg_multiplier: int
    order_step_size: int
    order_tick_size: int
    min_order_size: int
    funding_period: int
    last_funding_rate: int
    last24h_avg_funding_rate: int
    last_mark_price_twap: int
    last_mark_price_twap5min: int
    volume24h: int
    base_spread: int
    max_spread: int
    oracle_source: OracleSource


@dataclass
class SpotMarketAccount:
    oracle: Pubkey
    mint: Pubkey
    name: NameBuffer
    historical_oracle_data: HistoricalOracleData
    deposit_balance: int
    borrow_balance: int
    cumulative_deposit_interest: int
    cumulative_borrow_interest: int
    order_step_size: int
    order_tick_size: int
    min_order_size: int
    max_token_deposits: int
    initial_asset_weight: int
    maintenance_asset_weight: int
    initial_liability_weight: int
    maintenance_liability_weight: int
    imf_factor: int
    liquidator_fee: int
    if_liquidation_fee: int
    optimal_utilization: int
    optimal_borrow_rate: int
    max_borrow_rate: int
    decimals: int
    orders_enabled: bool
    oracle_source: OracleSource
    status: MarketStatus
    asset_tier: AssetTier
    market_index: int
    pubkey: Optional[Pubkey] = None

    @property
    def market_type(self) -> str:
        return "spot"

    @property
    def symbol(self) -> str:
        return decode_name(self.name)


@dataclass
class PerpMarketAccount:
    amm: AMM
    name: NameBuffer
    expiry_ts: int
    expiry_price: int
    imf_factor: int
    unrealized_pnl_imf_factor: int
    liquidator_fee: int
    if_liquidation_fee: int
    margin_ratio_initial: int
    margin_ratio_maintenance: int
    status: MarketStatus
    contract_type: ContractType
    contract_tier: ContractTier
    quote_spot_market_index: int
    high_leverage_margin_ratio_initial: int
    high_leverage_margin_ratio_maintenance: int
    market_index: int
    pubkey: Optional[Pubkey] = None

    @property
    def market_type(self) -> str:
        return "perp"

    @property
    def symbol(self) -> str:
        return decode_name(self.name)
