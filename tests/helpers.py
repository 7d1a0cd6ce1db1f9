import json
from typing import Optional

from driftdata.name import encode_name

USDC_ORACLE = "9VCioxmni2gDLv11qufWzT3RDERhQE4iY5Gf7NTfYyAV"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
SOL_ORACLE = "3m6i4RFWEDw2Ft4tFHPJtYgmpPe21k56M3FHeWYrgGBz"
SOL_MINT = "So11111111111111111111111111111111111111112"
BTC_ORACLE = "35MbvS1Juz2wf7GsyHrkCw8yfKciRLxVpEhfZDZFrB4R"


def historical_oracle_data(price: str) -> dict:
    return {
        "lastOraclePrice": price,
        "lastOracleConf": "64",
        "lastOracleDelay": "-02",
        "lastOraclePriceTwap": price,
        "lastOraclePriceTwap5Min": price,
        "lastOraclePriceTwapTs": "6553f100",
    }


def spot_account(
    symbol: str,
    oracle: str = USDC_ORACLE,
    mint: str = USDC_MINT,
    price: str = "0f4240",
    decimals: int = 6,
    oracle_source: str = "pythStableCoinPull",
    asset_tier: str = "collateral",
) -> dict:
    return {
        "oracle": oracle,
        "mint": mint,
        "name": encode_name(symbol),
        "historicalOracleData": historical_oracle_data(price),
        "depositBalance": "2386f26fc10000",
        "borrowBalance": "00",
        "cumulativeDepositInterest": "02540be400",
        "cumulativeBorrowInterest": "02540be400",
        "orderStepSize": "989680",
        "orderTickSize": "64",
        "minOrderSize": "989680",
        "maxTokenDeposits": "00",
        "initialAssetWeight": 8000,
        "maintenanceAssetWeight": 9000,
        "initialLiabilityWeight": 12000,
        "maintenanceLiabilityWeight": 11000,
        "imfFactor": 0,
        "liquidatorFee": 50000,
        "ifLiquidationFee": 10000,
        "optimalUtilization": 800000,
        "optimalBorrowRate": 50000,
        "maxBorrowRate": 1000000,
        "decimals": decimals,
        "ordersEnabled": True,
        "oracleSource": {oracle_source: {}},
        "status": {"active": {}},
        "assetTier": {asset_tier: {}},
    }


def perp_account(
    symbol: str,
    oracle: str = SOL_ORACLE,
    price: str = "08f0d180",
    contract_tier: str = "a",
    last_funding_rate: str = "-03e8",
) -> dict:
    return {
        "amm": {
            "oracle": oracle,
            "historicalOracleData": historical_oracle_data(price),
            "baseAssetReserve": "0de0b6b3a7640000",
            "quoteAssetReserve": "0de0b6b3a7640000",
            "sqrtK": "0de0b6b3a7640000",
            "pegMultiplier": price,
            "orderStepSize": "989680",
            "orderTickSize": "64",
            "minOrderSize": "989680",
            "fundingPeriod": "0e10",
            "lastFundingRate": last_funding_rate,
            "last24HAvgFundingRate": "01f4",
            "lastMarkPriceTwap": price,
            "lastMarkPriceTwap5Min": price,
            "volume24H": "2386f26fc10000",
            "baseSpread": 250,
            "maxSpread": 20000,
            "oracleSource": {"pythLazer": {}},
        },
        "name": encode_name(symbol),
        "expiryTs": "00",
        "expiryPrice": "00",
        "imfFactor": 0,
        "unrealizedPnlImfFactor": 0,
        "liquidatorFee": 10000,
        "ifLiquidationFee": 10000,
        "marginRatioInitial": 1000,
        "marginRatioMaintenance": 500,
        "status": {"active": {}},
        "contractType": {"perpetual": {}},
        "contractTier": {contract_tier: {}},
        "quoteSpotMarketIndex": 0,
        "highLeverageMarginRatioInitial": 0,
        "highLeverageMarginRatioMaintenance": 0,
    }


def bundle(*accounts: dict, public_keys: Optional[list[str]] = None) -> str:
    """Serialize accounts the way the dumper does, one wrapper per account."""
    wrappers = []
    for i, account in enumerate(accounts):
        wrapper = {"account": account}
        if public_keys is not None:
            wrapper["publicKey"] = public_keys[i]
        wrappers.append(wrapper)
    return json.dumps(wrappers, indent=2)


class StubAccountInfo:
    def __init__(self, data: bytes):
        self.data = data


class StubResponse:
    def __init__(self, value):
        self.value = value


class StubConnection:
    """Stands in for `AsyncClient`, serving account data from a dict."""

    def __init__(self, accounts: dict):
        self.accounts = accounts
        self.requested = []

    async def get_account_info(self, pubkey):
        self.requested.append(pubkey)
        data = self.accounts.get(pubkey)
        return StubResponse(StubAccountInfo(data) if data is not None else None)
