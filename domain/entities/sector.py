"""Market sectors and the symbol universe fetched for each."""
from enum import Enum
from typing import Tuple


class MarketSector(Enum):
    TOP_PICKS = "Top 5 Picks"
    TECHNOLOGY = "Technology"
    HEALTHCARE = "Healthcare"
    FINANCIALS = "Financials"
    CONSUMER_DISCRETIONARY = "Consumer Discretionary"
    CONSUMER_STAPLES = "Consumer Staples"
    INDUSTRIALS = "Industrials"
    ENERGY = "Energy"
    MATERIALS = "Materials"
    UTILITIES = "Utilities"
    REAL_ESTATE = "Real Estate"

    @property
    def is_top_picks(self) -> bool:
        return self is MarketSector.TOP_PICKS

    @property
    def symbols(self) -> Tuple[str, ...]:
        return SECTOR_SYMBOLS[self]


SECTOR_SYMBOLS = {
    # Large caps across sectors, narrowed to five by the top-picks ranking
    MarketSector.TOP_PICKS: (
        "AAPL", "MSFT", "GOOGL", "AMZN", "META", "NVDA", "AMD", "TSLA", "JPM", "V",
        "JNJ", "PG", "XOM", "BAC", "DIS", "NFLX", "ADBE", "CSCO", "INTC", "CRM"),
    MarketSector.TECHNOLOGY: (
        "AAPL", "MSFT", "GOOGL", "META", "NVDA", "ADBE", "CRM", "INTC", "AMD", "CSCO",
        "ORCL", "AVGO", "ACN", "IBM", "NOW", "QCOM", "ADI", "AMAT", "MU", "PYPL"),
    MarketSector.HEALTHCARE: (
        "JNJ", "UNH", "PFE", "ABT", "TMO", "MRK", "DHR", "BMY", "ABBV", "LLY",
        "AMGN", "CVS", "MDT", "ISRG", "GILD", "VRTX", "ZTS", "BSX", "BDX", "HUM"),
    MarketSector.FINANCIALS: (
        "JPM", "BAC", "WFC", "C", "GS", "MS", "BLK", "SCHW", "AXP", "USB",
        "PNC", "TFC", "COF", "BK", "SPGI", "CME", "ICE", "CB", "MMC", "AON"),
    MarketSector.CONSUMER_DISCRETIONARY: (
        "AMZN", "TSLA", "HD", "MCD", "NKE", "SBUX", "TGT", "LOW", "BKNG", "MAR",
        "F", "GM", "ROST", "TJX", "YUM", "DPZ", "EBAY", "BBY", "DRI", "CMG"),
    MarketSector.CONSUMER_STAPLES: (
        "PG", "KO", "PEP", "WMT", "COST", "PM", "MO", "EL", "CL", "KMB",
        "GIS", "K", "SYY", "STZ", "KHC", "HSY", "TSN", "CAG", "CLX", "CHD"),
    MarketSector.INDUSTRIALS: (
        "HON", "UPS", "BA", "CAT", "DE", "LMT", "RTX", "UNP", "MMM", "GE",
        "EMR", "ETN", "NSC", "CSX", "WM", "ITW", "FDX", "PH", "ROK", "CMI"),
    MarketSector.ENERGY: (
        "XOM", "CVX", "COP", "SLB", "EOG", "MPC", "PSX", "VLO", "PXD", "OXY",
        "KMI", "WMB", "HAL", "DVN", "BKR", "HES", "OKE", "CVI", "MRO", "APA"),
    MarketSector.MATERIALS: (
        "LIN", "APD", "ECL", "SHW", "DD", "NEM", "FCX", "DOW", "NUE", "VMC",
        "MLM", "CF", "ALB", "FMC", "MOS", "PPG", "EMN", "IFF", "CE", "AVY"),
    MarketSector.UTILITIES: (
        "NEE", "DUK", "SO", "D", "AEP", "SRE", "EXC", "XEL", "PCG", "WEC",
        "ES", "ED", "ETR", "PEG", "DTE", "FE", "AEE", "CMS", "CNP", "EIX"),
    MarketSector.REAL_ESTATE: (
        "PLD", "AMT", "CCI", "EQIX", "PSA", "O", "WELL", "DLR", "AVB", "EQR",
        "SPG", "VICI", "WY", "ARE", "VTR", "BXP", "UDR", "IRM", "HST", "KIM"),
}
