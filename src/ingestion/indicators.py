"""Descriptive metadata for well-known releases.

Generators attach these fields to the events they build; the aggregator
never computes them. Lookup is by exact title first, then by the first
catalogue key contained in the title ("Core Retail Sales m/m" picks up
"Retail Sales m/m").
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IndicatorInfo:
    """Immutable descriptor for a release type."""

    description: str
    why_it_matters: str
    frequency: str
    typical_reaction: dict[str, str] = field(default_factory=dict, hash=False)
    related_assets: tuple[str, ...] = ()
    historical_volatility: str | None = None


def _surprise(higher: str, lower: str) -> dict[str, str]:
    return {"higherThanExpected": higher, "lowerThanExpected": lower}


def _stance(hawkish: str, dovish: str) -> dict[str, str]:
    return {"hawkish": hawkish, "dovish": dovish}


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

INDICATORS: dict[str, IndicatorInfo] = {
    # Employment
    "Non-Farm Payrolls": IndicatorInfo(
        description="Monthly change in US payroll employment outside the farm sector.",
        why_it_matters="The headline US labour report; it moves rate expectations more than any other data point.",
        frequency="Monthly (first Friday)",
        typical_reaction=_surprise("USD bullish, bonds bearish", "USD bearish, bonds bullish"),
        related_assets=("USD", "US stocks", "US bonds", "Gold"),
        historical_volatility="Very High",
    ),
    "Unemployment Rate": IndicatorInfo(
        description="Share of the labour force that is out of work and looking for a job.",
        why_it_matters="Central banks weigh labour slack directly when setting policy.",
        frequency="Monthly",
        typical_reaction=_surprise("Currency bearish, bonds bullish", "Currency bullish, bonds bearish"),
        related_assets=("Local currency", "Government bonds"),
        historical_volatility="High",
    ),
    "Unemployment Claims": IndicatorInfo(
        description="Weekly count of first-time filings for US unemployment insurance.",
        why_it_matters="The highest-frequency read on layoffs; turning points show up here first.",
        frequency="Weekly (Thursday)",
        typical_reaction=_surprise("USD bearish", "USD bullish"),
        related_assets=("USD", "US stocks"),
        historical_volatility="Medium",
    ),
    "JOLTS Job Openings": IndicatorInfo(
        description="Number of open positions from the Job Openings and Labor Turnover Survey.",
        why_it_matters="Gauges labour demand; a high openings-to-unemployed ratio feeds wage pressure.",
        frequency="Monthly",
        typical_reaction=_surprise("USD bullish", "USD bearish"),
        related_assets=("USD", "US stocks"),
        historical_volatility="Medium",
    ),
    "Employment Change": IndicatorInfo(
        description="Net change in the number of people employed versus the prior period.",
        why_it_matters="Direct measure of job creation that underpins consumer spending.",
        frequency="Monthly",
        typical_reaction=_surprise("Currency bullish", "Currency bearish"),
        related_assets=("Local currency", "Local stocks"),
        historical_volatility="High",
    ),
    "Claimant Count Change": IndicatorInfo(
        description="Change in the number of people claiming UK unemployment-related benefits.",
        why_it_matters="Timely UK labour signal published alongside the wage data.",
        frequency="Monthly",
        typical_reaction=_surprise("GBP bearish", "GBP bullish"),
        related_assets=("GBP", "FTSE"),
        historical_volatility="Medium",
    ),
    "Average Earnings Index 3m/y": IndicatorInfo(
        description="UK wage growth over three months compared with a year earlier.",
        why_it_matters="Wage growth is the service-inflation driver the MPC watches most closely.",
        frequency="Monthly",
        typical_reaction=_surprise("GBP bullish", "GBP bearish"),
        related_assets=("GBP", "UK Gilts"),
        historical_volatility="Medium",
    ),
    # Inflation
    "CPI m/m": IndicatorInfo(
        description="Monthly change in the consumer price index.",
        why_it_matters="Headline inflation is the variable central banks target.",
        frequency="Monthly",
        typical_reaction=_surprise("Currency bullish, bonds bearish", "Currency bearish, bonds bullish"),
        related_assets=("Local currency", "Government bonds", "Gold"),
        historical_volatility="Very High",
    ),
    "Core CPI m/m": IndicatorInfo(
        description="Monthly CPI change excluding food and energy.",
        why_it_matters="Strips out volatile components to show persistent price pressure.",
        frequency="Monthly",
        typical_reaction=_surprise("Currency bullish, bonds bearish", "Currency bearish, bonds bullish"),
        related_assets=("Local currency", "Government bonds"),
        historical_volatility="Very High",
    ),
    "CPI y/y": IndicatorInfo(
        description="Consumer prices compared with the same month a year earlier.",
        why_it_matters="The measure policy targets are written against.",
        frequency="Monthly",
        typical_reaction=_surprise("Currency bullish", "Currency bearish"),
        related_assets=("Local currency", "Government bonds"),
        historical_volatility="High",
    ),
    "CPI Flash Estimate y/y": IndicatorInfo(
        description="Eurostat's early estimate of euro-area annual inflation.",
        why_it_matters="First look at euro-area inflation ahead of the final print and ECB meetings.",
        frequency="Monthly (end of month)",
        typical_reaction=_surprise("EUR bullish", "EUR bearish"),
        related_assets=("EUR", "Bunds"),
        historical_volatility="High",
    ),
    "CPI q/q": IndicatorInfo(
        description="Quarterly change in consumer prices.",
        why_it_matters="Quarterly inflation prints drive RBA and RBNZ policy decisions.",
        frequency="Quarterly",
        typical_reaction=_surprise("Currency bullish", "Currency bearish"),
        related_assets=("Local currency", "Government bonds"),
        historical_volatility="Very High",
    ),
    "PPI m/m": IndicatorInfo(
        description="Monthly change in prices received by domestic producers.",
        why_it_matters="Pipeline inflation that can pass through to consumer prices.",
        frequency="Monthly",
        typical_reaction=_surprise("USD bullish", "USD bearish"),
        related_assets=("USD", "US bonds"),
        historical_volatility="Medium",
    ),
    # Central banks
    "FOMC Rate Decision": IndicatorInfo(
        description="Federal Open Market Committee decision on the federal funds target range.",
        why_it_matters="Sets the price of dollar funding worldwide.",
        frequency="8 times per year",
        typical_reaction=_stance("USD bullish, stocks bearish", "USD bearish, stocks bullish"),
        related_assets=("USD", "US stocks", "US bonds", "Gold"),
        historical_volatility="Very High",
    ),
    "Fed Chair Press Conference": IndicatorInfo(
        description="Press conference held by the Fed Chair after each FOMC decision.",
        why_it_matters="Guidance on the path of rates often moves markets more than the decision.",
        frequency="8 times per year",
        typical_reaction=_stance("USD bullish", "USD bearish"),
        related_assets=("USD", "US stocks", "US bonds"),
        historical_volatility="Very High",
    ),
    "ECB Interest Rate Decision": IndicatorInfo(
        description="ECB Governing Council decision on its key interest rates.",
        why_it_matters="Sets euro-area policy rates and balance-sheet guidance.",
        frequency="8 times per year",
        typical_reaction=_stance("EUR bullish", "EUR bearish"),
        related_assets=("EUR", "Euro stocks", "Bunds"),
        historical_volatility="Very High",
    ),
    "BoE Interest Rate Decision": IndicatorInfo(
        description="Bank of England MPC decision on Bank Rate, with the vote split.",
        why_it_matters="The vote split signals how close the committee is to its next move.",
        frequency="8 times per year",
        typical_reaction=_stance("GBP bullish", "GBP bearish"),
        related_assets=("GBP", "FTSE", "UK Gilts"),
        historical_volatility="Very High",
    ),
    "RBA Interest Rate Decision": IndicatorInfo(
        description="Reserve Bank of Australia decision on the cash rate target.",
        why_it_matters="Main driver of AUD rate differentials.",
        frequency="8 times per year",
        typical_reaction=_stance("AUD bullish", "AUD bearish"),
        related_assets=("AUD", "ASX 200"),
        historical_volatility="High",
    ),
    "BoC Interest Rate Decision": IndicatorInfo(
        description="Bank of Canada decision on the overnight rate target.",
        why_it_matters="Main driver of CAD rate differentials against USD.",
        frequency="8 times per year",
        typical_reaction=_stance("CAD bullish", "CAD bearish"),
        related_assets=("CAD", "TSX"),
        historical_volatility="High",
    ),
    "RBNZ Interest Rate Decision": IndicatorInfo(
        description="Reserve Bank of New Zealand decision on the Official Cash Rate.",
        why_it_matters="Main driver of NZD rate differentials.",
        frequency="7 times per year",
        typical_reaction=_stance("NZD bullish", "NZD bearish"),
        related_assets=("NZD",),
        historical_volatility="High",
    ),
    "Fed Beige Book": IndicatorInfo(
        description="Summary of economic conditions across the 12 Federal Reserve districts, built from anecdotal reports.",
        why_it_matters="Published two weeks before each FOMC meeting; colours expectations for the decision.",
        frequency="8 times per year (2 weeks before FOMC)",
        typical_reaction=_stance("USD mildly bullish", "USD mildly bearish"),
        related_assets=("USD", "US bonds"),
        historical_volatility="Low",
    ),
    # Growth, activity and housing
    "GDP q/q": IndicatorInfo(
        description="Quarterly change in inflation-adjusted gross domestic product.",
        why_it_matters="The broadest measure of economic activity.",
        frequency="Quarterly",
        typical_reaction=_surprise("Currency bullish", "Currency bearish"),
        related_assets=("Local currency", "Local stocks"),
        historical_volatility="High",
    ),
    "Retail Sales m/m": IndicatorInfo(
        description="Monthly change in the value of retail sales.",
        why_it_matters="Consumer spending is the largest component of demand in most economies.",
        frequency="Monthly",
        typical_reaction=_surprise("Currency bullish", "Currency bearish"),
        related_assets=("Local currency", "Retail stocks"),
        historical_volatility="High",
    ),
    "ISM Manufacturing PMI": IndicatorInfo(
        description="Diffusion index of US purchasing managers; 50 separates expansion from contraction.",
        why_it_matters="The earliest monthly read on the US factory sector.",
        frequency="Monthly (first business day)",
        typical_reaction=_surprise("USD bullish", "USD bearish"),
        related_assets=("USD", "US stocks"),
        historical_volatility="High",
    ),
    "ISM Services PMI": IndicatorInfo(
        description="Diffusion index covering US non-manufacturing businesses.",
        why_it_matters="Services make up the bulk of US output.",
        frequency="Monthly (third business day)",
        typical_reaction=_surprise("USD bullish", "USD bearish"),
        related_assets=("USD", "US stocks"),
        historical_volatility="High",
    ),
    "Housing Starts": IndicatorInfo(
        description="Number of new residential construction projects begun in the month.",
        why_it_matters="Housing is rate-sensitive and leads the wider cycle.",
        frequency="Monthly",
        typical_reaction=_surprise("USD bullish", "USD bearish"),
        related_assets=("USD", "Homebuilder stocks"),
        historical_volatility="Medium",
    ),
    "UoM Consumer Sentiment (Preliminary)": IndicatorInfo(
        description="University of Michigan survey of consumer attitudes, early-month reading.",
        why_it_matters="Confidence leads spending; the survey also carries inflation expectations.",
        frequency="Monthly (second Friday)",
        typical_reaction=_surprise("USD bullish", "USD bearish"),
        related_assets=("USD", "US stocks"),
        historical_volatility="Medium",
    ),
    "10-Year Note Auction": IndicatorInfo(
        description="Treasury auction of new 10-year notes.",
        why_it_matters="Demand at the benchmark tenor feeds straight into long yields.",
        frequency="Monthly",
        typical_reaction={"strongDemand": "Yields lower", "weakDemand": "Yields higher"},
        related_assets=("US 10Y yield", "USD"),
        historical_volatility="Medium",
    ),
    "30-Year Bond Auction": IndicatorInfo(
        description="Treasury auction of new 30-year bonds.",
        why_it_matters="Long-end demand is a read on term premium.",
        frequency="Monthly",
        typical_reaction={"strongDemand": "Yields lower", "weakDemand": "Yields higher"},
        related_assets=("US 30Y yield", "USD"),
        historical_volatility="Medium",
    ),
    # Energy
    "Crude Oil Inventories": IndicatorInfo(
        description="Weekly change in US commercial crude oil stocks from the EIA.",
        why_it_matters="The main weekly supply read for oil; feeds into inflation expectations and commodity currencies.",
        frequency="Weekly (Wednesday)",
        typical_reaction={"largerBuild": "Oil bearish, CAD bearish", "largerDraw": "Oil bullish, CAD bullish"},
        related_assets=("WTI crude", "Brent crude", "CAD"),
        historical_volatility="Medium",
    ),
    "Natural Gas Storage": IndicatorInfo(
        description="Weekly change in US working natural gas in underground storage.",
        why_it_matters="Sets the supply balance behind natural gas prices, most of all in heating season.",
        frequency="Weekly (Thursday)",
        typical_reaction={"largerBuild": "Natural gas bearish", "largerDraw": "Natural gas bullish"},
        related_assets=("Natural gas",),
        historical_volatility="Low",
    ),
}


def get_indicator_info(title: str) -> IndicatorInfo | None:
    """Look up metadata by exact title, then by a catalogue key contained in it.

    Returns None when nothing matches; events then carry no descriptive fields.

    Example:
        >>> get_indicator_info("Non-Farm Payrolls").frequency
        'Monthly (first Friday)'
        >>> get_indicator_info("UoM Consumer Sentiment (Final)") is None
        True
    """
    info = INDICATORS.get(title)
    if info is not None:
        return info

    for key, candidate in INDICATORS.items():
        if key in title:
            return candidate
    return None
