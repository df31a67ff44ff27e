"""Tests for the indicator metadata catalogue."""

from src.ingestion.indicators import INDICATORS, IndicatorInfo, get_indicator_info


class TestGetIndicatorInfo:
    """Test catalogue lookup."""

    def test_exact_match(self):
        info = get_indicator_info("Non-Farm Payrolls")
        assert isinstance(info, IndicatorInfo)
        assert info.frequency == "Monthly (first Friday)"
        assert "USD" in info.related_assets

    def test_contained_key_match(self):
        """'Core Retail Sales m/m' picks up the 'Retail Sales m/m' entry."""
        assert get_indicator_info("Core Retail Sales m/m") is INDICATORS["Retail Sales m/m"]

    def test_match_is_one_directional(self):
        """A title shorter than every key does not match."""
        assert get_indicator_info("CPI") is None

    def test_no_match(self):
        assert get_indicator_info("UoM Consumer Sentiment (Final)") is None
        assert get_indicator_info("GDT Price Index") is None


class TestCatalogue:
    """Test catalogue contents."""

    def test_entries_complete(self):
        for title, info in INDICATORS.items():
            assert info.description, title
            assert info.why_it_matters, title
            assert info.frequency, title

    def test_central_bank_entries_have_stance_reactions(self):
        reaction = INDICATORS["FOMC Rate Decision"].typical_reaction
        assert set(reaction) == {"hawkish", "dovish"}
