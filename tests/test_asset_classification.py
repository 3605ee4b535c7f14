"""
Tests for asset classification
"""
import pytest
from assetscan.models.catalog import ClassificationRule, PatternTerm
from assetscan.services.asset_classification import classify_asset


def test_classify_smoke_detector(asset_rules):
    """Test smoke detector text"""
    result = classify_asset("Apollo Smoke Detector model X1", asset_rules)

    assert result is not None
    assert result.system_type == "Fire Alarm"
    assert result.asset_type == "Smoke Detector"
    assert result.score == pytest.approx(66.666, rel=1e-3)


def test_classify_air_handling_unit(asset_rules):
    """Test a rule requiring two matched terms"""
    result = classify_asset("AHU fan section air handling", asset_rules)

    assert result.system_type == "HVAC"
    assert result.asset_type == "Air Handling Unit"
    assert result.score == pytest.approx(100.0)


def test_required_match_count_not_reached(asset_rules):
    """Test a single AHU term is not enough for the HVAC rule"""
    assert classify_asset("ahu", asset_rules) is None


def test_empty_text_no_match(asset_rules):
    """Test empty input returns no match"""
    assert classify_asset("", asset_rules) is None


def test_unrelated_text_no_match(asset_rules):
    """Test text matching no pattern"""
    assert classify_asset("quarterly invoice 2024", asset_rules) is None


def test_tie_keeps_first_rule():
    """Test equal scores keep the first rule in catalog order"""
    terms = [PatternTerm(text="pump", weight=5)]
    rules = [
        ClassificationRule(system_type="Plumbing", asset_type="Pump", patterns=terms, require_match_count=1),
        ClassificationRule(system_type="HVAC", asset_type="Pump", patterns=terms, require_match_count=1),
    ]

    result = classify_asset("pump", rules)

    assert result.system_type == "Plumbing"


def test_non_ascii_letters_dropped_before_matching():
    """Test accented input matches its ASCII-stripped pattern exactly"""
    rules = [
        ClassificationRule(
            system_type="Mechanical",
            asset_type="Motor",
            patterns=[PatternTerm(text="motr", weight=1)],
            require_match_count=1
        )
    ]

    result = classify_asset("MOTÖR", rules)

    assert result.asset_type == "Motor"
    assert result.score == pytest.approx(100.0)


def test_score_normalized_by_winning_rule():
    """Test the winner is normalized by its own max score, not another rule sharing its asset type"""
    rules = [
        ClassificationRule(
            system_type="Sys A",
            asset_type="Pump",
            patterns=[
                PatternTerm(text="pump", weight=10),
                PatternTerm(text="impeller", weight=90),
            ],
            require_match_count=1
        ),
        ClassificationRule(
            system_type="Sys B",
            asset_type="Pump",
            patterns=[
                PatternTerm(text="booster", weight=8),
                PatternTerm(text="pump", weight=8),
            ],
            require_match_count=2
        ),
    ]

    result = classify_asset("booster pump", rules)

    assert result.system_type == "Sys B"
    assert result.score == pytest.approx(100.0)


def test_zero_requirement_empty_rule_never_outscores():
    """Test an empty rule with no requirement loses to any positive score"""
    empty = ClassificationRule(system_type="Any", asset_type="Anything", patterns=[], require_match_count=0)
    positive = ClassificationRule(
        system_type="Plumbing",
        asset_type="Water Heater",
        patterns=[PatternTerm(text="boiler", weight=1)],
        require_match_count=1
    )

    assert classify_asset("boiler", [empty, positive]).asset_type == "Water Heater"
    assert classify_asset("boiler", [empty]) is None


def test_score_within_bounds(asset_rules):
    """Test normalized score stays within 0-100"""
    for text in ["smoke detector fire alarm", "smok detectr", "water heater boiler", "air handling unit ahu fan"]:
        result = classify_asset(text, asset_rules)
        assert result is not None
        assert 0 <= result.score <= 100


def test_trace_lists_every_rule(asset_rules):
    """Test the diagnostic trace covers each evaluated rule"""
    trace = []

    classify_asset("Apollo Smoke Detector", asset_rules, trace=trace)

    assert [t.asset_type for t in trace] == ["Smoke Detector", "Air Handling Unit", "Water Heater"]
    assert trace[0].match_count == 1
    assert trace[0].total_score == pytest.approx(10.0)
    assert trace[0].max_possible_score == 15
    assert trace[0].matches[0].pattern == "smoke detector"
    assert trace[1].max_possible_score == 18


def test_threshold_passed_through(asset_rules):
    """Test a strict threshold rejects misspellings"""
    assert classify_asset("smok", asset_rules, threshold=60) is not None
    assert classify_asset("smok", asset_rules, threshold=90) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
