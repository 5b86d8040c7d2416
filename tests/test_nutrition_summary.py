import pytest

from healthlog.domain.nutrition.summary import (
    TRACKED_NUTRIENTS,
    get_deficiencies,
    get_percentage,
    percent_of_daily_values,
    summarize,
)
from healthlog.models.nutrition import NUTRIENT_FIELDS, RECOMMENDED_DAILY_VALUES, NutritionTotals
from tests.builders import make_food, make_record


def test_summarize_empty_day_is_all_zero() -> None:
    totals = summarize(make_record())
    assert totals == NutritionTotals()
    assert all(totals.value_of(n) == 0 for n in NUTRIENT_FIELDS)


def test_summarize_treats_unestimated_nutrients_as_zero() -> None:
    record = make_record(
        foods=[
            make_food("Oats", calories=300, protein=10, fiber=8),
            make_food("Milk", calories=120, protein=8, calcium=300),
            make_food("Mystery snack"),
        ]
    )
    totals = summarize(record)
    assert totals.calories == pytest.approx(420)
    assert totals.protein == pytest.approx(18)
    assert totals.fiber == pytest.approx(8)
    assert totals.calcium == pytest.approx(300)
    assert totals.iron == 0


def test_empty_day_is_deficient_in_every_tracked_nutrient_in_fixed_order() -> None:
    deficiencies = get_deficiencies(summarize(make_record()))
    assert [d.name for d in deficiencies] == [
        "Protein",
        "Fiber",
        "Vitamin C",
        "Vitamin D",
        "Calcium",
        "Iron",
        "Potassium",
    ]
    assert [d.unit for d in deficiencies] == ["g", "g", "mg", "mcg", "mg", "mg", "mg"]
    assert all(d.percentage == 0 for d in deficiencies)


def test_deficiency_uses_half_of_daily_value_as_cutoff() -> None:
    rec = RECOMMENDED_DAILY_VALUES
    totals = NutritionTotals(
        protein=rec.protein * 0.5,
        fiber=rec.fiber * 0.49,
        vitamin_c=rec.vitamin_c,
        vitamin_d=rec.vitamin_d,
        calcium=rec.calcium,
        iron=rec.iron,
        potassium=rec.potassium,
    )
    deficiencies = get_deficiencies(totals)
    assert [d.name for d in deficiencies] == ["Fiber"]
    assert deficiencies[0].recommended == rec.fiber
    assert deficiencies[0].percentage == pytest.approx(49)


def test_tracked_nutrients_table_matches_units() -> None:
    assert [n.field for n in TRACKED_NUTRIENTS] == [
        "protein",
        "fiber",
        "vitamin_c",
        "vitamin_d",
        "calcium",
        "iron",
        "potassium",
    ]


@pytest.mark.parametrize(
    ("current", "recommended", "expected"),
    [
        (25, 50, 50.0),
        (50, 50, 100.0),
        (150, 50, 200.0),
        (10, 0, 0.0),
        (0, 0, 0.0),
        (0, 90, 0.0),
    ],
)
def test_get_percentage(current: float, recommended: float, expected: float) -> None:
    assert get_percentage(current, recommended) == pytest.approx(expected)


def test_get_percentage_is_monotone_and_bounded() -> None:
    values = [get_percentage(x, 40) for x in range(0, 200, 5)]
    assert values == sorted(values)
    assert all(0 <= v <= 200 for v in values)


def test_percent_of_daily_values_covers_every_nutrient() -> None:
    totals = NutritionTotals(calories=1000, sodium=4600)
    percentages = percent_of_daily_values(totals)
    assert set(percentages) == set(NUTRIENT_FIELDS)
    assert percentages["calories"] == pytest.approx(50)
    assert percentages["sodium"] == pytest.approx(200)
    assert percentages["zinc"] == 0


def test_recommended_daily_values_are_immutable() -> None:
    with pytest.raises(Exception):
        RECOMMENDED_DAILY_VALUES.protein = 10  # type: ignore[misc]
