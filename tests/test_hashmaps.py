import pytest

from exerciser.lessons.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    fill_fruit_basket,
    fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_two_bananas_given():
    assert fruit_basket()["banana"] == 2


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5
    assert set(basket) == set(Fruit)


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_missing_fruits_added_once():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.BANANA] == 1
    assert basket[Fruit.PINEAPPLE] == 1


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    assert build_scores_table(RESULTS)["Spain"] == Team(goals_scored=0, goals_conceded=2)


def test_total_scored_equals_total_conceded():
    teams = build_scores_table(RESULTS).values()
    assert sum(t.goals_scored for t in teams) == sum(t.goals_conceded for t in teams)


def test_empty_results_give_empty_table():
    assert build_scores_table("") == {}


@pytest.mark.parametrize("line", ["England,France,4", "England,France,four,2", "England,France,4,-2", "\n"])
def test_malformed_lines_are_rejected(line):
    with pytest.raises(ValueError):
        build_scores_table(line if line.strip() else "England,France,4,2\n\nFrance,Italy,3,1\n")