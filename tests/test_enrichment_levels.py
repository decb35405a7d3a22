import pytest

from xmlprompter.prompting.enrichment_levels import (
    ENRICHMENT_INSTRUCTIONS,
    derive_sampling,
    generate_enrichment_instruction,
    get_plan_cap,
)


def test_table_covers_every_multiple_of_five():
    assert sorted(ENRICHMENT_INSTRUCTIONS) == list(range(0, 101, 5))
    assert len(set(ENRICHMENT_INSTRUCTIONS.values())) == 21


@pytest.mark.parametrize(
    "level, expected_key",
    [
        (52, 50),
        (53, 55),
        (52.5, 50),
        (2.5, 0),
        (97.5, 95),
        (0, 0),
        (100, 100),
        (-20, 0),
        (140, 100),
    ],
)
def test_nearest_key(level, expected_key):
    assert generate_enrichment_instruction(level) == ENRICHMENT_INSTRUCTIONS[expected_key]


def test_default_level():
    assert generate_enrichment_instruction() == ENRICHMENT_INSTRUCTIONS[50]
    assert generate_enrichment_instruction(None) == ENRICHMENT_INSTRUCTIONS[50]


def test_plan_cap():
    assert get_plan_cap("pro") == 2000
    assert get_plan_cap("enterprise") == 2000
    assert get_plan_cap("free") == 800
    assert get_plan_cap(None) == 800


def test_sampling_at_maximum_level():
    assert derive_sampling(100, 2000) == {
        "temperature": pytest.approx(1.1),
        "top_p": pytest.approx(1.0),
        "presence_penalty": pytest.approx(1.0),
        "frequency_penalty": pytest.approx(0.0),
        "max_tokens": 2000,
    }


def test_sampling_at_minimum_level():
    sampling = derive_sampling(0, 800)

    assert sampling["temperature"] == 0
    assert sampling["top_p"] == pytest.approx(0.1)
    assert sampling["presence_penalty"] == pytest.approx(-0.6)
    assert sampling["frequency_penalty"] == pytest.approx(0.4)
    assert sampling["max_tokens"] == 64


def test_sampling_clamps_level():
    assert derive_sampling(250, 800) == derive_sampling(100, 800)
    assert derive_sampling(-5, 800) == derive_sampling(0, 800)


def test_sampling_midpoint():
    sampling = derive_sampling(50, 800)

    assert sampling["temperature"] == pytest.approx(0.55)
    assert sampling["top_p"] == pytest.approx(0.55)
    assert sampling["presence_penalty"] == pytest.approx(0.2)
    assert sampling["frequency_penalty"] == pytest.approx(0.2)
    assert sampling["max_tokens"] == 432
