import pytest


@pytest.fixture
def detail_json():
    return {
        "freq_mainichi_shinbun": 1284,
        "grade": 1,
        "heisig_en": "rain",
        "jlpt": 4,
        "kanji": "雨",
        "kun_readings": ["あめ", "あま-"],
        "meanings": ["rain"],
        "name_readings": ["さめ"],
        "notes": [],
        "on_readings": ["ウ"],
        "stroke_count": 8,
        "unicode": "96e8",
        "unihan_cjk_compatibility_variant": None,
    }


@pytest.fixture
def words_json():
    return [
        {
            "meanings": [{"glosses": ["rain"]}, {"glosses": ["rainy day", "rainy weather"]}],
            "variants": [
                {"priorities": ["ichi1", "news1"], "pronounced": "あめ", "written": "雨"},
            ],
        },
        {
            "meanings": [{"glosses": ["umbrella"]}],
            "variants": [
                {"priorities": [], "pronounced": "あまがさ", "written": "雨傘"},
            ],
        },
    ]
