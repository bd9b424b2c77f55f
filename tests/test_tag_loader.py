import json

import pandas as pd
import pytest
from folksonomy.data.tag_loader import load_tag_counts, tag_counts_from_frame, tag_counts_from_records
from folksonomy.models import TagCount


def test_counts_from_records():
    records = [
        {"title": "Intro", "tags": ["python", "web"]},
        {"title": "Async", "tags": ["python", "asyncio"]},
        {"title": "Draft", "tags": []},
        {"title": "Single", "tags": "web"},
        {"title": "Untagged"},
    ]

    assert tag_counts_from_records(records) == [
        TagCount("python", 2),
        TagCount("web", 2),
        TagCount("asyncio", 1),
    ]


def test_counts_from_records_without_tags():
    assert tag_counts_from_records([{"title": "x"}]) == []


def test_counts_from_frame_sums_duplicates():
    df = pd.DataFrame({"tag": ["go", "rust", "go "], "count": [3, 1, 2]})
    assert tag_counts_from_frame(df) == [TagCount("go", 5), TagCount("rust", 1)]


@pytest.mark.parametrize("df", [
    pd.DataFrame({"tag": ["go"]}),
    pd.DataFrame({"tag": ["go"], "count": [-1]}),
    pd.DataFrame({"tag": ["go", "c"], "count": [1, None]}),
])
def test_counts_from_frame_rejects(df):
    with pytest.raises(ValueError):
        tag_counts_from_frame(df)


def test_load_csv(tmp_path):
    path = tmp_path / "tags.csv"
    path.write_text("tag,count\ngo,10\nrust,1\n", encoding="utf-8")

    assert load_tag_counts(path) == [TagCount("go", 10), TagCount("rust", 1)]


def test_load_json_counts(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text(json.dumps([{"tag": "go", "count": 10}, {"tag": "rust", "count": 1}]), encoding="utf-8")

    assert load_tag_counts(path) == [TagCount("go", 10), TagCount("rust", 1)]


def test_load_json_records(tmp_path):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps([{"tags": ["go", "rust"]}, {"tags": ["go"]}]), encoding="utf-8")

    assert load_tag_counts(path) == [TagCount("go", 2), TagCount("rust", 1)]


def test_load_json_must_be_list(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text(json.dumps({"go": 10}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_tag_counts(path)


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "tags.txt"
    path.write_text("go 10", encoding="utf-8")

    with pytest.raises(ValueError):
        load_tag_counts(path)


def test_load_csv_keeps_tags_that_look_like_missing_values(tmp_path):
    path = tmp_path / "tags.csv"
    path.write_text("tag,count\nNA,3\nnull,2\nnan,4\ngo,1\n", encoding="utf-8")

    assert load_tag_counts(path) == [
        TagCount("NA", 3),
        TagCount("null", 2),
        TagCount("nan", 4),
        TagCount("go", 1),
    ]


@pytest.mark.parametrize("content", [
    "tag,count\n,3\ngo,1\n",
    "tag,count\ngo,\n",
    "tag,count\ngo,many\n",
    "tag,count\ngo,1.7\n",
])
def test_load_csv_rejects_incomplete_rows(tmp_path, content):
    path = tmp_path / "tags.csv"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_tag_counts(path)


def test_counts_from_frame_accepts_whole_floats():
    df = pd.DataFrame({"tag": ["go"], "count": [3.0]})
    assert tag_counts_from_frame(df) == [TagCount("go", 3)]


@pytest.mark.parametrize("df", [
    pd.DataFrame({"tag": ["go"], "count": [1.7]}),
    pd.DataFrame({"tag": [None, "go"], "count": [1, 2]}),
    pd.DataFrame({"tag": ["  "], "count": [1]}),
])
def test_counts_from_frame_rejects_bad_values(df):
    with pytest.raises(ValueError):
        tag_counts_from_frame(df)


@pytest.mark.parametrize("data", [
    [{"tags": ["go"]}, "rust"],
    [{"tag": "go", "count": 1}, 5],
])
def test_load_json_items_must_be_objects(tmp_path, data):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ValueError):
        load_tag_counts(path)
