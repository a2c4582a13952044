# tests/test_counts.py
import json

from dogapi import run_demo
from dogapi.cache import CachingBreedFetcher
from dogapi.counts import REPORT_COLUMNS, build_sub_breed_report, number_of_sub_breeds
from dogapi.dog_api import DogApiBreedFetcher
from dogapi.fetcher import StaticBreedFetcher

TABLE = {"hound": ["afghan", "basset"], "akita": []}

def test_number_of_sub_breeds():
    fetcher = StaticBreedFetcher(TABLE)
    assert number_of_sub_breeds("hound", fetcher) == 2
    assert number_of_sub_breeds("akita", fetcher) == 0
    assert number_of_sub_breeds("cat", fetcher) == 0
    assert number_of_sub_breeds("cat", fetcher, not_found=-1) == -1

def test_report_rows_in_request_order():
    fetcher = CachingBreedFetcher(StaticBreedFetcher(TABLE))
    df = build_sub_breed_report(["hound", "cat", "akita", "hound"], fetcher)
    assert list(df.columns) == REPORT_COLUMNS
    assert df["breed"].tolist() == ["hound", "cat", "akita", "hound"]
    assert df["found"].tolist() == [True, False, True, True]
    assert df["sub_breed_count"].tolist() == [2, 0, 0, 2]
    assert df.loc[0, "sub_breeds"] == "afghan,basset"
    assert fetcher.calls_made == 3

def test_build_fetcher_sources(tmp_path):
    (tmp_path / "breeds_local.json").write_text(json.dumps(TABLE))
    local = run_demo.build_fetcher({"source": "local"}, root=tmp_path)
    assert isinstance(local.fetcher, StaticBreedFetcher)
    api = run_demo.build_fetcher({"source": "api", "base_url": "https://example.test"}, root=tmp_path)
    assert isinstance(api.fetcher, DogApiBreedFetcher)

def test_main_prints_counts(tmp_path, monkeypatch, capsys):
    (tmp_path / "breeds_local.json").write_text(json.dumps(TABLE))
    (tmp_path / "demo_config.json").write_text(json.dumps({"source": "local", "breeds": ["hound", "cat"]}))
    monkeypatch.setattr(run_demo, "ROOT", tmp_path)
    monkeypatch.setattr(run_demo, "LOG", tmp_path / "logs" / "dogapi.log")
    monkeypatch.setattr(run_demo, "OUT", tmp_path / "outputs")

    run_demo.main([])

    out = capsys.readouterr().out
    assert "hound has 2 sub breeds" in out
    assert "cat has 0 sub breeds" in out
    assert "Underlying calls made: 3" in out
    assert (tmp_path / "outputs" / "sub_breed_counts.csv").exists()
