import pytest

from pathgraph.exceptions import AlgorithmError
from pathgraph.path import all_paths, reconstruct_path

PREDS = {"A": None, "B": "A", "C": "B", "D": "C", "E": "A"}


def test_reconstruct_path_walks_back_to_source():
    assert reconstruct_path(PREDS, "A", "D") == ["A", "B", "C", "D"]
    assert reconstruct_path(PREDS, "A", "A") == ["A"]


def test_reconstruct_path_unreached_is_empty():
    assert reconstruct_path(PREDS, "A", "Q") == []


def test_reconstruct_path_detects_cycle():
    with pytest.raises(AlgorithmError):
        reconstruct_path({"A": None, "B": "C", "C": "B"}, "A", "B")


def test_all_paths_matches_single_reconstruction():
    paths = all_paths(PREDS, "A")
    assert set(paths) == set(PREDS)
    for target in PREDS:
        assert paths[target] == reconstruct_path(PREDS, "A", target)


def test_all_paths_detects_cycle():
    with pytest.raises(AlgorithmError):
        all_paths({"A": None, "B": "C", "C": "B"}, "A")
