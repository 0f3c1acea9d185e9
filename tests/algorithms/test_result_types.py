import dataclasses
import json

import pytest

from netflow.algorithms.max_flow import calc_max_flow
from netflow.algorithms.types import Augmentation, EdgeFlow


def test_result_is_frozen(single_edge):
    result = calc_max_flow(single_edge, 0, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.total_flow = 1  # type: ignore[misc]


def test_to_dict_is_json_serializable(diamond):
    result = calc_max_flow(diamond, 0, 3)
    data = result.to_dict()
    json.dumps(data)

    assert data["source"] == 0
    assert data["sink"] == 3
    assert data["total_flow"] == 5
    assert data["iterations"] == 3
    assert data["augmentations"][0] == {
        "iteration": 1,
        "path": [0, 1, 3],
        "bottleneck": 2,
        "total_flow": 2,
    }
    assert data["reachable"] == [0]
    assert data["min_cut_capacity"] == 5
    assert data["trace"] == list(result.trace)


def test_edge_flow_from_edge(single_edge):
    edge = single_edge.find_edge(0, 1)
    edge.augment(2)
    assert EdgeFlow.from_edge(edge) == EdgeFlow(0, 1, 2, 5)
    assert EdgeFlow.from_edge(edge.reverse) == EdgeFlow(1, 0, -2, 0)


def test_augmentation_to_dict_lists_path():
    step = Augmentation(iteration=2, path=(0, 4, 7), bottleneck=3, total_flow=9)
    assert step.to_dict()["path"] == [0, 4, 7]
