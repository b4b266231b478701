import pytest

from powerlogic import exceptions
from powerlogic.nodes import build_catalog
from powerlogic.rows import FrameRowSource
from powerlogic.types import Node


def test_build_catalog_maps_ids_to_names(nodes_df):
    nodes = build_catalog(FrameRowSource({"n": nodes_df}).rows("n"))
    assert nodes == {
        1: Node("com.apple.Music"),
        2: Node("CPU"),
        3: Node("Display"),
    }


def test_nodes_compare_by_name():
    assert Node("CPU") == Node("CPU")
    assert Node("CPU").id == "CPU"
    assert len({Node("CPU"), Node("CPU"), Node("GPU")}) == 2


def test_null_name_is_schema_error():
    with pytest.raises(exceptions.SchemaError):
        build_catalog([{"ID": 1, "Name": None}])


def test_null_id_is_schema_error():
    with pytest.raises(exceptions.SchemaError):
        build_catalog([{"ID": None, "Name": "CPU"}])
