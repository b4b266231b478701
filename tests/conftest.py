import pandas as pd
import pytest

from powerlogic import canon


@pytest.fixture
def nodes_df():
    return pd.DataFrame({"ID": [1, 2, 3], "Name": ["com.apple.Music", "CPU", "Display"]})


@pytest.fixture
def offsets_df():
    return pd.DataFrame({"timestamp": [200.0, 100.0], "system": [10.0, 5.0]})


@pytest.fixture
def events_df():
    # 1: root, 2: child of 1, 3: dummy placeholder, 4: zero-length, 5: second root
    return pd.DataFrame(
        {
            "ID": [1, 2, 3, 4, 5],
            "NodeID": [1, 1, 1, 2, 3],
            "RootNodeID": [2, 2, 2, 2, 3],
            "ParentEntryID": [None, 1, None, None, None],
            "timestamp": [150.0, 150.0, canon.DISTANT_PAST, 250.0, 250.0],
            "StartOffset": [0, 0, 0, 500, 0],
            "EndOffset": [2000, 1000, 1000, 500, 4000],
            "Energy": [100, 25, 999, 7, 40],
            "CorrectionEnergy": [0, 5, 0, 0, 0],
        }
    )


@pytest.fixture
def battery_df():
    return pd.DataFrame(
        {"timestamp": [250.0, 150.0], "Level": [0.8, 0.5], "ExternalConnected": [0, 1]}
    )


@pytest.fixture
def tables(nodes_df, offsets_df, events_df, battery_df):
    return {
        canon.NODES_TABLE: nodes_df,
        canon.TIME_OFFSET_TABLE: offsets_df,
        canon.ENERGY_EVENTS_TABLE: events_df,
        canon.BATTERY_TABLE: battery_df,
    }
