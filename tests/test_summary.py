import pytest
import pandas as pd
import powerlogic as pl


def test_events_frame(tables):
    doc = pl.ingest.from_frames(tables)
    df = pl.summary.events_frame(doc)
    assert list(df.columns) == pl.summary.EVENT_COLS
    assert len(df) == 3
    assert df["start"].dt.tz is not None
    assert df["start"].iloc[0] == pd.Timestamp(155.0, unit="s", tz="UTC")
    assert df["energy"].sum() == 70 + 30 + 40


def test_battery_frame(tables):
    doc = pl.ingest.from_frames(tables)
    df = pl.summary.battery_frame(doc)
    assert df.index.is_monotonic_increasing
    assert df.index.tz is not None
    assert df["charging"].tolist() == [True, False]


def test_energy_by_node_and_root(tables):
    doc = pl.ingest.from_frames(tables)
    by_node = pl.summary.energy_by(doc, by="node")
    assert by_node.to_dict() == {"com.apple.Music": 100, "Display": 40}
    assert by_node.index[0] == "com.apple.Music"

    by_root = pl.summary.energy_by(doc, by="root_node")
    assert by_root.to_dict() == {"CPU": 100, "Display": 40}


def test_energy_by_rejects_unknown_grouping(tables):
    doc = pl.ingest.from_frames(tables)
    with pytest.raises(ValueError):
        pl.summary.energy_by(doc, by="app")  # type: ignore[arg-type]


def test_filter_events(tables):
    doc = pl.ingest.from_frames(tables)
    assert [e.entry_id for e in pl.summary.filter_events(doc, node="com.apple.Music")] == [1, 2]
    assert [e.entry_id for e in pl.summary.filter_events(doc, root_node="Display")] == [5]
    assert pl.summary.filter_events(doc, node="com.apple.Music", root_node="Display") == []
    assert len(pl.summary.filter_events(doc)) == 3
