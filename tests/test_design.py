import numpy as np

from eeg_sim.design.designs import RepeatDesign, SingleSubjectDesign, shuffle_events


def test_single_subject_full_factorial():
    design = SingleSubjectDesign(conditions={"b": [1, 2, 3], "a": ["x", "y"]})
    events = design.generate_events(np.random.default_rng(0))

    assert design.size() == 6
    assert list(events.columns) == ["a", "b"]
    assert len(events) == 6
    assert events.iloc[0].tolist() == ["x", 1]
    assert events.iloc[-1].tolist() == ["y", 3]


def test_level_order_is_kept():
    design = SingleSubjectDesign(conditions={"stimulus_type": ["natural", "artificial"]})
    events = design.generate_events(np.random.default_rng(0))
    assert events["stimulus_type"].tolist() == ["natural", "artificial"]


def test_repeat_design():
    design = RepeatDesign(SingleSubjectDesign(conditions={"cond": ["A", "B"]}), 3)
    events = design.generate_events(np.random.default_rng(0))
    assert design.size() == 6
    assert events["cond"].tolist() == ["A", "B"] * 3


def test_zero_repeats_keep_columns():
    design = RepeatDesign(SingleSubjectDesign(conditions={"cond": ["A", "B"]}), 0)
    events = design.generate_events(np.random.default_rng(0))
    assert len(events) == 0
    assert list(events.columns) == ["cond"]


def test_shuffled_order_is_reproducible():
    design = SingleSubjectDesign(conditions={"n": list(range(20))}, event_order_function=shuffle_events)
    a = design.generate_events(np.random.default_rng(5))
    b = design.generate_events(np.random.default_rng(5))

    assert a["n"].tolist() == b["n"].tolist()
    assert sorted(a["n"].tolist()) == list(range(20))
    assert list(a.index) == list(range(20))
