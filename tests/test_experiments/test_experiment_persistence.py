import io
import pickle
from datetime import timedelta

import pytest

from neatio.config import PRESET_COMPACT
from neatio.experiments.codec import ValueDecoder, ValueEncoder
from neatio.experiments.experiment import Experiment
from neatio.utils.validation import ExperimentDecodeError
from trial_fakes import FakeTrial


def _run_a():
    return Experiment(
        experiment_id=7,
        name="run-A",
        trials=[
            FakeTrial(trial_id=0, duration=timedelta(seconds=3), generations=["g0", "g1"], is_solved=True),
            FakeTrial(trial_id=1, duration=timedelta(seconds=5), generations=["g0"], is_solved=False),
        ],
    )


def test_round_trip_preserves_id_name_and_trials():
    buf = io.BytesIO()
    _run_a().write(buf)
    buf.seek(0)

    restored = Experiment.read(buf, FakeTrial)
    assert restored.experiment_id == 7
    assert restored.name == "run-A"
    assert len(restored.trials) == 2
    assert [t.trial_id for t in restored.trials] == [0, 1]
    assert restored.trials[0].generations == ["g0", "g1"]
    assert restored.trials[0].duration == timedelta(seconds=3)
    assert restored.trials[1].is_solved is False
    # the whole stream was consumed
    assert buf.read() == b""


def test_encode_sequence_is_id_name_count_then_trials():
    buf = io.BytesIO()
    encoder = ValueEncoder(buf)
    _run_a().encode(encoder)
    buf.seek(0)

    values = []
    while True:
        try:
            values.append(pickle.load(buf))
        except EOFError:
            break
    assert values[:3] == [7, "run-A", 2]
    # first trial record follows directly
    assert values[3] == 0
    assert encoder.count == len(values)


def test_empty_experiment_round_trip():
    buf = io.BytesIO()
    Experiment(experiment_id=3, name="empty").write(buf, config=PRESET_COMPACT)
    buf.seek(0)
    restored = Experiment.read(buf, FakeTrial)
    assert (restored.experiment_id, restored.name, restored.trials) == (3, "empty", [])


def test_multiple_experiments_share_one_stream():
    buf = io.BytesIO()
    encoder = ValueEncoder(buf)
    _run_a().encode(encoder)
    Experiment(experiment_id=8, name="run-B").encode(encoder)
    buf.seek(0)

    decoder = ValueDecoder(buf)
    first, second = Experiment(), Experiment()
    first.decode(decoder, FakeTrial)
    second.decode(decoder, FakeTrial)
    assert (first.experiment_id, len(first.trials)) == (7, 2)
    assert (second.experiment_id, second.name) == (8, "run-B")


def test_short_read_raises_decode_error():
    buf = io.BytesIO()
    _run_a().write(buf)
    truncated = io.BytesIO(buf.getvalue()[: len(buf.getvalue()) // 2])

    with pytest.raises(ExperimentDecodeError) as info:
        Experiment.read(truncated, FakeTrial)
    assert info.value.error_type == "decode_failed"


def test_wrong_value_type_raises_decode_error():
    buf = io.BytesIO()
    encoder = ValueEncoder(buf)
    encoder.encode("not-an-id")
    buf.seek(0)
    with pytest.raises(ExperimentDecodeError):
        Experiment.read(buf, FakeTrial)


def test_negative_trial_count_rejected():
    buf = io.BytesIO()
    encoder = ValueEncoder(buf)
    for value in (1, "bad", -1):
        encoder.encode(value)
    buf.seek(0)
    with pytest.raises(ExperimentDecodeError):
        Experiment.read(buf, FakeTrial)


def test_decoder_rejects_garbage_bytes():
    decoder = ValueDecoder(io.BytesIO(b"\x00\x01garbage"))
    with pytest.raises(ExperimentDecodeError):
        decoder.decode()


def test_failed_decode_leaves_experiment_unchanged():
    buf = io.BytesIO()
    encoder = ValueEncoder(buf)
    for value in (7, "new", 1, 3):
        encoder.encode(value)
    # trial record stops after its id
    buf.seek(0)

    existing_trial = FakeTrial(trial_id=9)
    experiment = Experiment(experiment_id=5, name="old", trials=[existing_trial])
    with pytest.raises(ExperimentDecodeError):
        experiment.decode(ValueDecoder(buf), FakeTrial)
    assert (experiment.experiment_id, experiment.name) == (5, "old")
    assert experiment.trials == [existing_trial]


def test_bool_rejected_where_int_expected():
    buf = io.BytesIO()
    encoder = ValueEncoder(buf)
    for value in (True, "x", True):
        encoder.encode(value)
    buf.seek(0)
    with pytest.raises(ExperimentDecodeError) as info:
        Experiment.read(buf, FakeTrial)
    assert info.value.details["actual"] == "bool"

    buf = io.BytesIO()
    ValueEncoder(buf).encode(False)
    buf.seek(0)
    assert ValueDecoder(buf).decode(bool) is False
