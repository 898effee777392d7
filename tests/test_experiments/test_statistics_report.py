import io
from datetime import timedelta

from neatio.experiments.experiment import Experiment
from trial_fakes import FakeOrganism, FakeTrial


def _solved_experiment():
    return Experiment(
        experiment_id=2,
        name="xor",
        trials=[
            FakeTrial(
                duration=timedelta(seconds=4),
                generations=[0] * 10,
                best=FakeOrganism(15.5, species_age=3, complexity=9),
                is_solved=True,
                species_counts=[2, 4],
                winner_stats=(5, 7, 1200, 3),
                averages=([1.0, 3.0], [1, 1], [6, 8]),
            ),
            FakeTrial(
                duration=timedelta(seconds=6),
                generations=[0] * 20,
                best=FakeOrganism(12.0),
                species_counts=[6],
                averages=([2.0], [3], [4]),
            ),
        ],
    )


def test_report_contains_champion_and_averages():
    report = _solved_experiment().statistics_report()
    assert "Solved 1 trials from 2" in report
    assert "generations/trial:\t15" in report
    assert "Champion found in 0 trial run" in report
    assert "Winner Evals:\t1200" in report
    assert "Fitness:\t15.5" in report
    assert "Average among winners" in report
    assert "Averages for all organisms evaluated during experiment" in report
    # diversity mean of (3.0, 6.0)
    assert "Diversity:\t4.5" in report


def test_report_without_winner():
    ex = Experiment(experiment_id=1, name="none", trials=[FakeTrial(best=FakeOrganism(1.0)), FakeTrial()])
    report = ex.statistics_report()
    assert "No winner found in the experiment" in report
    assert "Average among winners" not in report


def test_report_precision_from_config():
    report = _solved_experiment().statistics_report({'report_precision': 3})
    assert "Fitness:\t15.500" in report


def test_print_statistics_writes_to_file():
    out = io.StringIO()
    Experiment(experiment_id=9, name="empty").print_statistics(file=out)
    text = out.getvalue()
    assert "Solved 0 trials from 0" in text
    assert "Averages for all organisms" not in text
