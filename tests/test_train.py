import io

import pytest

from linreg.gradient import DegenerateInputError, Parameters, gradient
from linreg.series import Series
from linreg.train import ProgressRecord, TrainingConfig, check_series, train

XS = [1, 2, 3]
YS = [2, 3, 4]


def test_config_defaults():
    cfg = TrainingConfig()
    assert cfg.w == 0.0
    assert cfg.b == 0.0
    assert cfg.alpha == 0.00001
    assert cfg.iterations == 100000
    assert cfg.log_every == 100
    assert cfg.output is None


def test_record_format():
    rec = ProgressRecord(iteration=7, w=1.0, b=-0.25)
    assert rec.format() == "iteration: 7, w: 1.000000, b: -0.250000"


def test_single_step_logs_initial_state():
    cfg = TrainingConfig(w=0.0, b=0.0, alpha=0.1, iterations=0, log_every=1)
    out = io.StringIO()
    result = train(Series(XS), Series(YS), cfg, out=out)
    assert out.getvalue() == "iteration: 0, w: 0.000000, b: 0.000000\n"
    assert result.records == [ProgressRecord(0, 0.0, 0.0)]
    # the one update still ran after logging
    assert result.params.w == pytest.approx(0.1 * 20.0 / 3.0)
    assert result.params.b == pytest.approx(0.3)


def test_log_every_one_emits_n_plus_one_records():
    cfg = TrainingConfig(alpha=0.01, iterations=25, log_every=1)
    result = train(XS, YS, cfg)
    assert [r.iteration for r in result.records] == list(range(26))


def test_log_every_selects_multiples():
    cfg = TrainingConfig(alpha=0.01, iterations=250, log_every=100)
    result = train(XS, YS, cfg)
    assert [r.iteration for r in result.records] == [0, 100, 200]


def test_first_record_shows_configured_start():
    cfg = TrainingConfig(w=2.5, b=-7.0, alpha=0.05, iterations=3, log_every=1)
    result = train(XS, YS, cfg)
    assert (result.records[0].w, result.records[0].b) == (2.5, -7.0)


def test_records_are_pre_update_snapshots():
    cfg = TrainingConfig(w=0.5, b=0.5, alpha=0.05, iterations=5, log_every=1)
    result = train(XS, YS, cfg)
    for prev, nxt in zip(result.records, result.records[1:]):
        g = gradient(XS, YS, Parameters(w=prev.w, b=prev.b))
        assert nxt.w == pytest.approx(prev.w - cfg.alpha * g.dw)
        assert nxt.b == pytest.approx(prev.b - cfg.alpha * g.db)
    last = result.records[-1]
    g = gradient(XS, YS, Parameters(w=last.w, b=last.b))
    assert result.params.w == pytest.approx(last.w - cfg.alpha * g.dw)


def test_converges_to_exact_line():
    cfg = TrainingConfig(alpha=0.1, iterations=3000, log_every=1000)
    result = train(XS, YS, cfg)
    assert result.params.w == pytest.approx(1.0, abs=1e-6)
    assert result.params.b == pytest.approx(1.0, abs=1e-6)


def test_runs_are_byte_identical():
    xs = [1, 2, 3, 123, 10, -10]
    ys = [2, 3, 4, 432, 1, 37]
    cfg = TrainingConfig(iterations=500, log_every=50)
    a, b = io.StringIO(), io.StringIO()
    train(xs, ys, cfg, out=a)
    train(xs, ys, cfg, out=b)
    assert a.getvalue() == b.getvalue()
    assert a.getvalue().count("\n") == 11


def test_empty_series_fails_before_any_output():
    out = io.StringIO()
    with pytest.raises(DegenerateInputError):
        train(Series(), Series(), TrainingConfig(iterations=3, log_every=1), out=out)
    assert out.getvalue() == ""


def test_check_series_length_mismatch():
    with pytest.raises(ValueError):
        check_series([1, 2], [1])


def test_streaming_without_keeping_records():
    cfg = TrainingConfig(alpha=0.01, iterations=1000, log_every=1)
    out = io.StringIO()
    result = train(XS, YS, cfg, out=out, keep_records=False)
    assert result.records == []
    assert out.getvalue().count("\n") == 1001
    kept = train(XS, YS, cfg)
    assert result.params == kept.params
