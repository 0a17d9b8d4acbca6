"""Unit tests for the evaluation session and its surface toggle"""
import pytest
from vci.catalog import ASPHALT_DISTRESSES, CONCRETE_DISTRESSES, UnknownSurfaceType
from vci.classifier import Band
from vci.session import EvaluationSession


def test_new_session_starts_blank_concrete():
    session = EvaluationSession()
    assert session.surface_type == "concrete"
    assert [(r.type, r.weight) for r in session.rows] == list(CONCRETE_DISTRESSES)
    assert all(r.observed == "" for r in session.rows)
    assert session.result().vci == 100.0


def test_set_observed_updates_weighted_and_vci():
    session = EvaluationSession("concrete")
    row = session.set_observed(0, "2")
    assert row.weighted == 7.2
    assert session.result().vci == pytest.approx(78.22, abs=0.01)
    assert session.band() is Band.GOOD


def test_switch_surface_resets_rows():
    session = EvaluationSession("concrete")
    for i in range(len(session.rows)):
        session.set_observed(i, "9")

    session.switch_surface("asphalt")
    assert session.surface_type == "asphalt"
    assert [(r.type, r.weight) for r in session.rows] == list(ASPHALT_DISTRESSES)
    assert all(r.observed == "" and r.weighted == 0 for r in session.rows)
    assert session.result().total_sdwf == 0


def test_switch_to_same_surface_also_resets():
    session = EvaluationSession("asphalt")
    session.set_observed(3, 5)
    session.switch_surface("asphalt")
    assert session.result().total_sdwf == 0


def test_switch_to_unknown_surface_keeps_state():
    session = EvaluationSession("concrete")
    session.set_observed(1, 4)
    with pytest.raises(UnknownSurfaceType):
        session.switch_surface("gravel")
    assert session.surface_type == "concrete"
    assert session.rows[1].observed == 4


def test_sessions_are_independent():
    a = EvaluationSession()
    b = EvaluationSession()
    a.set_observed(0, 50)
    assert b.result().vci == 100.0
    assert CONCRETE_DISTRESSES[0] == ("Cracking - Multiple Narrow", 3.6)
