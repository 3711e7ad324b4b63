import json

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from quizboard.core.errors import RotationInProgress
from quizboard.models import Leaderboard, Problem, User, UserResponse
from quizboard.services import rotation
from quizboard.services.problems import active_week, find_problem
from quizboard.services.rotation import rotate_week, rotation_lock
from quizboard.services.submissions import submit_answer


def _seed_standings(session, publish):
    publish(5, "five")
    answers = {
        "ada@example.com": ["five"],
        "bo@example.com": ["no", "five"],
        "cy@example.com": ["no"],
        "di@example.com": ["five", "no", "no"],
    }
    for email, attempts in answers.items():
        for answer in attempts:
            submit_answer(
                session, name=email.split("@")[0], email=email, answer=answer, week=5
            )


def test_rotation_after_week_five(session, publish):
    session.add(Leaderboard(week=5, top_players_json="[]"))
    session.commit()
    _seed_standings(session, publish)

    snapshot = rotate_week(session)

    assert snapshot.week == 6
    assert json.loads(snapshot.top_players_json) == [
        {"name": "ada", "problemsSolved": 1, "attempts": 1},
        {"name": "bo", "problemsSolved": 1, "attempts": 2},
        {"name": "di", "problemsSolved": 1, "attempts": 3},
    ]

    problem = find_problem(session, 6)
    assert problem.correct_answer == "NewAnswerHere"
    assert active_week(session) == 6

    users = session.exec(select(User).order_by(User.id)).all()
    assert [u.problems_solved for u in users] == [0, 0, 0, 0]
    assert [u.attempts for u in users] == [1, 2, 1, 3]
    assert session.exec(select(UserResponse)).all() == []


def test_first_rotation_starts_week_one(session):
    snapshot = rotate_week(session)

    assert snapshot.week == 1
    assert json.loads(snapshot.top_players_json) == []
    assert find_problem(session, 1) is not None


def test_snapshot_is_frozen(session, publish):
    _seed_standings(session, publish)
    rotate_week(session, placeholder_answer="six")

    submit_answer(session, name="ada", email="ada@example.com", answer="six", week=1)
    session.expire_all()

    stored = session.exec(select(Leaderboard).where(Leaderboard.week == 1)).one()
    assert json.loads(stored.top_players_json)[0] == {
        "name": "ada",
        "problemsSolved": 1,
        "attempts": 1,
    }


def test_attempts_reopen_after_rotation(session, publish):
    publish(1, "a")
    for _ in range(3):
        submit_answer(session, name="ada", email="ada@example.com", answer="x", week=1)

    rotate_week(session)

    # Responses are cleared, so the same week number accepts attempts again.
    assert submit_answer(
        session, name="ada", email="ada@example.com", answer="a", week=1
    ) == {"correct": True}
    user = session.exec(select(User)).one()
    assert user.attempts == 4


def test_authored_problem_is_kept(session, publish):
    publish(1, "authored")

    rotate_week(session)

    problems = session.exec(select(Problem).where(Problem.week == 1)).all()
    assert [p.correct_answer for p in problems] == ["authored"]


def test_concurrent_trigger_is_rejected(session):
    rotation_lock.acquire()
    try:
        with pytest.raises(RotationInProgress):
            rotate_week(session)
    finally:
        rotation_lock.release()

    assert session.exec(select(Leaderboard)).all() == []


def test_failure_rolls_back_every_step(session, publish, monkeypatch):
    _seed_standings(session, publish)

    def _broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("store unavailable"))

    monkeypatch.setattr(rotation, "find_problem", _broken)

    with pytest.raises(OperationalError):
        rotate_week(session)

    assert session.exec(select(Leaderboard)).all() == []
    scores = [u.problems_solved for u in session.exec(select(User)).all()]
    assert sum(scores) == 3
    assert not rotation_lock.locked()


def test_failure_while_ranking_is_logged(session, monkeypatch, caplog):
    def _broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("store unavailable"))

    monkeypatch.setattr(rotation, "top_players", _broken)

    with pytest.raises(OperationalError):
        rotate_week(session)

    assert "Weekly rotation failed and was rolled back" in caplog.text
    assert session.exec(select(Leaderboard)).all() == []
    assert not rotation_lock.locked()
