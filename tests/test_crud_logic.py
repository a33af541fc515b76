"""Tests for the coach CRUD screens' logic (camps, games, training, evaluations, enrollments)."""

import pytest

from hoopcamp.streamlit_app.logic import (
    camps_logic,
    enrollments_logic,
    evaluations_logic,
    games_logic,
    players_logic,
    training_logic,
)


class TestCamps:
    """Camp payloads and writes."""

    def test_build_payload(self):
        payload = camps_logic.build_camp_payload(
            "  Winter Clinic ", "2025-12-01", "2025-12-05", "199.5", " Gym B ", "   "
        )

        assert payload == {
            "name": "Winter Clinic",
            "start_date": "2025-12-01",
            "end_date": "2025-12-05",
            "price": 199.5,
            "location": "Gym B",
            "description": None,
        }

    def test_create_edit_delete(self, fake_db):
        payload = camps_logic.build_camp_payload("A", "2025-07-01", "2025-07-10", 100, "Court", "Fun")
        assert camps_logic.save_camp(payload)
        camp = camps_logic.load_camps()[0]

        assert camps_logic.save_camp({**payload, "name": "B"}, editing_id=camp.id)
        assert [c.name for c in camps_logic.load_camps()] == ["B"]

        assert camps_logic.delete_camp(camp.id)
        assert camps_logic.load_camps() == []

    def test_load_camps_latest_first(self, fake_db):
        for start in ("2025-06-01", "2025-08-01", "2025-07-01"):
            camps_logic.save_camp(camps_logic.build_camp_payload("C", start, start, 0, "X", ""))

        assert [c.start_date for c in camps_logic.load_camps()] == ["2025-08-01", "2025-07-01", "2025-06-01"]

    def test_failed_write_reported(self, fake_db):
        fake_db.failing_tables.add("camps")
        payload = camps_logic.build_camp_payload("A", "2025-07-01", "2025-07-10", 100, "Court", "")

        assert camps_logic.save_camp(payload) is False
        assert fake_db.rows("camps") == []


class TestGames:
    """Game payloads and team naming."""

    @pytest.mark.parametrize("opponent, team_1, team_2, expected", [
        ("Eagles", "", "", ("Eagles", "Team 1", "Eagles")),
        ("", "", "", (None, "Team 1", "Team 2")),
        ("Eagles", "Hawks", "Owls", ("Eagles", "Hawks", "Owls")),
    ])
    def test_build_payload_team_names(self, opponent, team_1, team_2, expected):
        payload = games_logic.build_game_payload("c1", "2025-06-05", opponent, team_1, team_2)

        assert (payload["opponent_name"], payload["team_1_name"], payload["team_2_name"]) == expected

    def test_load_games_with_camp(self, fake_db, camp):
        games_logic.save_game(games_logic.build_game_payload(camp["id"], "2025-06-05", "Eagles"))
        games_logic.save_game(games_logic.build_game_payload(camp["id"], "2025-06-09", "Owls"))

        games = games_logic.load_games()

        assert [g.game.opponent_name for g in games] == ["Owls", "Eagles"]
        assert all(g.camp.name == camp["name"] for g in games)

    def test_legacy_row_without_team_names(self, fake_db, camp):
        fake_db.seed("games", {"camp_id": camp["id"], "game_date": "2025-06-05", "opponent_name": "Bulls"})

        game = games_logic.load_games()[0].game

        assert game.title == "Team 1 vs Bulls"


class TestTraining:

    def test_create_and_list(self, fake_db, camp):
        payload = training_logic.build_session_payload(camp["id"], "2025-06-02", " Footwork ", "  ")
        assert training_logic.save_session(payload)

        sessions = training_logic.load_sessions()

        assert len(sessions) == 1
        assert sessions[0].session.drill_topic == "Footwork"
        assert sessions[0].session.notes is None
        assert sessions[0].camp.id == camp["id"]

    def test_delete(self, fake_db, training_session):
        assert training_logic.delete_session(training_session["id"])
        assert training_logic.load_sessions() == []


class TestEvaluations:
    """One evaluation per (session, student)."""

    @pytest.mark.parametrize("rating", [0, 11, -3])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValueError):
            evaluations_logic.build_evaluation_payload(rating)

    def test_blank_text_stored_as_null(self):
        payload = evaluations_logic.build_evaluation_payload(7, "Shooting", " ", "")

        assert payload == {"rating": 7, "strengths": "Shooting", "weaknesses": None, "coach_notes": None}

    def test_save_twice_updates(self, fake_db, training_session, students):
        session_id, student_id = training_session["id"], students[0]["id"]
        evaluations = evaluations_logic.save_evaluation(
            {}, session_id, student_id, evaluations_logic.build_evaluation_payload(6)
        )

        evaluations = evaluations_logic.save_evaluation(
            evaluations, session_id, student_id, evaluations_logic.build_evaluation_payload(9, "Defense")
        )

        rows = fake_db.rows("evaluations")
        assert len(rows) == 1
        assert rows[0]["rating"] == 9
        assert evaluations[student_id].strengths == "Defense"
        assert evaluations_logic.load_evaluations_map(session_id)[student_id].rating == 9

    def test_failed_save_returns_same_map(self, fake_db, training_session, students):
        fake_db.failing_tables.add("evaluations")
        evaluations = {}

        result = evaluations_logic.save_evaluation(
            evaluations, training_session["id"], students[0]["id"],
            evaluations_logic.build_evaluation_payload(5),
        )

        assert result is evaluations

    def test_stale_map_updates_existing_row(self, fake_db, training_session, students):
        """A save from an outdated map updates the row another coach created."""
        session_id, student_id = training_session["id"], students[0]["id"]
        stale = evaluations_logic.load_evaluations_map(session_id)
        evaluations_logic.save_evaluation({}, session_id, student_id, evaluations_logic.build_evaluation_payload(4))

        result = evaluations_logic.save_evaluation(
            stale, session_id, student_id, evaluations_logic.build_evaluation_payload(8)
        )

        rows = fake_db.rows("evaluations")
        assert len(rows) == 1
        assert rows[0]["rating"] == 8
        assert result[student_id].rating == 8


class TestEnrollments:
    """Student self-enrollment."""

    def test_enroll_once(self, fake_db, camp):
        student = fake_db.seed("profiles", {"name": "Cam Diaz", "role": "student"})

        enrolled = enrollments_logic.enroll(student["id"], camp["id"], set())
        again = enrollments_logic.enroll(student["id"], camp["id"], enrolled)

        assert enrolled == {camp["id"]}
        assert again is enrolled
        assert len(fake_db.rows("enrollments")) == 1
        assert enrollments_logic.load_enrolled_camp_ids(student["id"]) == {camp["id"]}

    def test_failed_enroll_leaves_set(self, fake_db, camp):
        fake_db.failing_tables.add("enrollments")
        enrolled = set()

        assert enrollments_logic.enroll("s1", camp["id"], enrolled) == set()

    def test_stale_set_picks_up_existing_enrollment(self, fake_db, camp, students):
        student_id = students[0]["id"]

        enrolled = enrollments_logic.enroll(student_id, camp["id"], set())

        assert enrolled == {camp["id"]}
        assert len(fake_db.rows("enrollments")) == 2

    def test_catalog_soonest_first(self, fake_db):
        for start in ("2025-09-01", "2025-06-01"):
            fake_db.seed("camps", {
                "name": start, "start_date": start, "end_date": start, "price": 0, "location": "X",
            })

        assert [c.start_date for c in enrollments_logic.load_camp_catalog()] == ["2025-06-01", "2025-09-01"]

    def test_student_enrollments_embed_camp(self, fake_db, camp, students):
        enrollments = enrollments_logic.load_student_enrollments(students[0]["id"])

        assert len(enrollments) == 1
        assert enrollments[0].camp.name == camp["name"]


class TestPlayers:
    """Player list, search and detail."""

    @pytest.mark.parametrize("query, expected", [
        ("", ["Ana Lopez", "Ben Carter"]),
        ("ana", ["Ana Lopez"]),
        ("BEN@", ["Ben Carter"]),
        ("zzz", []),
    ])
    def test_filter_students(self, fake_db, students, query, expected):
        result = players_logic.filter_students(players_logic.load_students(), query)

        assert [p.name for p in result] == expected

    def test_camps_by_student(self, fake_db, camp, students):
        names = players_logic.camps_by_student(players_logic.load_all_enrollments())

        assert names == {s["id"]: [camp["name"]] for s in students}

    def test_player_detail(self, fake_db, game, students, training_session):
        student_id = students[0]["id"]
        fake_db.seed("game_stats", {
            "game_id": game["id"], "student_id": student_id, "team_choice": "team_1",
            "points": 10, "rebounds": 5, "assists": 2, "steals": 1, "blocks": 0,
        })
        evaluations_logic.save_evaluation(
            {}, training_session["id"], student_id, evaluations_logic.build_evaluation_payload(8)
        )

        detail = players_logic.load_player_detail(student_id)

        assert detail.student.name == "Ana Lopez"
        assert detail.averages.points == 10.0
        assert detail.averages.games_played == 1
        assert detail.game_stats[0].game.title == "Hawks vs Eagles"
        assert detail.evaluations[0].session.drill_topic == "Pick and roll"
        frame = players_logic.game_log_frame(detail.game_stats)
        assert list(frame.columns) == ["Date", "Game", "PTS", "REB", "AST", "STL", "BLK"]
        assert frame.iloc[0]["PTS"] == 10

    def test_missing_player(self, fake_db):
        assert players_logic.load_player_detail("missing") is None
