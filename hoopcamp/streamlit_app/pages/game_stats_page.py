"""Game roster & stats page UI - split players into teams and record box scores."""

import streamlit as st

from hoopcamp.database.records import STAT_FIELDS, Profile
from hoopcamp.streamlit_app.logic import game_stats_logic
from hoopcamp.streamlit_app.logic.enrollments_logic import load_enrolled_students
from hoopcamp.streamlit_app.utils import (
    back_button,
    cache_key,
    format_date,
    go,
    require_profile,
    route_param,
)


def _stats_key(game_id: str) -> str:
    return cache_key("game_stats", game_id)


def _reload(game_id: str, message: str):
    st.session_state[_stats_key(game_id)] = game_stats_logic.load_stats_map(game_id)
    st.session_state["game_stats_error"] = message


def _assign(game_id: str, student_id: str, team):
    key = _stats_key(game_id)
    updated = game_stats_logic.assign_team(st.session_state[key], game_id, student_id, team)
    if updated is st.session_state[key]:
        _reload(game_id, "Could not update the team assignment. The roster has been reloaded.")
    else:
        st.session_state[key] = updated


def _render_assignment(game_id: str, student: Profile, team_names: dict):
    """One roster line with buttons to move the student between teams."""
    stat = st.session_state[_stats_key(game_id)].get(student.id)
    current = stat.team_choice if stat else None
    name_col, *button_cols = st.columns([3, 1, 1, 1])
    name_col.write(student.name)
    for col, team in zip(button_cols, ("team_1", "team_2", None)):
        label = team_names[team] if team else "Unassigned"
        col.button(
            label,
            key=f"assign_{student.id}_{team}",
            disabled=current == team,
            on_click=_assign,
            args=(game_id, student.id, team),
        )


def _render_stat_form(game_id: str, student: Profile):
    key = _stats_key(game_id)
    stat = st.session_state[key][student.id]
    with st.form(f"stat_form_{student.id}"):
        st.markdown(f"**{student.name}**")
        values = {}
        for col, field in zip(st.columns(len(STAT_FIELDS)), STAT_FIELDS):
            values[field] = col.number_input(
                field.capitalize(),
                min_value=0,
                step=1,
                value=getattr(stat, field),
                key=f"{field}_{student.id}",
            )
        save_col, delete_col = st.columns(2)
        saved = save_col.form_submit_button("Save")
        deleted = delete_col.form_submit_button("Delete Stats")

    if saved:
        updated = game_stats_logic.save_stat_line(st.session_state[key], student.id, values)
        if updated is st.session_state[key]:
            _reload(game_id, f"Could not save stats for {student.name}. The roster has been reloaded.")
            st.rerun()
        else:
            st.session_state[key] = updated
            st.toast(f"Saved stats for {student.name}")
    if deleted:
        st.session_state[f"confirm_delete_stat_{student.id}"] = True

    if st.session_state.get(f"confirm_delete_stat_{student.id}"):
        st.warning(f"Delete stats for {student.name}?")
        if st.button("Confirm", key=f"confirm_stat_{student.id}", type="primary"):
            st.session_state[f"confirm_delete_stat_{student.id}"] = False
            updated = game_stats_logic.delete_stat_line(st.session_state[key], student.id)
            if updated is st.session_state[key]:
                _reload(game_id, f"Could not delete stats for {student.name}.")
            else:
                st.session_state[key] = updated
            st.rerun()


def main():
    """Roster and box-score entry for one game."""
    require_profile("coach")

    game_id = route_param("game")
    if not game_id:
        st.error("No game specified in URL.")
        return

    item = game_stats_logic.load_game(game_id)
    if item is None:
        go("/coach/games")
    game, camp = item.game, item.camp

    students = load_enrolled_students(game.camp_id)
    key = _stats_key(game_id)
    if key not in st.session_state:
        st.session_state[key] = game_stats_logic.load_stats_map(game_id)

    back_button("/coach/games", "Back to Games")
    st.title("Game Roster & Stats")
    st.subheader(game.title)
    st.caption(f"{camp.name if camp else 'Unknown camp'} • {format_date(game.game_date)}")

    if error := st.session_state.pop("game_stats_error", None):
        st.error(error)

    if not students:
        st.info("No students are enrolled in this camp yet.")
        return

    team_names = {"team_1": game.team_1_name, "team_2": game.team_2_name}
    unassigned, team_1, team_2 = game_stats_logic.split_roster(students, st.session_state[key])

    # Roster assignment
    st.markdown("### Roster")
    roster_cols = st.columns(3)
    for col, (label, group) in zip(roster_cols, (
        ("Unassigned", unassigned),
        (game.team_1_name, team_1),
        (game.team_2_name, team_2),
    )):
        with col:
            st.markdown(f"**{label}** ({len(group)})")
            for student in group:
                _render_assignment(game_id, student, team_names)

    # Box scores for assigned players
    st.markdown("---")
    for label, group in ((game.team_1_name, team_1), (game.team_2_name, team_2)):
        st.markdown(f"### {label}")
        if not group:
            st.info("No players assigned.")
        for student in group:
            _render_stat_form(game_id, student)


if __name__ == "__main__":
    main()
