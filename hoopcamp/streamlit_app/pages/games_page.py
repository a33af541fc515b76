"""Coach games page UI - schedule games and open their roster."""

import datetime

import streamlit as st

from hoopcamp.database.records import Game
from hoopcamp.streamlit_app.logic import games_logic
from hoopcamp.streamlit_app.utils import format_date, open_page, require_profile

FORM_KEYS = {
    "game_camp": None,
    "game_date": None,
    "game_opponent": "",
    "game_team_1": "",
    "game_team_2": "",
}


def _reset_form():
    for key, default in FORM_KEYS.items():
        st.session_state[key] = default
    st.session_state["editing_game"] = None
    st.session_state["show_game_form"] = False


def _start_edit(game: Game):
    st.session_state["game_camp"] = game.camp_id
    st.session_state["game_date"] = datetime.date.fromisoformat(game.game_date[:10])
    st.session_state["game_opponent"] = game.opponent_name or ""
    st.session_state["game_team_1"] = game.team_1_name
    st.session_state["game_team_2"] = game.team_2_name
    st.session_state["editing_game"] = game.id
    st.session_state["show_game_form"] = True


def _submit():
    state = st.session_state
    if not state["game_camp"] or not state["game_date"]:
        state["game_error"] = "Camp and date are required."
        return
    payload = games_logic.build_game_payload(
        camp_id=state["game_camp"],
        game_date=state["game_date"].isoformat(),
        opponent_name=state["game_opponent"],
        team_1_name=state["game_team_1"],
        team_2_name=state["game_team_2"],
    )
    if games_logic.save_game(payload, state.get("editing_game")):
        _reset_form()
        state["game_error"] = None
    else:
        state["game_error"] = "Could not save the game."


def main():
    """Games page for coaches."""
    require_profile("coach")
    for key, default in FORM_KEYS.items():
        st.session_state.setdefault(key, default)
    st.session_state.setdefault("editing_game", None)
    st.session_state.setdefault("show_game_form", False)

    camps = games_logic.load_camp_options()
    camp_names = {camp.id: camp.name for camp in camps}

    title_col, button_col = st.columns([4, 1])
    with title_col:
        st.title("Games")
        st.caption("Schedule games and record player stats")
    with button_col:
        if not st.session_state["show_game_form"]:
            if st.button("+ New Game", disabled=not camps):
                st.session_state["show_game_form"] = True
                st.rerun()

    if not camps:
        st.info("Create a camp before scheduling games.")

    if st.session_state.get("game_error"):
        st.error(st.session_state["game_error"])

    if st.session_state["show_game_form"]:
        editing = st.session_state["editing_game"] is not None
        with st.form("game_form"):
            st.subheader("Edit Game" if editing else "Schedule New Game")
            st.selectbox(
                "Camp",
                options=list(camp_names),
                format_func=lambda camp_id: camp_names.get(camp_id, "Select a camp"),
                index=None,
                placeholder="Select a camp",
                key="game_camp",
            )
            st.date_input("Game Date", key="game_date")
            st.text_input("Opponent", key="game_opponent")
            col1, col2 = st.columns(2)
            col1.text_input("Team 1 Name", key="game_team_1", placeholder="Team 1")
            col2.text_input("Team 2 Name", key="game_team_2", placeholder="Team 2")
            submit_col, cancel_col = st.columns(2)
            submit_col.form_submit_button(
                "Update Game" if editing else "Create Game", on_click=_submit
            )
            cancel_col.form_submit_button("Cancel", on_click=_reset_form)

    games = games_logic.load_games()
    if not games:
        st.info("No games scheduled yet.")
        return

    for item in games:
        game, camp = item.game, item.camp
        with st.container(border=True):
            info_col, actions_col = st.columns([4, 1])
            with info_col:
                st.markdown(f"### {game.title}")
                st.write(f"🏕️ {camp.name if camp else 'Unknown camp'} • 📅 {format_date(game.game_date)}")
                if st.button("Roster & Stats →", key=f"roster_{game.id}", type="tertiary"):
                    open_page("/coach/games/stats", game=game.id)
            with actions_col:
                st.button("Edit", key=f"edit_{game.id}", on_click=_start_edit, args=(game,))
                if st.session_state.get("confirm_delete_game") == game.id:
                    st.warning("This will also delete all stats for this game.")
                    if st.button("Confirm", key=f"confirm_{game.id}", type="primary"):
                        st.session_state["confirm_delete_game"] = None
                        if games_logic.delete_game(game.id):
                            st.rerun()
                        st.error("Could not delete the game.")
                elif st.button("Delete", key=f"delete_{game.id}"):
                    st.session_state["confirm_delete_game"] = game.id
                    st.rerun()


if __name__ == "__main__":
    main()
