# =============================================================================
# streamlit_app.py - TriggerLines Python client: clickable motivational text
# =============================================================================
# Run: streamlit run streamlit_app.py
# Backend: BACKEND_URL (default http://127.0.0.1:3000)
# =============================================================================

import streamlit as st

from triggerlines.presentation.client import GatewayClient
from triggerlines.presentation.controller import TriggerLinesController
from triggerlines.presentation.tokens import Token, split_lines


class StreamlitView:
    """Keeps what to draw in session_state; the script body draws it on each rerun."""

    def __init__(self, state) -> None:
        self.state = state
        self.state.setdefault("view", {"loading": False, "tokens": [], "error": None, "pulsed": None})

    def show_loading(self) -> None:
        self.state["view"].update(loading=True, tokens=[], error=None)

    def show_message(self, tokens: list[Token]) -> None:
        self.state["view"].update(loading=False, tokens=tokens, error=None)

    def show_error(self, message: str) -> None:
        self.state["view"].update(loading=False, tokens=[], error=message)

    def pulse(self, token: Token) -> None:
        self.state["view"]["pulsed"] = token.clean_word


st.set_page_config(page_title="TriggerLines", layout="centered")

if "controller" not in st.session_state:
    client = GatewayClient()
    st.session_state.controller = TriggerLinesController(client, StreamlitView(st.session_state))
    st.session_state.backend_url = client.base_url
    with st.spinner("Connecting..."):
        st.session_state.controller.start()

controller: TriggerLinesController = st.session_state.controller
view = st.session_state["view"]

with st.sidebar:
    st.caption(f"Backend: `{st.session_state.backend_url}`")
    st.caption("Start the backend: `python run.py`")
    st.button("New message (R)", on_click=controller.on_key, args=("r",), disabled=controller.is_generating)

if view["loading"]:
    st.info("GENERATING...")
elif view["error"] is not None:
    st.error("UNABLE TO GENERATE MESSAGE")
    st.write(view["error"])
    st.caption("Check your API configuration in settings")
else:
    if view["pulsed"]:
        st.toast(f"Igniting: {view['pulsed']}")
        view["pulsed"] = None
    for i, line in enumerate(split_lines(view["tokens"])):
        if not line:
            st.write("")
            continue
        cols = st.columns(len(line))
        for j, (col, token) in enumerate(zip(cols, line)):
            col.button(
                token.text,
                key=f"word-{i}-{j}",
                on_click=controller.on_word_click,
                args=(token,),
                disabled=not token.triggers,
                type="tertiary" if token.triggers else "secondary",
            )
