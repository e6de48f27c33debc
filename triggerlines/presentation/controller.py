# =============================================================================
# triggerlines/presentation/controller.py - Render/interaction loop for a client
# =============================================================================
# Framework-free: a View adapter draws, the controller decides. One request at
# a time; anything arriving while a generation is in flight is dropped.
# =============================================================================

import random
from typing import Protocol

from triggerlines.presentation.client import GatewayClient, GatewayClientError
from triggerlines.presentation.tokens import Token, render_tokens

INITIAL_WORDS = (
    "POWER", "STRENGTH", "VICTORY", "COURAGE", "FIRE", "LIGHTNING",
    "THUNDER", "STORM", "UNSTOPPABLE", "FEARLESS", "WARRIOR", "CHAMPION",
)

BACKEND_UNAVAILABLE = (
    'Backend server not available. Please start the server with "python run.py" and refresh.'
)


class View(Protocol):
    def show_loading(self) -> None: ...

    def show_message(self, tokens: list[Token]) -> None: ...

    def show_error(self, message: str) -> None: ...

    def pulse(self, token: Token) -> None: ...


class TriggerLinesController:
    def __init__(self, client: GatewayClient, view: View, rng: random.Random | None = None) -> None:
        self.client = client
        self.view = view
        self.rng = rng or random.Random()
        self.is_generating = False

    def start(self) -> None:
        try:
            self.client.health()
        except GatewayClientError:
            self.view.show_error(BACKEND_UNAVAILABLE)
            return
        self.generate_initial_message()

    def generate_initial_message(self) -> None:
        self.request_message(self.rng.choice(INITIAL_WORDS))

    def request_message(self, trigger_word: str) -> bool:
        """Return False when dropped because a generation is already running."""
        if self.is_generating:
            return False
        self.is_generating = True
        self.view.show_loading()
        try:
            message = self.client.generate(trigger_word)
        except GatewayClientError as e:
            self.view.show_error(str(e))
        else:
            self.view.show_message(render_tokens(message))
        finally:
            self.is_generating = False
        return True

    def on_word_click(self, token: Token) -> bool:
        if not token.triggers:
            return False
        self.view.pulse(token)
        return self.request_message(token.clean_word)

    def on_key(self, key: str, ctrl: bool = False, meta: bool = False, alt: bool = False) -> bool:
        if key.lower() != "r" or ctrl or meta or alt or self.is_generating:
            return False
        self.generate_initial_message()
        return True
