"""Even or Odd — Stream Deck mini-game.

A stream of digits and little expressions scrolls in. Call each one EVEN
or ODD before the 60 second clock runs out. Streaks build a combo that
raises points per hit and unlocks harder expressions; a miss resets the
combo and locks the buttons for 2 seconds.

Layout (8x4 = 32 keys):
  Row 1 (0-7):   HUD — title, score, combo, timer, feedback
  Row 2 (8-15):  Preview, next 4 challenges on keys 10-13, nearest right
  Row 3 (16-23): Active challenge (key 19), START (key 20) when idle
  Row 4 (24-31): EVEN keys 25-26, ODD keys 29-30

Usage:
    uv run evenodd --config config.yaml
"""

import argparse
import random
import sys
import threading
from pathlib import Path

from PIL import Image
from StreamDeck.DeviceManager import DeviceManager
from StreamDeck.ImageHelpers import PILHelper
from StreamDeck.Transport.Transport import TransportError

from evenodd import renderer
from evenodd.config import (
    ACTIVE_KEY,
    FINAL_SCORE_KEY,
    HUD_KEYS,
    KEY_COUNT,
    PREVIEW_KEYS,
    AppConfig,
    default_config,
    load_config,
)
from evenodd.engine import LOCK_SECONDS, GameState, Outcome, ParityRound
from evenodd.sound import SoundBoard

TICK_SECONDS = 1.0
TICK_WARNING = 5   # beep each second from here down


def find_deck():
    """Find first visual Stream Deck device."""
    for deck in DeviceManager().enumerate():
        if deck.is_visual():
            return deck
    return None


class EvenOddGame:
    def __init__(self, deck, config: AppConfig | None = None,
                 sound: SoundBoard | None = None, rng=random,
                 verbose: bool = False):
        self.deck = deck
        self.config = config or default_config()
        self.controls = self.config.controls
        self.sound = sound or SoundBoard(enabled=False)
        self.verbose = verbose
        self.round = ParityRound(rng)
        self.rounds_played = 0

        # guards round id, timers and drawing; re-entrant so a sound or
        # draw callback may press START from inside a tick
        self.lock = threading.RLock()
        self._round_id = 0
        self._tick_timer: threading.Timer | None = None
        self._lock_timer: threading.Timer | None = None

        self.img_title = renderer.render_title()
        self.img_hud_empty = renderer.render_empty(renderer.BG_HUD)
        self.img_empty = renderer.render_empty()

    def set_key(self, pos: int, img: Image.Image):
        native = PILHelper.to_native_key_format(self.deck, img)
        with self.deck:
            self.deck.set_key_image(pos, native)

    def _log(self, msg: str):
        if self.verbose:
            print(msg)

    # ── timers ────────────────────────────────────────────────────

    def _timer(self, delay: float, fn, *args) -> threading.Timer:
        t = threading.Timer(delay, fn, args=args)
        t.daemon = True
        t.start()
        return t

    def _cancel_timers(self):
        for t in (self._tick_timer, self._lock_timer):
            if t:
                t.cancel()
        self._tick_timer = None
        self._lock_timer = None

    def _schedule_tick(self):
        self._tick_timer = self._timer(TICK_SECONDS, self._on_tick, self._round_id)

    def _on_tick(self, round_id: int):
        with self.lock:
            if round_id != self._round_id:
                return
            state = self.round.tick()
            if state.playing:
                self._schedule_tick()
            else:
                self._tick_timer = None
                self.rounds_played += 1

        if state.playing:
            if state.time_left <= TICK_WARNING:
                self.sound.play("tick")
        else:
            self.sound.play("gameover")
            self._log(f"Time up: score {state.score}")

        with self.lock:
            # START may have begun a new round while the cue played
            if round_id != self._round_id:
                return
            self._safe_draw()

    def _on_lock_expired(self, token: int):
        with self.lock:
            self._lock_timer = None
            self.round.expire_lock(token)
            self._safe_draw()

    # ── drawing ───────────────────────────────────────────────────

    def _safe_draw(self):
        """Redraw from a timer thread; a dropped deck must not kill it."""
        try:
            self.draw()
        except TransportError as e:
            self._log(f"Deck write failed: {e}")

    def draw(self, state: GameState | None = None):
        state = state or self.round.state
        for k in range(KEY_COUNT):
            self.set_key(k, self._key_image(k, state))

    def _key_image(self, key: int, state: GameState) -> Image.Image:
        if key in HUD_KEYS:
            return self._hud_image(key, state)

        if key in PREVIEW_KEYS:
            # farthest on the left, nearest next to the active row
            idx = len(PREVIEW_KEYS) - PREVIEW_KEYS.index(key) - 1
            return renderer.render_challenge(state.preview[idx])

        if key == ACTIVE_KEY:
            return renderer.render_challenge(state.active, active=True,
                                             locked=state.locked)

        if not state.playing:
            if key == self.controls.start_key:
                return renderer.render_start(again=self.rounds_played > 0)
            if key == FINAL_SCORE_KEY and self.rounds_played > 0:
                return renderer.render_game_over(state.score)

        direction = self.controls.direction_for(key)
        if direction is not None:
            enabled = state.playing and not state.locked
            return renderer.render_direction(direction, enabled=enabled)

        return self.img_empty

    def _hud_image(self, key: int, state: GameState) -> Image.Image:
        if key == 0:
            return self.img_title
        if key == 1:
            return renderer.render_hud_value("SCORE", state.score)
        if key == 2:
            return renderer.render_hud_value("COMBO", state.combo, "#fbbf24")
        if key == 3:
            return renderer.render_timer(state.time_left)
        if key == 4:
            return renderer.render_feedback(state.feedback, state.locked)
        return self.img_hud_empty

    # ── game flow ─────────────────────────────────────────────────

    def show_idle(self):
        """Draw the waiting screen with the preview queue already filled."""
        self.draw()

    def start_game(self):
        with self.lock:
            self._cancel_timers()
            self._round_id += 1
            self.round.start()
            self.sound.play("start")
            self._log("Round started")
            self.draw()
            self._schedule_tick()

    def stop(self):
        with self.lock:
            self._cancel_timers()
            self._round_id += 1

    def on_key(self, _deck, key: int, pressed: bool):
        if not pressed:
            return

        if key == self.controls.start_key and not self.round.state.playing:
            self.start_game()
            return

        direction = self.controls.direction_for(key)
        if direction is None:
            return

        with self.lock:
            outcome = self.round.submit_guess(direction)
            if outcome is Outcome.IGNORED:
                return

            if outcome is Outcome.CORRECT:
                self.sound.play("correct")
            else:
                self.sound.play("wrong")
                self._lock_timer = self._timer(
                    LOCK_SECONDS, self._on_lock_expired,
                    self.round.pending_lock_token,
                )
            state = self.round.state
            self._log(f"{direction.value}: {outcome.value} "
                      f"(score {state.score}, combo {state.combo})")
            self.draw(state)


# ── main ─────────────────────────────────────────────────────────────

def main():
    parser = argparse.ArgumentParser(description="Even or Odd — Stream Deck game")
    parser.add_argument("--config", help="Config file path (YAML)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    args = parser.parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Config not found: {config_path}")
            sys.exit(1)
        config = load_config(config_path)
    else:
        config = default_config()

    deck = find_deck()
    if deck is None:
        print("No Stream Deck found. Is it plugged in?")
        sys.exit(1)

    sound = SoundBoard(
        volume=config.sound.volume,
        player=config.sound.player,
        enabled=config.sound.enabled,
    )
    if sound.enabled:
        try:
            sound.generate()
            print("Sound effects: ON")
        except OSError as e:
            sound.enabled = False
            print(f"Sound effects: OFF ({e})")

    deck.open()
    deck.reset()
    deck.set_brightness(config.deck.brightness)
    print(f"Connected: {deck.deck_type()} ({deck.key_count()} keys)")
    print("EVEN or ODD! Press START to play.")

    game = EvenOddGame(deck, config=config, sound=sound, verbose=args.verbose)
    game.show_idle()
    deck.set_key_callback(game.on_key)

    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        print(f"\nBye! Last score: {game.round.state.score}")
    finally:
        game.stop()
        deck.reset()
        deck.close()
        sound.cleanup()


if __name__ == "__main__":
    main()
