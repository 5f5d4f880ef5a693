"""8-bit sound cues for correct / wrong guesses and the round clock.

WAVs are synthesised once into a temp dir, then played through an external
player (``afplay`` on macOS) in tracked child processes.
"""

import os
import shutil
import struct
import subprocess
import tempfile
import threading
import wave

SAMPLE_RATE = 22050
MAX_CONCURRENT = 4


def _wave(shape: str, phase: float) -> float:
    if shape == "square":
        return 1.0 if phase < 0.5 else -1.0
    if shape == "pulse":
        return 1.0 if phase < 0.125 else -1.0
    # triangle
    return 4 * abs(phase - 0.5) - 1


def _tone(start_hz: float, end_hz: float, dur: float, vol: float,
          shape: str = "triangle", decay: float = 0.6) -> list[float]:
    """One note gliding from start_hz to end_hz.

    5 ms linear attack, then a linear fade that drops to (1 - decay) of
    full volume by the end.
    """
    n = int(SAMPLE_RATE * dur)
    attack = SAMPLE_RATE * 0.005
    samples = []
    phase = 0.0
    for i in range(n):
        pos = i / n
        freq = start_hz + (end_hz - start_hz) * pos
        phase = (phase + freq / SAMPLE_RATE) % 1.0
        env = min(1.0, i / attack) * (1.0 - decay * pos)
        samples.append(_wave(shape, phase) * vol * env)
    return samples


def _rest(dur: float) -> list[float]:
    return [0.0] * int(SAMPLE_RATE * dur)


def write_wav(path: str, samples: list[float]) -> None:
    with wave.open(path, "w") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(SAMPLE_RATE)
        frames = b"".join(
            struct.pack("<h", int(max(-0.95, min(0.95, s)) * 32767))
            for s in samples
        )
        w.writeframes(frames)


def compose(volume: float) -> dict[str, list[float]]:
    """Sample data for every cue the game plays."""
    v = volume
    return {
        "correct": _tone(1047, 1319, 0.07, v * 0.5, decay=0.3),
        "wrong": _tone(220, 110, 0.25, v * 0.35, shape="square"),
        "start": (_tone(392, 392, 0.05, v * 0.4) + _rest(0.02) +
                  _tone(587, 587, 0.05, v * 0.45) + _rest(0.02) +
                  _tone(784, 880, 0.1, v * 0.5)),
        "tick": _tone(1500, 1200, 0.03, v * 0.3, shape="pulse", decay=0.9),
        "gameover": (_tone(523, 494, 0.15, v * 0.3, shape="square") +
                     _tone(440, 415, 0.15, v * 0.3, shape="square") +
                     _tone(349, 262, 0.35, v * 0.3, shape="square", decay=0.9)),
    }


class SoundBoard:
    def __init__(self, volume: float = 0.3, player: str = "afplay",
                 enabled: bool = True):
        self.volume = volume
        self.player = player
        self.enabled = enabled
        self.files: dict[str, str] = {}
        self._dir = ""
        self._processes: list[subprocess.Popen] = []
        self._lock = threading.Lock()

    def generate(self) -> None:
        """Write every cue to a fresh temp dir."""
        self._dir = tempfile.mkdtemp(prefix="evenodd-sfx-")
        for name, samples in compose(self.volume).items():
            path = os.path.join(self._dir, f"{name}.wav")
            write_wav(path, samples)
            self.files[name] = path

    def _reap(self) -> None:
        with self._lock:
            self._processes[:] = [p for p in self._processes if p.poll() is None]

    def play(self, name: str) -> None:
        """Play a cue non-blocking. Unknown or missing cues are silent."""
        if not self.enabled:
            return
        path = self.files.get(name)
        if not path or not os.path.exists(path):
            return
        self._reap()
        with self._lock:
            while len(self._processes) >= MAX_CONCURRENT:
                old = self._processes.pop(0)
                try:
                    old.kill()
                    old.wait()
                except OSError:
                    pass
            try:
                p = subprocess.Popen(
                    [self.player, path],
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
                self._processes.append(p)
            except OSError:
                # no player binary, stay quiet
                pass

    def stop_all(self) -> None:
        with self._lock:
            for p in self._processes:
                try:
                    p.kill()
                    p.wait()
                except OSError:
                    pass
            self._processes.clear()

    def cleanup(self) -> None:
        self.stop_all()
        if self._dir and os.path.isdir(self._dir):
            shutil.rmtree(self._dir, ignore_errors=True)
        self.files.clear()
