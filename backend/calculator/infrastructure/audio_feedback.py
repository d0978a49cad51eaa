"""Audio Feedback — tone cue adapter behind the engine's FeedbackPort.

Invariants:
    - ToneFeedback never raises and never blocks: it records the cue and returns
    - One cue per call; cues_emitted counts them for the session lifetime
    - The tone itself is played by the presentation layer from TONE

Design Decisions:
    - Server side only describes the tone (TONE) and logs cues at DEBUG;
      audio output belongs to the client that renders the keypad
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToneSpec:
    """Short key-click tone: sine oscillator with an exponential gain ramp."""
    frequency_hz: float = 800.0
    waveform: str = "sine"
    duration_s: float = 0.1
    start_gain: float = 0.1
    end_gain: float = 0.01


TONE = ToneSpec()


class ToneFeedback:
    """FeedbackPort implementation for one calculator session."""

    def __init__(self, calculator_id: str | None = None, tone: ToneSpec = TONE):
        self.calculator_id = calculator_id
        self.tone = tone
        self.cues_emitted = 0

    def __call__(self, event: str) -> None:
        self.cues_emitted += 1
        logger.debug(
            f"Key tone for {event}",
            extra={
                "calculator_id": self.calculator_id,
                "tone_hz": self.tone.frequency_hz,
            },
        )
