from .countdown_state import (
    CountdownLabel,
    CountdownState,
    MAX_SMOOTHING_TIME,
    STOP_COUNT,
)
